from __future__ import annotations

import logging
from typing import Optional

from chord_keys.chord.ir import ChordTable, KeyPress

from .capture import CaptureObserver, ChordCapture
from .dispatch import CommandDispatcher, DispatchResult
from .matcher import ChordMatcher

logger = logging.getLogger(__name__)


class ChordSession:
    """One running input session: routes key presses to capture or matcher.

    While a capture is active it is the only consumer of key presses;
    otherwise presses go to the matcher and fired actions are dispatched.
    """

    def __init__(self, table: ChordTable, dispatcher: CommandDispatcher) -> None:
        self._matcher = ChordMatcher(table)
        self._dispatcher = dispatcher
        self._capture: Optional[ChordCapture] = None
        self._closed = False
        self.last_dispatch: Optional[DispatchResult] = None

    @property
    def matcher(self) -> ChordMatcher:
        return self._matcher

    @property
    def capture(self) -> Optional[ChordCapture]:
        return self._capture

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def status_text(self) -> str:
        return f"Chord: {self._matcher.status() or 'None'}"

    def handle(self, press: KeyPress) -> bool:
        """Process one key press; returns whether its default must be suppressed."""

        if self._closed:
            raise RuntimeError("session is shut down")

        if self._capture is not None:
            suppress = self._capture.feed(press)
            if not self._capture.active:
                self._capture = None
            return suppress

        result = self._matcher.feed(press)
        if result.action is not None:
            self.last_dispatch = self._dispatcher.execute(result.action)
        return result.suppress_default

    def start_capture(self, observer: CaptureObserver) -> ChordCapture:
        self.stop_capture()
        self._matcher.reset()
        self._capture = ChordCapture(observer)
        logger.debug("Capture started")
        return self._capture

    def stop_capture(self) -> None:
        if self._capture is not None:
            capture, self._capture = self._capture, None
            capture.stop()

    def shutdown(self) -> None:
        if self._closed:
            return
        self.stop_capture()
        self._matcher.reset()
        self._closed = True
        logger.debug("Session shut down")
