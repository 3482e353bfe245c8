from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from chord_keys.chord.ir import KeyPress, Keystroke, render_sequence

logger = logging.getLogger(__name__)

CaptureObserver = Callable[[Tuple[Keystroke, ...], bool], None]

STOP_KEY = "Escape"


class ChordCapture:
    """Record keystrokes while a chord is being authored.

    Capture starts on construction and owns the keyboard until Escape is
    pressed or ``stop`` is called; both report the final sequence to the
    observer once. A stopped capture ignores further input.
    """

    def __init__(self, observer: CaptureObserver) -> None:
        self._observer = observer
        self._sequence: List[Keystroke] = []
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def sequence(self) -> Tuple[Keystroke, ...]:
        return tuple(self._sequence)

    def feed(self, press: KeyPress) -> bool:
        """Consume one key press; returns whether to suppress its default."""

        if not self._active or press.is_modifier:
            return False

        if press.key == STOP_KEY:
            self._finish()
            return True

        self._sequence.append(press.to_keystroke())
        logger.debug("Captured %s", render_sequence(self._sequence))
        self._observer(self.sequence, False)
        return True

    def stop(self) -> None:
        if self._active:
            self._finish()

    def _finish(self) -> None:
        self._active = False
        logger.debug("Capture finished: %r", render_sequence(self._sequence))
        self._observer(self.sequence, True)
