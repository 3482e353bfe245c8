from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from chord_keys.chord.ir import ChordTable, KeyPress, Keystroke, MatchKind, render_sequence

logger = logging.getLogger(__name__)


class MatcherState(str, Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


@dataclass(frozen=True)
class FeedResult:
    """Outcome of feeding one key press: action to fire and propagation flag."""

    action: Optional[str] = None
    suppress_default: bool = False


class ChordMatcher:
    """Incremental chord matcher over a live ChordTable.

    Keystrokes accumulate in a buffer while at least one chord can still be
    completed. The buffer resets as soon as a chord fires or nothing remains
    extendable. Chords are scanned in table order and the first exact match
    wins, so an earlier chord shadows later, longer chords sharing its prefix.
    """

    def __init__(self, table: ChordTable) -> None:
        self._table = table
        self._buffer: List[Keystroke] = []

    @property
    def table(self) -> ChordTable:
        return self._table

    @property
    def buffer(self) -> Tuple[Keystroke, ...]:
        return tuple(self._buffer)

    @property
    def state(self) -> MatcherState:
        return MatcherState.ACCUMULATING if self._buffer else MatcherState.IDLE

    def status(self) -> Optional[str]:
        """Rendering of the pending sequence, or None when idle."""

        if not self._buffer:
            return None
        return render_sequence(self._buffer)

    def reset(self) -> None:
        self._buffer = []

    def feed(self, press: KeyPress) -> FeedResult:
        if press.is_modifier:
            logger.debug("Skipping modifier key: %s", press.key)
            return FeedResult()

        self._buffer.append(press.to_keystroke())

        action: Optional[str] = None
        extendable = False
        for chord in self._table.chords:
            kind = chord.classify(self._buffer)
            if kind is MatchKind.EXACT_MATCH:
                action = chord.action
                extendable = False
                break
            if kind is MatchKind.EXTENDABLE_PREFIX:
                extendable = True

        # A key inside an attempted multi-key sequence never keeps its own meaning.
        suppress = action is not None or len(self._buffer) > 1 or extendable

        if action is not None:
            logger.info("Chord %s fired %s", render_sequence(self._buffer), action)
        elif extendable:
            logger.debug("Pending chord: %s", render_sequence(self._buffer))
        elif len(self._buffer) > 1:
            logger.debug("Abandoned chord: %s", render_sequence(self._buffer))

        if not extendable:
            self._buffer = []

        return FeedResult(action=action, suppress_default=suppress)
