from __future__ import annotations

from .capture import ChordCapture
from .dispatch import CommandDispatcher, CommandRegistry, DispatchResult
from .matcher import ChordMatcher, FeedResult, MatcherState
from .session import ChordSession
from .store import ChordStore, default_chords

__all__ = [
    "ChordCapture",
    "ChordMatcher",
    "ChordSession",
    "ChordStore",
    "CommandDispatcher",
    "CommandRegistry",
    "DispatchResult",
    "FeedResult",
    "MatcherState",
    "default_chords",
]
