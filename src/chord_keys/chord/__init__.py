from __future__ import annotations

from .config import ChordSettings, Config
from .dsl import parse_chord, parse_keystroke, parse_sequence
from .frontend import ChordFrontend
from .ir import (
    MODIFIER_KEYS,
    Chord,
    ChordTable,
    KeyPress,
    Keystroke,
    MatchKind,
    render_sequence,
)

__all__ = [
    "MODIFIER_KEYS",
    "Chord",
    "ChordFrontend",
    "ChordSettings",
    "ChordTable",
    "Config",
    "KeyPress",
    "Keystroke",
    "MatchKind",
    "parse_chord",
    "parse_keystroke",
    "parse_sequence",
    "render_sequence",
]
