from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from chord_keys.chord.dsl import parse_chord
from chord_keys.chord.frontend import ChordFrontend
from chord_keys.chord.ir import Chord, ChordTable

logger = logging.getLogger(__name__)


def default_chords() -> List[Chord]:
    return [
        parse_chord("C-x 3", "workspace:split-vertical"),
        parse_chord("C-x 2", "workspace:split-horizontal"),
    ]


class ChordStore:
    """JSON settings file holding the ordered chord list."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._frontend = ChordFrontend()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ChordTable:
        if not self._path.exists():
            logger.debug("No settings at %s, using defaults", self._path)
            return ChordTable(default_chords())

        chords = self._frontend.load_settings_json(self._path.read_text(encoding="utf-8"))
        return ChordTable(chords)

    def save(self, table: ChordTable) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(self._frontend.dump_settings_json(table) + "\n", encoding="utf-8")
        logger.info("Saved %d chords to %s (version %d)", len(table), self._path, table.version)
