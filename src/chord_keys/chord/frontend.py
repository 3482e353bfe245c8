from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List
import tomllib

from .config import ChordSettings, Config
from .dsl import parse_chord
from .ir import Chord


class ChordFrontend:
    """Parse config (TOML) and persisted settings (JSON) into chords."""

    def load_toml(self, path: str | Path) -> Dict[str, Any]:
        """Load a TOML config file into a dict."""

        path = Path(path)
        return tomllib.loads(path.read_text(encoding="utf-8"))

    def parse_config(self, config: Dict[str, Any]) -> List[Chord]:
        cfg = Config.model_validate(config)

        chords: List[Chord] = []
        for entry in cfg.chord:
            chords.append(parse_chord(entry.keys, entry.action, alias_key=cfg.alias.key))
        return chords

    def load_settings_json(self, text: str | bytes) -> List[Chord]:
        return ChordSettings.model_validate_json(text).hotkeys

    def dump_settings_json(self, chords: Iterable[Chord], *, indent: int | None = 2) -> str:
        settings = ChordSettings(hotkeys=list(chords))
        return settings.model_dump_json(indent=indent, by_alias=True)
