from __future__ import annotations

from pathlib import Path
from typing import Sequence, TextIO
import argparse
import logging
import sys

from chord_keys.chord.dsl import modifier_key_name, parse_keystroke
from chord_keys.chord.frontend import ChordFrontend
from chord_keys.chord.ir import ChordTable, KeyPress
from chord_keys.engine.matcher import ChordMatcher
from chord_keys.engine.store import ChordStore


def convert_toml_config(in_path: str | Path, out_path: str | Path, *, indent: int | None = 2) -> int:
    """TOML authoring file -> persisted settings JSON file. Returns the chord count."""

    in_path = Path(in_path)
    out_path = Path(out_path)

    frontend = ChordFrontend()
    chords = frontend.parse_config(frontend.load_toml(in_path))
    out_path.write_text(frontend.dump_settings_json(chords, indent=indent) + "\n", encoding="utf-8")
    return len(chords)


def _load_table(settings_path: str | Path) -> ChordTable:
    store = ChordStore(settings_path)
    if not store.path.exists():
        raise FileNotFoundError(f"settings file not found: {store.path}")
    return store.load()


def list_chords(settings_path: str | Path, out: TextIO) -> None:
    for chord in _load_table(settings_path):
        out.write(f"{chord.render()}\t{chord.action}\n")


def _to_press(token: str) -> tuple[str, KeyPress]:
    # Modifier names go through the matcher's own filter, never through a Keystroke.
    modifier = modifier_key_name(token)
    if modifier is not None:
        return modifier, KeyPress(key=modifier)

    keystroke = parse_keystroke(token)
    press = KeyPress(
        key=keystroke.key,
        meta=keystroke.meta,
        shift=keystroke.shift,
        ctrl=keystroke.ctrl,
        alt=keystroke.alt,
    )
    return keystroke.render(), press


def replay_keys(settings_path: str | Path, keys: Sequence[str], out: TextIO) -> None:
    """Feed keystrokes through a matcher and report each outcome."""

    matcher = ChordMatcher(_load_table(settings_path))
    for label, press in [_to_press(token) for token in " ".join(keys).split()]:
        result = matcher.feed(press)
        fired = result.action or "-"
        suppress = "suppress" if result.suppress_default else "pass"
        out.write(f"{label}\t{fired}\t{suppress}\t{matcher.status() or 'None'}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manage and test keyboard chord bindings.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert a TOML chord config to settings json")
    convert.add_argument("config", help="Chord config toml path (e.g. chords.toml)")
    convert.add_argument("out", help="Output settings json path")
    convert.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")

    list_ = sub.add_parser("list", help="List chords in a settings json")
    list_.add_argument("settings", help="Settings json path")

    replay = sub.add_parser("replay", help="Replay keystrokes (e.g. C-x 3) against settings")
    replay.add_argument("settings", help="Settings json path")
    replay.add_argument("keys", nargs="+", help="Keystrokes in chord notation")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == "convert":
            convert_toml_config(args.config, args.out, indent=args.indent)
        elif args.command == "list":
            list_chords(args.settings, sys.stdout)
        else:
            replay_keys(args.settings, args.keys, sys.stdout)
    except FileNotFoundError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
