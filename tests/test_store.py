from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from chord_keys.chord.dsl import parse_chord
from chord_keys.cli import convert_toml_config, main
from chord_keys.engine.store import ChordStore


def test_missing_file_loads_defaults(tmp_path: Path) -> None:
    table = ChordStore(tmp_path / "data.json").load()

    assert [(c.render(), c.action) for c in table] == [
        ("C-x 3", "workspace:split-vertical"),
        ("C-x 2", "workspace:split-horizontal"),
    ]


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    store = ChordStore(tmp_path / "nested" / "data.json")
    table = store.load()
    table.remove(0)
    table.append(parse_chord("A-k", "app:open-palette"))

    store.save(table)
    reloaded = store.load()

    assert list(reloaded) == list(table)
    raw = json.loads(store.path.read_text(encoding="utf-8"))
    assert raw["hotkeys"][1] == {
        "sequence": [{"key": "k", "meta": False, "shift": False, "ctrl": False, "alt": True}],
        "command": "app:open-palette",
    }


def test_invalid_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text('{"hotkeys": [{"sequence": []}]}', encoding="utf-8")
    with pytest.raises(ValidationError):
        ChordStore(path).load()


def test_empty_persisted_chord_rejected(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text('{"hotkeys": [{"sequence": [], "command": "a"}]}', encoding="utf-8")
    with pytest.raises(ValueError):
        ChordStore(path).load()


def test_cli_convert_list_replay(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "settings.json"
    count = convert_toml_config(Path(__file__).with_name("test_chords.toml"), out)
    assert count == 4

    assert main(["list", str(out)]) == 0
    listed = capsys.readouterr().out.splitlines()
    assert listed[0] == "C-x 3\tworkspace:split-vertical"
    assert len(listed) == 4

    assert main(["replay", str(out), "C-x", "2", "q"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "C-x\t-\tsuppress\tC-x",
        "2\tworkspace:split-horizontal\tsuppress\tNone",
        "q\t-\tpass\tNone",
    ]


def test_cli_replay_ignores_modifier_presses(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    settings = tmp_path / "settings.json"
    store = ChordStore(settings)
    store.save(store.load())

    assert main(["replay", str(settings), "C-x", "Shift", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "C-x\t-\tsuppress\tC-x",
        "Shift\t-\tpass\tC-x",
        "3\tworkspace:split-vertical\tsuppress\tNone",
    ]


@pytest.mark.parametrize("command", ["list", "replay"])
def test_cli_missing_settings_file(tmp_path: Path, command: str, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "missing.json"
    argv = [command, str(missing)] + (["C-x"] if command == "replay" else [])

    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "settings file not found" in captured.err
    assert captured.out == ""
    assert not missing.exists()
