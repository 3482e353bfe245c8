from __future__ import annotations

from typing import List, Mapping

from .ir import MODIFIER_KEYS, Chord, Keystroke


_PREFIX_FLAGS = {"A": "alt", "C": "ctrl", "M": "meta", "S": "shift"}

_MODIFIER_NAMES = {name.lower(): name for name in MODIFIER_KEYS}

DEFAULT_KEY_ALIASES: dict[str, str] = {
    "space": " ",
    "esc": "escape",
}


def modifier_key_name(token: str) -> str | None:
    """Canonical pure-modifier key name for ``token`` (any case), if it is one."""

    return _MODIFIER_NAMES.get(token.strip().lower())


def _normalize_aliases(aliases: Mapping[str, str] | None) -> dict[str, str]:
    merged = dict(DEFAULT_KEY_ALIASES)
    if aliases:
        merged.update({str(k).strip().lower(): str(v) for k, v in aliases.items()})
    return merged


def _tokenize(expr: str) -> list[str]:
    expr = expr.strip()
    if not expr:
        raise ValueError("expression is empty")
    return expr.split()


def _apply_alias(key: str, *, alias_key: Mapping[str, str]) -> str:
    return alias_key.get(key.lower(), key)


def _parse_token(token: str, *, alias_key: Mapping[str, str]) -> Keystroke:
    flags = {name: False for name in _PREFIX_FLAGS.values()}
    rest = token
    while len(rest) > 2 and rest[1] == "-" and rest[0] in _PREFIX_FLAGS:
        flag = _PREFIX_FLAGS[rest[0]]
        if flags[flag]:
            raise ValueError(f"invalid keystroke (repeated modifier): {token!r}")
        flags[flag] = True
        rest = rest[2:]
    if not rest:
        raise ValueError(f"invalid keystroke (no key): {token!r}")
    key = _apply_alias(rest, alias_key=alias_key)
    if modifier_key_name(rest) or modifier_key_name(key):
        raise ValueError(f"invalid keystroke (modifier-only key): {token!r}")
    return Keystroke(key=key, **flags)


def parse_keystroke(
    expr: str,
    *,
    alias_key: Mapping[str, str] | None = None,
) -> Keystroke:
    """Parse a single keystroke such as ``C-x`` or ``A-C-S-k``."""

    tokens = _tokenize(expr)
    if len(tokens) != 1:
        raise ValueError(f"expected exactly one keystroke: {expr!r}")
    return _parse_token(tokens[0], alias_key=_normalize_aliases(alias_key))


def parse_sequence(
    expr: str,
    *,
    alias_key: Mapping[str, str] | None = None,
) -> List[Keystroke]:
    """Parse a space-separated keystroke sequence such as ``C-x 3``."""

    alias_key = _normalize_aliases(alias_key)
    return [_parse_token(t, alias_key=alias_key) for t in _tokenize(expr)]


def parse_chord(
    keys: str,
    action: str,
    *,
    alias_key: Mapping[str, str] | None = None,
) -> Chord:
    """Parse a (keys, action) pair into a Chord."""

    action = action.strip()
    if not action:
        raise ValueError(f"chord {keys!r} has no action")
    return Chord(sequence=parse_sequence(keys, alias_key=alias_key), action=action)
