from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


MODIFIER_KEYS = frozenset({"Shift", "Meta", "Control", "Alt"})

PLACEHOLDER_ACTION = "invalid-placeholder"


class MatchKind(str, Enum):
    """Relationship between an input buffer and one chord."""

    NO_MATCH = "no_match"
    EXTENDABLE_PREFIX = "extendable_prefix"
    EXACT_MATCH = "exact_match"


class Keystroke(BaseModel):
    """One normalized key press plus its modifier flags."""

    model_config = ConfigDict(frozen=True)

    key: str
    meta: bool = False
    shift: bool = False
    ctrl: bool = False
    alt: bool = False

    @field_validator("key")
    @classmethod
    def lower_key(cls, value: str) -> str:
        return value.lower()

    def render(self) -> str:
        prefix = ""
        if self.alt:
            prefix += "A-"
        if self.ctrl:
            prefix += "C-"
        if self.meta:
            prefix += "M-"
        if self.shift:
            prefix += "S-"
        return prefix + self.key

    def __str__(self) -> str:
        return self.render()


class KeyPress(BaseModel):
    """Raw key press as delivered by the input source (key not normalized)."""

    model_config = ConfigDict(frozen=True)

    key: str
    meta: bool = False
    shift: bool = False
    ctrl: bool = False
    alt: bool = False

    @property
    def is_modifier(self) -> bool:
        return self.key in MODIFIER_KEYS

    def to_keystroke(self) -> Keystroke:
        return Keystroke(
            key=self.key,
            meta=self.meta,
            shift=self.shift,
            ctrl=self.ctrl,
            alt=self.alt,
        )


def render_sequence(sequence: Iterable[Keystroke]) -> str:
    return " ".join(k.render() for k in sequence)


class Chord(BaseModel):
    """Ordered keystrokes bound to an opaque action identifier."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    sequence: List[Keystroke] = Field(default_factory=list)
    action: str = Field(alias="command")

    @field_validator("sequence")
    @classmethod
    def copy_sequence(cls, value: List[Keystroke]) -> List[Keystroke]:
        return list(value)

    @classmethod
    def placeholder(cls) -> Chord:
        """The chord being authored before a sequence and command are chosen."""

        return cls(sequence=[], action=PLACEHOLDER_ACTION)

    @property
    def is_complete(self) -> bool:
        return bool(self.sequence) and self.action != PLACEHOLDER_ACTION

    def classify(self, keys: Sequence[Keystroke]) -> MatchKind:
        for expected, actual in zip(self.sequence, keys):
            if expected != actual:
                return MatchKind.NO_MATCH
        if len(keys) < len(self.sequence):
            return MatchKind.EXTENDABLE_PREFIX
        # Input longer than the chord still counts once its prefix matched.
        return MatchKind.EXACT_MATCH

    def render(self) -> str:
        return render_sequence(self.sequence)


class ChordTable:
    """Ordered, versioned chord list; order is match precedence.

    Mutation happens through discrete transactions, each of which commits a
    new snapshot. The table stores its own copies of the chords and hands out
    copies, so an edited chord only takes effect through ``replace``.
    """

    def __init__(self, chords: Iterable[Chord] = ()) -> None:
        self._chords: Tuple[Chord, ...] = ()
        self._version = 0
        self.reset(chords)

    @property
    def chords(self) -> Tuple[Chord, ...]:
        return tuple(_copy(chord) for chord in self._chords)

    @property
    def version(self) -> int:
        return self._version

    def __iter__(self) -> Iterator[Chord]:
        return iter(self.chords)

    def __len__(self) -> int:
        return len(self._chords)

    def __getitem__(self, index: int) -> Chord:
        return _copy(self._chords[index])

    def append(self, chord: Chord) -> None:
        _require_sequence(chord)
        self._commit((*self._chords, _copy(chord)))

    def replace(self, index: int, chord: Chord) -> None:
        _require_sequence(chord)
        chords = list(self._chords)
        chords[self._check_index(index)] = _copy(chord)
        self._commit(tuple(chords))

    def remove(self, index: int) -> Chord:
        chords = list(self._chords)
        removed = chords.pop(self._check_index(index))
        self._commit(tuple(chords))
        return removed

    def reset(self, chords: Iterable[Chord]) -> None:
        chords = tuple(_copy(chord) for chord in chords)
        for chord in chords:
            _require_sequence(chord)
        self._commit(chords)

    def _check_index(self, index: int) -> int:
        if not -len(self._chords) <= index < len(self._chords):
            raise IndexError(f"chord index out of range: {index}")
        return index

    def _commit(self, chords: Tuple[Chord, ...]) -> None:
        self._chords = chords
        self._version += 1


def _copy(chord: Chord) -> Chord:
    return chord.model_copy(deep=True)


def _require_sequence(chord: Chord) -> None:
    if not chord.sequence:
        raise ValueError(f"chord for {chord.action!r} has an empty key sequence")
