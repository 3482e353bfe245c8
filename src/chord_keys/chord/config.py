from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from .ir import Chord


class AliasConfig(BaseModel):
    key: Dict[str, str] = Field(default_factory=dict)


class ChordConfig(BaseModel):
    keys: str
    action: str


class Config(BaseModel):
    """Hand-written TOML authoring file."""

    version: int | None = None
    description: str | None = None
    alias: AliasConfig = Field(default_factory=AliasConfig)
    chord: List[ChordConfig] = Field(default_factory=list)


class ChordSettings(BaseModel):
    """Persisted settings layout; list order is match precedence."""

    hotkeys: List[Chord] = Field(default_factory=list)
