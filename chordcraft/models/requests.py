"""Request bodies for the ``POST /api/<Component>/<action>`` routes (camelCase on the wire)."""
from __future__ import annotations

from typing import Optional

from chordcraft.models.base import CamelModel


class CreateProgressionRequest(CamelModel):
    name: str


class ProgressionRequest(CamelModel):
    progression_id: str


class PositionRequest(CamelModel):
    progression_id: str
    position: int


class SetChordRequest(CamelModel):
    progression_id: str
    position: int
    chord: str


class ReorderSlotsRequest(CamelModel):
    progression_id: str
    old_position: int
    new_position: int


class RenameProgressionRequest(CamelModel):
    progression_id: str
    name: str


class SetInstrumentRequest(CamelModel):
    progression_id: str
    instrument: str


class SetSecondsPerChordRequest(CamelModel):
    progression_id: str
    seconds_per_chord: float


class ChordNotesRequest(CamelModel):
    chord: str


class ProgressionNotesRequest(CamelModel):
    progression: list[str]


class SetGenreRequest(CamelModel):
    progression_id: str
    genre: str


class SetComplexityRequest(CamelModel):
    progression_id: str
    complexity: str


class SetKeyRequest(CamelModel):
    progression_id: str
    key: str


class SuggestChordRequest(CamelModel):
    progression_id: str
    chords: list[Optional[str]]
    position: int


class SuggestProgressionRequest(CamelModel):
    progression_id: str
    length: int
