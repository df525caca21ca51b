"""Progression documents: a named, ordered sequence of chord slots."""
from __future__ import annotations

from typing import Optional

from pydantic import Field

from chordcraft.models.base import CamelModel


class Slot(CamelModel):
    """One position in a progression; ``chord`` is None when nothing is assigned."""
    chord: Optional[str] = None


class Progression(CamelModel):
    id: str
    name: str
    chord_sequence: list[Slot] = Field(default_factory=list)

    def chords(self) -> list[Optional[str]]:
        return [slot.chord for slot in self.chord_sequence]


class ProgressionIdentifier(CamelModel):
    """Listing entry for a progression."""
    id: str
    name: str
