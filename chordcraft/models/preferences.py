"""Per-progression suggestion preferences."""
from __future__ import annotations

from chordcraft.models.base import CamelModel


class SuggestionPreferences(CamelModel):
    id: str
    genre: str
    complexity: str
    key: str
