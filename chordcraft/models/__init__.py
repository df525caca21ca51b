"""Pydantic models for documents and request bodies."""
from __future__ import annotations

from chordcraft.models.base import CamelModel
from chordcraft.models.playback import Instrument, PlaybackSettings
from chordcraft.models.preferences import SuggestionPreferences
from chordcraft.models.progression import Progression, ProgressionIdentifier, Slot

__all__ = [
    "CamelModel",
    "Instrument",
    "PlaybackSettings",
    "Progression",
    "ProgressionIdentifier",
    "Slot",
    "SuggestionPreferences",
]
