"""Per-progression playback settings."""
from __future__ import annotations

from enum import Enum

from chordcraft.models.base import CamelModel


class Instrument(str, Enum):
    PIANO = "Piano"
    GUITAR = "Guitar"
    SYNTHESIZER = "Synthesizer"

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


class PlaybackSettings(CamelModel):
    """Keyed by progression id. ``seconds_per_chord`` lies in a closed range."""
    id: str
    instrument: Instrument
    seconds_per_chord: float
