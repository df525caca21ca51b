"""Component services and the process-wide container that wires them."""
from __future__ import annotations

from chordcraft.services.container import Services, build_services, get_services, reset_services
from chordcraft.services.playback import PlayBack
from chordcraft.services.progression_builder import ProgressionBuilder
from chordcraft.services.slot_editor import SlotEditor
from chordcraft.services.suggest_chord import SuggestChord

__all__ = [
    "PlayBack",
    "ProgressionBuilder",
    "Services",
    "SlotEditor",
    "SuggestChord",
    "build_services",
    "get_services",
    "reset_services",
]
