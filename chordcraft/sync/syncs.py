"""Default syncs wiring progressions to their playback settings and preferences."""
from __future__ import annotations

from typing import Any

from chordcraft.core.result import Result
from chordcraft.services.playback import PlayBack
from chordcraft.services.suggest_chord import SuggestChord
from chordcraft.sync.engine import ActionEvent, Sync, SyncEngine

CREATE_PROGRESSION = "ProgressionBuilder.createProgression"
DELETE_PROGRESSION = "ProgressionBuilder.deleteProgression"


def register_default_syncs(
    engine: SyncEngine,
    playback: PlayBack,
    suggestions: SuggestChord,
) -> None:
    """A new progression gets default settings and preferences; deleting it removes them."""

    async def initialize_settings(event: ActionEvent) -> Result[Any]:
        return await playback.initialize_settings(event.result.value.id)

    async def initialize_preferences(event: ActionEvent) -> Result[Any]:
        return await suggestions.initialize_preferences(event.result.value.id)

    async def delete_settings(event: ActionEvent) -> Result[Any]:
        return await playback.delete_settings(event.inputs["progression_id"])

    async def delete_preferences(event: ActionEvent) -> Result[Any]:
        return await suggestions.delete_preferences(event.inputs["progression_id"])

    engine.register(Sync("InitializePlayBackSettings", CREATE_PROGRESSION, initialize_settings))
    engine.register(Sync("InitializeSuggestionPreferences", CREATE_PROGRESSION, initialize_preferences))
    engine.register(Sync("DeletePlayBackSettings", DELETE_PROGRESSION, delete_settings))
    engine.register(Sync("DeleteSuggestionPreferences", DELETE_PROGRESSION, delete_preferences))
