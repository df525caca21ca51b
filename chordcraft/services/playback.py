"""
Playback settings.

One settings document per progression id (instrument and seconds per
chord), plus note lookups that delegate to the theory adapter. Only the
setting is modeled; nothing here schedules or renders audio.
"""
from __future__ import annotations

import logging

from chordcraft.config import settings
from chordcraft.core import theory
from chordcraft.core.result import Err, ErrorKind, Ok, Result, invalid_argument, not_found
from chordcraft.models.playback import Instrument, PlaybackSettings
from chordcraft.storage.document_store import DocumentStore

logger = logging.getLogger(__name__)

PLAYBACK_SETTINGS = "playback_settings"


def settings_not_found(progression_id: str) -> Err:
    return not_found(f"Playback settings for progression ID {progression_id} not found.")


class PlayBack:
    """Per-progression playback settings and chord-note lookup."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def _load(self, progression_id: str) -> Result[PlaybackSettings]:
        doc = await self._store.get(PLAYBACK_SETTINGS, progression_id)
        if doc is None:
            return settings_not_found(progression_id)
        return Ok(PlaybackSettings.model_validate(doc))

    async def _save(self, playback: PlaybackSettings) -> None:
        await self._store.put(PLAYBACK_SETTINGS, playback.id, playback.model_dump(mode="json"))

    async def initialize_settings(self, progression_id: str) -> Result[PlaybackSettings]:
        """Create default settings; fails if the progression already has some."""
        playback = PlaybackSettings(
            id=progression_id,
            instrument=Instrument(settings.default_instrument),
            seconds_per_chord=settings.default_seconds_per_chord,
        )
        created = await self._store.insert(
            PLAYBACK_SETTINGS, progression_id, playback.model_dump(mode="json")
        )
        if not created:
            logger.warning(f"Playback settings already exist for {progression_id[:8]}")
            return Err(
                ErrorKind.ALREADY_EXISTS,
                f"Playback settings already exist for progression ID {progression_id}.",
            )
        logger.info(f"Initialized playback settings for {progression_id[:8]}")
        return Ok(playback)

    async def set_instrument(self, progression_id: str, instrument: str) -> Result[PlaybackSettings]:
        loaded = await self._load(progression_id)
        if isinstance(loaded, Err):
            return loaded
        if instrument not in Instrument.names():
            return invalid_argument(
                f"Instrument must be one of {', '.join(Instrument.names())}."
            )
        playback = loaded.value
        playback.instrument = Instrument(instrument)
        await self._save(playback)
        logger.info(f"Set instrument of {progression_id[:8]} to {instrument}")
        return Ok(playback)

    async def set_seconds_per_chord(
        self,
        progression_id: str,
        seconds_per_chord: float,
    ) -> Result[PlaybackSettings]:
        loaded = await self._load(progression_id)
        if isinstance(loaded, Err):
            return loaded
        low, high = settings.min_seconds_per_chord, settings.max_seconds_per_chord
        if not low <= seconds_per_chord <= high:
            return invalid_argument(f"secondsPerChord must be between {low:g} and {high:g}.")
        playback = loaded.value
        playback.seconds_per_chord = seconds_per_chord
        await self._save(playback)
        logger.info(f"Set secondsPerChord of {progression_id[:8]} to {seconds_per_chord:g}")
        return Ok(playback)

    async def get_playback_settings(self, progression_id: str) -> Result[PlaybackSettings]:
        return await self._load(progression_id)

    async def delete_settings(self, progression_id: str) -> Result[None]:
        if not await self._store.delete(PLAYBACK_SETTINGS, progression_id):
            return settings_not_found(progression_id)
        logger.info(f"Deleted playback settings for {progression_id[:8]}")
        return Ok(None)

    async def get_chord_notes(self, chord: str) -> Result[list[str]]:
        return theory.notes_for_chord(chord)

    async def get_progression_notes(self, progression: list[str]) -> Result[list[list[str]]]:
        return theory.notes_for_progression(progression)
