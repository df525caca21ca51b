"""
Suggestion pipeline.

Builds a prompt from stored preferences and the chord context, sends it
to the LLM adapter once, and parses the reply into structured chords or
progressions. Argument checks run before the adapter is touched, and
adapter failures come back as ``Err(UPSTREAM_FAILURE)`` with the adapter's
message embedded. Preferences CRUD lives here too; the pipeline only reads
them.
"""
from __future__ import annotations

import logging
from typing import Optional

from chordcraft.config import settings
from chordcraft.core.llm_client import LLMAdapter
from chordcraft.core.prompts import build_chord_prompt, build_progression_prompt
from chordcraft.core.result import (
    Err,
    ErrorKind,
    Ok,
    Result,
    invalid_argument,
    not_found,
    out_of_range,
)
from chordcraft.core.suggestion_parser import (
    parse_chord_suggestions,
    parse_progression_suggestions,
)
from chordcraft.models.preferences import SuggestionPreferences
from chordcraft.storage.document_store import DocumentStore

logger = logging.getLogger(__name__)

SUGGESTION_PREFERENCES = "suggestion_preferences"


def preferences_not_found(progression_id: str) -> Err:
    return not_found(f"Preferences for progression {progression_id} not found.")


class SuggestChord:
    """Suggestion preferences plus the LLM-backed suggestion operations."""

    def __init__(self, store: DocumentStore, llm: LLMAdapter) -> None:
        self._store = store
        self._llm = llm

    async def _load(self, progression_id: str) -> Result[SuggestionPreferences]:
        doc = await self._store.get(SUGGESTION_PREFERENCES, progression_id)
        if doc is None:
            return preferences_not_found(progression_id)
        return Ok(SuggestionPreferences.model_validate(doc))

    async def _update(self, progression_id: str, **changes: str) -> Result[SuggestionPreferences]:
        loaded = await self._load(progression_id)
        if isinstance(loaded, Err):
            return loaded
        preferences = loaded.value.model_copy(update=changes)
        await self._store.put(SUGGESTION_PREFERENCES, progression_id, preferences.model_dump())
        logger.info(f"Updated preferences for {progression_id[:8]}: {changes}")
        return Ok(preferences)

    # -------------------------------------------------------------------------
    # Preferences
    # -------------------------------------------------------------------------

    async def initialize_preferences(self, progression_id: str) -> Result[SuggestionPreferences]:
        preferences = SuggestionPreferences(
            id=progression_id,
            genre=settings.default_genre,
            complexity=settings.default_complexity,
            key=settings.default_key,
        )
        created = await self._store.insert(
            SUGGESTION_PREFERENCES, progression_id, preferences.model_dump()
        )
        if not created:
            logger.warning(f"Preferences already exist for {progression_id[:8]}")
            return Err(
                ErrorKind.ALREADY_EXISTS,
                f"Preferences for progression {progression_id} already exist.",
            )
        logger.info(f"Initialized preferences for {progression_id[:8]}")
        return Ok(preferences)

    async def set_genre(self, progression_id: str, genre: str) -> Result[SuggestionPreferences]:
        return await self._update(progression_id, genre=genre)

    async def set_complexity(self, progression_id: str, complexity: str) -> Result[SuggestionPreferences]:
        return await self._update(progression_id, complexity=complexity)

    async def set_key(self, progression_id: str, key: str) -> Result[SuggestionPreferences]:
        return await self._update(progression_id, key=key)

    async def get_suggestion_preferences(self, progression_id: str) -> Result[SuggestionPreferences]:
        return await self._load(progression_id)

    async def delete_preferences(self, progression_id: str) -> Result[None]:
        if not await self._store.delete(SUGGESTION_PREFERENCES, progression_id):
            return preferences_not_found(progression_id)
        logger.info(f"Deleted preferences for {progression_id[:8]}")
        return Ok(None)

    # -------------------------------------------------------------------------
    # Suggestions
    # -------------------------------------------------------------------------

    async def suggest_chord(
        self,
        progression_id: str,
        chords: list[Optional[str]],
        position: int,
    ) -> Result[list[str]]:
        """Suggest chords for ``chords[position]`` given the rest of the sequence."""
        loaded = await self._load(progression_id)
        if isinstance(loaded, Err):
            return loaded
        if not 0 <= position < len(chords):
            return out_of_range(
                f"Invalid position: {position}. Must be within 0 and {len(chords) - 1}."
            )

        prompt = build_chord_prompt(
            loaded.value, chords, position, count=settings.suggestion_chord_count
        )
        try:
            reply = await self._llm.execute(prompt)
        except Exception as e:
            logger.error(f"Chord suggestion failed for {progression_id[:8]}: {e}")
            return Err(ErrorKind.UPSTREAM_FAILURE, f"Failed to get chord suggestions: {e}")

        parsed = parse_chord_suggestions(reply)
        if isinstance(parsed, Ok):
            logger.info(f"Got {len(parsed.value)} chord suggestions for {progression_id[:8]}")
        else:
            logger.warning(f"Unusable chord suggestion reply for {progression_id[:8]}: {reply[:100]!r}")
        return parsed

    async def suggest_progression(
        self,
        progression_id: str,
        length: int,
    ) -> Result[list[list[str]]]:
        """Suggest whole progressions; individual progression lengths are not enforced."""
        loaded = await self._load(progression_id)
        if isinstance(loaded, Err):
            return loaded
        if length <= 0:
            return invalid_argument(f"Invalid length: {length}. Must be greater than 0.")

        prompt = build_progression_prompt(
            loaded.value, length, count=settings.suggestion_progression_count
        )
        try:
            reply = await self._llm.execute(prompt)
        except Exception as e:
            logger.error(f"Progression suggestion failed for {progression_id[:8]}: {e}")
            return Err(ErrorKind.UPSTREAM_FAILURE, f"Failed to get progression suggestion: {e}")

        parsed = parse_progression_suggestions(reply)
        if isinstance(parsed, Ok):
            logger.info(f"Got {len(parsed.value)} progression suggestions for {progression_id[:8]}")
        else:
            logger.warning(f"Unusable progression reply for {progression_id[:8]}: {reply[:100]!r}")
        return parsed
