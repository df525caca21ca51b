"""
Progression editor.

CRUD and ordering over progression documents. Every mutation is one
read-modify-write of a single document. Positions are valid only when
``0 <= position < len(chord_sequence)``; negatives are rejected, never
wrapped, and the sequence stays contiguous after every operation.
"""
from __future__ import annotations

import logging
import uuid

from chordcraft.core.result import Err, Ok, Result, not_found, out_of_range
from chordcraft.models.progression import Progression, ProgressionIdentifier, Slot
from chordcraft.storage.document_store import DocumentStore

logger = logging.getLogger(__name__)

PROGRESSIONS = "progressions"


def progression_not_found(progression_id: str) -> Err:
    return not_found(f"Progression with ID {progression_id} not found.")


def invalid_position(position: int) -> Err:
    return out_of_range(f"Invalid position: {position}. Index out of bounds.")


def _position_valid(position: int, length: int) -> bool:
    return 0 <= position < length


class ProgressionBuilder:
    """Store-backed progression editor."""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    async def _load(self, progression_id: str) -> Result[Progression]:
        doc = await self._store.get(PROGRESSIONS, progression_id)
        if doc is None:
            return progression_not_found(progression_id)
        return Ok(Progression.model_validate(doc))

    async def _save(self, progression: Progression) -> None:
        await self._store.put(PROGRESSIONS, progression.id, progression.model_dump())

    async def _load_at(self, progression_id: str, position: int) -> Result[Progression]:
        loaded = await self._load(progression_id)
        if isinstance(loaded, Err):
            return loaded
        if not _position_valid(position, len(loaded.value.chord_sequence)):
            return invalid_position(position)
        return loaded

    async def create_progression(self, name: str) -> Result[Progression]:
        """Create an empty progression with a fresh id."""
        progression = Progression(id=str(uuid.uuid4()), name=name, chord_sequence=[])
        await self._store.insert(PROGRESSIONS, progression.id, progression.model_dump())
        logger.info(f"Created progression {progression.id[:8]} ({name!r})")
        return Ok(progression)

    async def add_slot(self, progression_id: str) -> Result[Progression]:
        """Append an empty slot."""
        loaded = await self._load(progression_id)
        if isinstance(loaded, Err):
            return loaded
        progression = loaded.value
        progression.chord_sequence.append(Slot())
        await self._save(progression)
        logger.info(f"Added slot {len(progression.chord_sequence) - 1} to {progression_id[:8]}")
        return Ok(progression)

    async def set_chord(self, progression_id: str, position: int, chord: str) -> Result[Progression]:
        loaded = await self._load_at(progression_id, position)
        if isinstance(loaded, Err):
            return loaded
        progression = loaded.value
        progression.chord_sequence[position].chord = chord
        await self._save(progression)
        logger.info(f"Set slot {position} of {progression_id[:8]} to {chord!r}")
        return Ok(progression)

    async def delete_chord(self, progression_id: str, position: int) -> Result[Progression]:
        """Clear the chord at ``position``; clearing an empty slot succeeds."""
        loaded = await self._load_at(progression_id, position)
        if isinstance(loaded, Err):
            return loaded
        progression = loaded.value
        progression.chord_sequence[position].chord = None
        await self._save(progression)
        logger.info(f"Cleared slot {position} of {progression_id[:8]}")
        return Ok(progression)

    async def delete_slot(self, progression_id: str, position: int) -> Result[Progression]:
        """Remove the slot at ``position``; later slots shift down by one."""
        loaded = await self._load_at(progression_id, position)
        if isinstance(loaded, Err):
            return loaded
        progression = loaded.value
        del progression.chord_sequence[position]
        await self._save(progression)
        logger.info(f"Deleted slot {position} of {progression_id[:8]}")
        return Ok(progression)

    async def reorder_slots(
        self,
        progression_id: str,
        old_position: int,
        new_position: int,
    ) -> Result[Progression]:
        """Move the slot at ``old_position`` so it ends up at ``new_position``.

        The slot is removed first and reinserted relative to the shortened
        sequence; both positions are checked against the current length.
        """
        loaded = await self._load(progression_id)
        if isinstance(loaded, Err):
            return loaded
        progression = loaded.value
        length = len(progression.chord_sequence)
        for position in (old_position, new_position):
            if not _position_valid(position, length):
                return invalid_position(position)

        slot = progression.chord_sequence.pop(old_position)
        progression.chord_sequence.insert(new_position, slot)
        await self._save(progression)
        logger.info(f"Moved slot {old_position} -> {new_position} in {progression_id[:8]}")
        return Ok(progression)

    async def rename_progression(self, progression_id: str, name: str) -> Result[Progression]:
        loaded = await self._load(progression_id)
        if isinstance(loaded, Err):
            return loaded
        progression = loaded.value
        progression.name = name
        await self._save(progression)
        logger.info(f"Renamed progression {progression_id[:8]} to {name!r}")
        return Ok(progression)

    async def delete_progression(self, progression_id: str) -> Result[None]:
        if not await self._store.delete(PROGRESSIONS, progression_id):
            return progression_not_found(progression_id)
        logger.info(f"Deleted progression {progression_id[:8]}")
        return Ok(None)

    async def get_progression(self, progression_id: str) -> Result[Progression]:
        return await self._load(progression_id)

    async def list_progressions(self) -> Result[list[ProgressionIdentifier]]:
        """All progressions as ``{id, name}``, in store iteration order."""
        docs = await self._store.list(PROGRESSIONS)
        return Ok([ProgressionIdentifier(id=doc["id"], name=doc["name"]) for doc in docs])

    async def validate_progression_and_position(
        self,
        progression_id: str,
        position: int,
    ) -> Result[None]:
        """Succeed iff the progression exists and ``position`` addresses one of its slots."""
        loaded = await self._load_at(progression_id, position)
        if isinstance(loaded, Err):
            return loaded
        return Ok(None)

