"""
In-memory progression editor with a selection cursor.

Edits a single slot sequence through a cursor instead of explicit
positions. The cursor is a tagged option (``NoSelection`` or
``Selected(index)``) and, when present, always addresses an existing slot.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from chordcraft.core.result import Err, Ok, Result, invalid_argument, out_of_range
from chordcraft.models.progression import Slot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoSelection:
    pass


@dataclass(frozen=True)
class Selected:
    index: int


Selection = Union[NoSelection, Selected]

NO_SELECTION = NoSelection()


def _no_slot_selected() -> Err:
    return invalid_argument("No slot selected.")


@dataclass
class SlotEditor:
    slots: list[Slot] = field(default_factory=list)
    selection: Selection = NO_SELECTION

    @property
    def chords(self) -> list[Optional[str]]:
        return [slot.chord for slot in self.slots]

    def add_slot(self) -> Result[int]:
        """Append an empty slot and return its index. The selection is untouched."""
        self.slots.append(Slot())
        return Ok(len(self.slots) - 1)

    def select_slot(self, index: int) -> Result[Selection]:
        """Toggle selection: the selected index clears it, any other valid index replaces it."""
        if not self.slots:
            return out_of_range("No slots to select.")
        if not 0 <= index < len(self.slots):
            return out_of_range(f"Invalid position: {index}. Index out of bounds.")

        if self.selection == Selected(index):
            self.selection = NO_SELECTION
        else:
            self.selection = Selected(index)
        return Ok(self.selection)

    def set_chord(self, chord: str) -> Result[None]:
        if not isinstance(self.selection, Selected):
            return _no_slot_selected()
        self.slots[self.selection.index].chord = chord
        return Ok(None)

    def delete_chord(self) -> Result[None]:
        if not isinstance(self.selection, Selected):
            return _no_slot_selected()
        self.slots[self.selection.index].chord = None
        return Ok(None)

    def delete_slot(self) -> Result[None]:
        """Remove the selected slot; the selection never outlives it."""
        if not isinstance(self.selection, Selected):
            return _no_slot_selected()
        del self.slots[self.selection.index]
        self.selection = NO_SELECTION
        return Ok(None)

    def reorder_slots(self, old_position: int, new_position: int) -> Result[None]:
        """Move a slot; a selection keeps pointing at the same slot after the move."""
        for position in (old_position, new_position):
            if not 0 <= position < len(self.slots):
                return out_of_range(f"Invalid position: {position}. Index out of bounds.")

        slot = self.slots.pop(old_position)
        self.slots.insert(new_position, slot)

        if isinstance(self.selection, Selected):
            selected = self.selection.index
            if selected == old_position:
                selected = new_position
            else:
                if selected > old_position:
                    selected -= 1
                if selected >= new_position:
                    selected += 1
            self.selection = Selected(selected)
        logger.debug(f"Moved slot {old_position} -> {new_position}, selection {self.selection}")
        return Ok(None)
