"""Cross-component synchronization: follow-up actions keyed on completed actions."""
from __future__ import annotations

from chordcraft.sync.engine import ActionEvent, Sync, SyncEngine, SyncOutcome
from chordcraft.sync.syncs import register_default_syncs

__all__ = ["ActionEvent", "Sync", "SyncEngine", "SyncOutcome", "register_default_syncs"]
