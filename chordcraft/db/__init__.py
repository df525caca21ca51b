"""
Database module for Chordcraft.

Async SQLAlchemy support (SQLite via aiosqlite by default) for the SQL
document store backend.
"""
from __future__ import annotations

from chordcraft.db.database import (
    close_db,
    get_session_factory,
    init_db,
)
from chordcraft.db.models import DocumentRow

__all__ = [
    "init_db",
    "close_db",
    "get_session_factory",
    "DocumentRow",
]
