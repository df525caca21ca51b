"""Keyed document storage used by every component."""
from __future__ import annotations

from chordcraft.storage.document_store import DocumentStore, InMemoryDocumentStore
from chordcraft.storage.sql_store import SqlDocumentStore

__all__ = ["DocumentStore", "InMemoryDocumentStore", "SqlDocumentStore"]
