"""
Service container.

Builds one set of components over a shared document store and LLM
adapter, with the default syncs registered. The API layer resolves it
through ``get_services()``; tests build their own with ``build_services``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from chordcraft.config import settings
from chordcraft.core.llm_client import LLMAdapter, get_llm_client
from chordcraft.services.playback import PlayBack
from chordcraft.services.progression_builder import ProgressionBuilder
from chordcraft.services.suggest_chord import SuggestChord
from chordcraft.storage.document_store import DocumentStore, InMemoryDocumentStore
from chordcraft.sync.engine import SyncEngine

logger = logging.getLogger(__name__)


@dataclass
class Services:
    store: DocumentStore
    progressions: ProgressionBuilder
    playback: PlayBack
    suggestions: SuggestChord
    syncs: SyncEngine


def build_services(store: DocumentStore, llm: LLMAdapter) -> Services:
    from chordcraft.sync.syncs import register_default_syncs

    playback = PlayBack(store)
    suggestions = SuggestChord(store, llm)
    engine = SyncEngine()
    register_default_syncs(engine, playback, suggestions)
    return Services(
        store=store,
        progressions=ProgressionBuilder(store),
        playback=playback,
        suggestions=suggestions,
        syncs=engine,
    )


def _default_store() -> DocumentStore:
    if settings.store_backend == "sql":
        from chordcraft.db.database import get_session_factory
        from chordcraft.storage.sql_store import SqlDocumentStore

        return SqlDocumentStore(get_session_factory())
    return InMemoryDocumentStore()


_services: Services | None = None


def get_services() -> Services:
    """Get the shared services, building them on first use."""
    global _services
    if _services is None:
        _services = build_services(_default_store(), get_llm_client())
        logger.info(f"Services ready ({settings.store_backend} store)")
    return _services


def reset_services() -> None:
    """Forget the shared services (for testing)."""
    global _services
    _services = None
