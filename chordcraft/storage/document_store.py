"""
Document store interface and the in-memory backend.

Documents are plain JSON-compatible dicts grouped into named collections and
addressed by id. Each call is a single read or write of one document, so
concurrent writers to the same id resolve as last-write-wins and writers to
different ids never interfere.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)

Document = dict[str, Any]


class DocumentStore(Protocol):
    """Async keyed store contract."""

    async def get(self, collection: str, doc_id: str) -> Document | None: ...

    async def insert(self, collection: str, doc_id: str, doc: Document) -> bool:
        """Store ``doc`` only if ``doc_id`` is absent. Returns False if it already existed."""
        ...

    async def put(self, collection: str, doc_id: str, doc: Document) -> None: ...

    async def delete(self, collection: str, doc_id: str) -> bool: ...

    async def list(self, collection: str) -> list[Document]: ...


class InMemoryDocumentStore:
    """
    Dict-backed document store.

    Reads and writes copy documents so callers can never mutate stored state
    in place. There is no await between the existence check and the write in
    ``insert``, which keeps it atomic on a single event loop.
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, Document]] = {}

    def _bucket(self, collection: str) -> dict[str, Document]:
        return self._collections.setdefault(collection, {})

    async def get(self, collection: str, doc_id: str) -> Document | None:
        doc = self._bucket(collection).get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def insert(self, collection: str, doc_id: str, doc: Document) -> bool:
        bucket = self._bucket(collection)
        if doc_id in bucket:
            return False
        bucket[doc_id] = copy.deepcopy(doc)
        return True

    async def put(self, collection: str, doc_id: str, doc: Document) -> None:
        self._bucket(collection)[doc_id] = copy.deepcopy(doc)

    async def delete(self, collection: str, doc_id: str) -> bool:
        return self._bucket(collection).pop(doc_id, None) is not None

    async def list(self, collection: str) -> list[Document]:
        return [copy.deepcopy(doc) for doc in self._bucket(collection).values()]

    def clear(self) -> None:
        """Clear all collections (for testing)."""
        self._collections.clear()

    def count(self, collection: str) -> int:
        return len(self._bucket(collection))
