"""SQL document store backend (one ``documents`` row per document)."""
from __future__ import annotations

import copy
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from chordcraft.db.models import DocumentRow
from chordcraft.storage.document_store import Document

logger = logging.getLogger(__name__)


class SqlDocumentStore:
    """Document store over an async SQLAlchemy session factory.

    Each call opens its own session and commits before returning.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, collection: str, doc_id: str) -> Document | None:
        async with self._session_factory() as session:
            row = await session.get(DocumentRow, (collection, doc_id))
            return copy.deepcopy(row.body) if row is not None else None

    async def insert(self, collection: str, doc_id: str, doc: Document) -> bool:
        async with self._session_factory() as session:
            if await session.get(DocumentRow, (collection, doc_id)) is not None:
                return False
            session.add(DocumentRow(collection=collection, id=doc_id, body=copy.deepcopy(doc)))
            try:
                await session.commit()
            except IntegrityError:
                await session.rollback()
                logger.warning(f"Concurrent insert lost for {collection}/{doc_id[:8]}")
                return False
            return True

    async def put(self, collection: str, doc_id: str, doc: Document) -> None:
        async with self._session_factory() as session:
            row = await session.get(DocumentRow, (collection, doc_id))
            if row is None:
                session.add(DocumentRow(collection=collection, id=doc_id, body=copy.deepcopy(doc)))
            else:
                row.body = copy.deepcopy(doc)
            await session.commit()

    async def delete(self, collection: str, doc_id: str) -> bool:
        async with self._session_factory() as session:
            result = await session.execute(
                delete(DocumentRow).where(
                    DocumentRow.collection == collection,
                    DocumentRow.id == doc_id,
                )
            )
            await session.commit()
            return bool(result.rowcount)

    async def list(self, collection: str) -> list[Document]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(DocumentRow).where(DocumentRow.collection == collection)
            )
            return [copy.deepcopy(row.body) for row in result.scalars().all()]
