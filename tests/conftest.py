"""Pytest configuration and fixtures."""
import logging
from typing import Optional

import pytest
import pytest_asyncio


def pytest_configure(config):
    """Ensure asyncio_mode is auto so async fixtures work when pyproject is not in cwd."""
    if hasattr(config.option, "asyncio_mode") and config.option.asyncio_mode is None:
        config.option.asyncio_mode = "auto"
    logging.getLogger("httpcore").setLevel(logging.CRITICAL)


from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from chordcraft.db import models  # noqa: F401
from chordcraft.db.database import Base
from chordcraft.main import app
from chordcraft.services.container import build_services, get_services, reset_services
from chordcraft.storage.document_store import InMemoryDocumentStore
from chordcraft.storage.sql_store import SqlDocumentStore


class FakeLLM:
    """Scripted LLM adapter: returns ``reply`` or raises ``error``, recording prompts."""

    def __init__(self) -> None:
        self.reply: str = ""
        self.error: Optional[Exception] = None
        self.prompts: list[str] = []

    async def execute(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True)
def _reset_services():
    """Reset the singleton services between tests to prevent cross-test pollution."""
    yield
    reset_services()
    app.dependency_overrides.clear()


@pytest.fixture
def store():
    """Fresh in-memory document store for each test."""
    s = InMemoryDocumentStore()
    yield s
    s.clear()


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def services(store, fake_llm):
    return build_services(store, fake_llm)


@pytest_asyncio.fixture
async def sql_store():
    """SQL document store over an in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    yield SqlDocumentStore(factory)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(services):
    """Async test client wired to the test services."""
    app.dependency_overrides[get_services] = lambda: services
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
