"""
Chordcraft API
FastAPI application for chord progression editing and suggestions.
"""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from chordcraft.api.routes import health, playback, progression_builder, suggest_chord
from chordcraft.config import settings
from chordcraft.core.llm_client import close_llm_client
from chordcraft.db import close_db, init_db
from chordcraft.services.container import get_services, reset_services

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"LLM provider: {settings.llm_provider}")
    logger.info(f"LLM model: {settings.llm_model}")

    if settings.store_backend == "sql":
        try:
            await init_db()
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise

    get_services()

    yield

    # Cleanup
    logger.info("Shutting down...")
    reset_services()
    await close_llm_client()
    await close_db()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Chord progression editor with LLM-backed suggestions.",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    openapi_url="/openapi.json" if settings.debug else None,
)

# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(progression_builder.router, prefix="/api/ProgressionBuilder", tags=["progressions"])
app.include_router(playback.router, prefix="/api/PlayBack", tags=["playback"])
app.include_router(suggest_chord.router, prefix="/api/SuggestChord", tags=["suggestions"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with service info."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("chordcraft.main:app", host=settings.host, port=settings.port)
