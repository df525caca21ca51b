"""Health check endpoints."""
from __future__ import annotations

from fastapi import APIRouter

from chordcraft.config import settings

router = APIRouter()


def _llm_configured() -> bool:
    """True if the configured LLM provider has an API key set."""
    return settings.llm_provider == "openrouter" and bool(settings.openrouter_api_key)


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Basic health check."""
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
        "store": settings.store_backend,
        "llm": "ok" if _llm_configured() else "unconfigured",
    }
