"""
Chordcraft Configuration

Environment-based configuration for the Chordcraft service.
"""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _app_version_from_package() -> str:
    """Read version from the installed distribution metadata."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("chordcraft")
    except PackageNotFoundError:
        return "0.0.0-unknown"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service Info
    app_name: str = "Chordcraft"
    app_version: str = _app_version_from_package()
    debug: bool = False

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 10010

    # Document store: "memory" (process-local) or "sql" (SQLAlchemy)
    store_backend: str = "memory"
    # SQLite (dev): sqlite+aiosqlite:///./chordcraft.db
    database_url: Optional[str] = None

    # LLM Configuration (OpenAI-compatible chat completions, OpenRouter by default)
    llm_provider: str = "openrouter"
    llm_base_url: str = "https://openrouter.ai/api"
    llm_model: str = "google/gemini-2.5-flash"
    llm_timeout: int = 60  # seconds
    llm_max_tokens: int = 1024
    llm_temperature: float = 0.7
    openrouter_api_key: Optional[str] = None

    # Suggestion prompt contract
    suggestion_chord_count: int = 48
    suggestion_progression_count: int = 6

    # Playback defaults
    default_instrument: str = "Piano"
    default_seconds_per_chord: float = 1
    min_seconds_per_chord: float = 1
    max_seconds_per_chord: float = 10

    # Suggestion preference defaults
    default_genre: str = "Pop"
    default_complexity: str = "Simple"
    default_key: str = "C"

    @model_validator(mode="after")
    def _check_store_backend(self) -> "Settings":
        """Reject unknown store backends; warn when SQL has no explicit URL."""
        if self.store_backend not in ("memory", "sql"):
            raise ValueError(
                f"Unknown store backend: {self.store_backend!r} (expected 'memory' or 'sql')"
            )
        if self.store_backend == "sql" and not self.database_url:
            logging.getLogger(__name__).warning(
                "CHORDCRAFT_STORE_BACKEND=sql without CHORDCRAFT_DATABASE_URL; "
                "falling back to a local SQLite file."
            )
        return self

    model_config = SettingsConfigDict(
        env_prefix="CHORDCRAFT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience access
settings = get_settings()
