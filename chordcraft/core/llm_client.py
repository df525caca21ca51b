"""
LLM client adapter.

A single-shot, text-in/text-out wrapper around an OpenAI-compatible
``/v1/chat/completions`` endpoint (OpenRouter by default). Every failure
(HTTP status, transport error, timeout, malformed body, empty content)
surfaces as ``LLMError`` carrying a human-readable message. Calls are
never retried here; callers decide what a failure means.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Optional, Protocol

import httpx

from chordcraft.config import settings

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Raised when the LLM call fails or yields no text."""


class LLMAdapter(Protocol):
    """Anything that turns a prompt into response text."""

    async def execute(self, prompt: str) -> str: ...


class LLMClient:
    """OpenAI-compatible chat-completion client used by the suggestion pipeline."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.provider = settings.llm_provider
        self.api_key = api_key if api_key is not None else settings.openrouter_api_key
        self.model = model or settings.llm_model
        self.base_url = (base_url or settings.llm_base_url).rstrip("/")
        self.timeout = timeout or settings.llm_timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = {"Authorization": f"Bearer {self.api_key or ''}"}
            if self.provider == "openrouter":
                headers["HTTP-Referer"] = "https://chordcraft.local"
                headers["X-Title"] = settings.app_name
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def execute(self, prompt: str) -> str:
        """Send ``prompt`` as a single user message and return the reply text."""
        if not self.api_key:
            raise LLMError("LLM API key not configured")

        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": settings.llm_temperature,
            "max_tokens": settings.llm_max_tokens,
            "stream": False,
        }

        start = time.time()
        try:
            response = await self.client.post(
                f"{self.base_url}/v1/chat/completions",
                json=payload,
            )
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.error(f"LLM request timed out after {self.timeout}s")
            raise LLMError(f"LLM request timed out after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            logger.error(f"LLM returned HTTP {e.response.status_code}: {e.response.text[:200]}")
            raise LLMError(f"LLM returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"LLM transport error: {e}")
            raise LLMError(f"LLM request failed: {e}") from e
        except ValueError as e:
            raise LLMError("LLM returned a non-JSON body") from e

        content = self._parse_response(data)
        usage = data.get("usage") if isinstance(data.get("usage"), dict) else {}
        logger.info(
            f"LLM: {time.time() - start:.2f}s, {usage.get('prompt_tokens', 0)} prompt, "
            f"{usage.get('completion_tokens', 0)} completion tokens"
        )
        return content

    def _parse_response(self, data: Any) -> str:
        """Pull ``choices[0].message.content`` out of an OpenAI-compatible body."""
        if not isinstance(data, dict):
            raise LLMError("LLM response body was not a JSON object")
        choices = data.get("choices") or [{}]
        choice = choices[0] if isinstance(choices, list) else None
        if not isinstance(choice, dict):
            raise LLMError("LLM response contained no usable choice")
        message = choice.get("message")
        if not isinstance(message, dict):
            raise LLMError("LLM response contained no text content")
        content = message.get("content")
        if not isinstance(content, str):
            raise LLMError("LLM response contained no text content")
        return content


_client: LLMClient | None = None


def get_llm_client() -> LLMClient:
    """Get the shared LLM client, creating it on first use."""
    global _client
    if _client is None:
        _client = LLMClient()
    return _client


async def close_llm_client() -> None:
    """Close and forget the shared LLM client."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
