"""Tests for the LLM client adapter (chordcraft/core/llm_client.py).

Covers: construction, execute() success and every failure path,
_parse_response, and the shared-client getters.
"""
from __future__ import annotations

import json

import httpx
import pytest

from chordcraft.core import llm_client as llm_module
from chordcraft.core.llm_client import (
    LLMClient,
    LLMError,
    close_llm_client,
    get_llm_client,
)


def _completion(content: str | None) -> dict:
    return {
        "choices": [{"message": {"role": "assistant", "content": content}, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5},
    }


def _client(handler) -> LLMClient:
    return LLMClient(
        api_key="test-key",
        model="test/model",
        base_url="https://llm.test/api/",
        transport=httpx.MockTransport(handler),
    )


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestLLMClientInit:

    def test_explicit_arguments(self) -> None:
        client = LLMClient(api_key="k", model="m", base_url="https://x/", timeout=5)
        assert client.api_key == "k"
        assert client.model == "m"
        assert client.base_url == "https://x"
        assert client.timeout == 5

    async def test_headers(self) -> None:
        client = LLMClient(api_key="secret", model="m")
        try:
            assert client.client.headers["Authorization"] == "Bearer secret"
            assert "X-Title" in client.client.headers
        finally:
            await client.close()

    async def test_close_is_idempotent(self) -> None:
        client = LLMClient(api_key="k")
        _ = client.client
        await client.close()
        await client.close()
        assert client._client is None


# ---------------------------------------------------------------------------
# execute
# ---------------------------------------------------------------------------


class TestExecute:

    async def test_returns_message_content(self) -> None:
        seen: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_completion("C, F, G"))

        client = _client(handler)
        assert await client.execute("suggest please") == "C, F, G"
        assert seen["url"] == "https://llm.test/api/v1/chat/completions"
        assert seen["body"]["model"] == "test/model"
        assert seen["body"]["messages"] == [{"role": "user", "content": "suggest please"}]
        assert seen["body"]["stream"] is False
        await client.close()

    async def test_empty_content_is_returned_not_raised(self) -> None:
        client = _client(lambda request: httpx.Response(200, json=_completion("")))
        assert await client.execute("x") == ""
        await client.close()

    async def test_http_error_raises_llm_error(self) -> None:
        client = _client(lambda request: httpx.Response(503, text="overloaded"))
        with pytest.raises(LLMError, match="HTTP 503"):
            await client.execute("x")
        await client.close()

    async def test_http_error_is_not_retried(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(500)

        client = _client(handler)
        with pytest.raises(LLMError):
            await client.execute("x")
        assert len(calls) == 1
        await client.close()

    async def test_timeout_raises_llm_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        client = _client(handler)
        with pytest.raises(LLMError, match="timed out"):
            await client.execute("x")
        await client.close()

    async def test_transport_error_raises_llm_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = _client(handler)
        with pytest.raises(LLMError, match="LLM request failed"):
            await client.execute("x")
        await client.close()

    async def test_non_json_body(self) -> None:
        client = _client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(LLMError, match="non-JSON"):
            await client.execute("x")
        await client.close()

    async def test_json_array_body_raises_llm_error(self) -> None:
        client = _client(lambda request: httpx.Response(200, json=["C", "F"]))
        with pytest.raises(LLMError):
            await client.execute("x")
        await client.close()

    async def test_missing_api_key(self) -> None:
        client = LLMClient(api_key="", model="m")
        with pytest.raises(LLMError, match="API key"):
            await client.execute("x")


# ---------------------------------------------------------------------------
# _parse_response
# ---------------------------------------------------------------------------


class TestParseResponse:

    def test_content(self) -> None:
        client = LLMClient(api_key="k")
        assert client._parse_response(_completion("hello")) == "hello"

    def test_no_choices(self) -> None:
        client = LLMClient(api_key="k")
        with pytest.raises(LLMError):
            client._parse_response({"choices": []})

    def test_body_not_an_object(self) -> None:
        client = LLMClient(api_key="k")
        with pytest.raises(LLMError, match="not a JSON object"):
            client._parse_response(["C, F"])

    def test_choice_not_an_object(self) -> None:
        client = LLMClient(api_key="k")
        with pytest.raises(LLMError, match="no usable choice"):
            client._parse_response({"choices": ["C, F"]})

    def test_null_content(self) -> None:
        client = LLMClient(api_key="k")
        with pytest.raises(LLMError):
            client._parse_response(_completion(None))


# ---------------------------------------------------------------------------
# Shared client
# ---------------------------------------------------------------------------


class TestSharedClient:

    async def test_get_returns_same_instance_until_closed(self) -> None:
        first = get_llm_client()
        assert get_llm_client() is first
        await close_llm_client()
        assert llm_module._client is None
        second = get_llm_client()
        assert second is not first
        await close_llm_client()
