"""Tests for PerplexityClient against a mocked HTTP transport."""

import asyncio
import json

import httpx
import pytest

from app.config import Settings, require_perplexity_api_key
from app.services.content_errors import UpstreamUnavailableError
from app.services.perplexity_client import SYSTEM_PROMPT, PerplexityClient


def completion(content: str) -> dict:
    return {
        "id": "cmpl-1",
        "model": "sonar",
        "created": 1760000000,
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }


def make_client(handler) -> PerplexityClient:
    return PerplexityClient("pplx-test", model="sonar", max_tokens=500, timeout=5.0, transport=httpx.MockTransport(handler))


class TestQuery:
    @pytest.mark.asyncio
    async def test_returns_message_content(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=completion('{"services": []}'))

        result = await make_client(handler).query("vets in Dublin", json_schema={"type": "object"})

        assert result == '{"services": []}'
        assert seen["auth"] == "Bearer pplx-test"
        body = seen["body"]
        assert body["model"] == "sonar"
        assert body["max_tokens"] == 500
        assert body["temperature"] == 0.2
        assert body["messages"] == [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "vets in Dublin"},
        ]
        assert body["response_format"] == {"type": "json_schema", "json_schema": {"schema": {"type": "object"}}}

    def test_payload_without_schema_has_no_response_format(self) -> None:
        client = PerplexityClient("pplx-test")

        assert "response_format" not in client.build_payload("hello")

    @pytest.mark.asyncio
    async def test_timeout_is_upstream_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamUnavailableError, match="timed out"):
            await make_client(handler).query("vets in Dublin")

    @pytest.mark.asyncio
    async def test_connection_error_is_upstream_unavailable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamUnavailableError):
            await make_client(handler).query("vets in Dublin")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 429, 500, 503])
    async def test_non_success_status(self, status_code) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json={"error": "nope"})

        with pytest.raises(UpstreamUnavailableError, match=str(status_code)):
            await make_client(handler).query("vets in Dublin")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"choices": []}, completion("")])
    async def test_missing_content(self, payload) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=payload)

        with pytest.raises(UpstreamUnavailableError, match="no message content"):
            await make_client(handler).query("vets in Dublin")


    @pytest.mark.asyncio
    async def test_slow_response_hits_overall_timeout(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200, json=completion("late"))

        client = PerplexityClient("pplx-test", timeout=0.05, transport=httpx.MockTransport(handler))

        with pytest.raises(UpstreamUnavailableError, match="timed out"):
            await client.query("vets in Dublin")


class TestApiKey:
    def test_missing_key_is_fatal(self) -> None:
        with pytest.raises(RuntimeError, match="PERPLEXITY_API_KEY"):
            require_perplexity_api_key(Settings(perplexity_api_key="  "))

    def test_key_is_returned(self) -> None:
        assert require_perplexity_api_key(Settings(perplexity_api_key="pplx-abc")) == "pplx-abc"
