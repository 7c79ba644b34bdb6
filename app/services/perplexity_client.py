"""
Perplexity (Sonar) chat-completions client. One prompt in, raw answer text out.
Single attempt, no retries; every failure surfaces as UpstreamUnavailableError.
"""
import asyncio
import logging
from functools import lru_cache
from typing import Any

import httpx

from app.config import get_settings, require_perplexity_api_key
from app.services.content_errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a helpful and concise pet care expert assistant."


class PerplexityClient:
    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.perplexity.ai/chat/completions",
        model: str = "sonar",
        max_tokens: int = 1000,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self.base_url = base_url
        self.model = model
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._transport = transport

    def build_payload(self, prompt: str, json_schema: dict[str, Any] | None = None) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": 0.2,
            "max_tokens": self.max_tokens,
            "stream": False,
        }
        if json_schema is not None:
            payload["response_format"] = {
                "type": "json_schema",
                "json_schema": {"schema": json_schema},
            }
        return payload

    async def _post(self, payload: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            return await client.post(self.base_url, json=payload, headers=headers)

    async def query(self, prompt: str, *, json_schema: dict[str, Any] | None = None) -> str:
        """
        Send one prompt and return the model's message text.
        When json_schema is given, the model is asked for structured output matching it.
        """
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            # httpx bounds each connect/read/write step; wait_for bounds the whole exchange
            res = await asyncio.wait_for(self._post(self.build_payload(prompt, json_schema), headers), self.timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.warning("Perplexity request timed out after %ss", self.timeout)
            raise UpstreamUnavailableError(f"Perplexity request timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            logger.warning("Perplexity request failed: %s", e)
            raise UpstreamUnavailableError(f"Failed to query Perplexity API: {e}") from e

        if res.status_code != 200:
            logger.warning("Perplexity returned %s: %s", res.status_code, res.text[:500])
            raise UpstreamUnavailableError(f"Perplexity API returned status {res.status_code}")

        try:
            data = res.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise UpstreamUnavailableError("Perplexity response has no message content") from e
        if not isinstance(content, str) or not content.strip():
            raise UpstreamUnavailableError("Perplexity response has no message content")
        return content


@lru_cache
def get_perplexity_client() -> PerplexityClient:
    """Process-wide client built from settings. Raises RuntimeError if the API key is missing."""
    settings = get_settings()
    return PerplexityClient(
        require_perplexity_api_key(settings),
        base_url=settings.perplexity_base_url,
        model=settings.perplexity_model,
        max_tokens=settings.perplexity_max_tokens,
        timeout=settings.perplexity_timeout_seconds,
    )
