"""Gemini generateContent wrapper with async support.

One call per revision, no retries: the caller decides whether to try again.
"""

from __future__ import annotations

import logging

import httpx

from reminder_reviser.errors import (
    ConfigurationError,
    EmptyResponseError,
    TransportError,
    UpstreamError,
)
from reminder_reviser.models.revision import RevisionResult
from reminder_reviser.utils.json_parser import extract_revision

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiClient:
    """Async Gemini API client returning a parsed ``RevisionResult``."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _client_kwargs(self) -> dict:
        kwargs: dict = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    async def _call_api(self, prompt: str, api_key: str) -> dict:
        """Make the single HTTP call and decode the JSON body."""
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        async with httpx.AsyncClient(**self._client_kwargs()) as client:
            response = await client.post(
                self.endpoint,
                params={"key": api_key},
                json=payload,
            )
        logger.debug("Gemini response: status=%d", response.status_code)
        return response.json()

    async def generate(self, prompt: str, api_key: str | None) -> str:
        """Send a prompt to Gemini and return the first candidate's text."""
        if not api_key:
            raise ConfigurationError("API key is not configured")

        logger.debug("Gemini call: model=%s", self.model)
        try:
            data = await self._call_api(prompt, api_key)
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Gemini call failed", exc_info=True)
            raise TransportError(str(e) or type(e).__name__) from e

        if not isinstance(data, dict):
            raise TransportError(
                f"Malformed response body: expected object, got {type(data).__name__}"
            )

        text = _first_candidate_text(data)
        if text:
            return text

        error = data.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else error
            message = "" if message is None else str(message)
            logger.warning("Gemini returned an error: %s", message)
            raise UpstreamError(message)

        raise EmptyResponseError("No candidate text in response")

    async def request_revision(self, prompt: str, api_key: str | None) -> RevisionResult:
        """Send the prompt and parse ``{revised, feedback}`` from the reply."""
        text = await self.generate(prompt, api_key)
        return extract_revision(text)


def _first_candidate_text(data: dict) -> str:
    """Return ``candidates[0].content.parts[0].text`` or an empty string."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""
