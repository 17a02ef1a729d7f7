"""Tests for GeminiClient (generateContent wrapper)."""

from __future__ import annotations

import json

import httpx
import pytest

from reminder_reviser.clients.gemini_client import GeminiClient
from reminder_reviser.errors import (
    ConfigurationError,
    EmptyResponseError,
    ParseError,
    TransportError,
    UpstreamError,
)
from reminder_reviser.models.revision import RevisionResult


def gemini_body(text: str) -> dict:
    """Build a generateContent success body carrying ``text``."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def revision_text(revised: str, feedback: str) -> str:
    return json.dumps({"revised": revised, "feedback": feedback}, ensure_ascii=False)


def _ok(text: str):
    return lambda request: httpx.Response(200, json=gemini_body(text))


class TestGeminiClientRequest:
    async def test_posts_prompt_with_key_query(self, mock_transport_factory):
        """One POST with the prompt as sole content and the key as a query param."""
        transport = mock_transport_factory(_ok(revision_text("X", "Y")))
        client = GeminiClient(transport=transport)

        await client.request_revision("PROMPT", "secret-key")

        assert len(transport.calls) == 1
        request = transport.calls[0]
        assert request.method == "POST"
        assert request.url.path == "/v1beta/models/gemini-2.5-flash:generateContent"
        assert request.url.params["key"] == "secret-key"
        assert json.loads(request.content) == {"contents": [{"parts": [{"text": "PROMPT"}]}]}

    async def test_custom_model_and_base_url(self, mock_transport_factory):
        transport = mock_transport_factory(_ok(revision_text("X", "Y")))
        client = GeminiClient(
            model="gemini-test", base_url="https://example.test/v9/", transport=transport
        )

        await client.request_revision("p", "k")

        assert str(transport.calls[0].url).startswith(
            "https://example.test/v9/models/gemini-test:generateContent"
        )

    async def test_missing_key_makes_no_call(self, mock_transport_factory):
        transport = mock_transport_factory(_ok(revision_text("X", "Y")))
        client = GeminiClient(transport=transport)

        with pytest.raises(ConfigurationError):
            await client.request_revision("p", None)
        with pytest.raises(ConfigurationError):
            await client.request_revision("p", "")

        assert transport.calls == []


class TestGeminiClientResponses:
    async def test_embedded_json_is_extracted(self, mock_transport_factory):
        text = 'はい、添削しました。\n{"revised":"X","feedback":"Y"}\n以上です。'
        client = GeminiClient(transport=mock_transport_factory(_ok(text)))

        result = await client.request_revision("p", "k")

        assert result == RevisionResult(revised="X", feedback="Y")

    async def test_fenced_json_is_extracted(self, mock_transport_factory):
        text = '```json\n{"revised": "拝啓", "feedback": "- **ポイント1**: 説明"}\n```'
        client = GeminiClient(transport=mock_transport_factory(_ok(text)))

        result = await client.request_revision("p", "k")

        assert result.revised == "拝啓"
        assert result.feedback == "- **ポイント1**: 説明"

    async def test_missing_feedback_defaults_to_empty(self, mock_transport_factory):
        client = GeminiClient(transport=mock_transport_factory(_ok('{"revised":"X"}')))

        result = await client.request_revision("p", "k")

        assert result == RevisionResult(revised="X", feedback="")

    async def test_no_braces_raises_parse_error(self, mock_transport_factory):
        client = GeminiClient(transport=mock_transport_factory(_ok("申し訳ありません。")))

        with pytest.raises(ParseError):
            await client.request_revision("p", "k")

    async def test_invalid_json_raises_parse_error(self, mock_transport_factory):
        client = GeminiClient(transport=mock_transport_factory(_ok("{revised: X}")))

        with pytest.raises(ParseError):
            await client.request_revision("p", "k")

    async def test_error_object_raises_upstream_error(self, mock_transport_factory):
        transport = mock_transport_factory(
            lambda request: httpx.Response(
                400, json={"error": {"code": 400, "message": "API key not valid"}}
            )
        )
        client = GeminiClient(transport=transport)

        with pytest.raises(UpstreamError) as exc_info:
            await client.request_revision("p", "k")

        assert exc_info.value.detail == "API key not valid"
        assert exc_info.value.user_message == "APIエラー: API key not valid"

    async def test_error_object_without_message(self, mock_transport_factory):
        transport = mock_transport_factory(
            lambda request: httpx.Response(500, json={"error": {"code": 500}})
        )
        client = GeminiClient(transport=transport)

        with pytest.raises(UpstreamError) as exc_info:
            await client.request_revision("p", "k")

        assert exc_info.value.user_message == "APIエラー: エラーが発生しました"

    async def test_non_string_error_message_is_stringified(self, mock_transport_factory):
        transport = mock_transport_factory(
            lambda request: httpx.Response(400, json={"error": {"message": 400}})
        )
        client = GeminiClient(transport=transport)

        with pytest.raises(UpstreamError) as exc_info:
            await client.request_revision("p", "k")

        assert exc_info.value.detail == "400"
        assert exc_info.value.user_message == "APIエラー: 400"

    async def test_no_candidates_raises_empty_response(self, mock_transport_factory):
        transport = mock_transport_factory(lambda request: httpx.Response(200, json={"candidates": []}))
        client = GeminiClient(transport=transport)

        with pytest.raises(EmptyResponseError):
            await client.request_revision("p", "k")

    async def test_empty_text_raises_empty_response(self, mock_transport_factory):
        client = GeminiClient(transport=mock_transport_factory(_ok("")))

        with pytest.raises(EmptyResponseError):
            await client.request_revision("p", "k")


class TestGeminiClientTransport:
    async def test_connect_error_raises_transport_error(self, mock_transport_factory):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = GeminiClient(transport=mock_transport_factory(handler))

        with pytest.raises(TransportError) as exc_info:
            await client.request_revision("p", "k")

        assert "connection refused" in exc_info.value.detail
        assert exc_info.value.user_message.startswith("エラーが発生しました: ")

    async def test_timeout_raises_transport_error(self, mock_transport_factory):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = GeminiClient(transport=mock_transport_factory(handler))

        with pytest.raises(TransportError):
            await client.request_revision("p", "k")

    async def test_non_json_body_raises_transport_error(self, mock_transport_factory):
        transport = mock_transport_factory(
            lambda request: httpx.Response(502, text="<html>Bad Gateway</html>")
        )
        client = GeminiClient(transport=transport)

        with pytest.raises(TransportError):
            await client.request_revision("p", "k")

    @pytest.mark.parametrize("body", [[], "text", 42])
    async def test_non_object_body_raises_transport_error(self, mock_transport_factory, body):
        transport = mock_transport_factory(lambda request: httpx.Response(200, json=body))
        client = GeminiClient(transport=transport)

        with pytest.raises(TransportError, match="Malformed response body"):
            await client.request_revision("p", "k")

    async def test_single_attempt_only(self, mock_transport_factory):
        """Failures are not retried."""
        def handler(request):
            raise httpx.ConnectError("down", request=request)

        transport = mock_transport_factory(handler)
        client = GeminiClient(transport=transport)

        with pytest.raises(TransportError):
            await client.request_revision("p", "k")

        assert len(transport.calls) == 1
