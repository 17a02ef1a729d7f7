"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from reminder_reviser.analytics.sink import Analytics
from reminder_reviser.clients.gemini_client import GeminiClient
from reminder_reviser.models.revision import RevisionResult
from reminder_reviser.pipeline.controller import RevisionController


@pytest.fixture
def sample_original_text() -> str:
    return "先日お送りした請求書の件ですが、まだ入金が確認できていません。確認お願いします。"


@pytest.fixture
def sample_revision() -> RevisionResult:
    return RevisionResult(
        revised="拝啓 先日お送りいたしました請求書の件につきまして、ご確認いただけますと幸いです。",
        feedback="- **ポイント1**: クッション言葉を追加\n- **ポイント2**: 依頼形に変更",
    )


@pytest.fixture
def mock_gemini_client(sample_revision) -> GeminiClient:
    """Create a mock Gemini client."""
    client = AsyncMock(spec=GeminiClient)
    client.request_revision = AsyncMock(return_value=sample_revision)
    return client


@pytest.fixture
def mock_analytics() -> Analytics:
    return MagicMock(spec=Analytics)


@pytest.fixture
def mock_clipboard() -> MagicMock:
    return MagicMock()


@pytest.fixture
def controller(mock_gemini_client, mock_analytics, mock_clipboard) -> RevisionController:
    return RevisionController(
        mock_gemini_client,
        analytics=mock_analytics,
        api_key_provider=lambda: "test-key",
        clipboard=mock_clipboard,
    )


@pytest.fixture
def mock_transport_factory():
    """Build an httpx.MockTransport that records the requests it serves."""

    def _factory(handler):
        calls: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return handler(request)

        transport = httpx.MockTransport(_handler)
        transport.calls = calls
        return transport

    return _factory
