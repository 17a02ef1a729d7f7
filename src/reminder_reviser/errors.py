"""Error taxonomy for a revision attempt.

Every failure a revision can hit is a ``RevisionError`` subclass. Each kind
knows the message shown to the user and the analytics action it is reported
under, so callers only need to catch the base class.
"""

from __future__ import annotations


class RevisionError(Exception):
    """Base class for all revision failures."""

    kind: str = "unknown"
    analytics_action: str = "revision_error"

    def __init__(self, detail: object = ""):
        detail = "" if detail is None else str(detail)
        super().__init__(detail or self.kind)
        self.detail = detail

    @property
    def user_message(self) -> str:
        return self.detail

    @property
    def analytics_label(self) -> str:
        return self.detail or self.kind


class ValidationError(RevisionError):
    """Input text is empty after trimming."""

    kind = "validation"
    analytics_action = "validation_error"

    @property
    def user_message(self) -> str:
        return "添削する文面を入力してください"


class ConfigurationError(RevisionError):
    """No API key is configured."""

    kind = "configuration"
    analytics_action = "configuration_error"

    @property
    def user_message(self) -> str:
        return "Gemini APIキーが設定されていません。.envファイルを確認してください。"


class TransportError(RevisionError):
    """Network failure, timeout, or an unreadable response body."""

    kind = "transport"
    analytics_action = "revision_error"

    @property
    def user_message(self) -> str:
        return "エラーが発生しました: " + (self.detail or "不明なエラー")


class UpstreamError(RevisionError):
    """The provider answered with an explicit error object."""

    kind = "upstream"
    analytics_action = "api_error"

    @property
    def user_message(self) -> str:
        return "APIエラー: " + (self.detail or "エラーが発生しました")


class EmptyResponseError(RevisionError):
    """The response carried no extractable text."""

    kind = "empty_response"
    analytics_action = "empty_response"

    @property
    def user_message(self) -> str:
        return "AIからの応答がありませんでした"


class ParseError(RevisionError):
    """The model's reply did not contain a parseable JSON object."""

    kind = "parse"
    analytics_action = "parse_error"

    @property
    def user_message(self) -> str:
        return "AIからの応答を解析できませんでした"
