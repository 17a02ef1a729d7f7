"""Application State Controller - mediates user actions and session state.

A revision attempt walks an explicit transition table::

    Idle -> Validating -> InFlight -> Success -> Idle
                      \\           \\-> Failed  -> Idle
                       \\-> Failed -> Idle

Validation and configuration failures happen before InFlight, so they leave a
previously displayed result untouched. Entering InFlight always clears the
error and result fields first.
"""

from __future__ import annotations

import logging
from typing import Callable

from reminder_reviser.analytics.sink import Analytics, get_analytics
from reminder_reviser.catalog import get_tone
from reminder_reviser.clients.gemini_client import GeminiClient
from reminder_reviser.config import get_api_key
from reminder_reviser.errors import (
    ConfigurationError,
    RevisionError,
    TransportError,
    ValidationError,
)
from reminder_reviser.models.revision import Phase, RevisionResult, SessionState
from reminder_reviser.models.tone import SampleText
from reminder_reviser.pipeline.prompt_builder import build_prompt

logger = logging.getLogger(__name__)

TRANSITIONS: dict[Phase, frozenset[Phase]] = {
    Phase.IDLE: frozenset({Phase.VALIDATING}),
    Phase.VALIDATING: frozenset({Phase.IN_FLIGHT, Phase.FAILED}),
    Phase.IN_FLIGHT: frozenset({Phase.SUCCESS, Phase.FAILED}),
    Phase.SUCCESS: frozenset({Phase.IDLE}),
    Phase.FAILED: frozenset({Phase.IDLE}),
}


class RevisionController:
    """Owns ``SessionState`` and drives the revision client."""

    def __init__(
        self,
        client: GeminiClient,
        *,
        analytics: Analytics | None = None,
        api_key_provider: Callable[[], str | None] = get_api_key,
        clipboard: Callable[[str], None] | None = None,
        state: SessionState | None = None,
    ):
        self.client = client
        self.analytics = analytics if analytics is not None else get_analytics()
        self.api_key_provider = api_key_provider
        self.clipboard = clipboard
        self.state = state if state is not None else SessionState()

    # -- synchronous actions ------------------------------------------------

    def set_input_text(self, text: str) -> None:
        self.state.original_text = text

    def select_tone(self, tone_key: str) -> None:
        tone = get_tone(tone_key)
        self.state.selected_tone = tone.key
        self.analytics.record_event("User", "select_tone", tone.key)

    def load_sample(self, sample: SampleText) -> None:
        self.state.original_text = sample.text
        self.analytics.record_event("User", "use_sample", sample.label)

    def copy_result(self, text: str) -> None:
        """Best-effort copy; clipboard failures are logged, never surfaced."""
        try:
            if self.clipboard is not None:
                self.clipboard(text)
        except Exception:
            logger.warning("Clipboard write failed", exc_info=True)
        self.analytics.record_event("User", "copy_text", "revised_text")

    # -- revision -----------------------------------------------------------

    async def submit_revision(self) -> RevisionResult | None:
        """Run one revision attempt. Returns the result, or None on failure."""
        state = self.state
        if state.is_loading:
            logger.debug("Revision already in flight; ignoring submit")
            return None

        self._transition(Phase.VALIDATING)
        if not state.original_text.strip():
            self._fail(ValidationError())
            return None
        api_key = self.api_key_provider()
        if not api_key:
            self._fail(ConfigurationError())
            return None

        self._transition(Phase.IN_FLIGHT)
        state.is_loading = True
        state.error_message = ""
        state.error_kind = None
        state.revised_text = ""
        state.feedback_text = ""

        tone = get_tone(state.selected_tone)
        try:
            prompt = build_prompt(state.original_text, tone)
            result = await self.client.request_revision(prompt, api_key)
        except RevisionError as e:
            state.is_loading = False
            self._fail(e)
            return None
        except Exception as e:
            logger.exception("Unexpected revision failure")
            state.is_loading = False
            self._fail(TransportError(str(e) or type(e).__name__))
            return None

        state.revised_text = result.revised
        state.feedback_text = result.feedback
        state.error_message = ""
        state.is_loading = False
        self._transition(Phase.SUCCESS)
        self.analytics.record_event("Revision", "revision_success", tone.key)
        self._transition(Phase.IDLE)
        return result

    def _fail(self, error: RevisionError) -> None:
        logger.info("Revision failed (%s): %s", error.kind, error.detail)
        self._transition(Phase.FAILED)
        try:
            self.state.error_message = error.user_message
            self.state.error_kind = error.kind
            self.analytics.record_event("Error", error.analytics_action, error.analytics_label)
        finally:
            self.state.is_loading = False
            self._transition(Phase.IDLE)

    def _transition(self, target: Phase) -> None:
        current = self.state.phase
        if target not in TRANSITIONS[current]:
            raise RuntimeError(f"Illegal transition {current.value} -> {target.value}")
        self.state.phase = target
