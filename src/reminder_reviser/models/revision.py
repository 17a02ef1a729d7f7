"""Pydantic models for revision output and per-session UI state."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from reminder_reviser.models.tone import ToneKey


class RevisionResult(BaseModel):
    revised: str = ""
    feedback: str = ""  # Markdown source, rendered only at display time


class Phase(str, Enum):
    """Phases of a single revision attempt."""

    IDLE = "idle"
    VALIDATING = "validating"
    IN_FLIGHT = "in_flight"
    SUCCESS = "success"
    FAILED = "failed"


class SessionState(BaseModel):
    """Interactive state of one page session, mutated only by the controller."""

    original_text: str = ""
    selected_tone: ToneKey = "standard"
    is_loading: bool = False
    error_message: str = ""
    error_kind: str | None = None
    revised_text: str = ""
    feedback_text: str = ""
    phase: Phase = Phase.IDLE

    model_config = {"validate_assignment": True}

    @property
    def has_result(self) -> bool:
        return bool(self.revised_text or self.feedback_text)
