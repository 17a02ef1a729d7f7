"""Data models for the reminder reviser."""

from reminder_reviser.models.revision import Phase, RevisionResult, SessionState
from reminder_reviser.models.tone import SampleText, ToneKey, ToneVariant

__all__ = [
    "Phase",
    "RevisionResult",
    "SampleText",
    "SessionState",
    "ToneKey",
    "ToneVariant",
]
