"""Utility to extract the structured revision from free-form model output."""

from __future__ import annotations

import json

from reminder_reviser.errors import ParseError
from reminder_reviser.models.revision import RevisionResult


def find_json_span(text: str) -> str | None:
    """Return the greedy span from the first '{' to the last '}', or None."""
    if not text:
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return text[start : end + 1]


def parse_json_object(span: str) -> dict:
    """Strictly parse ``span`` as a JSON object."""
    try:
        data = json.loads(span)
    except (ValueError, RecursionError) as e:
        raise ParseError(f"Invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Expected JSON object, got {type(data).__name__}")
    return data


def extract_revision(text: str) -> RevisionResult:
    """Extract ``{revised, feedback}`` from model output.

    Missing fields default to an empty string rather than failing.
    """
    span = find_json_span(text)
    if span is None:
        raise ParseError(f"No JSON object in response: {(text or '')[:200]}")
    data = parse_json_object(span)
    return RevisionResult(
        revised=_as_text(data.get("revised")),
        feedback=_as_text(data.get("feedback")),
    )


def _as_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
