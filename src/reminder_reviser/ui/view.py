"""View helpers for the Streamlit page; pure functions of ``SessionState``."""

from __future__ import annotations

import json

from reminder_reviser.models.revision import SessionState
from reminder_reviser.models.tone import ToneVariant

TITLE = "催促文面添削"
TAGLINE = "やさしく、でも、きちんと伝わる文面に。"
PLACEHOLDER = "催促やリマインドの文面を入力してください..."
FOOTER = "やさしい言葉は、やさしい関係をつくる。"


def can_submit(state: SessionState) -> bool:
    """Submit is disabled while loading or when the input is blank."""
    return not state.is_loading and bool(state.original_text.strip())


def show_error(state: SessionState) -> bool:
    return bool(state.error_message)


def show_results(state: SessionState) -> bool:
    return state.has_result


def submit_label(state: SessionState) -> str:
    return "添削しています..." if state.is_loading else "添削する"


def tone_button_label(tone: ToneVariant) -> str:
    return f"{tone.emoji} {tone.label}"


def is_selected(state: SessionState, tone: ToneVariant) -> bool:
    return state.selected_tone == tone.key


def clipboard_script(text: str) -> str:
    """HTML snippet that writes ``text`` to the browser clipboard."""
    # json.dumps escapes quotes, newlines and script-breaking characters
    safe = json.dumps(text).replace("</", "<\\/")
    return (
        "<script>"
        f"navigator.clipboard.writeText({safe}).catch(function () {{}});"
        "</script>"
    )
