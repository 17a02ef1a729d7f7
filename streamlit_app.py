"""Streamlit Web UI for reminder-reviser.

Paste a Japanese reminder / follow-up message, pick a tone, and get a revised
version plus Markdown feedback from Gemini.
"""

from __future__ import annotations

import asyncio
import logging
import os
import uuid

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets → os.environ so backend clients can read them
for key in ("GEMINI_API_KEY", "GA_MEASUREMENT_ID", "GA_API_SECRET"):
    if key not in os.environ:
        try:
            os.environ[key] = st.secrets[key]
        except Exception:
            pass

from reminder_reviser.analytics import get_analytics
from reminder_reviser.catalog import SAMPLES, TIPS, TONES
from reminder_reviser.clients.gemini_client import GeminiClient
from reminder_reviser.config import get_api_secret, get_measurement_id, load_config
from reminder_reviser.models.tone import SampleText
from reminder_reviser.pipeline.controller import RevisionController
from reminder_reviser.ui import view

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title=view.TITLE,
    page_icon="✉️",
    layout="centered",
)

config = load_config()


@st.cache_resource
def _init_analytics():
    """Initialize the process-wide analytics capability once."""
    analytics = get_analytics()
    analytics.initialize(
        get_measurement_id(),
        api_secret=get_api_secret(),
        config=config.analytics,
    )
    return analytics


analytics = _init_analytics()

# ---------------------------------------------------------------------------
# Session controller
# ---------------------------------------------------------------------------

INPUT_KEY = "original_text_input"


def _queue_clipboard(text: str) -> None:
    st.session_state["pending_clipboard"] = text


if "controller" not in st.session_state:
    session_analytics = analytics.for_client(str(uuid.uuid4()))
    st.session_state.controller = RevisionController(
        GeminiClient(
            model=config.gemini.model,
            base_url=config.gemini.base_url,
            timeout=config.gemini.timeout,
        ),
        analytics=session_analytics,
        clipboard=_queue_clipboard,
    )
    session_analytics.record_page_view("/")

controller: RevisionController = st.session_state.controller
state = controller.state

# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


def _on_sample(sample: SampleText) -> None:
    controller.load_sample(sample)
    st.session_state[INPUT_KEY] = controller.state.original_text


def _on_tone(tone_key: str) -> None:
    controller.select_tone(tone_key)


def _on_input() -> None:
    controller.set_input_text(st.session_state[INPUT_KEY])


def _on_copy() -> None:
    controller.copy_result(controller.state.revised_text)


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

st.markdown(f"<h1 style='text-align:center'>✉️ {view.TITLE}</h1>", unsafe_allow_html=True)
st.markdown(
    f"<p style='text-align:center;color:#8B7B73'>{view.TAGLINE}</p>",
    unsafe_allow_html=True,
)

# ---------------------------------------------------------------------------
# Form
# ---------------------------------------------------------------------------

with st.container(border=True):
    sample_cols = st.columns(len(SAMPLES) + 1)
    sample_cols[0].caption("お試し：")
    for col, sample in zip(sample_cols[1:], SAMPLES):
        col.button(
            sample.label,
            key=f"sample_{sample.label}",
            on_click=_on_sample,
            args=(sample,),
            use_container_width=True,
        )

    if INPUT_KEY not in st.session_state:
        st.session_state[INPUT_KEY] = state.original_text
    st.text_area(
        "添削する文面",
        key=INPUT_KEY,
        height=180,
        placeholder=view.PLACEHOLDER,
        on_change=_on_input,
        label_visibility="collapsed",
    )

    st.markdown(
        "<p style='text-align:center;color:#8B7B73'>トーンを選ぶ</p>",
        unsafe_allow_html=True,
    )
    tone_cols = st.columns(len(TONES))
    for col, tone in zip(tone_cols, TONES):
        with col:
            st.button(
                view.tone_button_label(tone),
                key=f"tone_{tone.key}",
                type="primary" if view.is_selected(state, tone) else "secondary",
                help=tone.description,
                on_click=_on_tone,
                args=(tone.key,),
                use_container_width=True,
            )
            st.caption(tone.description)

    if st.button(
        view.submit_label(state),
        type="primary",
        disabled=not view.can_submit(state),
        use_container_width=True,
    ):
        with st.spinner("添削しています..."):
            asyncio.run(controller.submit_revision())

    if view.show_error(state):
        st.error(state.error_message)

# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

if view.show_results(state):
    with st.container(border=True):
        head, copy_col = st.columns([4, 1])
        head.subheader("✓ 添削後の文面")
        copy_col.button("コピー", key="copy_revised", on_click=_on_copy)
        st.text(state.revised_text)

    with st.container(border=True):
        st.subheader("💡 改善ポイント")
        st.markdown(state.feedback_text)

pending = st.session_state.pop("pending_clipboard", None)
if pending is not None:
    components.html(view.clipboard_script(pending), height=0)

# ---------------------------------------------------------------------------
# Tips & footer
# ---------------------------------------------------------------------------

st.divider()
st.caption("— 催促文のコツ —")
tip_cols = st.columns(len(TIPS))
for col, tip in zip(tip_cols, TIPS):
    col.markdown(f"<small>{tip}</small>", unsafe_allow_html=True)

st.markdown(
    f"<p style='text-align:center;color:#B8A8A0;font-size:0.8em'>{view.FOOTER}</p>",
    unsafe_allow_html=True,
)
