"""Pydantic models for the static tone and sample catalogs."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

ToneKey = Literal["soft", "standard", "firm"]


class ToneVariant(BaseModel):
    """A preset instruction profile controlling the register of the revision."""

    key: ToneKey
    label: str
    emoji: str
    description: str
    instruction: str  # injected verbatim into the prompt

    model_config = {"frozen": True}


class SampleText(BaseModel):
    """Canned input text a user can load with one click."""

    label: str
    text: str

    model_config = {"frozen": True}
