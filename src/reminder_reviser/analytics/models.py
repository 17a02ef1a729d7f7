"""Analytics event data models."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class AnalyticsEvent(BaseModel):
    """Single category/action/label notification."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)
    category: str  # "Revision" | "Error" | "User" | "Page"
    action: str
    label: str = ""
    client_id: str | None = None  # browser session the event belongs to

    def to_measurement_protocol(self) -> dict:
        """Render as a GA4 Measurement Protocol event entry."""
        if self.action == "page_view":
            return {"name": "page_view", "params": {"page_location": self.label}}
        return {
            "name": self.action,
            "params": {
                "event_category": self.category,
                "event_label": self.label[:100],
            },
        }
