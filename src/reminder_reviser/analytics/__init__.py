"""Fire-and-forget analytics sink."""

from reminder_reviser.analytics.models import AnalyticsEvent
from reminder_reviser.analytics.sink import (
    Analytics,
    MeasurementProtocolSender,
    get_analytics,
    initialize,
    record_event,
    record_page_view,
)

__all__ = [
    "Analytics",
    "AnalyticsEvent",
    "MeasurementProtocolSender",
    "get_analytics",
    "initialize",
    "record_event",
    "record_page_view",
]
