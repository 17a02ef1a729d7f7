"""Process-wide analytics capability.

Initialized once at startup from an optional measurement id. Until then every
``record_*`` call is a no-op. Delivery never raises and never blocks the caller.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Callable

import httpx

from reminder_reviser.analytics.models import AnalyticsEvent
from reminder_reviser.config import AnalyticsConfig

logger = logging.getLogger(__name__)

Sender = Callable[[AnalyticsEvent], None]


class MeasurementProtocolSender:
    """Post events to the GA4 Measurement Protocol on a background thread."""

    def __init__(
        self,
        measurement_id: str,
        api_secret: str,
        client_id: str | None = None,
        config: AnalyticsConfig | None = None,
    ):
        config = config or AnalyticsConfig()
        self.measurement_id = measurement_id
        self.api_secret = api_secret
        self.client_id = client_id or str(uuid.uuid4())
        self.endpoint = config.endpoint
        self.timeout = config.timeout

    def __call__(self, event: AnalyticsEvent) -> None:
        threading.Thread(target=self._post, args=(event,), daemon=True).start()

    def _post(self, event: AnalyticsEvent) -> None:
        try:
            httpx.post(
                self.endpoint,
                params={"measurement_id": self.measurement_id, "api_secret": self.api_secret},
                json={
                    "client_id": event.client_id or self.client_id,
                    "events": [event.to_measurement_protocol()],
                },
                timeout=self.timeout,
            )
        except Exception:
            logger.debug("Analytics delivery failed", exc_info=True)


def _log_sender(event: AnalyticsEvent) -> None:
    logger.info("analytics %s/%s/%s", event.category, event.action, event.label)


class Analytics:
    """Analytics capability; all calls are no-ops until initialized.

    ``for_client`` returns a view bound to one browser session: it shares the
    root's sender and stamps its events with that session's client id.
    """

    def __init__(self, client_id: str | None = None, *, root: Analytics | None = None):
        self.client_id = client_id
        self._root = root
        self.measurement_id: str | None = None
        self._sender: Sender | None = None

    @property
    def _active_sender(self) -> Sender | None:
        return (self._root or self)._sender

    @property
    def enabled(self) -> bool:
        return self._active_sender is not None

    def for_client(self, client_id: str) -> Analytics:
        return Analytics(client_id, root=self._root or self)

    def initialize(
        self,
        measurement_id: str | None,
        *,
        api_secret: str | None = None,
        client_id: str | None = None,
        config: AnalyticsConfig | None = None,
        sender: Sender | None = None,
    ) -> bool:
        """Enable analytics. Returns False (and stays disabled) without an id.

        With an ``api_secret`` events go to the Measurement Protocol; without
        one they are only written to the log.
        """
        if not measurement_id:
            logger.debug("Analytics disabled: no measurement id")
            return False
        if sender is None:
            if api_secret:
                sender = MeasurementProtocolSender(
                    measurement_id, api_secret, client_id=client_id, config=config
                )
            else:
                sender = _log_sender
        self.measurement_id = measurement_id
        self._sender = sender
        logger.info("Analytics initialized: %s", measurement_id)
        return True

    def reset(self) -> None:
        self.measurement_id = None
        self._sender = None

    def record_page_view(self, page: str = "/") -> None:
        self._emit(
            AnalyticsEvent(
                category="Page", action="page_view", label=page, client_id=self.client_id
            )
        )

    def record_event(self, category: str, action: str, label: str = "") -> None:
        self._emit(
            AnalyticsEvent(
                category=category, action=action, label=label, client_id=self.client_id
            )
        )

    def _emit(self, event: AnalyticsEvent) -> None:
        sender = self._active_sender
        if sender is None:
            return
        try:
            sender(event)
        except Exception:
            logger.debug("Analytics sender raised", exc_info=True)


_analytics = Analytics()


def get_analytics() -> Analytics:
    return _analytics


def initialize(measurement_id: str | None, **kwargs) -> bool:
    return _analytics.initialize(measurement_id, **kwargs)


def record_page_view(page: str = "/") -> None:
    _analytics.record_page_view(page)


def record_event(category: str, action: str, label: str = "") -> None:
    _analytics.record_event(category, action, label)
