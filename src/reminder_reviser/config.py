"""Application configuration loaded from config.yaml and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

API_KEY_ENV = "GEMINI_API_KEY"
MEASUREMENT_ID_ENV = "GA_MEASUREMENT_ID"
API_SECRET_ENV = "GA_API_SECRET"


@dataclass(frozen=True)
class GeminiConfig:
    model: str = "gemini-2.5-flash"
    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    timeout: int = 60

    def __post_init__(self):
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"gemini.timeout must be between 1 and 600, got {self.timeout}")


@dataclass(frozen=True)
class AnalyticsConfig:
    endpoint: str = "https://www.google-analytics.com/mp/collect"
    timeout: float = 2.0

    def __post_init__(self):
        if self.timeout <= 0:
            raise ValueError(f"analytics.timeout must be positive, got {self.timeout}")


@dataclass(frozen=True)
class AppConfig:
    gemini: GeminiConfig = field(default_factory=GeminiConfig)
    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        gemini=GeminiConfig(**raw.get("gemini", {})),
        analytics=AnalyticsConfig(**raw.get("analytics", {})),
    )


def get_api_key() -> str | None:
    """Return the Gemini API key from the environment, or None when unset."""
    return os.environ.get(API_KEY_ENV, "").strip() or None


def get_measurement_id() -> str | None:
    return os.environ.get(MEASUREMENT_ID_ENV, "").strip() or None


def get_api_secret() -> str | None:
    return os.environ.get(API_SECRET_ENV, "").strip() or None
