"""
Configuration for BizPulse.
Loads settings from environment variables and an optional ``.env`` file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from bizpulse.domain.service.metrics import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    DEFAULT_SERIES_DAYS,
)
from bizpulse.infrastructure.insight.gemini_provider import DEFAULT_MODEL

STORE_BACKENDS = ("memory", "json", "cached")
INSIGHT_PROVIDERS = ("gemini", "stub")


@dataclass(frozen=True)
class Settings:
    """Configuration settings for the dashboard."""

    # Storage settings
    store_backend: str = "json"
    data_dir: Path = Path("data")
    demo_data: bool = False

    # Metrics settings
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    series_days: int = DEFAULT_SERIES_DAYS

    # Insight settings
    insight_provider: str = "stub"
    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_MODEL
    insight_timeout: float = 60.0

    # Logging settings
    log_level: str = "INFO"

    @property
    def cache_file(self) -> Path:
        return self.data_dir / "cache.json"

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> Settings:
        """Create settings from environment variables.

        Raises:
            ValueError: If a variable holds an unusable value
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        api_key = os.getenv("GEMINI_API_KEY") or None
        settings = cls(
            store_backend=os.getenv("BIZPULSE_STORE", "json").lower(),
            data_dir=Path(os.getenv("BIZPULSE_DATA_DIR", "data")),
            demo_data=_bool(os.getenv("BIZPULSE_DEMO_DATA", "false")),
            low_stock_threshold=_int("BIZPULSE_LOW_STOCK_THRESHOLD", DEFAULT_LOW_STOCK_THRESHOLD),
            series_days=_int("BIZPULSE_SERIES_DAYS", DEFAULT_SERIES_DAYS),
            insight_provider=os.getenv(
                "BIZPULSE_INSIGHT_PROVIDER", "gemini" if api_key else "stub"
            ).lower(),
            gemini_api_key=api_key,
            gemini_model=os.getenv("BIZPULSE_GEMINI_MODEL", DEFAULT_MODEL),
            insight_timeout=_float("BIZPULSE_INSIGHT_TIMEOUT", 60.0),
            log_level=os.getenv("BIZPULSE_LOG_LEVEL", "INFO").upper(),
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        if self.store_backend not in STORE_BACKENDS:
            raise ValueError(
                f"BIZPULSE_STORE must be one of {', '.join(STORE_BACKENDS)}, "
                f"got {self.store_backend!r}"
            )
        if self.insight_provider not in INSIGHT_PROVIDERS:
            raise ValueError(
                f"BIZPULSE_INSIGHT_PROVIDER must be one of {', '.join(INSIGHT_PROVIDERS)}, "
                f"got {self.insight_provider!r}"
            )
        if self.insight_provider == "gemini" and not self.gemini_api_key:
            raise ValueError("GEMINI_API_KEY is required for the gemini insight provider")
        if self.low_stock_threshold < 0:
            raise ValueError("BIZPULSE_LOW_STOCK_THRESHOLD cannot be negative")
        if self.series_days <= 0:
            raise ValueError("BIZPULSE_SERIES_DAYS must be positive")
        if self.insight_timeout <= 0:
            raise ValueError("BIZPULSE_INSIGHT_TIMEOUT must be positive")


def _bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
