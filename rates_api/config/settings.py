"""Application configuration and environment helpers."""

from __future__ import annotations

from datetime import time
from functools import lru_cache
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cnb_fixing.fetcher import CNB_DAILY_URL, DEFAULT_TIMEOUT_SECONDS
from cnb_fixing.schedule import DEFAULT_PUBLICATION_TIME, DEFAULT_TIMEZONE, ScheduleThreshold

DEFAULT_PORT = 8081
DEFAULT_CACHE_FILENAME = "cnb-rates.txt"


class AppSettings(BaseSettings):
    """Configuration options for the exchange rates service."""

    app_name: str = Field(default="CNB Exchange Rates API")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    log_level: str = Field(default="INFO")

    feed_url: str = Field(default=CNB_DAILY_URL, description="Daily fixing text feed.")
    cache_path: Path = Field(
        default_factory=lambda: Path.cwd() / DEFAULT_CACHE_FILENAME,
        description="Local copy of the most recently downloaded feed.",
    )
    feed_timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA timezone the publication time is expressed in.",
    )
    publication_time: time = Field(
        default=DEFAULT_PUBLICATION_TIME,
        description="Time of day after which a new feed is expected.",
    )
    fetch_timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    telemetry_enabled: bool = Field(default=False)
    telemetry_service_name: str = Field(default="cnb-rates-api")
    telemetry_otlp_endpoint: str | None = Field(default=None)
    telemetry_otlp_insecure: bool = Field(default=True)
    telemetry_sample_ratio: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("feed_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    def schedule_threshold(self) -> ScheduleThreshold:
        """Return the publication threshold used for cache staleness checks."""

        return ScheduleThreshold.from_time(self.publication_time, self.feed_timezone)

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a sanitized dict for logging purposes."""

        return {k: (str(v) if isinstance(v, (Path, time)) else v) for k, v in self.model_dump().items()}


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> AppSettings:
    """Return cached application settings with optional overrides."""

    if overrides:
        return AppSettings(**overrides)
    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_CACHE_FILENAME",
    "DEFAULT_PORT",
    "get_settings",
]
