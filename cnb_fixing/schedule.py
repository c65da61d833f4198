"""Daily publication schedule of the fixing feed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Europe/Prague"
DEFAULT_PUBLICATION_TIME = time(14, 30, 0)


@dataclass(frozen=True)
class ScheduleThreshold:
    """Wall-clock time in a named timezone after which a new feed is expected."""

    timezone: str = DEFAULT_TIMEZONE
    hour: int = DEFAULT_PUBLICATION_TIME.hour
    minute: int = DEFAULT_PUBLICATION_TIME.minute
    second: int = DEFAULT_PUBLICATION_TIME.second

    @classmethod
    def from_time(cls, at: time, timezone: str = DEFAULT_TIMEZONE) -> "ScheduleThreshold":
        return cls(timezone=timezone, hour=at.hour, minute=at.minute, second=at.second)

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def instant_on(self, now: datetime) -> datetime:
        """Return the threshold instant on ``now``'s calendar day in the threshold timezone.

        The wall-clock time is resolved through ``zoneinfo`` so the UTC offset
        follows daylight-saving rules for that particular date.
        """

        _require_aware(now, "now")
        local_now = now.astimezone(self.zone)
        return local_now.replace(
            hour=self.hour,
            minute=self.minute,
            second=self.second,
            microsecond=0,
        )


def is_stale(
    now: datetime,
    refreshed_at: Optional[datetime],
    threshold: ScheduleThreshold,
) -> bool:
    """Return whether the cached feed must be downloaded again.

    A missing cache is always stale. Otherwise the cache is stale once today's
    publication threshold has passed and the cache predates that threshold.
    Weekends and holidays are not special-cased: the feed is simply fetched
    again and comes back unchanged.
    """

    if refreshed_at is None:
        return True
    _require_aware(refreshed_at, "refreshed_at")
    today_threshold = threshold.instant_on(now)
    return now >= today_threshold and refreshed_at < today_threshold


def _require_aware(value: datetime, name: str) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware")


__all__ = [
    "DEFAULT_PUBLICATION_TIME",
    "DEFAULT_TIMEZONE",
    "ScheduleThreshold",
    "is_stale",
]
