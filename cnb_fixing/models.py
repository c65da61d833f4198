"""Domain models used by the rate refresh pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CurrencyRecord:
    """One row of the daily fixing: a foreign currency and its rate."""

    country: str
    code: str
    rate: float


@dataclass(frozen=True)
class CacheState:
    """Validity of the local feed copy.

    ``refreshed_at`` is the instant of the last successful download (or the
    cache file's mtime when it was adopted at start-up). ``valid`` drops to
    ``False`` when the cached content could not be read or parsed.
    """

    refreshed_at: Optional[datetime] = None
    valid: bool = False

    def effective_refreshed_at(self) -> Optional[datetime]:
        """Return the refresh instant, or ``None`` when the cache is unusable."""

        return self.refreshed_at if self.valid else None

    def invalidated(self) -> "CacheState":
        return CacheState(refreshed_at=self.refreshed_at, valid=False)
