"""Rate provider: staleness check, coalesced refresh, read and parse."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from .errors import CacheError, ParseError
from .fetcher import FeedFetcher
from .models import CacheState, CurrencyRecord
from .parser import parse_feed
from .schedule import ScheduleThreshold, is_stale
from .singleflight import SingleFlight

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RateProvider:
    """Serve the current rate snapshot, downloading the feed when it is outdated.

    Validity is tracked in :class:`CacheState` rather than read from the
    file's mtime on every request; the mtime is only used to adopt a cache
    file left by a previous run.
    """

    def __init__(
        self,
        fetcher: FeedFetcher,
        threshold: ScheduleThreshold | None = None,
        *,
        clock: Callable[[], datetime] = _utcnow,
        flight: SingleFlight | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.threshold = threshold or ScheduleThreshold()
        self._clock = clock
        self._flight = flight or SingleFlight()
        self._state = self._adopt_existing_cache()

    @property
    def cache_path(self) -> Path:
        return self.fetcher.cache_path

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def refresh_in_progress(self) -> bool:
        return self._flight.in_flight(self._flight_key)

    @property
    def _flight_key(self) -> str:
        return str(self.cache_path.resolve())

    def needs_refresh(self) -> bool:
        refreshed_at = self._state.effective_refreshed_at()
        if refreshed_at is not None and not self.cache_path.exists():
            refreshed_at = None
        return is_stale(self._clock(), refreshed_at, self.threshold)

    async def get_rates(self) -> list[CurrencyRecord]:
        """Return the parsed records of the current feed."""

        if self.needs_refresh():
            await self.refresh()
        raw = await self._read_cache()
        try:
            return parse_feed(raw)
        except ParseError:
            self._state = self._state.invalidated()
            raise

    async def refresh(self) -> CacheState:
        """Download the feed, joining a download already in progress."""

        return await self._flight.do(self._flight_key, self._refresh)

    async def _refresh(self) -> CacheState:
        await self.fetcher.fetch()
        self._state = CacheState(refreshed_at=self._clock(), valid=True)
        return self._state

    async def _read_cache(self) -> bytes:
        try:
            return await asyncio.to_thread(self.cache_path.read_bytes)
        except OSError as exc:
            self._state = self._state.invalidated()
            raise CacheError(f"Unable to read rates cache file: {exc}") from exc

    def _adopt_existing_cache(self) -> CacheState:
        try:
            mtime = self.cache_path.stat().st_mtime
        except FileNotFoundError:
            return CacheState()
        refreshed_at = datetime.fromtimestamp(mtime, tz=timezone.utc)
        logger.info("Using cached rates feed last written at %s", refreshed_at.isoformat())
        return CacheState(refreshed_at=refreshed_at, valid=True)


__all__ = ["RateProvider"]
