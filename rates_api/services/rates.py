"""Construction of the rate provider from application settings."""

from __future__ import annotations

import logging

from cnb_fixing import FeedFetcher, RateProvider

from rates_api.config import AppSettings

logger = logging.getLogger(__name__)


def build_rate_provider(settings: AppSettings) -> RateProvider:
    fetcher = FeedFetcher(
        settings.cache_path,
        url=settings.feed_url,
        timeout=settings.fetch_timeout_seconds,
    )
    threshold = settings.schedule_threshold()
    logger.debug(
        "Rates cache at %s refreshes after %02d:%02d:%02d %s",
        settings.cache_path,
        threshold.hour,
        threshold.minute,
        threshold.second,
        threshold.timezone,
    )
    return RateProvider(fetcher, threshold)


__all__ = ["build_rate_provider"]
