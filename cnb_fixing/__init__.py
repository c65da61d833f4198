"""Core package for the CNB daily fixing cache pipeline."""

from .errors import CacheError, FetchError, FixingError, ParseError
from .fetcher import CNB_DAILY_URL, FeedFetcher
from .fx import convert_amount, find_record
from .models import CacheState, CurrencyRecord
from .parser import parse_feed
from .provider import RateProvider
from .schedule import ScheduleThreshold, is_stale
from .singleflight import SingleFlight

__all__ = [
    "CNB_DAILY_URL",
    "CacheError",
    "CacheState",
    "CurrencyRecord",
    "FeedFetcher",
    "FetchError",
    "FixingError",
    "ParseError",
    "RateProvider",
    "ScheduleThreshold",
    "SingleFlight",
    "convert_amount",
    "find_record",
    "is_stale",
    "parse_feed",
]
