"""Exceptions raised by the rate refresh pipeline."""

from __future__ import annotations


class FixingError(RuntimeError):
    """Base class for failures while producing the current rate snapshot."""


class FetchError(FixingError):
    """Raised when the feed cannot be downloaded into the cache file."""


class ParseError(FixingError):
    """Raised when the feed content does not match the expected layout."""


class CacheError(FixingError):
    """Raised when the cached feed cannot be read back from disk."""


__all__ = ["FixingError", "FetchError", "ParseError", "CacheError"]
