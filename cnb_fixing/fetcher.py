"""Downloader for the CNB daily fixing feed."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import httpx

from .errors import FetchError

logger = logging.getLogger(__name__)

CNB_DAILY_URL = (
    "https://www.cnb.cz/en/financial-markets/foreign-exchange-market/"
    "central-bank-exchange-rate-fixing/central-bank-exchange-rate-fixing/daily.txt"
)
DEFAULT_TIMEOUT_SECONDS = 30.0
_PARTIAL_SUFFIX = ".part"


class FeedFetcher:
    """Stream the remote feed into the local cache file.

    The body is written to a sibling ``.part`` file which replaces the cache
    file only once the download has completed, so the cache path always holds
    either the previous complete feed or the new one.
    """

    def __init__(
        self,
        cache_path: Path | str,
        *,
        url: str = CNB_DAILY_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.cache_path = Path(cache_path)
        self.url = url
        self.timeout = timeout
        self._client = client

    @property
    def partial_path(self) -> Path:
        return self.cache_path.with_name(self.cache_path.name + _PARTIAL_SUFFIX)

    async def fetch(self) -> Path:
        """Download the feed and atomically install it at :attr:`cache_path`."""

        partial = self.partial_path
        logger.info("Downloading rates feed from %s", self.url)
        try:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            size = await self._download(partial)
            os.replace(partial, self.cache_path)
        except httpx.HTTPError as exc:
            self._discard(partial)
            raise FetchError(f"Rates feed download failed: {exc}") from exc
        except OSError as exc:
            self._discard(partial)
            raise FetchError(f"Unable to write rates cache file: {exc}") from exc
        logger.info("Rates feed downloaded (%d bytes)", size)
        return self.cache_path

    async def _download(self, target: Path) -> int:
        if self._client is not None:
            return await self._stream_into(self._client, target)
        async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
            return await self._stream_into(client, target)

    async def _stream_into(self, client: httpx.AsyncClient, target: Path) -> int:
        written = 0
        async with client.stream(
            "GET", self.url, timeout=self.timeout, follow_redirects=True
        ) as response:
            response.raise_for_status()
            with target.open("wb") as handle:
                async for chunk in response.aiter_bytes():
                    handle.write(chunk)
                    written += len(chunk)
        return written

    @staticmethod
    def _discard(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Failed to remove incomplete download %s: %s", path, exc)


__all__ = ["CNB_DAILY_URL", "DEFAULT_TIMEOUT_SECONDS", "FeedFetcher"]
