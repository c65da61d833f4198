"""Coalescing of concurrent calls to the same asynchronous operation."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Dict


class SingleFlight:
    """Run at most one operation per key; concurrent callers share its outcome.

    The first caller for a key starts the operation as a task. Callers
    arriving while it runs await that same task and receive its result or its
    exception. A cancelled caller does not cancel the shared task.
    """

    def __init__(self) -> None:
        self._inflight: Dict[str, asyncio.Task[Any]] = {}

    def in_flight(self, key: str) -> bool:
        return key in self._inflight

    async def do(self, key: str, fn: Callable[[], Awaitable[Any]]) -> Any:
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._run(key, fn))
            self._inflight[key] = task
        return await asyncio.shield(task)

    async def _run(self, key: str, fn: Callable[[], Awaitable[Any]]) -> Any:
        try:
            return await fn()
        finally:
            self._inflight.pop(key, None)


__all__ = ["SingleFlight"]
