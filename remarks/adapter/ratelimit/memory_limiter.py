"""In-process rate limiter for tests and single-process deployments."""

import asyncio
import time
from typing import Callable

import logfire

from remarks.domain.service.rate_limiter import RateLimiter


class InMemoryRateLimiter(RateLimiter):
    """Fixed-window counters held in a dict.

    Args:
        clock: Monotonic time source in seconds, injectable for tests
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._windows: dict[str, tuple[float, int]] = {}  # key -> (expires_at, count)
        self._lock = asyncio.Lock()

    async def gate(self, key: str, max_attempts: int, window_seconds: int) -> bool:
        async with self._lock:
            now = self._clock()
            self._prune(now)

            expires_at, count = self._windows.get(key, (now + window_seconds, 0))
            count += 1
            self._windows[key] = (expires_at, count)

        if count > max_attempts:
            logfire.warn("Rate limit hit", key=key, attempts=count)
            return False
        return True

    def _prune(self, now: float) -> None:
        expired = [
            key for key, (expires_at, _) in self._windows.items() if expires_at <= now
        ]
        for key in expired:
            del self._windows[key]
