"""Unit tests for InMemoryRateLimiter."""

import asyncio

import pytest

from remarks.adapter.ratelimit import InMemoryRateLimiter


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestGate:
    @pytest.mark.asyncio
    async def test_allows_up_to_max_attempts(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())

        results = [await limiter.gate("comment:a", 5, 300) for _ in range(6)]

        assert results == [True] * 5 + [False]

    @pytest.mark.asyncio
    async def test_window_expiry_resets_quota(self):
        clock = FakeClock()
        limiter = InMemoryRateLimiter(clock=clock)
        for _ in range(6):
            await limiter.gate("comment:a", 5, 300)

        clock.now += 299
        assert await limiter.gate("comment:a", 5, 300) is False

        clock.now += 1
        assert await limiter.gate("comment:a", 5, 300) is True

    @pytest.mark.asyncio
    async def test_keys_are_independent(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())
        for _ in range(5):
            await limiter.gate("comment:a", 5, 300)

        assert await limiter.gate("comment:a", 5, 300) is False
        assert await limiter.gate("comment:b", 5, 300) is True

    @pytest.mark.asyncio
    async def test_concurrent_attempts_never_exceed_quota(self):
        limiter = InMemoryRateLimiter(clock=FakeClock())

        results = await asyncio.gather(
            *(limiter.gate("comment:a", 5, 300) for _ in range(50))
        )

        assert sum(results) == 5
