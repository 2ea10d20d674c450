"""Unit tests for RedisRateLimiter."""

from unittest.mock import AsyncMock, Mock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from remarks.adapter.ratelimit import RedisRateLimiter


@pytest.fixture
def mock_redis():
    """Mock Redis client whose pipeline reports the given counter value."""
    redis_mock = AsyncMock()
    mock_pipe = Mock()
    mock_pipe.execute = AsyncMock(return_value=[True, 1])
    redis_mock.pipeline = Mock(return_value=mock_pipe)
    return redis_mock


class TestGate:
    @pytest.mark.asyncio
    async def test_first_attempt_opens_window(self, mock_redis):
        limiter = RedisRateLimiter(mock_redis)

        allowed = await limiter.gate("comment:198.51.100.4", 5, 300)

        assert allowed is True
        mock_redis.pipeline.assert_called_once_with(transaction=True)
        pipe = mock_redis.pipeline.return_value
        pipe.set.assert_called_once_with(
            "ratelimit:comment:198.51.100.4", 0, ex=300, nx=True
        )
        pipe.incr.assert_called_once_with("ratelimit:comment:198.51.100.4")

    @pytest.mark.asyncio
    async def test_last_allowed_attempt(self, mock_redis):
        mock_redis.pipeline.return_value.execute.return_value = [None, 5]
        limiter = RedisRateLimiter(mock_redis)

        assert await limiter.gate("comment:u1", 5, 300) is True

    @pytest.mark.asyncio
    async def test_over_quota_denied(self, mock_redis):
        mock_redis.pipeline.return_value.execute.return_value = [None, 6]
        limiter = RedisRateLimiter(mock_redis)

        assert await limiter.gate("comment:u1", 5, 300) is False

    @pytest.mark.asyncio
    async def test_string_counter_from_decoded_client(self, mock_redis):
        mock_redis.pipeline.return_value.execute.return_value = [None, "3"]
        limiter = RedisRateLimiter(mock_redis)

        assert await limiter.gate("comment:u1", 5, 300) is True

    @pytest.mark.asyncio
    async def test_unreachable_redis_denies(self, mock_redis):
        mock_redis.pipeline.return_value.execute.side_effect = RedisConnectionError(
            "connection refused"
        )
        limiter = RedisRateLimiter(mock_redis)

        assert await limiter.gate("comment:u1", 5, 300) is False
