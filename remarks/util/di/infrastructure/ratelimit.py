"""Rate limiter infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from redis.asyncio import Redis

from remarks.adapter.ratelimit import RedisRateLimiter
from remarks.config import Settings
from remarks.domain.service import RateLimiter
from remarks.util.di.base import ProviderBase
from remarks.util.observability import instrument_redis


class RateLimitProvider(ProviderBase):
    """Rate limiter component base."""

    __mock_component__ = "ratelimit"


class ProdRateLimitProvider(RateLimitProvider):
    """Production rate limiter backed by Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_redis(self, settings: Settings) -> AsyncIterator[Redis]:
        """Provide Redis client, closed when the container closes."""
        client = Redis.from_url(
            settings.redis.url,
            socket_timeout=settings.redis.socket_timeout,
            socket_connect_timeout=settings.redis.socket_connect_timeout,
            decode_responses=True,
        )
        instrument_redis()
        yield client
        await client.aclose()
        logfire.info("Redis client closed")

    @provide(scope=Scope.APP)
    def get_rate_limiter(self, client: Redis) -> RateLimiter:
        """Provide rate limiter."""
        return RedisRateLimiter(client)
