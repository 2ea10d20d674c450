"""Redis-backed rate limiter.

Fixed window per key: the first attempt creates the counter with the
window as TTL, later attempts increment it until the key expires.
"""

import logfire
from redis.asyncio import Redis
from redis.exceptions import RedisError

from remarks.domain.service.rate_limiter import RateLimiter


class RedisRateLimiter(RateLimiter):
    """Rate limiter sharing its counters across processes through Redis."""

    def __init__(self, client: Redis, prefix: str = "ratelimit") -> None:
        """Initialize Redis rate limiter.

        Args:
            client: Async Redis client
            prefix: Namespace for counter keys
        """
        self.client = client
        self.prefix = prefix

    async def gate(self, key: str, max_attempts: int, window_seconds: int) -> bool:
        """Count one attempt for ``key`` and report whether it is allowed.

        SET NX and INCR run in one MULTI/EXEC block, so the window is created
        exactly once and no increment is lost. If Redis cannot be reached the
        attempt is denied.
        """
        redis_key = f"{self.prefix}:{key}"
        with logfire.span("rate_limiter.gate", key=key, max_attempts=max_attempts):
            try:
                pipe = self.client.pipeline(transaction=True)
                pipe.set(redis_key, 0, ex=window_seconds, nx=True)
                pipe.incr(redis_key)
                _, attempts = await pipe.execute()
            except RedisError as e:
                logfire.error("Rate limiter unavailable", key=key, error=str(e))
                return False

            allowed = int(attempts) <= max_attempts
            if not allowed:
                logfire.warn("Rate limit hit", key=key, attempts=int(attempts))
            return allowed
