"""Rate limiter adapters."""

from .memory_limiter import InMemoryRateLimiter
from .redis_limiter import RedisRateLimiter

__all__ = ["InMemoryRateLimiter", "RedisRateLimiter"]
