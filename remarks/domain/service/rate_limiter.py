"""Rate limiter interface."""


class RateLimiter:
    """Gate on how often a key may attempt an action.

    Every call counts as an attempt, whether or not the action behind the
    gate later succeeds. Implementations must increment atomically and
    deny when their backing store is unavailable.
    """

    async def gate(self, key: str, max_attempts: int, window_seconds: int) -> bool:
        """Record an attempt for ``key`` and decide whether it may proceed.

        Args:
            key: Counter key, e.g. ``comment:203.0.113.7``
            max_attempts: Attempts allowed per window
            window_seconds: Window length in seconds

        Returns:
            True if the attempt is within quota, False otherwise
        """
        raise NotImplementedError
