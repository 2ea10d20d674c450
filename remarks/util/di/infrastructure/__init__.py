"""Infrastructure providers."""

# Import bases
from .notification import NotificationProvider
from .persistence import PersistenceProvider
from .ratelimit import RateLimitProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .ratelimit import ProdRateLimitProvider  # noqa: F401

__all__ = [
    "NotificationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdRateLimitProvider",
    "RateLimitProvider",
]
