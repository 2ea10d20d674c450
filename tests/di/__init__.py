"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .ratelimit import MockRateLimitProvider
from .notification import FailingNotifier, RecordingNotifier, RecordingNotifierProvider
from .container import build_test_container

__all__ = [
    "FailingNotifier",
    "MockPersistenceProvider",
    "MockRateLimitProvider",
    "RecordingNotifier",
    "RecordingNotifierProvider",
    "build_test_container",
]
