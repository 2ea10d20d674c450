"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryTransactionManager",
]
