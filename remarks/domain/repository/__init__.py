"""Repository interfaces for the comment subsystem.

Interfaces live in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from remarks.domain.repository.comment import CommentFilter, CommentRepository
from remarks.domain.repository.post import PostRepository
from remarks.domain.repository.transaction import TransactionManager

__all__ = [
    "CommentFilter",
    "CommentRepository",
    "PostRepository",
    "TransactionManager",
]
