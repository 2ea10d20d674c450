"""PostgreSQL repository implementations."""

from remarks.persistence.repository.comment import PostgresCommentRepository
from remarks.persistence.repository.post import PostgresPostRepository
from remarks.persistence.repository.transaction import SqlTransactionManager

__all__ = [
    "PostgresCommentRepository",
    "PostgresPostRepository",
    "SqlTransactionManager",
]
