"""In-memory transaction manager for testing."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from remarks.domain.repository import TransactionManager

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository


class InMemoryTransactionManager(TransactionManager):
    """Serializes units of work and restores repository state on failure.

    A single lock stands in for the post row lock, so concurrent units of
    work never interleave. Not reentrant.
    """

    def __init__(
        self,
        comment_repository: InMemoryCommentRepository,
        post_repository: InMemoryPostRepository,
    ) -> None:
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self._lock:
            comments = self.comment_repository.snapshot()
            posts = self.post_repository.snapshot()
            try:
                yield
            except BaseException:
                self.comment_repository.restore(comments)
                self.post_repository.restore(posts)
                raise
