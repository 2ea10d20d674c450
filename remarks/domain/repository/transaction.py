"""Transaction manager interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Scopes a unit of work.

    Everything written inside ``transaction()`` is applied together or not
    at all: any exception escaping the block discards every write made in
    it, including counter updates.

    Usage:
        async with transactions.transaction():
            await deleter.delete_with_descendants(comment_id)
            await counter_sync.sync(post_id)
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a unit of work."""
        pass
