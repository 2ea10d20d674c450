"""SQLAlchemy transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from remarks.domain.error import PersistenceError
from remarks.domain.repository import TransactionManager


class SqlTransactionManager(TransactionManager):
    """Runs a unit of work in a SAVEPOINT and commits it on success.

    A failed unit of work rolls back to its savepoint and leaves earlier
    work in the session untouched. On success the session is committed
    before the block exits, so callers act on durable rows only.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        try:
            async with self.session.begin_nested():
                yield
        except SQLAlchemyError as e:
            logfire.error("Transaction rolled back", error=str(e))
            raise PersistenceError(str(e)) from e

        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logfire.error("Commit failed", error=str(e))
            await self.session.rollback()
            raise PersistenceError(str(e)) from e
