"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from remarks.domain.model import Comment
from remarks.domain.repository import CommentFilter, CommentRepository
from remarks.domain.value import CommentId, CommentOrder, CommentStatus, PostId
from remarks.persistence.mappers import comment_to_dict, row_to_comment
from remarks.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_filter(self, stmt: Select, criteria: CommentFilter) -> Select:
        """Add WHERE clauses for every set filter field."""
        if criteria.status is not None:
            stmt = stmt.where(comments_table.c.status == criteria.status.value)
        if criteria.post_id is not None:
            stmt = stmt.where(comments_table.c.post_id == criteria.post_id)
        if criteria.user_id is not None:
            stmt = stmt.where(comments_table.c.user_id == criteria.user_id)
        if criteria.date_from is not None:
            stmt = stmt.where(comments_table.c.created_at >= criteria.date_from)
        if criteria.date_to is not None:
            stmt = stmt.where(comments_table.c.created_at <= criteria.date_to)
        return stmt

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_approved_by_post(self, post_id: PostId) -> List[Comment]:
        """Find approved comments of a post, top-level first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.status == CommentStatus.APPROVED.value)
            .order_by(
                comments_table.c.parent_id.asc().nulls_first(),
                comments_table.c.created_at.asc(),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct child comments of a parent comment."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_filtered(
        self,
        criteria: CommentFilter,
        order: CommentOrder = CommentOrder.OLDEST_FIRST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments matching a filter, paginated."""
        stmt = self._apply_filter(select(comments_table), criteria)

        if order == CommentOrder.NEWEST_FIRST:
            stmt = stmt.order_by(comments_table.c.created_at.desc())
        else:
            stmt = stmt.order_by(comments_table.c.created_at.asc())

        stmt = stmt.limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_filtered(self, criteria: CommentFilter) -> int:
        """Count comments matching a filter."""
        stmt = self._apply_filter(
            select(func.count()).select_from(comments_table), criteria
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_post(self, post_id: PostId, status: CommentStatus) -> int:
        """Count a post's comments in the given status."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.status == status.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_status(
        self,
        comment_id: CommentId,
        status: CommentStatus,
        expected: CommentStatus,
    ) -> Optional[Comment]:
        """Compare-and-set the comment status."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.status == expected.value)
            .values(status=status.value)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()

        if result.rowcount == 0:
            return None
        return await self.find_by_id(comment_id)

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
