"""PostgreSQL implementation of Post repository."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from remarks.domain.model import Post
from remarks.domain.repository.post import PostRepository
from remarks.domain.value import PostId
from remarks.persistence.mappers import post_to_dict, row_to_post
from remarks.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID, optionally taking a row lock."""
        with logfire.span(
            "post_repository.find_by_id", post_id=str(post_id), for_update=for_update
        ):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            if for_update:
                # SELECT ... FOR UPDATE; a no-op on SQLite
                stmt = stmt.with_for_update()

            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def set_comment_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the approved-comment counter."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(comment_count=count)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        post_dict = post_to_dict(post)
        existing = await self.find_by_id(post.id)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post
