"""Post domain service."""

import logfire

from remarks.domain.model.post import Post
from remarks.domain.repository import PostRepository
from remarks.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for the owning post."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def lock_post(self, post_id: PostId) -> Post | None:
        """Get a post and hold its row lock until the transaction ends.

        Every write that changes which comments are approved takes this
        lock first, so counter recomputations on one post never overlap.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.lock_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id, for_update=True)
            if not post:
                logfire.warn("Post not found for locking", post_id=str(post_id))
            return post

    async def set_comment_count(self, post_id: PostId, count: int) -> None:
        """Write the denormalized approved-comment counter.

        Args:
            post_id: Post ID
            count: Recomputed count
        """
        with logfire.span(
            "post_service.set_comment_count", post_id=str(post_id), count=count
        ):
            await self.post_repository.set_comment_count(post_id, count)
            logfire.info("Comment count stored", post_id=str(post_id), count=count)
