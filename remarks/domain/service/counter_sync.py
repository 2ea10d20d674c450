"""Post comment counter maintenance."""

import logfire

from remarks.domain.value import PostId

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


class CounterSync(Service):
    """Keeps ``Post.comment_count`` equal to the post's approved comments.

    The counter is always recomputed from the comment rows, never adjusted
    by +1/-1. Call it inside the same transaction as the write that changed
    the comments, after taking the post lock.
    """

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize counter sync.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def sync(self, post_id: PostId) -> int:
        """Recompute and store the approved-comment count of a post.

        Args:
            post_id: Post ID

        Returns:
            The stored count
        """
        with logfire.span("counter_sync.sync", post_id=str(post_id)):
            count = await self.comment_service.count_approved(post_id)
            await self.post_service.set_comment_count(post_id, count)
            return count
