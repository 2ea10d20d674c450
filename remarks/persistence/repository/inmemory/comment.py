"""In-memory comment repository for testing."""

from typing import Optional

from remarks.domain.model.comment import Comment
from remarks.domain.repository.comment import CommentFilter, CommentRepository
from remarks.domain.value import CommentId, CommentOrder, CommentStatus, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def snapshot(self) -> dict[CommentId, Comment]:
        """Copy current state (comments are immutable, a shallow copy suffices)."""
        return dict(self._comments)

    def restore(self, snapshot: dict[CommentId, Comment]) -> None:
        self._comments = dict(snapshot)

    def _matches(self, comment: Comment, criteria: CommentFilter) -> bool:
        if criteria.status is not None and comment.status != criteria.status:
            return False
        if criteria.post_id is not None and comment.post_id != criteria.post_id:
            return False
        if criteria.user_id is not None and comment.user_id != criteria.user_id:
            return False
        if criteria.date_from is not None and comment.created_at < criteria.date_from:
            return False
        if criteria.date_to is not None and comment.created_at > criteria.date_to:
            return False
        return True

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_approved_by_post(self, post_id: PostId) -> list[Comment]:
        """Find approved comments of a post, top-level first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post_id == post_id and c.status == CommentStatus.APPROVED
        ]

        # Top-level first, then by parent, then by creation time
        comments.sort(
            key=lambda c: (
                c.parent_id is not None,
                str(c.parent_id) if c.parent_id else "",
                c.created_at,
            )
        )
        return comments

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct children of a comment."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_filtered(
        self,
        criteria: CommentFilter,
        order: CommentOrder = CommentOrder.OLDEST_FIRST,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments matching a filter, paginated."""
        comments = [c for c in self._comments.values() if self._matches(c, criteria)]
        comments.sort(
            key=lambda c: c.created_at, reverse=order == CommentOrder.NEWEST_FIRST
        )
        return comments[offset : offset + limit]

    async def count_filtered(self, criteria: CommentFilter) -> int:
        """Count comments matching a filter."""
        return sum(1 for c in self._comments.values() if self._matches(c, criteria))

    async def count_by_post(self, post_id: PostId, status: CommentStatus) -> int:
        """Count a post's comments in the given status."""
        return sum(
            1
            for c in self._comments.values()
            if c.post_id == post_id and c.status == status
        )

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_status(
        self,
        comment_id: CommentId,
        status: CommentStatus,
        expected: CommentStatus,
    ) -> Optional[Comment]:
        """Compare-and-set the comment status."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.status != expected:
            return None

        updated = comment.model_copy(update={"status": status})
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        return self._comments.pop(comment_id, None) is not None
