"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from remarks.domain.error import NotFoundError
from remarks.domain.model.comment import Comment, CommentDraft
from remarks.domain.repository import CommentFilter, CommentRepository
from remarks.domain.value import CommentId, CommentOrder, CommentStatus, PostId

from .base import Service


class CommentService(Service):
    """Domain service for comment storage operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self, draft: CommentDraft, status: CommentStatus
    ) -> Comment:
        """Store a validated draft as a new comment.

        Args:
            draft: Validated submission
            status: Initial moderation status

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(draft.post_id),
            user_id=str(draft.user_id) if draft.user_id else None,
            parent_id=str(draft.parent_id) if draft.parent_id else None,
            status=status.value,
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                status=status,
                created_at=datetime.now(),
                **draft.model_dump(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(saved.post_id),
                status=saved.status.value,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def require_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID or fail.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def get_approved_comments(self, post_id: PostId) -> list[Comment]:
        """Get a post's approved comments in display order.

        Args:
            post_id: Post ID

        Returns:
            Approved comments, top-level first, each group oldest first
        """
        with logfire.span(
            "comment_service.get_approved_comments", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_approved_by_post(post_id)
            logfire.info(
                "Approved comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def list_comments(
        self,
        criteria: CommentFilter,
        order: CommentOrder,
        limit: int,
        offset: int,
    ) -> tuple[list[Comment], int]:
        """List comments matching a filter.

        Args:
            criteria: Filter to apply
            order: Creation-time ordering
            limit: Page size
            offset: Number of comments to skip

        Returns:
            The requested page and the total number of matches
        """
        with logfire.span(
            "comment_service.list_comments",
            status=criteria.status.value if criteria.status else None,
            post_id=str(criteria.post_id) if criteria.post_id else None,
            user_id=str(criteria.user_id) if criteria.user_id else None,
            limit=limit,
            offset=offset,
        ):
            comments = await self.comment_repository.find_filtered(
                criteria, order=order, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_filtered(criteria)
            return comments, total

    async def count_comments(self, criteria: CommentFilter) -> int:
        """Count comments matching a filter."""
        return await self.comment_repository.count_filtered(criteria)

    async def count_approved(self, post_id: PostId) -> int:
        """Count a post's approved comments.

        Args:
            post_id: Post ID

        Returns:
            Number of approved comments
        """
        return await self.comment_repository.count_by_post(
            post_id, CommentStatus.APPROVED
        )

    async def get_children(self, parent_id: CommentId) -> list[Comment]:
        """Get direct replies of a comment, whatever their status."""
        return await self.comment_repository.find_children(parent_id)

    async def change_status(
        self,
        comment_id: CommentId,
        status: CommentStatus,
        expected: CommentStatus,
    ) -> Comment | None:
        """Move a comment from ``expected`` to ``status``.

        Args:
            comment_id: Comment ID
            status: Target status
            expected: Required current status

        Returns:
            Updated comment, or None if the comment is missing or not in
            the expected status
        """
        with logfire.span(
            "comment_service.change_status",
            comment_id=str(comment_id),
            status=status.value,
            expected=expected.value,
        ):
            updated = await self.comment_repository.update_status(
                comment_id, status, expected
            )
            if updated:
                logfire.info(
                    "Comment status changed",
                    comment_id=str(comment_id),
                    status=status.value,
                )
            else:
                logfire.warn(
                    "Comment status unchanged",
                    comment_id=str(comment_id),
                    expected=expected.value,
                )
            return updated

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a single comment row.

        Args:
            comment_id: Comment ID

        Returns:
            True if the row existed and was removed
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            deleted = await self.comment_repository.delete(comment_id)
            if deleted:
                logfire.info("Comment deleted", comment_id=str(comment_id))
            else:
                logfire.warn("Comment already gone", comment_id=str(comment_id))
            return deleted
