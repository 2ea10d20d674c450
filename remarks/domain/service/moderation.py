"""Comment moderation lifecycle."""

import logfire

from remarks.domain.error import ConflictError, NotFoundError
from remarks.domain.model.comment import Comment
from remarks.domain.value import Actor, Authenticated, CommentId, CommentStatus

from .base import Service
from .comment_service import CommentService


class ModerationPolicy(Service):
    """Assigns initial status and performs moderator transitions.

    Allowed transitions:
    - approve: pending -> approved
    - reject: pending -> spam
    - revoke: approved -> spam (reversal of an earlier approval)

    Whether the caller may moderate at all is decided before these methods
    are called.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize moderation policy.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    @staticmethod
    def initial_status(actor: Actor) -> CommentStatus:
        """Status for a new comment: registered users skip the queue."""
        if isinstance(actor, Authenticated):
            return CommentStatus.APPROVED
        return CommentStatus.PENDING

    async def approve(self, comment_id: CommentId) -> Comment:
        """Approve a pending comment.

        Raises:
            NotFoundError: If the comment does not exist
            ConflictError: If the comment is not pending
        """
        return await self._transition(
            comment_id, CommentStatus.PENDING, CommentStatus.APPROVED
        )

    async def reject(self, comment_id: CommentId) -> Comment:
        """Mark a pending comment as spam.

        Raises:
            NotFoundError: If the comment does not exist
            ConflictError: If the comment is not pending
        """
        return await self._transition(
            comment_id, CommentStatus.PENDING, CommentStatus.SPAM
        )

    async def revoke(self, comment_id: CommentId) -> Comment:
        """Mark an approved comment as spam.

        Raises:
            NotFoundError: If the comment does not exist
            ConflictError: If the comment is not approved
        """
        return await self._transition(
            comment_id, CommentStatus.APPROVED, CommentStatus.SPAM
        )

    async def _transition(
        self,
        comment_id: CommentId,
        source: CommentStatus,
        target: CommentStatus,
    ) -> Comment:
        with logfire.span(
            "moderation.transition",
            comment_id=str(comment_id),
            source=source.value,
            target=target.value,
        ):
            updated = await self.comment_service.change_status(
                comment_id, target, expected=source
            )
            if updated is not None:
                return updated

            # Compare-and-set failed: tell a missing comment from a wrong state
            current = await self.comment_service.get_comment_by_id(comment_id)
            if current is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.warn(
                "Moderation transition refused",
                comment_id=str(comment_id),
                current=current.status.value,
                target=target.value,
            )
            raise ConflictError(
                f"Comment {comment_id} is {current.status.value}, "
                f"expected {source.value}"
            )
