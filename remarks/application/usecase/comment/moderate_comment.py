"""Moderation use cases: approve, reject and revoke.

Callers are expected to have checked that the actor is a moderator.
"""

from typing import Awaitable, Callable

import logfire
from pydantic import BaseModel

from remarks.application.error import EXPECTED_ERRORS, OperationError
from remarks.application.usecase.base import BaseUseCase
from remarks.domain.error import NotFoundError
from remarks.domain.model import Comment
from remarks.domain.repository import TransactionManager
from remarks.domain.service import (
    CommentNotifier,
    CommentService,
    CounterSync,
    ModerationPolicy,
    PostService,
)
from remarks.domain.value import CommentEvent, CommentId

from .common import CommentItem, dispatch_notification


class ModerateCommentRequest(BaseModel):
    """Moderation request."""

    comment_id: CommentId


class ModerateCommentResponse(BaseModel):
    """Moderation response with the comment in its new state."""

    comment: CommentItem | None = None
    error: OperationError | None = None


class _ModerateCommentUseCase(BaseUseCase):
    """Runs one moderation transition with counter resync."""

    action: str
    event: CommentEvent

    def __init__(
        self,
        moderation_policy: ModerationPolicy,
        comment_service: CommentService,
        post_service: PostService,
        counter_sync: CounterSync,
        transactions: TransactionManager,
        notifier: CommentNotifier,
    ) -> None:
        """Initialize moderation use case.

        Args:
            moderation_policy: Status state machine
            comment_service: Comment domain service
            post_service: Post domain service
            counter_sync: Post counter maintenance
            transactions: Unit of work scope
            notifier: Notification dispatcher
        """
        self.moderation_policy = moderation_policy
        self.comment_service = comment_service
        self.post_service = post_service
        self.counter_sync = counter_sync
        self.transactions = transactions
        self.notifier = notifier

    def _transition(self) -> Callable[[CommentId], Awaitable[Comment]]:
        raise NotImplementedError

    async def execute(
        self, request: ModerateCommentRequest
    ) -> ModerateCommentResponse:
        """Execute the transition.

        Locks the owning post, applies the compare-and-set transition and
        recomputes the counter in one transaction, then notifies.

        Args:
            request: Moderation request

        Returns:
            Updated comment, or the reason the transition was refused
        """
        with logfire.span(
            f"{self.action}_comment", comment_id=str(request.comment_id)
        ):
            try:
                async with self.transactions.transaction():
                    current = await self.comment_service.require_comment(
                        request.comment_id
                    )
                    post = await self.post_service.lock_post(current.post_id)
                    if post is None:
                        raise NotFoundError("Post", str(current.post_id))

                    comment = await self._transition()(request.comment_id)
                    await self.counter_sync.sync(comment.post_id)
            except EXPECTED_ERRORS as e:
                return ModerateCommentResponse(error=OperationError.from_exception(e))

        await dispatch_notification(self.notifier, self.event, comment)
        return ModerateCommentResponse(comment=CommentItem.from_comment(comment))


class ApproveCommentUseCase(_ModerateCommentUseCase):
    """Approve a pending comment."""

    action = "approve"
    event = CommentEvent.APPROVED

    def _transition(self) -> Callable[[CommentId], Awaitable[Comment]]:
        return self.moderation_policy.approve


class RejectCommentUseCase(_ModerateCommentUseCase):
    """Mark a pending comment as spam."""

    action = "reject"
    event = CommentEvent.REJECTED

    def _transition(self) -> Callable[[CommentId], Awaitable[Comment]]:
        return self.moderation_policy.reject


class RevokeCommentUseCase(_ModerateCommentUseCase):
    """Withdraw approval: an approved comment becomes spam."""

    action = "revoke"
    event = CommentEvent.REJECTED

    def _transition(self) -> Callable[[CommentId], Awaitable[Comment]]:
        return self.moderation_policy.revoke
