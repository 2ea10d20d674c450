"""Submit comment use case."""

import logfire
from pydantic import BaseModel

from remarks.application.error import EXPECTED_ERRORS, OperationError
from remarks.application.usecase.base import BaseUseCase
from remarks.config import CommentSettings
from remarks.domain.error import RateLimitExceededError, ValidationError
from remarks.domain.model import Comment
from remarks.domain.repository import TransactionManager
from remarks.domain.service import (
    CommentNotifier,
    CommentService,
    CommentSubmission,
    CommentValidationPolicy,
    CounterSync,
    ModerationPolicy,
    PostService,
    RateLimiter,
)
from remarks.domain.value import (
    Actor,
    Anonymous,
    Authenticated,
    CommentEvent,
    CommentId,
    PostId,
)

from .common import CommentItem, dispatch_notification


class SubmitCommentRequest(BaseModel):
    """Submit comment request."""

    actor: Actor
    post_id: PostId
    content: str
    parent_id: CommentId | None = None  # Parent comment ID for replies
    ip_address: str = ""
    user_agent: str = ""


class SubmitCommentResponse(BaseModel):
    """Submit comment response. Exactly one of the fields is set."""

    comment: CommentItem | None = None
    error: OperationError | None = None


def rate_limit_key(actor: Actor, ip_address: str) -> str:
    """Quota key: registered users by account, anonymous readers by address."""
    if isinstance(actor, Authenticated):
        return f"comment:{actor.id}"
    return f"comment:{ip_address}"


class SubmitCommentUseCase(BaseUseCase):
    """Use case for posting a new comment or reply."""

    def __init__(
        self,
        rate_limiter: RateLimiter,
        validation_policy: CommentValidationPolicy,
        comment_service: CommentService,
        post_service: PostService,
        counter_sync: CounterSync,
        transactions: TransactionManager,
        notifier: CommentNotifier,
        settings: CommentSettings,
    ) -> None:
        """Initialize submit comment use case.

        Args:
            rate_limiter: Submission quota gate
            validation_policy: Submission validation
            comment_service: Comment domain service
            post_service: Post domain service
            counter_sync: Post counter maintenance
            transactions: Unit of work scope
            notifier: Notification dispatcher
            settings: Comment settings (rate limits)
        """
        self.rate_limiter = rate_limiter
        self.validation_policy = validation_policy
        self.comment_service = comment_service
        self.post_service = post_service
        self.counter_sync = counter_sync
        self.transactions = transactions
        self.notifier = notifier
        self.settings = settings

    async def execute(self, request: SubmitCommentRequest) -> SubmitCommentResponse:
        """Execute submit comment flow.

        Steps:
        1. Count the attempt against the actor's quota
        2. In one transaction: lock the post, validate, store the comment
           with its initial status, recompute the post counter
        3. Notify listeners once committed

        Args:
            request: Submit comment request

        Returns:
            Created comment, or the reason it was refused
        """
        with logfire.span(
            "submit_comment",
            post_id=str(request.post_id),
            actor_kind=request.actor.kind,
        ):
            try:
                comment = await self._submit(request)
            except EXPECTED_ERRORS as e:
                logfire.info("Comment submission refused", reason=str(e))
                return SubmitCommentResponse(error=OperationError.from_exception(e))

        await dispatch_notification(self.notifier, CommentEvent.CREATED, comment)
        return SubmitCommentResponse(comment=CommentItem.from_comment(comment))

    async def _submit(self, request: SubmitCommentRequest) -> Comment:
        if isinstance(request.actor, Anonymous) and not request.ip_address.strip():
            # No address means no quota key of its own
            logfire.warn(
                "Anonymous comment without address", post_id=str(request.post_id)
            )
            raise ValidationError(
                {"ip_address": "Anonymous comments need a client address"}
            )

        key = rate_limit_key(request.actor, request.ip_address)
        max_attempts = self.settings.rate_limit_max_attempts
        window_seconds = self.settings.rate_limit_window_seconds

        if not await self.rate_limiter.gate(key, max_attempts, window_seconds):
            logfire.warn("Comment rate limit exceeded", key=key)
            raise RateLimitExceededError(key, max_attempts, window_seconds)

        submission = CommentSubmission(
            post_id=request.post_id,
            content=request.content,
            parent_id=request.parent_id,
            ip_address=request.ip_address,
            user_agent=request.user_agent,
        )

        async with self.transactions.transaction():
            post = await self.post_service.lock_post(request.post_id)
            draft = await self.validation_policy.validate(
                request.actor, submission, post
            )
            status = ModerationPolicy.initial_status(request.actor)
            comment = await self.comment_service.create_comment(draft, status)
            await self.counter_sync.sync(comment.post_id)

        return comment
