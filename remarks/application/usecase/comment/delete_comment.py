"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from remarks.application.error import EXPECTED_ERRORS, OperationError
from remarks.application.usecase.base import BaseUseCase
from remarks.domain.error import NotFoundError
from remarks.domain.repository import TransactionManager
from remarks.domain.service import (
    CascadeDeleter,
    CommentAuthorizationPolicy,
    CommentService,
    CounterSync,
    PostService,
)
from remarks.domain.value import Actor, CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    actor: Actor
    comment_id: CommentId


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted_ids: list[str] = []  # Deletion order, requested comment last
    approved_removed: int = 0
    error: OperationError | None = None


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment together with all its replies."""

    def __init__(
        self,
        authorization_policy: CommentAuthorizationPolicy,
        comment_service: CommentService,
        post_service: PostService,
        cascade_deleter: CascadeDeleter,
        counter_sync: CounterSync,
        transactions: TransactionManager,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            authorization_policy: Delete permission check
            comment_service: Comment domain service
            post_service: Post domain service
            cascade_deleter: Subtree removal
            counter_sync: Post counter maintenance
            transactions: Unit of work scope
        """
        self.authorization_policy = authorization_policy
        self.comment_service = comment_service
        self.post_service = post_service
        self.cascade_deleter = cascade_deleter
        self.counter_sync = counter_sync
        self.transactions = transactions

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        The permission check, subtree removal and counter resync share one
        transaction: a failure at any point leaves comments and counter as
        they were. A ``CascadeIntegrityError`` is not an expected outcome and
        propagates to the caller.

        Args:
            request: Delete comment request

        Returns:
            Removed comment IDs, or the reason nothing was removed
        """
        with logfire.span(
            "delete_comment",
            comment_id=str(request.comment_id),
            actor_kind=request.actor.kind,
        ):
            try:
                async with self.transactions.transaction():
                    comment = await self.comment_service.require_comment(
                        request.comment_id
                    )
                    await self.authorization_policy.ensure_can_delete(
                        request.actor, comment
                    )

                    post = await self.post_service.lock_post(comment.post_id)
                    if post is None:
                        raise NotFoundError("Post", str(comment.post_id))

                    result = await self.cascade_deleter.delete_with_descendants(
                        request.comment_id
                    )
                    for post_id in sorted(result.post_ids, key=str):
                        await self.counter_sync.sync(post_id)
            except EXPECTED_ERRORS as e:
                return DeleteCommentResponse(error=OperationError.from_exception(e))

            logfire.info(
                "Comment subtree deleted",
                comment_id=str(request.comment_id),
                deleted=len(result.deleted),
            )
            return DeleteCommentResponse(
                deleted_ids=[str(comment_id) for comment_id in result.deleted_ids],
                approved_removed=result.approved_removed,
            )
