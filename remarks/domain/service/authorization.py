"""Comment deletion authorization."""

import logfire

from remarks.domain.error import ForbiddenError
from remarks.domain.model.comment import Comment
from remarks.domain.repository import PostRepository
from remarks.domain.value import Actor, Authenticated

from .base import Service


class CommentAuthorizationPolicy(Service):
    """Decides who may delete a comment.

    A registered actor may delete a comment when they wrote it, when they
    are an administrator, or when they own the post it was left on.
    Anonymous actors may never delete.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize authorization policy.

        Args:
            post_repository: Post repository, queried fresh for ownership
        """
        self.post_repository = post_repository

    async def can_delete(self, actor: Actor, comment: Comment) -> bool:
        """Check whether ``actor`` may delete ``comment``.

        Args:
            actor: Acting party
            comment: Comment to delete

        Returns:
            True if deletion is allowed
        """
        with logfire.span(
            "comment_authorization.can_delete",
            comment_id=str(comment.id),
            actor_kind=actor.kind,
        ):
            if not isinstance(actor, Authenticated):
                return False
            if comment.user_id is not None and actor.id == comment.user_id:
                return True
            if actor.is_admin:
                return True

            # Ownership can move between users, so never trust a cached post
            post = await self.post_repository.find_by_id(comment.post_id)
            return post is not None and post.owner_id == actor.id

    async def ensure_can_delete(self, actor: Actor, comment: Comment) -> None:
        """Raise unless ``actor`` may delete ``comment``.

        Raises:
            ForbiddenError: If deletion is not allowed
        """
        if not await self.can_delete(actor, comment):
            logfire.warn(
                "Comment deletion refused",
                comment_id=str(comment.id),
                actor_kind=actor.kind,
            )
            raise ForbiddenError(f"Not allowed to delete comment {comment.id}")
