"""Cascading comment deletion."""

from dataclasses import dataclass, field

import logfire

from remarks.domain.error import CascadeIntegrityError, NotFoundError
from remarks.domain.model.comment import Comment
from remarks.domain.value import CommentId, PostId

from .base import Service
from .comment_service import CommentService


@dataclass
class CascadeResult:
    """Outcome of a cascading deletion."""

    deleted: list[Comment] = field(default_factory=list)

    @property
    def deleted_ids(self) -> list[CommentId]:
        return [comment.id for comment in self.deleted]

    @property
    def approved_removed(self) -> int:
        return sum(1 for comment in self.deleted if comment.is_approved)

    @property
    def post_ids(self) -> set[PostId]:
        return {comment.post_id for comment in self.deleted}


class CascadeDeleter(Service):
    """Removes a comment together with every reply beneath it.

    Deletion is depth-first post-order: each reply's own replies go before
    the reply itself, and the requested comment goes last. Traversal uses an
    explicit stack, so arbitrarily deep reply chains are fine.

    Must run inside a transaction; a failure part way leaves the tree as it
    was once the transaction rolls back.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize cascade deleter.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def delete_with_descendants(self, comment_id: CommentId) -> CascadeResult:
        """Delete a comment and all transitive replies.

        Args:
            comment_id: Root of the subtree to remove

        Returns:
            Removed comments in deletion order

        Raises:
            NotFoundError: If the comment does not exist
            CascadeIntegrityError: If a comment is reached twice
        """
        with logfire.span(
            "cascade_deleter.delete_with_descendants", comment_id=str(comment_id)
        ):
            root = await self.comment_service.get_comment_by_id(comment_id)
            if root is None:
                raise NotFoundError("Comment", str(comment_id))

            order = await self._post_order(root)
            for comment in order:
                if not await self.comment_service.delete_comment(comment.id):
                    # Removed concurrently between traversal and delete
                    raise NotFoundError("Comment", str(comment.id))

            result = CascadeResult(deleted=order)
            logfire.info(
                "Comment subtree deleted",
                comment_id=str(comment_id),
                deleted=len(result.deleted),
                approved_removed=result.approved_removed,
            )
            return result

    async def _post_order(self, root: Comment) -> list[Comment]:
        order: list[Comment] = []
        seen: set[CommentId] = {root.id}
        # (comment, children already pushed)
        stack: list[tuple[Comment, bool]] = [(root, False)]

        while stack:
            comment, expanded = stack.pop()
            if expanded:
                order.append(comment)
                continue

            stack.append((comment, True))
            children = await self.comment_service.get_children(comment.id)
            # Reversed so the oldest reply is popped first
            for child in reversed(children):
                if child.id in seen:
                    logfire.error(
                        "Reply chain revisits comment",
                        comment_id=str(child.id),
                        root_id=str(root.id),
                    )
                    raise CascadeIntegrityError(str(child.id))
                seen.add(child.id)
                stack.append((child, False))

        return order
