"""Get comment thread use case."""

from __future__ import annotations

import logfire
from pydantic import BaseModel

from remarks.application.error import EXPECTED_ERRORS, OperationError
from remarks.application.usecase.base import BaseUseCase
from remarks.config import CommentSettings
from remarks.domain.error import NotFoundError
from remarks.domain.service import (
    CommentService,
    CommentThreadNode,
    PostService,
    ThreadBuilder,
)
from remarks.domain.value import PostId

from .common import CommentItem


class ThreadItem(BaseModel):
    """A comment with its nested replies."""

    comment: CommentItem
    children: list[ThreadItem] = []

    @classmethod
    def from_nodes(cls, nodes: list[CommentThreadNode]) -> list[ThreadItem]:
        """Convert a built forest without recursing on the call stack."""
        items = [cls(comment=CommentItem.from_comment(node.comment)) for node in nodes]
        pending = list(zip(nodes, items))
        while pending:
            node, item = pending.pop()
            for child in node.children:
                child_item = cls(comment=CommentItem.from_comment(child.comment))
                item.children.append(child_item)
                pending.append((child, child_item))
        return items


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    post_id: PostId


class GetCommentThreadResponse(BaseModel):
    """Approved comments of a post arranged for display."""

    post_id: str
    comments: list[ThreadItem] = []
    total: int = 0  # Approved comments, nested or not
    error: OperationError | None = None


class GetCommentThreadUseCase(BaseUseCase):
    """Use case for reading the displayable comment thread of a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        settings: CommentSettings,
    ) -> None:
        """Initialize get comment thread use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            settings: Comment settings (thread depth)
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.thread_builder = ThreadBuilder(recursive=settings.recursive_threads)

    async def execute(
        self, request: GetCommentThreadRequest
    ) -> GetCommentThreadResponse:
        """Execute get comment thread flow.

        Args:
            request: Get comment thread request

        Returns:
            Top-level comments with their replies, oldest first
        """
        with logfire.span("get_comment_thread", post_id=str(request.post_id)):
            try:
                post = await self.post_service.get_post_by_id(request.post_id)
                if post is None:
                    raise NotFoundError("Post", str(request.post_id))

                comments = await self.comment_service.get_approved_comments(
                    request.post_id
                )
            except EXPECTED_ERRORS as e:
                return GetCommentThreadResponse(
                    post_id=str(request.post_id),
                    error=OperationError.from_exception(e),
                )

            forest = self.thread_builder.build(comments)
            return GetCommentThreadResponse(
                post_id=str(request.post_id),
                comments=ThreadItem.from_nodes(forest),
                total=len(comments),
            )
