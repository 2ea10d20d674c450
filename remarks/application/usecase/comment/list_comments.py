"""List comments use case (moderation queue, user history, admin filters)."""

from datetime import datetime
from math import ceil

import logfire
from pydantic import BaseModel, Field

from remarks.application.error import EXPECTED_ERRORS, OperationError
from remarks.application.usecase.base import BaseUseCase
from remarks.config import CommentSettings
from remarks.domain.repository import CommentFilter
from remarks.domain.service import CommentService
from remarks.domain.value import CommentOrder, CommentStatus, PostId, UserId

from .common import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request. Unset filters match everything."""

    status: CommentStatus | None = None
    post_id: PostId | None = None
    user_id: UserId | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    order: CommentOrder = CommentOrder.OLDEST_FIRST
    page: int = Field(default=1, ge=1)
    per_page: int | None = Field(default=None, ge=1, le=100)


class ListCommentsResponse(BaseModel):
    """One page of comments with pagination metadata."""

    comments: list[CommentItem] = []
    current_page: int = 1
    per_page: int = 0
    total: int = 0
    last_page: int = 1
    error: OperationError | None = None


class ListCommentsUseCase(BaseUseCase):
    """Use case for filtered, paginated comment listings."""

    def __init__(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            settings: Comment settings (default page size)
        """
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Args:
            request: Filters, ordering and page

        Returns:
            Requested page; pages past the end are empty
        """
        per_page = request.per_page or self.settings.per_page
        criteria = CommentFilter(
            status=request.status,
            post_id=request.post_id,
            user_id=request.user_id,
            date_from=request.date_from,
            date_to=request.date_to,
        )

        with logfire.span(
            "list_comments",
            status=request.status.value if request.status else None,
            post_id=str(request.post_id) if request.post_id else None,
            page=request.page,
            per_page=per_page,
        ):
            try:
                comments, total = await self.comment_service.list_comments(
                    criteria,
                    order=request.order,
                    limit=per_page,
                    offset=(request.page - 1) * per_page,
                )
            except EXPECTED_ERRORS as e:
                return ListCommentsResponse(error=OperationError.from_exception(e))

        return ListCommentsResponse(
            comments=[CommentItem.from_comment(comment) for comment in comments],
            current_page=request.page,
            per_page=per_page,
            total=total,
            last_page=max(1, ceil(total / per_page)),
        )
