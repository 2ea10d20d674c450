"""Comment statistics use case."""

from datetime import datetime, timedelta

import logfire
from pydantic import BaseModel

from remarks.application.error import EXPECTED_ERRORS, OperationError
from remarks.application.usecase.base import BaseUseCase
from remarks.domain.repository import CommentFilter
from remarks.domain.service import CommentService
from remarks.domain.value import CommentStatus, PostId


class GetCommentStatsRequest(BaseModel):
    """Stats request. Restrict to one post or cover the whole blog."""

    post_id: PostId | None = None
    now: datetime | None = None  # Reference time, defaults to current time


class GetCommentStatsResponse(BaseModel):
    """Comment counts by status and by creation period."""

    total: int = 0
    approved: int = 0
    pending: int = 0
    spam: int = 0
    today: int = 0
    this_week: int = 0  # Since Monday 00:00
    this_month: int = 0
    error: OperationError | None = None


class GetCommentStatsUseCase(BaseUseCase):
    """Use case for comment dashboard counters."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment stats use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: GetCommentStatsRequest
    ) -> GetCommentStatsResponse:
        """Execute get comment stats flow.

        Args:
            request: Stats request

        Returns:
            Aggregate counts
        """
        now = request.now or datetime.now()
        start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
        start_of_week = start_of_day - timedelta(days=start_of_day.weekday())
        start_of_month = start_of_day.replace(day=1)

        def count(**criteria):
            return self.comment_service.count_comments(
                CommentFilter(post_id=request.post_id, **criteria)
            )

        with logfire.span(
            "get_comment_stats",
            post_id=str(request.post_id) if request.post_id else None,
        ):
            try:
                return GetCommentStatsResponse(
                    total=await count(),
                    approved=await count(status=CommentStatus.APPROVED),
                    pending=await count(status=CommentStatus.PENDING),
                    spam=await count(status=CommentStatus.SPAM),
                    today=await count(date_from=start_of_day),
                    this_week=await count(date_from=start_of_week),
                    this_month=await count(date_from=start_of_month),
                )
            except EXPECTED_ERRORS as e:
                return GetCommentStatsResponse(error=OperationError.from_exception(e))
