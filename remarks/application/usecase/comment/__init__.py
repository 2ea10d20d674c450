"""Comment use cases."""

from .common import CommentItem
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_stats import (
    GetCommentStatsRequest,
    GetCommentStatsResponse,
    GetCommentStatsUseCase,
)
from .get_thread import (
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
    ThreadItem,
)
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .moderate_comment import (
    ApproveCommentUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    RejectCommentUseCase,
    RevokeCommentUseCase,
)
from .submit_comment import (
    SubmitCommentRequest,
    SubmitCommentResponse,
    SubmitCommentUseCase,
    rate_limit_key,
)

__all__ = [
    "ApproveCommentUseCase",
    "CommentItem",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentStatsRequest",
    "GetCommentStatsResponse",
    "GetCommentStatsUseCase",
    "GetCommentThreadRequest",
    "GetCommentThreadResponse",
    "GetCommentThreadUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ModerateCommentRequest",
    "ModerateCommentResponse",
    "RejectCommentUseCase",
    "RevokeCommentUseCase",
    "SubmitCommentRequest",
    "SubmitCommentResponse",
    "SubmitCommentUseCase",
    "ThreadItem",
    "rate_limit_key",
]
