"""Domain services."""

from .authorization import CommentAuthorizationPolicy
from .base import Service
from .cascade import CascadeDeleter, CascadeResult
from .comment_service import CommentService
from .counter_sync import CounterSync
from .moderation import ModerationPolicy
from .notification import CommentNotifier
from .post_service import PostService
from .rate_limiter import RateLimiter
from .thread_builder import CommentThreadNode, ThreadBuilder
from .validation import CommentSubmission, CommentValidationPolicy

__all__ = [
    "CascadeDeleter",
    "CascadeResult",
    "CommentAuthorizationPolicy",
    "CommentNotifier",
    "CommentService",
    "CommentSubmission",
    "CommentThreadNode",
    "CommentValidationPolicy",
    "CounterSync",
    "ModerationPolicy",
    "PostService",
    "RateLimiter",
    "Service",
    "ThreadBuilder",
]
