"""Domain value objects for the comment subsystem."""

from remarks.domain.value.actor import Actor, Anonymous, Authenticated
from remarks.domain.value.identifiers import CommentId, PostId, UserId
from remarks.domain.value.types import (
    CommentEvent,
    CommentOrder,
    CommentStatus,
    PostStatus,
    UserRole,
)

__all__ = [
    # Identifiers
    "CommentId",
    "PostId",
    "UserId",
    # Types
    "CommentEvent",
    "CommentOrder",
    "CommentStatus",
    "PostStatus",
    "UserRole",
    # Actors
    "Actor",
    "Anonymous",
    "Authenticated",
]
