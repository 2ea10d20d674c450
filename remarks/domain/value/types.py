"""Enumerations shared across the comment subsystem."""

from enum import Enum


class CommentStatus(str, Enum):
    """Moderation state of a comment.

    Only approved comments are displayed and counted on the post.
    """

    PENDING = "pending"
    APPROVED = "approved"
    SPAM = "spam"


class PostStatus(str, Enum):
    """Publication state of the owning post."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class UserRole(str, Enum):
    """Role of a registered user."""

    USER = "user"
    AUTHOR = "author"
    ADMIN = "admin"


class CommentEvent(str, Enum):
    """Events emitted to the notification dispatcher."""

    CREATED = "created"
    APPROVED = "approved"
    REJECTED = "rejected"


class CommentOrder(str, Enum):
    """Sort order for comment listings."""

    OLDEST_FIRST = "oldest_first"  # Moderation queue
    NEWEST_FIRST = "newest_first"  # User history
