"""Domain model entities for the comment subsystem."""

from remarks.domain.model.comment import Comment, CommentDraft
from remarks.domain.model.post import Post

__all__ = [
    "Comment",
    "CommentDraft",
    "Post",
]
