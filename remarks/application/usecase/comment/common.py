"""Shared response items and helpers for comment use cases."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from remarks.domain.model import Comment
from remarks.domain.service import CommentNotifier
from remarks.domain.value import CommentEvent, CommentStatus


class CommentItem(BaseModel):
    """Comment as returned to callers.

    Email, IP address and user agent stay internal.
    """

    comment_id: str
    post_id: str
    user_id: str | None
    parent_id: str | None
    author_name: str
    author_website: str | None
    content: str
    status: CommentStatus
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            user_id=str(comment.user_id) if comment.user_id else None,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_name=comment.author_name,
            author_website=comment.author_website,
            content=comment.content,
            status=comment.status,
            created_at=comment.created_at,
        )


async def dispatch_notification(
    notifier: CommentNotifier, event: CommentEvent, comment: Comment
) -> None:
    """Send a notification after the unit of work has committed.

    Delivery is fire-and-forget: a failing notifier is logged and the
    operation still succeeds.
    """
    try:
        await notifier.notify(event, comment)
    except Exception as e:
        logfire.error(
            "Comment notification failed",
            event=event.value,
            comment_id=str(comment.id),
            error=str(e),
        )
