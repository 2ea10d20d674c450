"""Notification dispatcher that records comment events in Logfire."""

import logfire

from remarks.domain.model import Comment
from remarks.domain.service.notification import CommentNotifier
from remarks.domain.value import CommentEvent


class LogfireCommentNotifier(CommentNotifier):
    """Records each event; mail delivery hooks in by replacing this class."""

    async def notify(self, event: CommentEvent, comment: Comment) -> None:
        logfire.info(
            "Comment event {event}",
            event=event.value,
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            status=comment.status.value,
        )
