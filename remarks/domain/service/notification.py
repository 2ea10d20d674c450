"""Comment notification interface."""

from remarks.domain.model.comment import Comment
from remarks.domain.value import CommentEvent


class CommentNotifier:
    """Dispatcher for comment lifecycle events (admin and author mails).

    Delivery is fire-and-forget: callers do not wait on the outcome and a
    failing dispatcher never fails the operation that triggered it.
    """

    async def notify(self, event: CommentEvent, comment: Comment) -> None:
        """Dispatch a comment event.

        Args:
            event: What happened to the comment
            comment: Comment after the change
        """
        raise NotImplementedError
