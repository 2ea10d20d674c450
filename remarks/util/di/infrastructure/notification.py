"""Notification infrastructure provider."""

from dishka import Scope, provide

from remarks.adapter.notification import LogfireCommentNotifier
from remarks.domain.service import CommentNotifier
from remarks.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification dispatcher provider - concrete, no mocks needed."""

    @provide(scope=Scope.APP)
    def get_notifier(self) -> CommentNotifier:
        """Provide comment notifier."""
        return LogfireCommentNotifier()
