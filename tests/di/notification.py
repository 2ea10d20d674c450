"""Recording notifier for asserting dispatched events."""

from dishka import Provider, Scope, provide

from remarks.domain.model import Comment
from remarks.domain.service import CommentNotifier
from remarks.domain.value import CommentEvent


class RecordingNotifier(CommentNotifier):
    """Keeps every dispatched event in memory."""

    def __init__(self) -> None:
        self.events: list[tuple[CommentEvent, Comment]] = []

    async def notify(self, event: CommentEvent, comment: Comment) -> None:
        self.events.append((event, comment))


class FailingNotifier(CommentNotifier):
    """Notifier whose transport is down."""

    async def notify(self, event: CommentEvent, comment: Comment) -> None:
        raise ConnectionError("mail relay unreachable")


class RecordingNotifierProvider(Provider):
    """Replaces the default notifier with a shared RecordingNotifier."""

    @provide(scope=Scope.APP)
    def get_recording_notifier(self) -> RecordingNotifier:
        return RecordingNotifier()

    @provide(scope=Scope.APP)
    def get_notifier(self, recorder: RecordingNotifier) -> CommentNotifier:
        return recorder
