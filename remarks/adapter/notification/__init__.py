"""Notification adapters."""

from .logfire_notifier import LogfireCommentNotifier

__all__ = ["LogfireCommentNotifier"]
