"""Strongly typed identifiers for comment subsystem entities.

NewType keeps post, comment and user ids from being mixed up while
remaining plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
PostId = NewType("PostId", UUID)
UserId = NewType("UserId", UUID)
