"""Comment entity.

Comments form a forest per post through ``parent_id``. A reply always
belongs to the same post as its parent.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from remarks.domain.model.common import DomainModel
from remarks.domain.value import CommentId, CommentStatus, PostId, UserId


class CommentDraft(DomainModel):
    """Normalized, validated submission that has not been stored yet.

    Produced by the validation policy. Author fields are already resolved
    from the actor (account data for registered users, form data for
    anonymous readers).
    """

    post_id: PostId
    user_id: Optional[UserId] = None
    parent_id: Optional[CommentId] = None
    author_name: str
    author_email: str
    author_website: Optional[str] = None
    content: str
    ip_address: str = ""
    user_agent: str = ""


class Comment(DomainModel):
    """Stored comment.

    ``ip_address`` and ``user_agent`` are kept for abuse analysis only and
    never change after creation.
    """

    id: CommentId
    post_id: PostId
    user_id: Optional[UserId] = None
    parent_id: Optional[CommentId] = None
    author_name: str
    author_email: str
    author_website: Optional[str] = None
    content: str = Field(min_length=1)
    status: CommentStatus = CommentStatus.PENDING
    ip_address: str = ""
    user_agent: str = ""
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_approved(self) -> bool:
        return self.status == CommentStatus.APPROVED

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None
