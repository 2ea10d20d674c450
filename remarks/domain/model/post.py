"""Owning post, as seen by the comment subsystem.

Posts are managed by the blog core. Only the fields that comment rules
depend on are modelled here, plus the denormalized ``comment_count`` that
this subsystem keeps in sync.
"""

from pydantic import Field

from remarks.domain.model.common import DomainModel
from remarks.domain.value import PostId, PostStatus, UserId


class Post(DomainModel):
    """Post projection used for comment validation and authorization."""

    id: PostId
    owner_id: UserId
    status: PostStatus = PostStatus.PUBLISHED
    allow_comments: bool = True
    comment_count: int = Field(default=0, ge=0)

    @property
    def accepts_comments(self) -> bool:
        return self.status == PostStatus.PUBLISHED and self.allow_comments
