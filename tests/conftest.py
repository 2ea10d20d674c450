"""Test configuration and factories."""

from datetime import datetime
from uuid import uuid4

import logfire

from remarks.domain.model import Comment, Post
from remarks.domain.value import (
    Anonymous,
    Authenticated,
    CommentId,
    CommentStatus,
    PostId,
    PostStatus,
    UserId,
    UserRole,
)

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    owner_id: UserId | None = None,
    status: PostStatus = PostStatus.PUBLISHED,
    allow_comments: bool = True,
    comment_count: int = 0,
) -> Post:
    """Build a post ready to be saved."""
    return Post(
        id=PostId(uuid4()),
        owner_id=owner_id or UserId(uuid4()),
        status=status,
        allow_comments=allow_comments,
        comment_count=comment_count,
    )


def make_comment(
    post_id: PostId,
    parent_id: CommentId | None = None,
    status: CommentStatus = CommentStatus.APPROVED,
    user_id: UserId | None = None,
    content: str = "A thoughtful comment",
    created_at: datetime | None = None,
) -> Comment:
    """Build a stored comment directly, bypassing the submission pipeline."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        user_id=user_id,
        parent_id=parent_id,
        author_name="Reader",
        author_email="reader@example.com",
        content=content,
        status=status,
        ip_address="203.0.113.7",
        user_agent="pytest",
        created_at=created_at or datetime.now(),
    )


def make_user(
    role: UserRole = UserRole.USER, user_id: UserId | None = None
) -> Authenticated:
    """Build an authenticated actor."""
    user_id = user_id or UserId(uuid4())
    return Authenticated(
        id=user_id,
        name=f"user-{str(user_id)[:8]}",
        email=f"{str(user_id)[:8]}@example.com",
        role=role,
    )


def make_anonymous(
    name: str = "Anna", email: str = "a@x.com", website: str | None = None
) -> Anonymous:
    """Build an anonymous actor."""
    return Anonymous(name=name, email=email, website=website)
