"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through the ORM.
"""

from typing import Any, Dict
from uuid import UUID

from remarks.domain.model import Comment, Post
from remarks.domain.value import CommentId, CommentStatus, PostId, PostStatus, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return None if value is None else _uuid(value)


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    user_id = _optional_uuid(row.get("user_id"))
    parent_id = _optional_uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(user_id) if user_id else None,
        parent_id=CommentId(parent_id) if parent_id else None,
        author_name=row["author_name"],
        author_email=row["author_email"],
        author_website=row.get("author_website"),
        content=row["content"],
        status=CommentStatus(row["status"]),
        ip_address=row.get("ip_address") or "",
        user_agent=row.get("user_agent") or "",
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    data = comment.model_dump()
    data["status"] = comment.status.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["user_id"])),
        status=PostStatus(row["status"]),
        allow_comments=bool(row["allow_comments"]),
        comment_count=row["comment_count"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "user_id": post.owner_id,
        "status": post.status.value,
        "allow_comments": post.allow_comments,
        "comment_count": post.comment_count,
    }
