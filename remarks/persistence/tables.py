"""SQLAlchemy table definitions for the comment subsystem.

These table definitions match the schema defined in Alembic migrations.
Generic column types are used so the same metadata also runs on SQLite.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    Uuid,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE (owned by the blog core; columns read or written by comments)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("user_id", Uuid, nullable=False),  # Post author
    Column("status", String(20), nullable=False, server_default="draft"),
    Column("allow_comments", Boolean, nullable=False, server_default="1"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("post_id", Uuid, ForeignKey("posts.id"), nullable=False),
    Column("user_id", Uuid, nullable=True),  # Null for anonymous comments
    # No ON DELETE CASCADE: replies are removed explicitly, deepest first
    Column("parent_id", Uuid, ForeignKey("comments.id"), nullable=True),
    Column("author_name", String(255), nullable=False),
    Column("author_email", String(255), nullable=False),
    Column("author_website", String(255), nullable=True),
    Column("content", Text, nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("ip_address", String(45), nullable=False, server_default=""),
    Column("user_agent", Text, nullable=False, server_default=""),
    Column("created_at", DateTime(timezone=True), nullable=False),
    CheckConstraint(
        "status IN ('pending', 'approved', 'spam')", name="comment_status_valid"
    ),
)

# Thread reads and counter recomputation
Index("idx_comments_post_id_status", comments_table.c.post_id, comments_table.c.status)
# Cascade traversal
Index("idx_comments_parent_id", comments_table.c.parent_id)
# User history
Index("idx_comments_user_id", comments_table.c.user_id)
# Moderation queue and date filters
Index("idx_comments_created_at", comments_table.c.created_at)
