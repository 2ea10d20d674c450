"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from remarks.domain.model.comment import Comment
from remarks.domain.value import CommentId, CommentOrder, CommentStatus, PostId, UserId
from remarks.domain.value.common import ValueObject


class CommentFilter(ValueObject):
    """Criteria for comment listings. Unset fields do not filter."""

    status: Optional[CommentStatus] = None
    post_id: Optional[PostId] = None
    user_id: Optional[UserId] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_approved_by_post(self, post_id: PostId) -> List[Comment]:
        """Find the approved comments of a post in display order.

        Order is ``parent_id`` ascending with top-level comments first,
        then ``created_at`` ascending.

        Args:
            post_id: The post ID

        Returns:
            Approved comments of the post
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies of a comment, whatever their status.

        Args:
            parent_id: The parent comment ID

        Returns:
            Child comments, oldest first
        """
        pass

    @abstractmethod
    async def find_filtered(
        self,
        criteria: CommentFilter,
        order: CommentOrder = CommentOrder.OLDEST_FIRST,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments matching a filter, paginated.

        Args:
            criteria: Filter to apply
            order: Creation-time ordering
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Matching comments
        """
        pass

    @abstractmethod
    async def count_filtered(self, criteria: CommentFilter) -> int:
        """Count comments matching a filter.

        Args:
            criteria: Filter to apply

        Returns:
            Number of matching comments
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId, status: CommentStatus) -> int:
        """Count a post's comments in the given status.

        Args:
            post_id: The post ID
            status: Status to count

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to store

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        comment_id: CommentId,
        status: CommentStatus,
        expected: CommentStatus,
    ) -> Optional[Comment]:
        """Move a comment to ``status`` if it is currently ``expected``.

        The check and the write happen in a single statement, so of two
        concurrent transitions only one succeeds.

        Args:
            comment_id: The comment ID
            status: New status
            expected: Status the comment must currently have

        Returns:
            The updated comment, or None if it is missing or was not in
            the expected status
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment row (hard delete).

        Replies are not touched; callers remove them first.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a row was removed
        """
        pass
