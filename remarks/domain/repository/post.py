"""Post repository interface.

The comment subsystem does not own posts. This port covers the lookups
and the single counter write it needs.
"""

from abc import ABC, abstractmethod
from typing import Optional

from remarks.domain.model.post import Post
from remarks.domain.value import PostId


class PostRepository(ABC):
    """Repository for the owning post."""

    @abstractmethod
    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier
            for_update: Lock the post row until the current transaction
                ends, serializing concurrent writers on the same post

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def set_comment_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the denormalized approved-comment counter.

        Args:
            post_id: The post ID
            count: Freshly computed approved-comment count
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Used to seed posts in tests and fixtures.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
