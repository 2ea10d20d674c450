"""In-memory post repository for testing."""

from typing import Optional

from remarks.domain.model.post import Post
from remarks.domain.repository.post import PostRepository
from remarks.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def snapshot(self) -> dict[PostId, Post]:
        return dict(self._posts)

    def restore(self, snapshot: dict[PostId, Post]) -> None:
        self._posts = dict(snapshot)

    async def find_by_id(
        self, post_id: PostId, for_update: bool = False
    ) -> Optional[Post]:
        """Find a post by ID.

        Locking is handled by the in-memory transaction manager, which
        serializes whole units of work.
        """
        return self._posts.get(post_id)

    async def set_comment_count(self, post_id: PostId, count: int) -> None:
        """Overwrite the approved-comment counter."""
        post = self._posts.get(post_id)
        if post is not None:
            self._posts[post_id] = post.model_copy(update={"comment_count": count})

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        self._posts[post.id] = post
        return post
