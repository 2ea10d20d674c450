"""Integration tests for PostgresPostRepository."""

from uuid import uuid4

import pytest

from remarks.domain.repository import PostRepository
from remarks.domain.value import PostId, PostStatus
from tests.conftest import make_post
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})


class TestPostRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_save_and_find(self, integration_env):
        repo = await integration_env.get(PostRepository)
        post = make_post(status=PostStatus.DRAFT, allow_comments=False)

        await repo.save(post)
        found = await repo.find_by_id(post.id)

        assert found == post
        assert found.accepts_comments is False

    @pytest.mark.asyncio
    async def test_save_existing_updates(self, integration_env):
        repo = await integration_env.get(PostRepository)
        post = await repo.save(make_post(status=PostStatus.DRAFT))

        await repo.save(post.model_copy(update={"status": PostStatus.PUBLISHED}))

        assert (await repo.find_by_id(post.id)).status == PostStatus.PUBLISHED

    @pytest.mark.asyncio
    async def test_locked_read(self, integration_env):
        repo = await integration_env.get(PostRepository)
        post = await repo.save(make_post())

        assert (await repo.find_by_id(post.id, for_update=True)).id == post.id
        assert await repo.find_by_id(PostId(uuid4()), for_update=True) is None

    @pytest.mark.asyncio
    async def test_set_comment_count(self, integration_env):
        repo = await integration_env.get(PostRepository)
        post = await repo.save(make_post(comment_count=4))

        await repo.set_comment_count(post.id, 7)

        assert (await repo.find_by_id(post.id)).comment_count == 7
