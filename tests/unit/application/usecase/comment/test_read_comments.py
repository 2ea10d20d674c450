"""Unit tests for the read use cases: thread, listing and stats."""

from datetime import datetime, timedelta
from unittest.mock import patch
from uuid import uuid4

import pytest

from remarks.application.error import ErrorKind
from remarks.application.usecase.comment import (
    GetCommentStatsRequest,
    GetCommentStatsUseCase,
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from remarks.config import CommentSettings
from remarks.domain.repository import CommentRepository, PostRepository
from remarks.domain.service import CommentService, PostService
from remarks.domain.value import CommentOrder, CommentStatus, PostId, UserId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

T0 = datetime(2026, 3, 4, 15, 30, 0)  # A Wednesday


class TestGetCommentThread:
    @pytest.mark.asyncio
    async def test_only_approved_one_level(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post())
        root = await comment_repo.save(make_comment(post.id, created_at=T0))
        reply = await comment_repo.save(
            make_comment(post.id, parent_id=root.id, created_at=T0 + timedelta(1))
        )
        await comment_repo.save(
            make_comment(post.id, parent_id=reply.id, created_at=T0 + timedelta(2))
        )
        await comment_repo.save(
            make_comment(post.id, status=CommentStatus.PENDING, created_at=T0)
        )

        response = await use_case.execute(GetCommentThreadRequest(post_id=post.id))

        assert response.error is None
        assert response.total == 3
        assert [item.comment.comment_id for item in response.comments] == [str(root.id)]
        children = response.comments[0].children
        assert [item.comment.comment_id for item in children] == [str(reply.id)]
        assert children[0].children == []

    @pytest.mark.asyncio
    async def test_recursive_threads_setting(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        use_case = GetCommentThreadUseCase(
            comment_service=await unit_env.get(CommentService),
            post_service=await unit_env.get(PostService),
            settings=CommentSettings(recursive_threads=True),
        )
        post = await post_repo.save(make_post())
        root = await comment_repo.save(make_comment(post.id, created_at=T0))
        reply = await comment_repo.save(
            make_comment(post.id, parent_id=root.id, created_at=T0 + timedelta(1))
        )
        nested = await comment_repo.save(
            make_comment(post.id, parent_id=reply.id, created_at=T0 + timedelta(2))
        )

        response = await use_case.execute(GetCommentThreadRequest(post_id=post.id))

        grandchild = response.comments[0].children[0].children[0]
        assert grandchild.comment.comment_id == str(nested.id)

    @pytest.mark.asyncio
    async def test_missing_post_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetCommentThreadUseCase)

        response = await use_case.execute(
            GetCommentThreadRequest(post_id=PostId(uuid4()))
        )

        assert response.error.kind == ErrorKind.NOT_FOUND


class TestListComments:
    @pytest.mark.asyncio
    async def test_moderation_queue_oldest_first(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        newer = await comment_repo.save(
            make_comment(post_id, status=CommentStatus.PENDING, created_at=T0)
        )
        older = await comment_repo.save(
            make_comment(
                post_id,
                status=CommentStatus.PENDING,
                created_at=T0 - timedelta(hours=1),
            )
        )
        await comment_repo.save(make_comment(post_id, created_at=T0))

        response = await use_case.execute(
            ListCommentsRequest(status=CommentStatus.PENDING)
        )

        assert [item.comment_id for item in response.comments] == [
            str(older.id),
            str(newer.id),
        ]
        assert response.total == 2

    @pytest.mark.asyncio
    async def test_user_history_newest_first_paginated(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        user_id = UserId(uuid4())
        saved = [
            await comment_repo.save(
                make_comment(
                    PostId(uuid4()),
                    user_id=user_id,
                    created_at=T0 + timedelta(minutes=i),
                )
            )
            for i in range(5)
        ]
        await comment_repo.save(make_comment(PostId(uuid4()), created_at=T0))

        response = await use_case.execute(
            ListCommentsRequest(
                user_id=user_id, order=CommentOrder.NEWEST_FIRST, page=2, per_page=2
            )
        )

        assert [item.comment_id for item in response.comments] == [
            str(saved[2].id),
            str(saved[1].id),
        ]
        assert response.current_page == 2
        assert response.per_page == 2
        assert response.total == 5
        assert response.last_page == 3

    @pytest.mark.asyncio
    async def test_date_range_and_default_page_size(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        await comment_repo.save(make_comment(post_id, created_at=T0 - timedelta(3)))
        inside = await comment_repo.save(make_comment(post_id, created_at=T0))

        response = await use_case.execute(
            ListCommentsRequest(
                post_id=post_id,
                date_from=T0 - timedelta(hours=1),
                date_to=T0 + timedelta(hours=1),
            )
        )

        assert [item.comment_id for item in response.comments] == [str(inside.id)]
        assert response.per_page == 20
        assert response.last_page == 1

    @pytest.mark.asyncio
    async def test_listing_is_traced(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with patch(
            "remarks.application.usecase.comment.list_comments.logfire"
        ) as log:
            await use_case.execute(
                ListCommentsRequest(status=CommentStatus.PENDING, page=2)
            )

        log.span.assert_called_once()
        assert log.span.call_args.args == ("list_comments",)
        assert log.span.call_args.kwargs["status"] == "pending"
        assert log.span.call_args.kwargs["page"] == 2


class TestGetCommentStats:
    @pytest.mark.asyncio
    async def test_counts_by_status_and_period(self, unit_env):
        use_case = await unit_env.get(GetCommentStatsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        fixtures = [
            (CommentStatus.APPROVED, T0 - timedelta(hours=2)),  # today
            (CommentStatus.PENDING, T0 - timedelta(days=1)),  # Tuesday
            (CommentStatus.SPAM, T0 - timedelta(days=2, hours=1)),  # Monday
            (CommentStatus.APPROVED, T0 - timedelta(days=3)),  # Sunday, same month
            (CommentStatus.APPROVED, T0 - timedelta(days=10)),  # February
        ]
        for status, created_at in fixtures:
            await comment_repo.save(
                make_comment(post_id, status=status, created_at=created_at)
            )

        response = await use_case.execute(
            GetCommentStatsRequest(post_id=post_id, now=T0)
        )

        assert response.total == 5
        assert response.approved == 3
        assert response.pending == 1
        assert response.spam == 1
        assert response.today == 1
        assert response.this_week == 3
        assert response.this_month == 4

    @pytest.mark.asyncio
    async def test_other_posts_excluded(self, unit_env):
        use_case = await unit_env.get(GetCommentStatsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(PostId(uuid4()), created_at=T0))

        response = await use_case.execute(
            GetCommentStatsRequest(post_id=PostId(uuid4()), now=T0)
        )

        assert response.total == 0
