"""Integration test for the comment lifecycle with a real database.

Submission, moderation, threading and cascade deletion run through the
SQLAlchemy repositories on SQLite; rate limiting stays in memory.
"""

from uuid import UUID

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from remarks.application.usecase.comment import (
    ApproveCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
    ModerateCommentRequest,
    SubmitCommentRequest,
    SubmitCommentUseCase,
)
from remarks.config import CommentSettings
from remarks.domain.repository import (
    CommentFilter,
    CommentRepository,
    PostRepository,
    TransactionManager,
)
from remarks.domain.service import (
    CommentNotifier,
    CommentService,
    CommentValidationPolicy,
    CounterSync,
    ModerationPolicy,
    PostService,
    RateLimiter,
)
from remarks.domain.value import CommentEvent, CommentStatus
from tests.conftest import make_anonymous, make_post, make_user
from tests.harness import create_env_fixture

# Integration test fixture - real persistence, mocked rate limiter
integration_env = create_env_fixture(unmock={"persistence"})


class TestCommentLifecycleIntegration:
    @pytest.mark.asyncio
    async def test_submit_moderate_thread_delete(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        owner = make_user()
        post = await post_repo.save(make_post(owner_id=owner.id))
        submit = await integration_env.get(SubmitCommentUseCase)

        root = await submit.execute(
            SubmitCommentRequest(actor=make_user(), post_id=post.id, content="Root")
        )
        reply = await submit.execute(
            SubmitCommentRequest(
                actor=make_anonymous(),
                post_id=post.id,
                content="Anonymous reply",
                parent_id=UUID(root.comment.comment_id),
                ip_address="198.51.100.4",
            )
        )
        assert reply.comment.status == CommentStatus.PENDING
        assert (await post_repo.find_by_id(post.id)).comment_count == 1

        # Act - approve the reply
        approve = await integration_env.get(ApproveCommentUseCase)
        approved = await approve.execute(
            ModerateCommentRequest(comment_id=UUID(reply.comment.comment_id))
        )

        # Assert - visible in the thread and counted
        assert approved.error is None
        assert (await post_repo.find_by_id(post.id)).comment_count == 2
        thread = await (await integration_env.get(GetCommentThreadUseCase)).execute(
            GetCommentThreadRequest(post_id=post.id)
        )
        assert thread.total == 2
        assert [item.comment.comment_id for item in thread.comments] == [
            root.comment.comment_id
        ]
        assert [c.comment.comment_id for c in thread.comments[0].children] == [
            reply.comment.comment_id
        ]

        # Act - post owner deletes the root
        delete = await integration_env.get(DeleteCommentUseCase)
        deleted = await delete.execute(
            DeleteCommentRequest(
                actor=owner, comment_id=UUID(root.comment.comment_id)
            )
        )

        # Assert - subtree gone, counter back to zero
        assert deleted.error is None
        assert deleted.approved_removed == 2
        assert await comment_repo.count_filtered(CommentFilter()) == 0
        assert (await post_repo.find_by_id(post.id)).comment_count == 0


class SessionStateNotifier(CommentNotifier):
    """Records whether the session still had an open transaction."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.seen: list[tuple[CommentEvent, bool]] = []

    async def notify(self, event, comment) -> None:
        self.seen.append((event, self.session.in_transaction()))


class TestNotificationAfterCommit:
    @pytest.mark.asyncio
    async def test_events_see_committed_rows(self, integration_env):
        # Arrange
        session = await integration_env.get(AsyncSession)
        notifier = SessionStateNotifier(session)
        comment_service = await integration_env.get(CommentService)
        post_service = await integration_env.get(PostService)
        counter_sync = await integration_env.get(CounterSync)
        transactions = await integration_env.get(TransactionManager)
        submit = SubmitCommentUseCase(
            rate_limiter=await integration_env.get(RateLimiter),
            validation_policy=await integration_env.get(CommentValidationPolicy),
            comment_service=comment_service,
            post_service=post_service,
            counter_sync=counter_sync,
            transactions=transactions,
            notifier=notifier,
            settings=await integration_env.get(CommentSettings),
        )
        approve = ApproveCommentUseCase(
            moderation_policy=await integration_env.get(ModerationPolicy),
            comment_service=comment_service,
            post_service=post_service,
            counter_sync=counter_sync,
            transactions=transactions,
            notifier=notifier,
        )
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        submitted = await submit.execute(
            SubmitCommentRequest(
                actor=make_anonymous(),
                post_id=post.id,
                content="Pending until approved",
                ip_address="198.51.100.4",
            )
        )
        await approve.execute(
            ModerateCommentRequest(comment_id=UUID(submitted.comment.comment_id))
        )

        # Assert
        assert notifier.seen == [
            (CommentEvent.CREATED, False),
            (CommentEvent.APPROVED, False),
        ]
