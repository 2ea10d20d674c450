"""Counter invariant under random interleavings of comment operations."""

import asyncio
import random

import pytest

from remarks.application.usecase.comment import (
    ApproveCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ModerateCommentRequest,
    RejectCommentUseCase,
    RevokeCommentUseCase,
    SubmitCommentRequest,
    SubmitCommentUseCase,
)
from remarks.domain.repository import CommentFilter, CommentRepository, PostRepository
from remarks.domain.value import CommentStatus, UserRole
from tests.conftest import make_anonymous, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _assert_counters(unit_env, posts) -> None:
    post_repo = await unit_env.get(PostRepository)
    comment_repo = await unit_env.get(CommentRepository)
    for post in posts:
        stored = await post_repo.find_by_id(post.id)
        approved = await comment_repo.count_filtered(
            CommentFilter(post_id=post.id, status=CommentStatus.APPROVED)
        )
        assert stored.comment_count == approved


class TestCounterInvariant:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("seed", [7, 19, 2024])
    async def test_random_interleavings(self, unit_env, seed):
        rng = random.Random(seed)
        submit = await unit_env.get(SubmitCommentUseCase)
        approve = await unit_env.get(ApproveCommentUseCase)
        reject = await unit_env.get(RejectCommentUseCase)
        revoke = await unit_env.get(RevokeCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        admin = make_user(UserRole.ADMIN)
        posts = [await post_repo.save(make_post()) for _ in range(2)]
        submissions = 0
        replies = 0

        def random_submission(existing):
            nonlocal submissions, replies
            submissions += 1
            # Fresh actors keep every submission inside its own quota
            actor = make_user() if rng.random() < 0.5 else make_anonymous()
            post = rng.choice(posts)
            # Replies build nested subtrees for the cascading deletes
            candidates = [c for c in existing if c.post_id == post.id]
            parent = None
            if candidates and rng.random() < 0.6:
                parent = rng.choice(candidates)
                replies += 1
            return submit.execute(
                SubmitCommentRequest(
                    actor=actor,
                    post_id=post.id,
                    content=f"Comment {submissions}",
                    parent_id=parent.id if parent else None,
                    ip_address=f"198.51.100.{submissions % 250}",
                )
            )

        for _ in range(12):
            existing = await comment_repo.find_filtered(CommentFilter(), limit=1000)
            batch = [random_submission(existing) for _ in range(rng.randint(1, 3))]
            for comment in rng.sample(existing, k=min(len(existing), 4)):
                request = ModerateCommentRequest(comment_id=comment.id)
                action = rng.choice(["approve", "reject", "revoke", "delete"])
                if action == "approve":
                    batch.append(approve.execute(request))
                elif action == "reject":
                    batch.append(reject.execute(request))
                elif action == "revoke":
                    batch.append(revoke.execute(request))
                else:
                    batch.append(
                        delete.execute(
                            DeleteCommentRequest(actor=admin, comment_id=comment.id)
                        )
                    )
            rng.shuffle(batch)

            await asyncio.gather(*batch)

            await _assert_counters(unit_env, posts)

        assert replies > 0

