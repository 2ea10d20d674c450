"""Application layer DI providers."""

from dishka import Scope, provide

from remarks.application.usecase.comment import (
    ApproveCommentUseCase,
    DeleteCommentUseCase,
    GetCommentStatsUseCase,
    GetCommentThreadUseCase,
    ListCommentsUseCase,
    RejectCommentUseCase,
    RevokeCommentUseCase,
    SubmitCommentUseCase,
)
from remarks.config import CommentSettings
from remarks.domain.repository import TransactionManager
from remarks.domain.service import (
    CascadeDeleter,
    CommentAuthorizationPolicy,
    CommentNotifier,
    CommentService,
    CommentValidationPolicy,
    CounterSync,
    ModerationPolicy,
    PostService,
    RateLimiter,
)
from remarks.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Submission
    @provide(scope=Scope.REQUEST)
    def get_submit_comment_use_case(
        self,
        rate_limiter: RateLimiter,
        validation_policy: CommentValidationPolicy,
        comment_service: CommentService,
        post_service: PostService,
        counter_sync: CounterSync,
        transactions: TransactionManager,
        notifier: CommentNotifier,
        settings: CommentSettings,
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(
            rate_limiter=rate_limiter,
            validation_policy=validation_policy,
            comment_service=comment_service,
            post_service=post_service,
            counter_sync=counter_sync,
            transactions=transactions,
            notifier=notifier,
            settings=settings,
        )

    # Moderation
    @provide(scope=Scope.REQUEST)
    def get_approve_comment_use_case(
        self,
        moderation_policy: ModerationPolicy,
        comment_service: CommentService,
        post_service: PostService,
        counter_sync: CounterSync,
        transactions: TransactionManager,
        notifier: CommentNotifier,
    ) -> ApproveCommentUseCase:
        """Provide approve comment use case."""
        return ApproveCommentUseCase(
            moderation_policy=moderation_policy,
            comment_service=comment_service,
            post_service=post_service,
            counter_sync=counter_sync,
            transactions=transactions,
            notifier=notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_reject_comment_use_case(
        self,
        moderation_policy: ModerationPolicy,
        comment_service: CommentService,
        post_service: PostService,
        counter_sync: CounterSync,
        transactions: TransactionManager,
        notifier: CommentNotifier,
    ) -> RejectCommentUseCase:
        """Provide reject comment use case."""
        return RejectCommentUseCase(
            moderation_policy=moderation_policy,
            comment_service=comment_service,
            post_service=post_service,
            counter_sync=counter_sync,
            transactions=transactions,
            notifier=notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_revoke_comment_use_case(
        self,
        moderation_policy: ModerationPolicy,
        comment_service: CommentService,
        post_service: PostService,
        counter_sync: CounterSync,
        transactions: TransactionManager,
        notifier: CommentNotifier,
    ) -> RevokeCommentUseCase:
        """Provide revoke comment use case."""
        return RevokeCommentUseCase(
            moderation_policy=moderation_policy,
            comment_service=comment_service,
            post_service=post_service,
            counter_sync=counter_sync,
            transactions=transactions,
            notifier=notifier,
        )

    # Deletion
    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        authorization_policy: CommentAuthorizationPolicy,
        comment_service: CommentService,
        post_service: PostService,
        cascade_deleter: CascadeDeleter,
        counter_sync: CounterSync,
        transactions: TransactionManager,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            authorization_policy=authorization_policy,
            comment_service=comment_service,
            post_service=post_service,
            cascade_deleter=cascade_deleter,
            counter_sync=counter_sync,
            transactions=transactions,
        )

    # Reads
    @provide(scope=Scope.REQUEST)
    def get_comment_thread_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        settings: CommentSettings,
    ) -> GetCommentThreadUseCase:
        """Provide get comment thread use case."""
        return GetCommentThreadUseCase(
            comment_service=comment_service,
            post_service=post_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service, settings=settings)

    @provide(scope=Scope.REQUEST)
    def get_comment_stats_use_case(
        self, comment_service: CommentService
    ) -> GetCommentStatsUseCase:
        """Provide comment stats use case."""
        return GetCommentStatsUseCase(comment_service=comment_service)
