"""Domain layer DI providers."""

from dishka import Scope, provide

from remarks.config import CommentSettings
from remarks.domain.repository import CommentRepository, PostRepository
from remarks.domain.service import (
    CascadeDeleter,
    CommentAuthorizationPolicy,
    CommentService,
    CommentValidationPolicy,
    CounterSync,
    ModerationPolicy,
    PostService,
)
from remarks.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each unit of work gets fresh service instances sharing one session.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_validation_policy(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> CommentValidationPolicy:
        """Provide comment validation policy."""
        return CommentValidationPolicy(
            comment_repository=comment_repository, settings=settings
        )

    @provide
    def get_moderation_policy(self, comment_service: CommentService) -> ModerationPolicy:
        """Provide moderation policy."""
        return ModerationPolicy(comment_service=comment_service)

    @provide
    def get_authorization_policy(
        self, post_repository: PostRepository
    ) -> CommentAuthorizationPolicy:
        """Provide comment authorization policy."""
        return CommentAuthorizationPolicy(post_repository=post_repository)

    @provide
    def get_cascade_deleter(self, comment_service: CommentService) -> CascadeDeleter:
        """Provide cascading comment deleter."""
        return CascadeDeleter(comment_service=comment_service)

    @provide
    def get_counter_sync(
        self, comment_service: CommentService, post_service: PostService
    ) -> CounterSync:
        """Provide post counter maintenance."""
        return CounterSync(comment_service=comment_service, post_service=post_service)
