"""Comment submission validation."""

import re
from typing import Optional

import logfire

from remarks.config import CommentSettings
from remarks.domain.error import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from remarks.domain.model.comment import CommentDraft
from remarks.domain.model.post import Post
from remarks.domain.repository import CommentRepository
from remarks.domain.value import (
    Actor,
    Anonymous,
    Authenticated,
    CommentId,
    PostId,
    PostStatus,
)
from remarks.domain.value.common import ValueObject

from .base import Service

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
WEBSITE_PATTERN = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)
WEBSITE_MAX_LENGTH = 255


class CommentSubmission(ValueObject):
    """Raw fields of a comment submission as handed over by the caller."""

    post_id: PostId
    content: str
    parent_id: Optional[CommentId] = None
    ip_address: str = ""
    user_agent: str = ""


class CommentValidationPolicy(Service):
    """Checks a submission and turns it into a normalized draft.

    Rules differ by actor: anonymous readers must supply a usable name and
    email, registered users always comment under their account identity.
    Validation only reads; it never writes.
    """

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize validation policy.

        Args:
            comment_repository: Comment repository, used to resolve parents
            settings: Comment limits
        """
        self.comment_repository = comment_repository
        self.settings = settings

    async def validate(
        self,
        actor: Actor,
        submission: CommentSubmission,
        post: Post | None,
    ) -> CommentDraft:
        """Validate a submission against its actor and owning post.

        Args:
            actor: Who is commenting
            submission: Raw submitted fields
            post: Owning post loaded fresh by the caller, None if missing

        Returns:
            Normalized comment draft

        Raises:
            ValidationError: Content or anonymous identity fields invalid
            NotFoundError: Post missing or not published
            ForbiddenError: Comments disabled, or anonymous comments off
            ConflictError: Parent missing or on another post
        """
        with logfire.span(
            "comment_validation.validate",
            post_id=str(submission.post_id),
            actor_kind=actor.kind,
            parent_id=str(submission.parent_id) if submission.parent_id else None,
        ):
            errors: dict[str, str] = {}

            content = submission.content.strip()
            if len(content) < self.settings.content_min_length:
                errors["content"] = (
                    f"Comment must be at least "
                    f"{self.settings.content_min_length} characters"
                )
            elif len(content) > self.settings.content_max_length:
                errors["content"] = (
                    f"Comment must be at most "
                    f"{self.settings.content_max_length} characters"
                )

            if isinstance(actor, Anonymous):
                if not self.settings.allow_anonymous:
                    logfire.warn(
                        "Anonymous comment rejected",
                        post_id=str(submission.post_id),
                    )
                    raise ForbiddenError("Anonymous comments are disabled")
                name, email, website = self._check_anonymous(actor, errors)
                user_id = None
            else:
                name, email, website = self._identity_of(actor)
                user_id = actor.id

            if errors:
                logfire.info(
                    "Comment submission invalid",
                    post_id=str(submission.post_id),
                    fields=sorted(errors),
                )
                raise ValidationError(errors)

            self._check_post(submission.post_id, post)
            await self._check_parent(submission)

            return CommentDraft(
                post_id=submission.post_id,
                user_id=user_id,
                parent_id=submission.parent_id,
                author_name=name,
                author_email=email,
                author_website=website,
                content=content,
                ip_address=submission.ip_address,
                user_agent=submission.user_agent,
            )

    def _check_anonymous(
        self, actor: Anonymous, errors: dict[str, str]
    ) -> tuple[str, str, str | None]:
        name = actor.name.strip()
        email = actor.email.strip()
        website = actor.website.strip() if actor.website else None

        if len(name) < self.settings.author_name_min_length:
            errors["author_name"] = (
                f"Name must be at least "
                f"{self.settings.author_name_min_length} characters"
            )
        if not EMAIL_PATTERN.match(email):
            errors["author_email"] = "Invalid email address"
        if website and (
            len(website) > WEBSITE_MAX_LENGTH or not WEBSITE_PATTERN.match(website)
        ):
            errors["author_website"] = "Website must be an http(s) URL"

        return name, email, website or None

    @staticmethod
    def _identity_of(actor: Authenticated) -> tuple[str, str, str | None]:
        # Account identity only; form fields are ignored for logged-in users
        return actor.name, actor.email, None

    @staticmethod
    def _check_post(post_id: PostId, post: Post | None) -> None:
        if post is None or post.status != PostStatus.PUBLISHED:
            logfire.warn("Post not available for comments", post_id=str(post_id))
            raise NotFoundError("Post", str(post_id))
        if not post.allow_comments:
            logfire.warn("Comments disabled for post", post_id=str(post_id))
            raise ForbiddenError(f"Comments are disabled for post {post_id}")

    async def _check_parent(self, submission: CommentSubmission) -> None:
        if submission.parent_id is None:
            return

        parent = await self.comment_repository.find_by_id(submission.parent_id)
        if parent is None:
            logfire.warn(
                "Parent comment not found",
                parent_id=str(submission.parent_id),
                post_id=str(submission.post_id),
            )
            raise ConflictError(f"Parent comment {submission.parent_id} not found")
        if parent.post_id != submission.post_id:
            logfire.warn(
                "Parent comment does not belong to post",
                parent_id=str(submission.parent_id),
                parent_post_id=str(parent.post_id),
                target_post_id=str(submission.post_id),
            )
            raise ConflictError(
                f"Parent comment {submission.parent_id} belongs to another post"
            )
