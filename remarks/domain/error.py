"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Submitted fields failed shape or length checks.

    ``errors`` maps each offending field to a human readable message.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        super().__init__(
            "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        )

    @property
    def field(self) -> str:
        """Name of the first offending field."""
        return next(iter(self.errors))


class RateLimitExceededError(DomainError):
    """Raised when an actor has used up its submission quota."""

    def __init__(self, key: str, max_attempts: int, window_seconds: int):
        self.key = key
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        super().__init__(
            f"Too many attempts for {key}: "
            f"limit is {max_attempts} per {window_seconds} seconds"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when an operation is not allowed for the actor or resource."""

    def __init__(self, message: str):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when a request conflicts with the current state.

    Covers replies to a comment on another post and moderation
    transitions from a non-pending state.
    """

    def __init__(self, message: str):
        super().__init__(message)


class PersistenceError(DomainError):
    """Storage layer failure. Not retried internally."""

    def __init__(self, message: str):
        super().__init__(message)


class CascadeIntegrityError(DomainError):
    """A reply chain revisited a comment during cascading deletion.

    Parent links are acyclic by construction, so this signals corrupted
    data and is never treated as an expected outcome.
    """

    def __init__(self, comment_id: str):
        self.comment_id = comment_id
        super().__init__(f"Comment {comment_id} reached twice while deleting replies")
