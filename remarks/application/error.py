"""Typed error results returned by use cases."""

from enum import Enum

from pydantic import BaseModel, Field

from remarks.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    PersistenceError,
    RateLimitExceededError,
    ValidationError,
)


class ErrorKind(str, Enum):
    """Category of an expected failure."""

    VALIDATION = "validation"
    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    PERSISTENCE = "persistence"


# Expected outcomes, recovered at the use case boundary.
# CascadeIntegrityError is not among them and propagates.
EXPECTED_ERRORS: tuple[type[DomainError], ...] = (
    ValidationError,
    RateLimitExceededError,
    NotFoundError,
    ForbiddenError,
    ConflictError,
    PersistenceError,
)

_KINDS: dict[type[DomainError], ErrorKind] = {
    ValidationError: ErrorKind.VALIDATION,
    RateLimitExceededError: ErrorKind.RATE_LIMITED,
    NotFoundError: ErrorKind.NOT_FOUND,
    ForbiddenError: ErrorKind.FORBIDDEN,
    ConflictError: ErrorKind.CONFLICT,
    PersistenceError: ErrorKind.PERSISTENCE,
}


class OperationError(BaseModel):
    """Failed-operation result."""

    kind: ErrorKind
    message: str
    errors: dict[str, str] = Field(default_factory=dict)  # Field -> message

    @classmethod
    def from_exception(cls, exc: DomainError) -> "OperationError":
        """Build an error result from an expected domain error.

        Raises:
            TypeError: If the error is not an expected outcome
        """
        for error_type, kind in _KINDS.items():
            if isinstance(exc, error_type):
                errors = exc.errors if isinstance(exc, ValidationError) else {}
                return cls(kind=kind, message=str(exc), errors=errors)
        raise TypeError(f"Unexpected error type: {type(exc).__name__}")
