"""Actor context supplied by the caller for every operation.

The acting party is a tagged union: either a registered user or an
anonymous reader. It is always passed in explicitly; nothing in the
subsystem looks up the current session.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from remarks.domain.value.common import ValueObject
from remarks.domain.value.identifiers import UserId
from remarks.domain.value.types import UserRole


class Authenticated(ValueObject):
    """A logged-in user. Name and email come from the account."""

    kind: Literal["authenticated"] = "authenticated"
    id: UserId
    name: str
    email: str
    role: UserRole = UserRole.USER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


class Anonymous(ValueObject):
    """A reader without an account, identified only by what they typed."""

    kind: Literal["anonymous"] = "anonymous"
    name: str
    email: str
    website: str | None = None


Actor = Annotated[Union[Authenticated, Anonymous], Field(discriminator="kind")]
