"""Base classes for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for composite value objects (actors, filters, drafts).

    Value objects are frozen and compared field by field.
    """

    model_config = ConfigDict(frozen=True)
