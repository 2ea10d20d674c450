"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases are the subsystem boundary: expected domain errors are
    returned as ``OperationError`` values on the response, never raised.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
