"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Identity is always part of the request; use cases never read an
    ambient "current user".
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
