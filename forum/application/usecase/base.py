"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases take a pydantic request, call domain services and return a
    pydantic response; they never touch HTTP.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
