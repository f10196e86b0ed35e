"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case.

    A use case takes one pydantic request carrying string ids and the
    caller's identity, drives the domain services, and returns one pydantic
    response. Domain errors propagate to the interface layer untouched.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
