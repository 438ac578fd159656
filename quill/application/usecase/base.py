"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services.

    Use cases take a plain request model, call into the domain and return a
    response model. They never build HTTP envelopes.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
