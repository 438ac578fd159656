"""Success envelopes shared by all routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """``{"success": true, "data": ...}``"""

    success: bool = True
    data: T


class MessageResponse(BaseModel):
    """``{"success": true, "message": ...}`` for operations with no payload."""

    success: bool = True
    message: str
