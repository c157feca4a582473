"""Response envelopes shared by every handler."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Successful response: ``{"data": ...}``."""

    data: T


class ErrorResponse(BaseModel):
    """Failed response: ``{"error": "..."}``."""

    error: str


class DeleteResult(BaseModel):
    success: bool = True
