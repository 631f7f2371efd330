"""Response envelope shared by every JSON route."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from hub.domain.value import Pagination

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Successful response: ``{success, message?, data, pagination?}``."""

    success: bool = True
    message: str | None = None
    data: DataT
    pagination: Pagination | None = None


class MessageResponse(BaseModel):
    """Successful response that carries no data."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Failed response: ``{success: false, message, errors?, retry_after?}``."""

    success: bool = False
    message: str
    errors: list[str] | None = None
    retry_after: int | None = None
