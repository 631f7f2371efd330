"""Translation of errors into HTTP responses.

Routes let domain and adapter errors propagate; the handlers registered here
turn each into the failure envelope with its status code.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from hub.adapter.error import EmailDeliveryError, StorageError
from hub.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    RateLimitExceededError,
    ValidationError,
)
from hub.interface.api.envelope import ErrorResponse

# Most specific first; the first isinstance match wins
DOMAIN_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (RateLimitExceededError, status.HTTP_429_TOO_MANY_REQUESTS),
]


def error_response(
    status_code: int,
    message: str,
    errors: list[str] | None = None,
    retry_after: int | None = None,
) -> JSONResponse:
    """Build the failure envelope."""
    body = ErrorResponse(
        message=message, errors=errors or None, retry_after=retry_after
    )
    headers = {"Retry-After": str(retry_after)} if retry_after is not None else None
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_type, status_code in DOMAIN_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _field_errors(errors) -> list[str]:
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return messages


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logfire.info(
        "Domain error",
        path=request.url.path,
        error_type=type(exc).__name__,
        status_code=status_code,
        error=str(exc),
    )
    return error_response(
        status_code,
        str(exc),
        errors=getattr(exc, "errors", None),
        retry_after=getattr(exc, "retry_after", None),
    )


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST, "Validation failed", _field_errors(exc.errors())
    )


async def handle_model_validation(
    request: Request, exc: PydanticValidationError
) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST, "Validation failed", _field_errors(exc.errors())
    )


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    logfire.warn("Integrity error", path=request.url.path, error=str(exc.orig))
    return error_response(status.HTTP_400_BAD_REQUEST, "Duplicate value")


async def handle_email_error(request: Request, exc: EmailDeliveryError) -> JSONResponse:
    logfire.error("Email delivery failed", path=request.url.path, error=str(exc))
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to send invitation email"
    )


async def handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
    logfire.error("File storage failed", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "File storage failed")


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logfire.exception("Unhandled error", path=request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install every error translation on the app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(PydanticValidationError, handle_model_validation)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(EmailDeliveryError, handle_email_error)
    app.add_exception_handler(StorageError, handle_storage_error)
    app.add_exception_handler(Exception, handle_unexpected)
