"""
Error kinds, service results and FastAPI exception handlers.

Expected domain outcomes (conflict, not found, ...) travel as a ``ServiceResult``
from the service layer to the routes. Routes turn a failed result into an
``HTTPException`` with the status mapped below. Anything else is an
unexpected failure and propagates as a normal exception.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories surfaced to API clients."""

    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNEXPECTED = "unexpected"


ERROR_KIND_TO_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either a value or an error kind with a client-facing message."""

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "ServiceResult[T]":
        return cls(error=error, message=message)

    def unwrap(self) -> T:
        """
        Return the value or raise the matching HTTPException.

        Raises:
            HTTPException: With the status mapped from the error kind
        """
        if self.error is not None:
            raise http_error(self.error, self.message)
        return self.value  # type: ignore[return-value]


def http_error(kind: ErrorKind, message: str) -> HTTPException:
    """Build an HTTPException for an error kind."""
    headers = {"WWW-Authenticate": "Bearer"} if kind is ErrorKind.UNAUTHORIZED else None
    return HTTPException(
        status_code=ERROR_KIND_TO_STATUS[kind],
        detail=message,
        headers=headers,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request-shape validation errors as 400 instead of 422."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]
    logger.info(f"Validation failed on {request.method} {request.url.path}: {len(errors)} error(s)")
    return JSONResponse(
        status_code=ERROR_KIND_TO_STATUS[ErrorKind.VALIDATION],
        content={"detail": jsonable_encoder(errors)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and return a generic 500 body."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=ERROR_KIND_TO_STATUS[ErrorKind.UNEXPECTED],
        content={"detail": "Internal server error"},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
