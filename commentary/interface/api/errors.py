"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from commentary.domain.error import (
    BusinessRuleViolationError,
    DepthExceededError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)

# Most specific first; the first isinstance match wins
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (DepthExceededError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
    (UnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error (500 if unmapped)."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    log = logfire.error if status_code >= 500 else logfire.warn
    log(
        "Request failed",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain error handler on the app."""
    app.add_exception_handler(DomainError, handle_domain_error)
