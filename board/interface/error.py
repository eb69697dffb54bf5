"""Interface layer errors and their HTTP mapping."""

import math

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from board.adapter.error import AdapterError
from board.domain.error import (
    DomainError,
    LedgerRejectedError,
    NotFoundError,
    PolicyDeniedError,
    RateLimitedError,
    StoreUnavailableError,
    ValidationError,
    VerificationExpiredError,
    VerificationMismatchError,
    VerificationRequiredError,
    VerificationStateError,
)
from board.domain.value import LedgerRejection


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationRequiredError(InterfaceError):
    """Request carried no valid session token."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (PolicyDeniedError, status.HTTP_403_FORBIDDEN),
    (VerificationRequiredError, status.HTTP_403_FORBIDDEN),
    (VerificationExpiredError, status.HTTP_403_FORBIDDEN),
    (VerificationMismatchError, status.HTTP_403_FORBIDDEN),
    (VerificationStateError, status.HTTP_409_CONFLICT),
    (RateLimitedError, status.HTTP_429_TOO_MANY_REQUESTS),
    (LedgerRejectedError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def status_for(error: DomainError) -> int:
    """Resolve the HTTP status code for a domain error.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTP status code, 500 for unmapped errors
    """
    if (
        isinstance(error, LedgerRejectedError)
        and error.reason is LedgerRejection.RECIPIENT_NOT_FOUND
    ):
        return status.HTTP_404_NOT_FOUND
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _headers_for(error: DomainError) -> dict[str, str] | None:
    if isinstance(error, RateLimitedError):
        retry_after = max(1, math.ceil(error.retry_after.total_seconds()))
        return {"Retry-After": str(retry_after)}
    return None


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error with its specific message."""
    status_code = status_for(exc)
    body: dict[str, object] = {"detail": str(exc), "error": type(exc).__name__}
    if isinstance(exc, LedgerRejectedError):
        body["reason"] = exc.reason.value

    if status_code >= 500:
        logfire.warn(
            "Request failed on domain error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
    return JSONResponse(status_code=status_code, content=body, headers=_headers_for(exc))


async def adapter_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render an outbound delivery or storage failure as a bad gateway."""
    logfire.error(
        "Request failed on adapter error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


async def authentication_error_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render a missing or invalid session token."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(AdapterError, adapter_error_handler)
    app.add_exception_handler(AuthenticationRequiredError, authentication_error_handler)
