"""Exception handlers mapping domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from agora.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from agora.interface.api.response import failure

SERVER_ERROR_MESSAGE = "Server error"


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotAuthorizedError):
        return status.HTTP_403_FORBIDDEN
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Convert domain errors to error envelopes.

    Args:
        request: The incoming request
        exc: The domain error that was raised

    Returns:
        JSONResponse with the mapped status code
    """
    status_code = _status_for(exc)

    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
            operation=getattr(exc, "operation", None),
        )
        message = SERVER_ERROR_MESSAGE
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            method=request.method,
            status_code=status_code,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        message = str(exc)

    return JSONResponse(status_code=status_code, content=failure(message))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap HTTP errors raised by routes (e.g. 401) in the error envelope."""
    logfire.warn(
        "HTTP error",
        path=request.url.path,
        method=request.method,
        status_code=exc.status_code,
        detail=str(exc.detail),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report malformed input (request bodies or model rules) as 400."""
    if isinstance(exc, (RequestValidationError, PydanticValidationError)):
        errors = exc.errors()
        message = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
            for err in errors
        )
    else:
        message = str(exc)

    logfire.warn(
        "Validation failed",
        path=request.url.path,
        method=request.method,
        error=message,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=failure(message)
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(PydanticValidationError, validation_error_handler)
