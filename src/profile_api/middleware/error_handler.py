"""Boundary translation of errors into HTTP responses.

Every domain error is raised as a ``ProfileAPIError`` subclass and mapped to
its status code here, and nowhere else.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from profile_api.config import get_settings
from profile_api.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ProfileAPIError,
    ServiceDisabledError,
    UnauthorizedError,
    UpstreamError,
    UpstreamTimeoutError,
    ValidationError,
)
from profile_api.utils.secure_logging import log_error

logger = logging.getLogger(__name__)

# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    401: "Authentication required",
    403: "Access denied",
    404: "Resource not found",
    405: "Method not allowed",
    409: "Conflict with existing resource",
    500: "Internal server error",
    502: "Service unavailable",
    504: "Upstream service timed out",
}

# Most specific first: UpstreamTimeoutError subclasses UpstreamError
_STATUS_BY_ERROR: tuple[tuple[type[ProfileAPIError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (UpstreamTimeoutError, status.HTTP_504_GATEWAY_TIMEOUT),
    (UpstreamError, status.HTTP_502_BAD_GATEWAY),
    (ServiceDisabledError, status.HTTP_502_BAD_GATEWAY),
)


def _get_cors_headers(request: Request) -> dict[str, str]:
    """Get CORS headers for error responses.

    Exception handlers run before the CORS middleware can add headers,
    so allowed origins are echoed here.

    Args:
        request: The incoming request

    Returns:
        Dict of CORS headers to add to the response
    """
    origin = request.headers.get("origin")
    if not origin:
        return {}

    settings = get_settings()
    if origin in settings.cors_origins_list:
        headers = {"Access-Control-Allow-Origin": origin}
        if settings.cors_allow_credentials:
            headers["Access-Control-Allow-Credentials"] = "true"
        return headers

    return {}


def status_for(exc: ProfileAPIError) -> int:
    """Map a domain error to its HTTP status code."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_body(status_code: int, message: str, details: dict[str, Any] | None = None) -> dict:
    return {
        "status": status_code,
        "error": SAFE_ERROR_MESSAGES.get(status_code, "Request failed"),
        "message": message,
        "details": details or {},
    }


async def profile_api_exception_handler(request: Request, exc: ProfileAPIError) -> JSONResponse:
    """Translate a domain error into its HTTP response.

    Args:
        request: FastAPI request
        exc: Domain error

    Returns:
        JSONResponse with status, error, message and details
    """
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
    elif status_code == status.HTTP_403_FORBIDDEN:
        logger.warning("Forbidden on %s %s: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s on %s %s", type(exc).__name__, request.method, request.url.path)

    return JSONResponse(
        status_code=status_code,
        content=_error_body(status_code, exc.message, exc.details),
        headers=_get_cors_headers(request),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework HTTP exceptions (unknown routes, wrong methods).

    Args:
        request: FastAPI request
        exc: HTTP exception

    Returns:
        JSONResponse with a generic message for the status
    """
    message = SAFE_ERROR_MESSAGES.get(exc.status_code, "Request failed")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, message),
        headers=_get_cors_headers(request),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request-shape errors as 400 listing every offending field.

    Args:
        request: FastAPI request
        exc: Validation exception

    Returns:
        JSONResponse with per-field reasons
    """
    field_errors = []
    for error in exc.errors():
        # Locations already carry wire names (aliases)
        loc = [part for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(str(part) for part in loc)
        field_errors.append({"field": field or "body", "reason": error.get("msg", "Invalid value")})

    logger.info(
        "Request validation failed on %s %s: %s",
        request.method,
        request.url.path,
        [fe["field"] for fe in field_errors],
    )

    status_code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(
        status_code=status_code,
        content=_error_body(status_code, "Invalid request", {"fields": field_errors}),
        headers=_get_cors_headers(request),
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle SQLAlchemy exceptions without leaking database details.

    Args:
        request: FastAPI request
        exc: SQLAlchemy exception

    Returns:
        JSONResponse with safe error
    """
    # Driver messages echo bound parameters, which are profile values
    log_error(logger, f"Database error for {request.method} {request.url.path}", exc)

    if isinstance(exc, IntegrityError):
        text = str(exc).lower()
        if "unique" in text or "duplicate" in text:
            status_code = status.HTTP_409_CONFLICT
            return JSONResponse(
                status_code=status_code,
                content=_error_body(status_code, "Resource already exists"),
                headers=_get_cors_headers(request),
            )
        if "foreign key" in text:
            status_code = status.HTTP_400_BAD_REQUEST
            return JSONResponse(
                status_code=status_code,
                content=_error_body(status_code, "Referenced resource not found"),
                headers=_get_cors_headers(request),
            )

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=status_code,
        content=_error_body(status_code, "Database error occurred"),
        headers=_get_cors_headers(request),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information.

    Args:
        request: FastAPI request
        exc: Unexpected exception

    Returns:
        JSONResponse with generic error
    """
    logger.error("Unhandled exception for %s %s", request.method, request.url.path, exc_info=True)

    settings = get_settings()
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    details = {"type": type(exc).__name__} if settings.debug else None
    return JSONResponse(
        status_code=status_code,
        content=_error_body(status_code, SAFE_ERROR_MESSAGES[500], details),
        headers=_get_cors_headers(request),
    )
