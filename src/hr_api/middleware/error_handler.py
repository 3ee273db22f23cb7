"""Exception handlers turning errors into ``{"error": ...}`` JSON responses.

Domain errors keep their message. Framework and database errors are reduced
to a fixed message per status code so internals never reach the client.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from hr_api.config import get_settings
from hr_api.exceptions import (
    ConflictError,
    HRAPIError,
    InvalidCredentialsError,
    InvalidStateTransitionError,
    NotFoundError,
    ValidationError,
)
from hr_api.utils.secure_logging import log_error, log_warning

logger = logging.getLogger(__name__)

GENERIC_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: "Invalid request",
    status.HTTP_401_UNAUTHORIZED: "Authentication required",
    status.HTTP_403_FORBIDDEN: "Access denied",
    status.HTTP_404_NOT_FOUND: "Resource not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
    status.HTTP_409_CONFLICT: "Conflict with existing resource",
    status.HTTP_422_UNPROCESSABLE_ENTITY: "Invalid input data",
    status.HTTP_429_TOO_MANY_REQUESTS: "Too many requests",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal server error",
}

# HTTPException details raised by our own security code or by routing
PASSTHROUGH_MESSAGES = (
    "Invalid credentials",
    "Authentication required",
    "Invalid or expired token",
    "Insufficient role",
    "Access denied",
    "Resource not found",
    "Not Found",
    "Method Not Allowed",
)

# Checked in order; the first matching family wins
DOMAIN_ERROR_STATUS: list[tuple[type[HRAPIError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InvalidStateTransitionError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
]

MAX_VIOLATIONS = 20


def _cors_headers(request: Request) -> dict[str, str]:
    """Echo an allowed Origin, since handler responses bypass CORSMiddleware."""
    origin = request.headers.get("origin")
    if origin and origin in get_settings().cors_origins_list:
        return {"Access-Control-Allow-Origin": origin, "Access-Control-Allow-Credentials": "true"}
    return {}


def _error_response(
    request: Request,
    status_code: int,
    content: dict[str, Any],
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers={**(headers or {}), **_cors_headers(request)},
    )


def is_safe_error_message(message: str) -> bool:
    lowered = message.lower()
    return any(allowed.lower() in lowered for allowed in PASSTHROUGH_MESSAGES)


def sanitize_error_detail(detail: Any, status_code: int) -> str:
    """Keep a known-safe detail string, otherwise use the generic message for the status."""
    if isinstance(detail, str) and is_safe_error_message(detail):
        return detail
    return GENERIC_MESSAGES.get(status_code, "Request failed")


def status_for_domain_error(exc: HRAPIError) -> int:
    return next(
        (code for family, code in DOMAIN_ERROR_STATUS if isinstance(exc, family)),
        status.HTTP_400_BAD_REQUEST,
    )


def build_violations(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten request validation errors into ``{field, message}`` pairs.

    The ``body``/``query``/``path`` prefix is dropped from each location and
    at most ``MAX_VIOLATIONS`` entries are returned.
    """
    violations = []
    for error in errors[:MAX_VIOLATIONS]:
        parts = [str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path")]
        violations.append({"field": ".".join(parts) or "body", "message": error.get("msg", "Invalid value")})
    return violations


async def domain_exception_handler(request: Request, exc: HRAPIError) -> JSONResponse:
    """Map a domain error to its status code, keeping message and details."""
    status_code = status_for_domain_error(exc)
    logger.info(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")

    content: dict[str, Any] = {"error": exc.message}
    if exc.details:
        content["details"] = exc.details
    headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
    return _error_response(request, status_code, content, headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if get_settings().debug else sanitize_error_detail(exc.detail, exc.status_code)
    return _error_response(request, exc.status_code, {"error": detail}, getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Validation error for {request.method} {request.url.path}")
    return _error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        {"error": "Validation failed", "violations": build_violations(list(exc.errors()))},
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Report constraint violations as 409/400 and anything else as an opaque 500."""
    if isinstance(exc, IntegrityError):
        reason = str(exc.orig if exc.orig is not None else exc).lower()
        log_warning(logger, f"Integrity error for {request.url.path}", exc)
        if "unique" in reason or "duplicate" in reason:
            return _error_response(request, status.HTTP_409_CONFLICT, {"error": "Resource already exists"})
        if "foreign key" in reason:
            return _error_response(
                request, status.HTTP_400_BAD_REQUEST, {"error": "Referenced resource not found"}
            )

    log_error(logger, f"Database error for {request.url.path}", exc)
    return _error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, {"error": "Database error occurred"}
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception for {request.method} {request.url.path}", exc_info=exc)
    if get_settings().debug:
        content = {"error": str(exc), "type": type(exc).__name__}
    else:
        content = {"error": GENERIC_MESSAGES[status.HTTP_500_INTERNAL_SERVER_ERROR]}
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, content)
