"""FastAPI application factory and ASGI entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from hr_api.config import Settings, get_settings
from hr_api.database import engine
from hr_api.exceptions import HRAPIError
from hr_api.middleware.error_handler import (
    domain_exception_handler,
    generic_exception_handler,
    http_exception_handler,
    sqlalchemy_exception_handler,
    validation_exception_handler,
)
from hr_api.routers import auth, employees, payrolls, users, vacations
from hr_api.security.rate_limit import limiter

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}
HSTS_HEADER = "max-age=31536000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds hardening headers; API responses are never cached."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        response.headers.setdefault("Cache-Control", "no-store")
        if not get_settings().debug:
            response.headers["Strict-Transport-Security"] = HSTS_HEADER
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"{app.title} starting")
    yield
    await engine.dispose()
    logger.info(f"{app.title} stopped")


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """429 with a Retry-After hint in seconds."""
    return JSONResponse(
        status_code=429,
        content={"error": "Too many requests"},
        headers={"Retry-After": "60"},
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _add_exception_handlers(app: FastAPI) -> None:
    # Domain errors map to status codes; everything else is sanitized
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(HRAPIError, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)


def _add_middleware(app: FastAPI, config: Settings) -> None:
    origins = config.cors_origins_list
    if "*" in origins:
        raise ValueError("CORS_ORIGINS must list explicit origins; '*' is not allowed with credentials")

    # Added last runs first: CORS wraps the security headers
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )


def create_app() -> FastAPI:
    """Build the HR API application from current settings."""
    config = get_settings()
    configure_logging(config.log_level)

    app = FastAPI(
        title=config.app_name,
        version="0.1.0",
        description="Employees, payroll and vacation requests",
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )
    app.state.limiter = limiter

    _add_exception_handlers(app)
    _add_middleware(app, config)

    app.include_router(auth.router, prefix="/api", tags=["Authentication"])
    app.include_router(employees.router, prefix="/api/employees", tags=["Employees"])
    app.include_router(vacations.router, prefix="/api/vacations", tags=["Vacations"])
    app.include_router(payrolls.router, prefix="/api/payrolls", tags=["Payrolls"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
