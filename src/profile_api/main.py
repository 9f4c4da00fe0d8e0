"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from profile_api.config import get_settings
from profile_api.exceptions import ProfileAPIError
from profile_api.middleware.cors_logging_middleware import CORSLoggingMiddleware
from profile_api.middleware.error_handler import (
    generic_exception_handler,
    http_exception_handler,
    profile_api_exception_handler,
    sqlalchemy_exception_handler,
    validation_exception_handler,
)
from profile_api.providers.huggingface import HuggingFaceTextPolisher
from profile_api.routers import absence, auth, directory, feedback, profiles
from profile_api.tasks.scheduler import start_scheduler, stop_scheduler

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        # Profiles carry personal data; never cache API responses
        if "Cache-Control" not in response.headers:
            response.headers["Cache-Control"] = "no-store, max-age=0"
        response.headers.setdefault("Vary", "Accept, Authorization, Origin")
        if get_settings().environment == "production":
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    await start_scheduler()
    yield
    await stop_scheduler()

    # Close shared HTTP clients to release connections
    await HuggingFaceTextPolisher.close_client()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_settings()

    app = FastAPI(
        title=config.app_name,
        version="0.1.0",
        description="Employee profile, directory, absence and feedback API",
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )

    # Domain errors first; everything else gets a sanitized response
    app.add_exception_handler(ProfileAPIError, profile_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    allowed_origins = [
        origin
        for origin in config.cors_origins_list
        if origin.startswith("http://") or origin.startswith("https://")
    ]

    # Middleware runs in reverse order of addition
    app.add_middleware(SecurityHeadersMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=config.cors_allow_credentials,
        allow_methods=config.cors_allowed_methods_list,
        allow_headers=config.cors_allowed_headers_list,
    )

    # Added after CORSMiddleware so it runs before it on incoming requests
    app.add_middleware(CORSLoggingMiddleware, allowed_origins=allowed_origins)

    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(profiles.router, prefix="/api/profiles", tags=["Profiles"])
    app.include_router(directory.router, prefix="/api/directory", tags=["Directory"])
    app.include_router(feedback.router, prefix="/api/feedback", tags=["Feedback"])
    app.include_router(absence.router, prefix="/api/absence", tags=["Absence"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
