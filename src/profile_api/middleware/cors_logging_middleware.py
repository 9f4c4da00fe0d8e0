"""CORS logging middleware for security monitoring."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class CORSLoggingMiddleware(BaseHTTPMiddleware):
    """Logs requests whose Origin is not on the allow list.

    Should be added after CORSMiddleware so it runs before it on requests.
    """

    def __init__(self, app: ASGIApp, allowed_origins: list[str]) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application
            allowed_origins: Allowed origin URLs
        """
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Log a rejected origin, then pass the request on."""
        origin = request.headers.get("origin")

        if origin and origin not in self.allowed_origins:
            logger.warning(
                "CORS origin rejected",
                extra={
                    "origin": origin,
                    "method": request.method,
                    "path": request.url.path,
                    "client_ip": request.client.host if request.client else "unknown",
                },
            )

        return await call_next(request)
