"""Middleware package."""

from profile_api.middleware.cors_logging_middleware import CORSLoggingMiddleware
from profile_api.middleware.error_handler import profile_api_exception_handler

__all__ = [
    "CORSLoggingMiddleware",
    "profile_api_exception_handler",
]
