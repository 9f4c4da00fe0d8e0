"""Domain-specific exceptions for the profile API.

These exceptions provide a clean separation between service-layer errors
and HTTP responses. The single translation point is
``profile_api.middleware.error_handler.profile_api_exception_handler``.
"""

from typing import Any


class ProfileAPIError(Exception):
    """Base exception for all profile API errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(ProfileAPIError):
    """Base class for resource not found errors."""

    pass


class UserNotFoundError(NotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: Any = None, message: str = "User not found") -> None:
        details = {"user_id": str(user_id)} if user_id else {}
        super().__init__(message, details)


class ProfileNotFoundError(NotFoundError):
    """Raised when a user exists but has no employee profile."""

    def __init__(self, user_id: Any = None) -> None:
        details = {"user_id": str(user_id)} if user_id else {}
        super().__init__("Profile not found", details)


class AbsenceNotFoundError(NotFoundError):
    """Raised when an absence request cannot be found."""

    def __init__(self, absence_id: Any = None) -> None:
        details = {"absence_id": str(absence_id)} if absence_id else {}
        super().__init__("Absence request not found", details)


# =============================================================================
# Permission Errors (403)
# =============================================================================


class ForbiddenError(ProfileAPIError):
    """Raised when an ownership or permission check fails."""

    def __init__(self, message: str = "Access denied", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class FieldClassForbiddenError(ForbiddenError):
    """Raised when a profile patch touches a field class the viewer cannot edit.

    Names the offending class only, never field values.
    """

    def __init__(self, field_class: Any) -> None:
        self.field_class = field_class
        super().__init__(
            f"You don't have permission to edit {str(field_class).lower()} fields of this profile",
            {"field_class": str(field_class)},
        )


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(ProfileAPIError):
    """Raised when input shape, size or format is invalid.

    ``field_errors`` lists every offending field as ``{"field", "reason"}``.
    """

    def __init__(
        self,
        message: str = "Invalid request",
        field_errors: list[dict[str, str]] | None = None,
    ) -> None:
        self.field_errors = field_errors or []
        details = {"fields": self.field_errors} if self.field_errors else {}
        super().__init__(message, details)

    @classmethod
    def for_field(cls, field: str, reason: str) -> "ValidationError":
        """Build a validation error for a single field."""
        return cls(f"{field}: {reason}", [{"field": field, "reason": reason}])


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class ConflictError(ProfileAPIError):
    """Base class for state conflicts."""

    pass


class AbsenceTransitionConflictError(ConflictError):
    """Raised when an absence request is no longer pending."""

    def __init__(self, absence_id: Any = None, status: str | None = None) -> None:
        details: dict[str, Any] = {}
        if absence_id:
            details["absence_id"] = str(absence_id)
        if status:
            details["status"] = status
        super().__init__("Only pending requests can be updated", details)


# =============================================================================
# Authentication Errors (401)
# =============================================================================


class UnauthorizedError(ProfileAPIError):
    """Raised when the identity token is missing or invalid."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


# =============================================================================
# Upstream Errors (502 / 504)
# =============================================================================


class UpstreamError(ProfileAPIError):
    """Raised when the text polishing service fails or returns nothing."""

    pass


class UpstreamTimeoutError(UpstreamError):
    """Raised when the text polishing service exceeds its deadline."""

    def __init__(self, message: str = "AI service timed out") -> None:
        super().__init__(message)


class ServiceDisabledError(ProfileAPIError):
    """Raised when a feature flag turns an operation off."""

    pass
