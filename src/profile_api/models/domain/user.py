"""User domain model."""

from enum import StrEnum
from uuid import UUID

from pydantic import BaseModel


class UserRole(StrEnum):
    """User role enum."""

    EMPLOYEE = "EMPLOYEE"
    MANAGER = "MANAGER"


class AuthenticatedUser(BaseModel):
    """Principal decoded from the identity token.

    Passed explicitly into every service call; nothing reads the current
    user from ambient state.
    """

    user_id: UUID
    email: str
    employee_id: str
    role: UserRole
    manager_id: UUID | None = None

    def is_manager(self) -> bool:
        """Check if the principal holds the manager role."""
        return self.role == UserRole.MANAGER
