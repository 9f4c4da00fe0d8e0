"""Authentication DTOs."""

from uuid import UUID

from pydantic import EmailStr, Field

from profile_api.models.domain.user import UserRole
from profile_api.models.dto.base import ApiModel


class LoginRequest(ApiModel):
    """Login request DTO."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class SwitchUserRequest(ApiModel):
    """Demo identity switch request."""

    email: EmailStr


class UserInfo(ApiModel):
    """Identity summary of the authenticated user."""

    user_id: UUID
    email: str
    employee_id: str
    role: UserRole
    manager_id: UUID | None = None


class TokenResponse(ApiModel):
    """Issued bearer token and the identity it carries."""

    token: str
    token_type: str = "Bearer"
    expires_in: int
    user: UserInfo
