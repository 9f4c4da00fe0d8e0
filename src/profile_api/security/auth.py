"""Identity token issuing and request authentication."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from profile_api.config import get_settings
from profile_api.exceptions import ForbiddenError, UnauthorizedError
from profile_api.models.domain.user import AuthenticatedUser, UserRole

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(
    user_id: UUID,
    email: str,
    employee_id: str,
    role: UserRole,
    manager_id: UUID | None = None,
) -> str:
    """Create a JWT access token.

    Args:
        user_id: User UUID
        email: User email
        employee_id: Employee number
        role: User role
        manager_id: Direct manager, if any

    Returns:
        JWT token string
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=settings.jwt_expiration_minutes)

    payload: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "employeeId": employee_id,
        "role": role.value,
        "exp": expire,
        "iat": now,
    }
    if manager_id is not None:
        payload["managerId"] = str(manager_id)

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict[str, Any]:
    """Decode and verify a JWT token.

    Args:
        token: JWT token string

    Returns:
        Token payload

    Raises:
        UnauthorizedError: If token is invalid or expired
    """
    settings = get_settings()

    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as e:
        raise UnauthorizedError("Invalid or expired token") from e


def principal_from_token(token: str) -> AuthenticatedUser:
    """Build the request principal from a bearer token.

    Raises:
        UnauthorizedError: If the token is invalid or lacks required claims
    """
    payload = decode_token(token)
    try:
        manager_claim = payload.get("managerId")
        return AuthenticatedUser(
            user_id=UUID(payload["sub"]),
            email=payload["email"],
            employee_id=payload["employeeId"],
            role=UserRole(payload["role"]),
            manager_id=UUID(manager_claim) if manager_claim else None,
        )
    except (KeyError, ValueError) as e:
        raise UnauthorizedError("Invalid or expired token") from e


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
) -> AuthenticatedUser:
    """Get the current authenticated user from the bearer token.

    Args:
        credentials: HTTP Bearer credentials

    Returns:
        AuthenticatedUser principal

    Raises:
        UnauthorizedError: If authentication fails
    """
    if credentials is None:
        raise UnauthorizedError()
    return principal_from_token(credentials.credentials)


async def require_manager(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
) -> AuthenticatedUser:
    """Require the current user to hold the manager role.

    Raises:
        ForbiddenError: If user is not a manager
    """
    if not current_user.is_manager():
        logger.warning("Manager endpoint denied for user %s", current_user.user_id)
        raise ForbiddenError("Manager role required")
    return current_user
