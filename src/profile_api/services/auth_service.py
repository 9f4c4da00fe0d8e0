"""Authentication service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.config import get_settings
from profile_api.exceptions import ForbiddenError, UnauthorizedError, UserNotFoundError
from profile_api.models.domain.user import UserRole
from profile_api.models.dto.auth import TokenResponse, UserInfo
from profile_api.models.orm.user import UserORM
from profile_api.repositories.user_repository import UserRepository
from profile_api.security.auth import create_access_token
from profile_api.security.password import get_password_service

logger = logging.getLogger(__name__)


class AuthService:
    """Service for issuing identity tokens."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.user_repo = UserRepository(session)
        self.password_service = get_password_service()

    async def login(self, email: str, password: str) -> TokenResponse:
        """Authenticate with email and password.

        Args:
            email: User email
            password: User password

        Returns:
            TokenResponse with bearer token

        Raises:
            UnauthorizedError: If the credentials do not match; the message
                does not say which part was wrong
        """
        user = await self.user_repo.get_by_email(email)
        if user is None or not self.password_service.verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise UnauthorizedError("Invalid email or password")

        logger.info("User %s logged in", user.id)
        return self._issue(user)

    async def switch_user(self, email: str) -> TokenResponse:
        """Issue a token for any user without a password (demo only).

        Raises:
            ForbiddenError: If identity switching is disabled
            UserNotFoundError: If no user has this email
        """
        if not get_settings().demo_switch_user_enabled:
            raise ForbiddenError("User switching is disabled")

        user = await self.user_repo.get_by_email(email)
        if user is None:
            raise UserNotFoundError()

        logger.info("Switched identity to user %s", user.id)
        return self._issue(user)

    def _issue(self, user: UserORM) -> TokenResponse:
        settings = get_settings()
        role = UserRole(user.role)
        token = create_access_token(
            user_id=user.id,
            email=user.email,
            employee_id=user.employee_id,
            role=role,
            manager_id=user.manager_id,
        )
        return TokenResponse(
            token=token,
            expires_in=settings.jwt_expiration_minutes * 60,
            user=UserInfo(
                user_id=user.id,
                email=user.email,
                employee_id=user.employee_id,
                role=role,
                manager_id=user.manager_id,
            ),
        )
