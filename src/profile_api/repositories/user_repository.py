"""User repository."""

from sqlalchemy import func, select

from profile_api.models.orm.user import UserORM
from profile_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserORM]):
    """Repository for user operations."""

    model = UserORM

    async def get_by_email(self, email: str) -> UserORM | None:
        """Get a user by email, case-insensitively.

        Args:
            email: Email address

        Returns:
            UserORM or None if not found
        """
        result = await self.session.execute(
            select(UserORM).where(func.lower(UserORM.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()
