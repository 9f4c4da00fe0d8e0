"""Employee profile repository.

Profile queries join ``users`` explicitly and return ``(profile, user)``
pairs; nothing relies on lazy relationship loading.
"""

from uuid import UUID

from sqlalchemy import func, or_, select

from profile_api.models.domain.profile import EmploymentStatus
from profile_api.models.orm.employee_profile import EmployeeProfileORM
from profile_api.models.orm.user import UserORM
from profile_api.repositories.base import BaseRepository
from profile_api.utils.validation import escape_like_wildcards

ProfileRow = tuple[EmployeeProfileORM, UserORM]


class ProfileRepository(BaseRepository[EmployeeProfileORM]):
    """Repository for employee profile operations."""

    model = EmployeeProfileORM

    async def get_with_user(self, user_id: UUID, for_update: bool = False) -> ProfileRow | None:
        """Get a user's profile together with the user row.

        Args:
            user_id: Owning user UUID
            for_update: Lock the profile row until the transaction ends

        Returns:
            (profile, user) or None if the user has no profile
        """
        query = (
            select(EmployeeProfileORM, UserORM)
            .join(UserORM, UserORM.id == EmployeeProfileORM.user_id)
            .where(EmployeeProfileORM.user_id == user_id)
        )
        if for_update:
            query = query.with_for_update(of=EmployeeProfileORM)
        result = await self.session.execute(query)
        row = result.one_or_none()
        return (row[0], row[1]) if row else None

    async def get_by_user_ids(self, user_ids: list[UUID]) -> dict[UUID, EmployeeProfileORM]:
        """Get profiles for several users in a single query.

        Args:
            user_ids: Owning user UUIDs

        Returns:
            Dict mapping user ID to profile
        """
        if not user_ids:
            return {}
        result = await self.session.execute(
            select(EmployeeProfileORM).where(EmployeeProfileORM.user_id.in_(user_ids))
        )
        return {profile.user_id: profile for profile in result.scalars().all()}

    async def list_active(
        self,
        exclude_user_id: UUID | None = None,
        search: str | None = None,
        department: str | None = None,
    ) -> list[ProfileRow]:
        """List active profiles with their users.

        Args:
            exclude_user_id: User to leave out (usually the viewer)
            search: Case-insensitive substring over names, email,
                employee ID and department
            department: Case-insensitive exact department match

        Returns:
            List of (profile, user) pairs, unordered
        """
        query = (
            select(EmployeeProfileORM, UserORM)
            .join(UserORM, UserORM.id == EmployeeProfileORM.user_id)
            .where(EmployeeProfileORM.employment_status == EmploymentStatus.ACTIVE.value)
        )

        if exclude_user_id is not None:
            query = query.where(UserORM.id != exclude_user_id)

        if search:
            # Escape LIKE wildcards to prevent pattern injection
            pattern = f"%{escape_like_wildcards(search)}%"
            full_name = EmployeeProfileORM.legal_first_name + " " + EmployeeProfileORM.legal_last_name
            query = query.where(
                or_(
                    EmployeeProfileORM.preferred_name.ilike(pattern, escape="\\"),
                    full_name.ilike(pattern, escape="\\"),
                    UserORM.email.ilike(pattern, escape="\\"),
                    UserORM.employee_id.ilike(pattern, escape="\\"),
                    EmployeeProfileORM.department.ilike(pattern, escape="\\"),
                )
            )

        if department:
            query = query.where(func.lower(EmployeeProfileORM.department) == department.lower())

        result = await self.session.execute(query)
        return [(profile, user) for profile, user in result.all()]

    async def list_departments(self) -> list[str]:
        """Get the distinct departments of active profiles, sorted."""
        result = await self.session.execute(
            select(EmployeeProfileORM.department)
            .where(
                EmployeeProfileORM.employment_status == EmploymentStatus.ACTIVE.value,
                EmployeeProfileORM.department.is_not(None),
            )
            .distinct()
            .order_by(EmployeeProfileORM.department)
        )
        return [department for department in result.scalars().all() if department]
