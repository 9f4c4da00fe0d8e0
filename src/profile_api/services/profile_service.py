"""Profile read and update service."""

import logging
from collections.abc import Mapping
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.exceptions import ProfileNotFoundError, UserNotFoundError
from profile_api.models.domain.user import AuthenticatedUser
from profile_api.models.dto.profile import ProfileResponse
from profile_api.models.orm.base import utcnow
from profile_api.repositories.profile_repository import ProfileRepository, ProfileRow
from profile_api.repositories.user_repository import UserRepository
from profile_api.security.profile_patch import apply_patch, plan_patch
from profile_api.security.profile_projection import project_profile
from profile_api.security.relationships import determine_relationship

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for profile projection and sparse updates."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.profile_repo = ProfileRepository(session)
        self.user_repo = UserRepository(session)

    async def _load(self, user_id: UUID, for_update: bool = False) -> ProfileRow:
        row = await self.profile_repo.get_with_user(user_id, for_update=for_update)
        if row is not None:
            return row
        if await self.user_repo.exists(user_id):
            raise ProfileNotFoundError(user_id)
        raise UserNotFoundError(user_id)

    async def get_profile(self, viewer: AuthenticatedUser, user_id: UUID) -> ProfileResponse:
        """Get a profile as the viewer may see it.

        Args:
            viewer: Authenticated principal
            user_id: Profile owner

        Returns:
            Projected profile

        Raises:
            UserNotFoundError: If the owner does not exist
            ProfileNotFoundError: If the owner has no profile
        """
        profile, user = await self._load(user_id)
        relationship = determine_relationship(viewer.user_id, user.id, user.manager_id)
        return project_profile(profile, user, relationship)

    async def update_profile(
        self,
        viewer: AuthenticatedUser,
        user_id: UUID,
        patch: Mapping[str, Any],
    ) -> ProfileResponse:
        """Apply a sparse patch to a profile.

        The profile row is locked for the rest of the transaction, so
        concurrent updates of one profile apply one after another. A patch
        that touches any class the viewer cannot edit changes nothing.

        Args:
            viewer: Authenticated principal
            user_id: Profile owner
            patch: Attribute name to new value; null means unchanged

        Returns:
            Viewer's projection of the updated profile

        Raises:
            UserNotFoundError: If the owner does not exist
            ProfileNotFoundError: If the owner has no profile
            ValidationError: Unknown keys or invalid values
            FieldClassForbiddenError: A touched class is not editable
        """
        profile, user = await self._load(user_id, for_update=True)
        relationship = determine_relationship(viewer.user_id, user.id, user.manager_id)

        plan = plan_patch(relationship, patch)
        if not plan.is_empty:
            apply_patch(profile, plan)
            profile.updated_at = utcnow()
            await self.session.flush()
            await self.session.refresh(profile)
            # Field names only; values may be personal data
            logger.info(
                "Profile of %s updated by %s (%s): %s",
                user_id,
                viewer.user_id,
                relationship,
                sorted(plan.changes),
            )

        return project_profile(profile, user, relationship)
