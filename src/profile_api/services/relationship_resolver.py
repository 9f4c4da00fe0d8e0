"""Relationship resolution against stored users."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.exceptions import UserNotFoundError
from profile_api.models.domain.access import Relationship
from profile_api.models.orm.user import UserORM
from profile_api.repositories.user_repository import UserRepository
from profile_api.security.relationships import determine_relationship
from profile_api.utils.request_cache import RequestScopedCache

logger = logging.getLogger(__name__)


class RelationshipResolver:
    """Resolves a viewer's relationship to a target user."""

    def __init__(
        self,
        session: AsyncSession,
        users: RequestScopedCache[UserORM] | None = None,
    ) -> None:
        """Initialize resolver.

        Args:
            session: Database session
            users: Request-scoped user cache to share with the caller
        """
        self.session = session
        self.user_repo = UserRepository(session)
        self.users = users or RequestScopedCache(self.user_repo.get_by_ids)

    async def resolve(self, viewer_id: UUID, target_id: UUID) -> Relationship:
        """Resolve the viewer's relationship to a target user.

        Args:
            viewer_id: Authenticated user
            target_id: User being viewed

        Returns:
            Relationship of viewer to target

        Raises:
            UserNotFoundError: If the target does not exist
        """
        target = await self.users.get(target_id)
        if target is None:
            raise UserNotFoundError(target_id)

        relationship = determine_relationship(viewer_id, target.id, target.manager_id)
        logger.debug("Resolved relationship %s -> %s: %s", viewer_id, target_id, relationship)
        return relationship
