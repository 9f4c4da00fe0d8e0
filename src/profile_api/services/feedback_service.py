"""Peer feedback service."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from profile_api.config import get_settings
from profile_api.exceptions import ForbiddenError, UserNotFoundError, ValidationError
from profile_api.models.domain.access import Relationship
from profile_api.models.domain.user import AuthenticatedUser
from profile_api.models.dto.feedback import FeedbackCreate, FeedbackResponse
from profile_api.models.orm.feedback import FeedbackORM
from profile_api.repositories.feedback_repository import FeedbackRepository
from profile_api.repositories.profile_repository import ProfileRepository
from profile_api.repositories.user_repository import UserRepository
from profile_api.security.feedback_visibility import can_read_feedback
from profile_api.security.profile_projection import display_name_of
from profile_api.services.relationship_resolver import RelationshipResolver
from profile_api.utils.request_cache import RequestScopedCache

logger = logging.getLogger(__name__)


class FeedbackService:
    """Service for writing and reading peer feedback."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.feedback_repo = FeedbackRepository(session)
        self.user_repo = UserRepository(session)
        self.profile_repo = ProfileRepository(session)
        # Per-request caches; one service instance serves one request
        self.users = RequestScopedCache(self.user_repo.get_by_ids)
        self.profiles = RequestScopedCache(self.profile_repo.get_by_user_ids)
        self.resolver = RelationshipResolver(session, users=self.users)

    async def create_feedback(
        self,
        author: AuthenticatedUser,
        request: FeedbackCreate,
    ) -> FeedbackResponse:
        """Record feedback from the author about a coworker.

        Args:
            author: Authenticated principal writing the feedback
            request: Recipient, text and polish flag

        Returns:
            Created feedback

        Raises:
            ForbiddenError: If the author targets themselves
            ValidationError: If the text is blank or too long
            UserNotFoundError: If author or recipient is unknown
        """
        if author.user_id == request.recipient_id:
            raise ForbiddenError("You cannot leave feedback for yourself")

        text = request.text.strip()
        if not text:
            raise ValidationError.for_field("text", "Feedback text must not be blank")
        max_length = get_settings().feedback_max_length
        if len(text) > max_length:
            raise ValidationError.for_field("text", f"Feedback text must be at most {max_length} characters")

        users = await self.users.get_many([author.user_id, request.recipient_id])
        if author.user_id not in users:
            raise UserNotFoundError(author.user_id, "Author not found")
        if request.recipient_id not in users:
            raise UserNotFoundError(request.recipient_id, "Recipient not found")

        feedback = await self.feedback_repo.create(
            author_id=author.user_id,
            recipient_id=request.recipient_id,
            text=text,
            ai_polished=bool(request.ai_polished),
        )
        logger.info("Feedback %s recorded from %s to %s", feedback.id, author.user_id, request.recipient_id)
        responses = await self._to_responses([feedback])
        return responses[0]

    async def list_for_user(self, viewer: AuthenticatedUser, target_id: UUID) -> list[FeedbackResponse]:
        """List feedback about a user that the viewer may read.

        The target and the target's direct manager see everything; anyone
        else sees only what they wrote, which is empty for strangers.

        Args:
            viewer: Authenticated principal
            target_id: Feedback recipient

        Returns:
            Readable feedback, newest first

        Raises:
            UserNotFoundError: If the target does not exist
        """
        relationship = await self.resolver.resolve(viewer.user_id, target_id)
        target = await self.users.get(target_id)

        if relationship in (Relationship.SELF, Relationship.MANAGER):
            records = await self.feedback_repo.list_for_recipient(target_id)
        else:
            records = await self.feedback_repo.list_for_recipient(target_id, author_id=viewer.user_id)

        manager_id = target.manager_id if target else None
        readable = [
            record
            for record in records
            if can_read_feedback(viewer.user_id, record.author_id, record.recipient_id, manager_id)
        ]
        return await self._to_responses(readable)

    async def list_authored(self, viewer: AuthenticatedUser) -> list[FeedbackResponse]:
        """List feedback the viewer wrote, newest first."""
        await self._require_user(viewer.user_id)
        return await self._to_responses(await self.feedback_repo.list_by_author(viewer.user_id))

    async def list_received(self, viewer: AuthenticatedUser) -> list[FeedbackResponse]:
        """List feedback about the viewer, newest first."""
        await self._require_user(viewer.user_id)
        return await self._to_responses(await self.feedback_repo.list_for_recipient(viewer.user_id))

    async def _require_user(self, user_id: UUID) -> None:
        if await self.users.get(user_id) is None:
            raise UserNotFoundError(user_id)

    async def _to_responses(self, records: list[FeedbackORM]) -> list[FeedbackResponse]:
        """Attach display names, loading each person's profile at most once."""
        people = [record.author_id for record in records] + [record.recipient_id for record in records]
        profiles = await self.profiles.get_many(people)

        def name_of(user_id: UUID) -> str | None:
            profile = profiles.get(user_id)
            return display_name_of(profile) if profile else None

        return [
            FeedbackResponse(
                id=record.id,
                author_id=record.author_id,
                author_name=name_of(record.author_id),
                recipient_id=record.recipient_id,
                recipient_name=name_of(record.recipient_id),
                text=record.text,
                ai_polished=record.ai_polished,
                created_at=record.created_at,
            )
            for record in records
        ]
