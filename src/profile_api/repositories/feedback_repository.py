"""Feedback repository."""

from uuid import UUID

from sqlalchemy import select

from profile_api.models.orm.feedback import FeedbackORM
from profile_api.repositories.base import BaseRepository


class FeedbackRepository(BaseRepository[FeedbackORM]):
    """Repository for feedback operations. Every listing is newest first."""

    model = FeedbackORM

    async def list_for_recipient(
        self,
        recipient_id: UUID,
        author_id: UUID | None = None,
    ) -> list[FeedbackORM]:
        """List feedback about a recipient.

        Args:
            recipient_id: Recipient UUID
            author_id: Restrict to one author

        Returns:
            Feedback records, newest first
        """
        query = select(FeedbackORM).where(FeedbackORM.recipient_id == recipient_id)
        if author_id is not None:
            query = query.where(FeedbackORM.author_id == author_id)
        result = await self.session.execute(query.order_by(FeedbackORM.created_at.desc()))
        return list(result.scalars().all())

    async def list_by_author(self, author_id: UUID) -> list[FeedbackORM]:
        """List feedback written by a user, newest first."""
        result = await self.session.execute(
            select(FeedbackORM)
            .where(FeedbackORM.author_id == author_id)
            .order_by(FeedbackORM.created_at.desc())
        )
        return list(result.scalars().all())
