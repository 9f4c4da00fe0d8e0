"""Feedback ORM model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from profile_api.models.orm.base import Base, UUIDMixin, utcnow


class FeedbackORM(Base, UUIDMixin):
    """Peer feedback database model. Append-only."""

    __tablename__ = "feedback"

    author_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    recipient_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    ai_polished: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    __table_args__ = (
        CheckConstraint("author_id <> recipient_id", name="ck_feedback_not_self"),
        Index("idx_feedback_recipient_created", "recipient_id", "created_at"),
        Index("idx_feedback_author_created", "author_id", "created_at"),
    )
