"""Feedback DTOs."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from profile_api.constants.validation import POLISH_MAX_CHARS
from profile_api.models.dto.base import ApiModel


class FeedbackCreate(ApiModel):
    """Request body for creating feedback."""

    recipient_id: UUID
    text: str = Field(min_length=1)
    ai_polished: bool | None = None


class FeedbackResponse(ApiModel):
    """Feedback response DTO."""

    id: UUID
    author_id: UUID
    author_name: str | None = None
    recipient_id: UUID
    recipient_name: str | None = None
    text: str
    ai_polished: bool
    created_at: datetime


class PolishRequest(ApiModel):
    """Request body for polishing feedback text."""

    text: str = Field(max_length=POLISH_MAX_CHARS)


class PolishResponse(ApiModel):
    """Original and rewritten feedback text."""

    original_text: str
    polished_text: str
