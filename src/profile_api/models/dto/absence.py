"""Absence DTOs."""

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from profile_api.constants.validation import ABSENCE_NOTE_MAX_LENGTH
from profile_api.models.domain.absence import AbsenceStatus, AbsenceType
from profile_api.models.dto.base import ApiModel


class AbsenceCreate(ApiModel):
    """Request body for submitting an absence request."""

    start_date: date
    end_date: date
    type: AbsenceType
    note: str | None = Field(default=None, max_length=ABSENCE_NOTE_MAX_LENGTH)


class AbsenceStatusUpdate(ApiModel):
    """Manager decision. ``action`` is APPROVE or REJECT, any case."""

    action: str | None = None
    note: str | None = Field(default=None, max_length=ABSENCE_NOTE_MAX_LENGTH)


class AbsenceResponse(ApiModel):
    """Absence request response DTO."""

    id: UUID
    user_id: UUID
    manager_id: UUID | None = None
    start_date: date
    end_date: date
    type: AbsenceType
    status: AbsenceStatus
    note: str | None = None
    created_at: datetime
    updated_at: datetime


class SweepResponse(ApiModel):
    """Result of a completion sweep."""

    as_of: date
    completed: int
