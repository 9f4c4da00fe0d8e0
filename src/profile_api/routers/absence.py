"""Absence router."""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from profile_api.dependencies import get_absence_service
from profile_api.models.domain.user import AuthenticatedUser
from profile_api.models.dto.absence import (
    AbsenceCreate,
    AbsenceResponse,
    AbsenceStatusUpdate,
    SweepResponse,
)
from profile_api.security.auth import get_current_user, require_manager
from profile_api.services.absence_service import AbsenceService
from profile_api.utils.dates import service_today

router = APIRouter()


@router.post("", response_model=AbsenceResponse, status_code=status.HTTP_201_CREATED)
async def submit_absence(
    body: AbsenceCreate,
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    absence_service: Annotated[AbsenceService, Depends(get_absence_service)],
) -> AbsenceResponse:
    """Submit an absence request for the caller."""
    return await absence_service.submit(current_user, body)


@router.get("/mine", response_model=list[AbsenceResponse])
async def list_my_absences(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    absence_service: Annotated[AbsenceService, Depends(get_absence_service)],
) -> list[AbsenceResponse]:
    """List the caller's absence requests."""
    return await absence_service.list_mine(current_user)


@router.get("/pending", response_model=list[AbsenceResponse])
async def list_pending_absences(
    current_user: Annotated[AuthenticatedUser, Depends(require_manager)],
    absence_service: Annotated[AbsenceService, Depends(get_absence_service)],
) -> list[AbsenceResponse]:
    """List requests awaiting the calling manager."""
    return await absence_service.list_pending_for_manager(current_user)


@router.post("/sweep", response_model=SweepResponse)
async def run_completion_sweep(
    current_user: Annotated[AuthenticatedUser, Depends(require_manager)],
    absence_service: Annotated[AbsenceService, Depends(get_absence_service)],
    as_of: date | None = Query(default=None, alias="asOf"),
) -> SweepResponse:
    """Complete approved requests that ended before ``asOf`` (default today)."""
    as_of = as_of or service_today()
    completed = await absence_service.sweep_completion(as_of)
    return SweepResponse(as_of=as_of, completed=completed)


@router.patch("/{absence_id}", response_model=AbsenceResponse)
async def update_absence_status(
    absence_id: UUID,
    body: AbsenceStatusUpdate,
    current_user: Annotated[AuthenticatedUser, Depends(require_manager)],
    absence_service: Annotated[AbsenceService, Depends(get_absence_service)],
) -> AbsenceResponse:
    """Approve or reject a pending request."""
    return await absence_service.update_status(current_user, absence_id, body)
