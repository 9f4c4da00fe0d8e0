"""Feedback router."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from profile_api.dependencies import get_feedback_polish_service, get_feedback_service
from profile_api.models.domain.user import AuthenticatedUser
from profile_api.models.dto.feedback import (
    FeedbackCreate,
    FeedbackResponse,
    PolishRequest,
    PolishResponse,
)
from profile_api.security.auth import get_current_user
from profile_api.services.feedback_polish_service import FeedbackPolishService
from profile_api.services.feedback_service import FeedbackService

router = APIRouter()


@router.post("", response_model=FeedbackResponse, status_code=status.HTTP_201_CREATED)
async def create_feedback(
    body: FeedbackCreate,
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    feedback_service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> FeedbackResponse:
    """Leave feedback for a coworker."""
    return await feedback_service.create_feedback(current_user, body)


@router.post("/polish", response_model=PolishResponse)
async def polish_feedback(
    body: PolishRequest,
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    polish_service: Annotated[FeedbackPolishService, Depends(get_feedback_polish_service)],
) -> PolishResponse:
    """Rewrite a feedback draft with the AI polisher."""
    return await polish_service.polish(body.text)


@router.get("/authored", response_model=list[FeedbackResponse])
async def list_authored_feedback(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    feedback_service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> list[FeedbackResponse]:
    """List feedback the caller wrote."""
    return await feedback_service.list_authored(current_user)


@router.get("/received", response_model=list[FeedbackResponse])
async def list_received_feedback(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    feedback_service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> list[FeedbackResponse]:
    """List feedback about the caller."""
    return await feedback_service.list_received(current_user)
