"""Profiles router."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends

from profile_api.dependencies import get_feedback_service, get_profile_service
from profile_api.models.domain.user import AuthenticatedUser
from profile_api.models.dto.feedback import FeedbackResponse
from profile_api.models.dto.profile import ProfileResponse
from profile_api.security.auth import get_current_user
from profile_api.services.feedback_service import FeedbackService
from profile_api.services.profile_service import ProfileService

router = APIRouter()


@router.get("/me", response_model=ProfileResponse, response_model_exclude_unset=True)
async def get_my_profile(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> ProfileResponse:
    """Get the caller's own profile."""
    return await profile_service.get_profile(current_user, current_user.user_id)


@router.get("/{user_id}", response_model=ProfileResponse, response_model_exclude_unset=True)
async def get_profile(
    user_id: UUID,
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> ProfileResponse:
    """Get a profile; attributes the caller may not see are omitted."""
    return await profile_service.get_profile(current_user, user_id)


@router.patch("/{user_id}", response_model=ProfileResponse, response_model_exclude_unset=True)
async def update_profile(
    user_id: UUID,
    patch: Annotated[dict[str, Any], Body()],
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
) -> ProfileResponse:
    """Apply a sparse patch. Null values leave attributes unchanged."""
    return await profile_service.update_profile(current_user, user_id, patch)


@router.get("/{user_id}/feedback", response_model=list[FeedbackResponse])
async def list_profile_feedback(
    user_id: UUID,
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    feedback_service: Annotated[FeedbackService, Depends(get_feedback_service)],
) -> list[FeedbackResponse]:
    """List feedback about a user that the caller may read."""
    return await feedback_service.list_for_user(current_user, user_id)
