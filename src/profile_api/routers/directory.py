"""Directory router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from profile_api.constants.validation import MAX_DEPARTMENT_LENGTH, MAX_SEARCH_LENGTH
from profile_api.dependencies import get_directory_service
from profile_api.models.domain.user import AuthenticatedUser
from profile_api.models.dto.directory import DirectoryEntry
from profile_api.security.auth import get_current_user
from profile_api.services.directory_service import DirectoryService

router = APIRouter()


@router.get("", response_model=list[DirectoryEntry], response_model_exclude_unset=True)
async def list_directory(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    directory_service: Annotated[DirectoryService, Depends(get_directory_service)],
    search: str | None = Query(default=None, max_length=MAX_SEARCH_LENGTH),
    department: str | None = Query(default=None, max_length=MAX_DEPARTMENT_LENGTH),
    direct_reports_only: bool = Query(default=False, alias="directReportsOnly"),
) -> list[DirectoryEntry]:
    """List active coworkers, excluding the caller."""
    return await directory_service.list_directory(
        current_user,
        search=search,
        department=department,
        direct_reports_only=direct_reports_only,
    )


@router.get("/departments", response_model=list[str])
async def list_departments(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
    directory_service: Annotated[DirectoryService, Depends(get_directory_service)],
) -> list[str]:
    """List departments of active employees."""
    return await directory_service.get_departments()
