"""Authentication router."""

from typing import Annotated

from fastapi import APIRouter, Depends

from profile_api.dependencies import get_auth_service
from profile_api.models.domain.user import AuthenticatedUser
from profile_api.models.dto.auth import LoginRequest, SwitchUserRequest, TokenResponse, UserInfo
from profile_api.security.auth import get_current_user
from profile_api.services.auth_service import AuthService

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """Exchange email and password for a bearer token."""
    return await auth_service.login(body.email, body.password)


@router.post("/switch-user", response_model=TokenResponse)
async def switch_user(
    body: SwitchUserRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """Issue a token for another user without a password.

    Only available when demo identity switching is enabled.
    """
    return await auth_service.switch_user(body.email)


@router.get("/me", response_model=UserInfo)
async def get_me(
    current_user: Annotated[AuthenticatedUser, Depends(get_current_user)],
) -> UserInfo:
    """Get the authenticated principal."""
    return UserInfo(
        user_id=current_user.user_id,
        email=current_user.email,
        employee_id=current_user.employee_id,
        role=current_user.role,
        manager_id=current_user.manager_id,
    )
