"""Users router - API accounts, not employees."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from hr_api.dependencies import get_user_service
from hr_api.models.domain.user import UserRole
from hr_api.models.dto.user import UserCreateRequest, UserInfo, UserListResponse
from hr_api.security.auth import CurrentUser, get_current_user, require_role
from hr_api.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserListResponse:
    """List users."""
    return await user_service.list_users()


@router.post("", response_model=UserInfo, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreateRequest,
    current_user: Annotated[CurrentUser, Depends(require_role(UserRole.ADMIN.value))],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserInfo:
    """Create a user."""
    return await user_service.create_user(
        body,
        created_by_id=current_user.id,
        created_by_email=current_user.email,
    )


@router.get("/{user_id}", response_model=UserInfo)
async def get_user(
    user_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserInfo:
    """Get a user."""
    return await user_service.get_user(user_id)
