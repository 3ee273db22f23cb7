"""Authentication router."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from hr_api.dependencies import get_auth_service, get_user_service
from hr_api.models.dto.auth import LoginRequest, LoginResponse
from hr_api.models.dto.user import UserInfo
from hr_api.security.auth import CurrentUser, get_current_user
from hr_api.security.rate_limit import API_DEFAULT_LIMIT, AUTH_LOGIN_LIMIT, limiter
from hr_api.services.auth_service import AuthService
from hr_api.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login_check", response_model=LoginResponse)
@limiter.limit(AUTH_LOGIN_LIMIT)
async def login(
    request: Request,
    body: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """Authenticate with email and password and receive a bearer token."""
    return await auth_service.login(
        email=body.email,
        password=body.password,
        ip_address=request.client.host if request.client else None,
    )


@router.get("/me", response_model=UserInfo)
@limiter.limit(API_DEFAULT_LIMIT)
async def get_me(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserInfo:
    """Get the authenticated user's account."""
    return await user_service.get_user(current_user.id)
