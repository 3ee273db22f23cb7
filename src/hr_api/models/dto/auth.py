"""Authentication DTOs."""

from datetime import datetime

from pydantic import BaseModel, Field

from hr_api.models.dto.user import UserInfo


class LoginRequest(BaseModel):
    """Login request."""

    email: str = Field(max_length=255)
    password: str = Field(max_length=128)


class LoginResponse(BaseModel):
    """Login response with a bearer access token."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int
    expires_at: datetime
    user: UserInfo
