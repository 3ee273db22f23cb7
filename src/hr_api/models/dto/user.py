"""User DTOs."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from hr_api.models.domain.user import UserRole


class UserInfo(BaseModel):
    """User info DTO."""

    id: UUID
    email: str
    name: str
    roles: list[str]
    is_active: bool
    last_login_at: datetime | None = None
    created_at: datetime


class UserCreateRequest(BaseModel):
    """User creation request."""

    email: str = Field(max_length=180)
    name: str = Field(max_length=255)
    password: str = Field(max_length=128)
    roles: list[UserRole] = Field(default_factory=list, max_length=10)


class UserListResponse(BaseModel):
    """User list response DTO."""

    items: list[UserInfo]
    total: int
