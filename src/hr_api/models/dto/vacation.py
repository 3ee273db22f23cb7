"""Vacation request DTOs."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from hr_api.models.domain.vacation import VacationStatus


class VacationCreate(BaseModel):
    """DTO for requesting a vacation."""

    employee_id: UUID
    start_date: date
    end_date: date
    reason: str | None = Field(default=None, max_length=1000)


class VacationUpdate(BaseModel):
    """DTO for editing a pending vacation request.

    Both dates must be given to change the period.
    """

    start_date: date | None = None
    end_date: date | None = None
    reason: str | None = Field(default=None, max_length=1000)


class VacationRejectRequest(BaseModel):
    """DTO for rejecting a vacation request."""

    reason: str = Field(max_length=1000)


class VacationResponse(BaseModel):
    """Vacation request response DTO."""

    id: UUID
    employee_id: UUID
    start_date: date
    end_date: date
    reason: str | None = None
    status: VacationStatus
    days_requested: int
    working_days_requested: int
    approved_at: datetime | None = None
    rejection_reason: str | None = None
    is_active: bool
    is_upcoming: bool
    is_past: bool
    created_at: datetime
    updated_at: datetime | None = None


class VacationListResponse(BaseModel):
    """Vacation list response DTO."""

    items: list[VacationResponse]
    total: int
