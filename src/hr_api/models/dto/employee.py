"""Employee DTOs."""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field

# Largest value a Numeric(12, 2) column holds
MAX_AMOUNT = Decimal("9999999999.99")

Amount = Annotated[Decimal, Field(le=MAX_AMOUNT)]


class EmployeeCreate(BaseModel):
    """DTO for creating an employee."""

    first_name: str = Field(max_length=100, description="Given name")
    last_name: str = Field(max_length=100, description="Family name")
    email: str = Field(max_length=255, description="Employee email address")
    position: str = Field(max_length=255, description="Job title")
    salary_amount: Amount = Field(description="Annual salary")
    salary_currency: str = Field(default="USD", max_length=10, description="ISO 4217 currency code")
    hired_at: date = Field(description="Hire date")


class EmployeeUpdate(BaseModel):
    """DTO for a partial employee update."""

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    email: str | None = Field(default=None, max_length=255)
    position: str | None = Field(default=None, max_length=255)
    salary_amount: Amount | None = None
    salary_currency: str | None = Field(default=None, max_length=10)


class EmployeeCreatedResponse(BaseModel):
    """Employee returned right after creation (no tenure figures)."""

    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    position: str
    salary_amount: Decimal
    salary_currency: str
    hired_at: date
    created_at: datetime


class EmployeeResponse(EmployeeCreatedResponse):
    """Employee response DTO with tenure-based figures."""

    updated_at: datetime | None = None
    years_of_service: int
    months_of_service: int
    annual_vacation_days: int
    vacation_eligible: bool
    vacation_eligibility_date: date


class EmployeeListResponse(BaseModel):
    """Employee list response DTO."""

    items: list[EmployeeResponse]
    total: int
    page: int
    limit: int
    total_pages: int
