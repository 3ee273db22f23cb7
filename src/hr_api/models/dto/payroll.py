"""Payroll DTOs."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from hr_api.models.domain.payroll import PayrollStatus
from hr_api.models.dto.employee import Amount


class DeductionsPayload(BaseModel):
    """Deduction amounts sent by the client."""

    taxes: Amount = Decimal("0")
    social_security: Amount = Decimal("0")
    health_insurance: Amount = Decimal("0")
    other_deductions: Amount = Decimal("0")
    currency: str | None = Field(
        default=None, max_length=10, description="Defaults to the payroll currency"
    )


class PayrollCreate(BaseModel):
    """DTO for creating a payroll."""

    employee_id: UUID
    period_start: date
    period_end: date
    gross_amount: Amount
    currency: str = Field(default="USD", max_length=10)
    deductions: DeductionsPayload = Field(default_factory=DeductionsPayload)


class DeductionsResponse(BaseModel):
    """Deduction breakdown."""

    taxes: Decimal
    social_security: Decimal
    health_insurance: Decimal
    other_deductions: Decimal
    total: Decimal
    percentage_of_gross: Decimal


class PayrollResponse(BaseModel):
    """Payroll response DTO."""

    id: UUID
    employee_id: UUID
    period_start: date
    period_end: date
    days_in_period: int
    currency: str
    gross_amount: Decimal
    deductions: DeductionsResponse
    net_amount: Decimal
    status: PayrollStatus
    processed_at: datetime | None = None
    paid_at: datetime | None = None
    created_at: datetime
    updated_at: datetime | None = None


class PayrollListResponse(BaseModel):
    """Payroll list response DTO."""

    items: list[PayrollResponse]
    total: int
