"""Payrolls router."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from hr_api.dependencies import get_payroll_service
from hr_api.models.domain.payroll import PayrollStatus
from hr_api.models.domain.user import UserRole
from hr_api.models.dto.payroll import (
    DeductionsPayload,
    PayrollCreate,
    PayrollListResponse,
    PayrollResponse,
)
from hr_api.security.auth import CurrentUser, get_current_user, require_role
from hr_api.services.payroll_service import PayrollService

router = APIRouter()

RequireAdmin = Annotated[CurrentUser, Depends(require_role(UserRole.ADMIN.value))]
RequireUser = Annotated[CurrentUser, Depends(get_current_user)]
Service = Annotated[PayrollService, Depends(get_payroll_service)]


@router.get("", response_model=PayrollListResponse)
async def list_payrolls(
    current_user: RequireUser,
    payroll_service: Service,
    employee_id: UUID | None = None,
    status: PayrollStatus | None = None,
) -> PayrollListResponse:
    """List payrolls."""
    return await payroll_service.list_payrolls(employee_id=employee_id, status=status)


@router.post("", response_model=PayrollResponse, status_code=status.HTTP_201_CREATED)
async def create_payroll(
    body: PayrollCreate,
    current_user: RequireAdmin,
    payroll_service: Service,
) -> PayrollResponse:
    """Create a payroll for an employee and period."""
    return await payroll_service.create_payroll(body)


@router.get("/{payroll_id}", response_model=PayrollResponse)
async def get_payroll(
    payroll_id: UUID,
    current_user: RequireUser,
    payroll_service: Service,
) -> PayrollResponse:
    """Get a payroll."""
    return await payroll_service.get_payroll(payroll_id)


@router.put("/{payroll_id}/deductions", response_model=PayrollResponse)
async def update_deductions(
    payroll_id: UUID,
    body: DeductionsPayload,
    current_user: RequireAdmin,
    payroll_service: Service,
) -> PayrollResponse:
    """Replace the deductions of a pending payroll."""
    return await payroll_service.update_deductions(payroll_id, body)


@router.post("/{payroll_id}/process", response_model=PayrollResponse)
async def process_payroll(
    payroll_id: UUID,
    current_user: RequireAdmin,
    payroll_service: Service,
) -> PayrollResponse:
    """Process a pending payroll."""
    return await payroll_service.process_payroll(payroll_id)


@router.post("/{payroll_id}/pay", response_model=PayrollResponse)
async def pay_payroll(
    payroll_id: UUID,
    current_user: RequireAdmin,
    payroll_service: Service,
) -> PayrollResponse:
    """Mark a processed payroll as paid."""
    return await payroll_service.pay_payroll(payroll_id)


@router.post("/{payroll_id}/cancel", response_model=PayrollResponse)
async def cancel_payroll(
    payroll_id: UUID,
    current_user: RequireAdmin,
    payroll_service: Service,
) -> PayrollResponse:
    """Cancel a payroll that has not been processed."""
    return await payroll_service.cancel_payroll(payroll_id)


@router.delete("/{payroll_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payroll(
    payroll_id: UUID,
    current_user: RequireAdmin,
    payroll_service: Service,
) -> None:
    """Delete a payroll."""
    await payroll_service.delete_payroll(payroll_id)
