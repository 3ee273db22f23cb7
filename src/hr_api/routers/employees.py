"""Employees router."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from hr_api.config import get_settings
from hr_api.dependencies import get_employee_service
from hr_api.models.domain.user import UserRole
from hr_api.models.dto.employee import (
    EmployeeCreate,
    EmployeeCreatedResponse,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from hr_api.security.auth import CurrentUser, get_current_user, require_role
from hr_api.services.employee_service import EmployeeService

router = APIRouter()

_settings = get_settings()


@router.get("", response_model=EmployeeListResponse)
async def list_employees(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
    page: int = Query(default=1, ge=1, le=10000),
    limit: int = Query(default=_settings.default_page_size, ge=1, le=_settings.max_page_size),
) -> EmployeeListResponse:
    """List employees, oldest first."""
    return await employee_service.list_employees(page=page, limit=limit)


@router.post("", response_model=EmployeeCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    body: EmployeeCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeCreatedResponse:
    """Create an employee."""
    return await employee_service.create_employee(body)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: UUID,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Get an employee with tenure and vacation allowance figures."""
    return await employee_service.get_employee(employee_id)


@router.patch("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: UUID,
    body: EmployeeUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeResponse:
    """Update an employee."""
    return await employee_service.update_employee(employee_id, body)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: UUID,
    current_user: Annotated[CurrentUser, Depends(require_role(UserRole.ADMIN.value))],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> None:
    """Delete an employee and their vacation and payroll records."""
    await employee_service.delete_employee(employee_id)
