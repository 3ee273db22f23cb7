"""Vacation requests router."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from hr_api.dependencies import get_vacation_service
from hr_api.models.domain.user import UserRole
from hr_api.models.domain.vacation import VacationStatus
from hr_api.models.dto.vacation import (
    VacationCreate,
    VacationListResponse,
    VacationRejectRequest,
    VacationResponse,
    VacationUpdate,
)
from hr_api.security.auth import CurrentUser, get_current_user, require_role
from hr_api.services.vacation_service import VacationService

router = APIRouter()

RequireAdmin = Annotated[CurrentUser, Depends(require_role(UserRole.ADMIN.value))]
RequireUser = Annotated[CurrentUser, Depends(get_current_user)]
Service = Annotated[VacationService, Depends(get_vacation_service)]


@router.get("", response_model=VacationListResponse)
async def list_vacations(
    current_user: RequireUser,
    vacation_service: Service,
    employee_id: UUID | None = None,
    status: VacationStatus | None = None,
) -> VacationListResponse:
    """List vacation requests."""
    return await vacation_service.list_vacations(employee_id=employee_id, status=status)


@router.post("", response_model=VacationResponse, status_code=status.HTTP_201_CREATED)
async def request_vacation(
    body: VacationCreate,
    current_user: RequireUser,
    vacation_service: Service,
) -> VacationResponse:
    """Request a vacation for an employee."""
    return await vacation_service.request_vacation(body)


@router.get("/{vacation_id}", response_model=VacationResponse)
async def get_vacation(
    vacation_id: UUID,
    current_user: RequireUser,
    vacation_service: Service,
) -> VacationResponse:
    """Get a vacation request."""
    return await vacation_service.get_vacation(vacation_id)


@router.patch("/{vacation_id}", response_model=VacationResponse)
async def update_vacation(
    vacation_id: UUID,
    body: VacationUpdate,
    current_user: RequireUser,
    vacation_service: Service,
) -> VacationResponse:
    """Edit the reason or period of a pending request."""
    return await vacation_service.update_vacation(vacation_id, body)


@router.post("/{vacation_id}/approve", response_model=VacationResponse)
async def approve_vacation(
    vacation_id: UUID,
    current_user: RequireAdmin,
    vacation_service: Service,
) -> VacationResponse:
    """Approve a pending request."""
    return await vacation_service.approve_vacation(vacation_id)


@router.post("/{vacation_id}/reject", response_model=VacationResponse)
async def reject_vacation(
    vacation_id: UUID,
    body: VacationRejectRequest,
    current_user: RequireAdmin,
    vacation_service: Service,
) -> VacationResponse:
    """Reject a pending request."""
    return await vacation_service.reject_vacation(vacation_id, body.reason)


@router.post("/{vacation_id}/cancel", response_model=VacationResponse)
async def cancel_vacation(
    vacation_id: UUID,
    current_user: RequireUser,
    vacation_service: Service,
) -> VacationResponse:
    """Cancel a request."""
    return await vacation_service.cancel_vacation(vacation_id)


@router.delete("/{vacation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vacation(
    vacation_id: UUID,
    current_user: RequireAdmin,
    vacation_service: Service,
) -> None:
    """Delete a vacation request."""
    await vacation_service.delete_vacation(vacation_id)
