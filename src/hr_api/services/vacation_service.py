"""Vacation service: request, review and manage vacation requests."""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.exceptions import (
    EmployeeNotFoundError,
    InvalidValueError,
    VacationNotAllowedError,
    VacationNotFoundError,
    VacationOverlapError,
)
from hr_api.models.domain.repositories import (
    EmployeeRepositoryProtocol,
    VacationRepositoryProtocol,
)
from hr_api.models.domain.vacation import Vacation, VacationPeriod, VacationStatus
from hr_api.models.dto.vacation import (
    VacationCreate,
    VacationListResponse,
    VacationResponse,
    VacationUpdate,
)
from hr_api.repositories.employee_repository import EmployeeRepository
from hr_api.repositories.vacation_repository import VacationRepository

logger = logging.getLogger(__name__)


class VacationService:
    """Service for vacation request operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo: EmployeeRepositoryProtocol = EmployeeRepository(session)
        self.vacation_repo: VacationRepositoryProtocol = VacationRepository(session)

    async def request_vacation(self, request: VacationCreate) -> VacationResponse:
        """Create a pending vacation request.

        Args:
            request: Vacation request data

        Returns:
            Created vacation request

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            InvalidValueError: If the period is invalid
            VacationNotAllowedError: If the employee has less than 3 months of service
            VacationOverlapError: If the period overlaps a pending or approved request
        """
        employee = await self.employee_repo.get_by_id(request.employee_id)
        if employee is None:
            raise EmployeeNotFoundError(request.employee_id)

        period = VacationPeriod(request.start_date, request.end_date)

        if not employee.is_eligible_for_vacation():
            raise VacationNotAllowedError(employee.vacation_eligibility_date)

        await self._ensure_no_overlap(employee.id, period)

        vacation = Vacation.create(employee.id, period, request.reason)
        await self.vacation_repo.save(vacation)
        logger.info(f"Vacation requested: {vacation.id} for employee {employee.id}")
        return self._build_response(vacation)

    async def get_vacation(self, vacation_id: UUID) -> VacationResponse:
        """Get a vacation request by ID.

        Raises:
            VacationNotFoundError: If the request does not exist
        """
        return self._build_response(await self._get_or_raise(vacation_id))

    async def list_vacations(
        self,
        employee_id: UUID | None = None,
        status: VacationStatus | None = None,
    ) -> VacationListResponse:
        """List vacation requests.

        Args:
            employee_id: Filter by employee
            status: Filter by status

        Returns:
            VacationListResponse
        """
        vacations = await self.vacation_repo.find_filtered(employee_id=employee_id, status=status)
        today = date.today()
        return VacationListResponse(
            items=[self._build_response(v, today) for v in vacations],
            total=len(vacations),
        )

    async def update_vacation(self, vacation_id: UUID, request: VacationUpdate) -> VacationResponse:
        """Edit the reason and/or period of a pending request.

        Args:
            vacation_id: Vacation UUID
            request: Fields to change

        Returns:
            Updated vacation request

        Raises:
            VacationNotFoundError: If the request does not exist
            InvalidStateTransitionError: If the request is no longer pending
            InvalidValueError: If only one date is given or the period is invalid
            VacationOverlapError: If the new period overlaps another request
        """
        vacation = await self._get_or_raise(vacation_id)
        fields = request.model_fields_set

        if "start_date" in fields or "end_date" in fields:
            if request.start_date is None or request.end_date is None:
                raise InvalidValueError("Both start_date and end_date are required to change the period")
            vacation.ensure_period_editable()
            period = VacationPeriod(request.start_date, request.end_date)
            await self._ensure_no_overlap(vacation.employee_id, period, exclude_id=vacation.id)
            vacation.update_period(period)

        if "reason" in fields:
            vacation.update_reason(request.reason)

        await self.vacation_repo.save(vacation)
        return self._build_response(vacation)

    async def approve_vacation(self, vacation_id: UUID) -> VacationResponse:
        """Approve a pending request.

        Raises:
            VacationNotFoundError: If the request does not exist
            InvalidStateTransitionError: If the request is not pending
        """
        vacation = await self._get_or_raise(vacation_id)
        vacation.approve()
        await self.vacation_repo.save(vacation)
        logger.info(f"Vacation approved: {vacation.id}")
        return self._build_response(vacation)

    async def reject_vacation(self, vacation_id: UUID, reason: str) -> VacationResponse:
        """Reject a pending request with a reason.

        Raises:
            VacationNotFoundError: If the request does not exist
            InvalidStateTransitionError: If the request is not pending
            InvalidValueError: If the reason is blank
        """
        vacation = await self._get_or_raise(vacation_id)
        vacation.reject(reason)
        await self.vacation_repo.save(vacation)
        logger.info(f"Vacation rejected: {vacation.id}")
        return self._build_response(vacation)

    async def cancel_vacation(self, vacation_id: UUID) -> VacationResponse:
        """Cancel a request that has not been rejected.

        Raises:
            VacationNotFoundError: If the request does not exist
            InvalidStateTransitionError: If the request was rejected
        """
        vacation = await self._get_or_raise(vacation_id)
        vacation.cancel()
        await self.vacation_repo.save(vacation)
        logger.info(f"Vacation cancelled: {vacation.id}")
        return self._build_response(vacation)

    async def delete_vacation(self, vacation_id: UUID) -> None:
        """Delete a vacation request.

        Raises:
            VacationNotFoundError: If the request does not exist
        """
        vacation = await self._get_or_raise(vacation_id)
        await self.vacation_repo.delete(vacation)
        logger.info(f"Vacation deleted: {vacation.id}")

    async def _get_or_raise(self, vacation_id: UUID) -> Vacation:
        vacation = await self.vacation_repo.get_by_id(vacation_id)
        if vacation is None:
            raise VacationNotFoundError(vacation_id)
        return vacation

    async def _ensure_no_overlap(
        self,
        employee_id: UUID,
        period: VacationPeriod,
        exclude_id: UUID | None = None,
    ) -> None:
        overlapping = await self.vacation_repo.find_overlapping(employee_id, period, exclude_id)
        if overlapping:
            raise VacationOverlapError(overlapping[0].id)

    def _build_response(self, vacation: Vacation, today: date | None = None) -> VacationResponse:
        today = today or date.today()
        return VacationResponse(
            id=vacation.id,
            employee_id=vacation.employee_id,
            start_date=vacation.period.start_date,
            end_date=vacation.period.end_date,
            reason=vacation.reason,
            status=vacation.status,
            days_requested=vacation.days_requested,
            working_days_requested=vacation.working_days_requested,
            approved_at=vacation.approved_at,
            rejection_reason=vacation.rejection_reason,
            is_active=vacation.is_active(today),
            is_upcoming=vacation.is_upcoming(today),
            is_past=vacation.is_past(today),
            created_at=vacation.created_at,
            updated_at=vacation.updated_at,
        )
