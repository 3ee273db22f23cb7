"""Vacation request repository."""

from uuid import UUID

from sqlalchemy import select

from hr_api.models.domain.vacation import Vacation, VacationPeriod, VacationStatus
from hr_api.models.orm.vacation import VacationORM
from hr_api.repositories.base import BaseRepository

# Requests in these states block overlapping requests for the same employee
BLOCKING_STATUSES = (VacationStatus.PENDING.value, VacationStatus.APPROVED.value)


class VacationRepository(BaseRepository[VacationORM, Vacation]):
    """Repository for vacation request operations."""

    model = VacationORM

    def _to_domain(self, row: VacationORM) -> Vacation:
        return Vacation(
            id=row.id,
            employee_id=row.employee_id,
            period=VacationPeriod.restore(row.start_date, row.end_date),
            reason=row.reason,
            status=VacationStatus(row.status),
            approved_at=row.approved_at,
            rejection_reason=row.rejection_reason,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _apply(self, row: VacationORM, vacation: Vacation) -> None:
        row.employee_id = vacation.employee_id
        row.start_date = vacation.period.start_date
        row.end_date = vacation.period.end_date
        row.reason = vacation.reason
        row.status = vacation.status.value
        row.approved_at = vacation.approved_at
        row.rejection_reason = vacation.rejection_reason
        row.created_at = vacation.created_at
        row.updated_at = vacation.updated_at

    async def find_by_employee_id(self, employee_id: UUID) -> list[Vacation]:
        """Get all vacation requests of an employee, earliest start first.

        Args:
            employee_id: Employee UUID

        Returns:
            List of vacation requests
        """
        return await self._fetch(
            select(VacationORM)
            .where(VacationORM.employee_id == employee_id)
            .order_by(VacationORM.start_date, VacationORM.created_at)
        )

    async def find_by_status(self, status: VacationStatus) -> list[Vacation]:
        """Get vacation requests in a given status.

        Args:
            status: Vacation status

        Returns:
            List of vacation requests
        """
        return await self._fetch(
            select(VacationORM)
            .where(VacationORM.status == status.value)
            .order_by(VacationORM.start_date, VacationORM.created_at)
        )

    async def find_filtered(
        self,
        employee_id: UUID | None = None,
        status: VacationStatus | None = None,
    ) -> list[Vacation]:
        """Get vacation requests matching optional filters.

        Args:
            employee_id: Filter by employee
            status: Filter by status

        Returns:
            List of vacation requests
        """
        query = select(VacationORM)
        if employee_id is not None:
            query = query.where(VacationORM.employee_id == employee_id)
        if status is not None:
            query = query.where(VacationORM.status == status.value)
        return await self._fetch(query.order_by(VacationORM.start_date, VacationORM.created_at))

    async def find_overlapping(
        self,
        employee_id: UUID,
        period: VacationPeriod,
        exclude_id: UUID | None = None,
    ) -> list[Vacation]:
        """Get pending or approved requests of an employee that overlap a period.

        Args:
            employee_id: Employee UUID
            period: Period to check
            exclude_id: Request to ignore (the one being edited)

        Returns:
            List of overlapping vacation requests
        """
        query = select(VacationORM).where(
            VacationORM.employee_id == employee_id,
            VacationORM.status.in_(BLOCKING_STATUSES),
            VacationORM.start_date <= period.end_date,
            VacationORM.end_date >= period.start_date,
        )
        if exclude_id is not None:
            query = query.where(VacationORM.id != exclude_id)
        return await self._fetch(query)
