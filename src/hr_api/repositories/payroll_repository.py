"""Payroll repository."""

from uuid import UUID

from sqlalchemy import select

from hr_api.models.domain.payroll import (
    Deductions,
    GrossSalary,
    Payroll,
    PayrollPeriod,
    PayrollStatus,
)
from hr_api.models.orm.payroll import PayrollORM
from hr_api.repositories.base import BaseRepository


class PayrollRepository(BaseRepository[PayrollORM, Payroll]):
    """Repository for payroll operations."""

    model = PayrollORM

    def _to_domain(self, row: PayrollORM) -> Payroll:
        return Payroll(
            id=row.id,
            employee_id=row.employee_id,
            period=PayrollPeriod(row.period_start, row.period_end),
            gross_salary=GrossSalary(row.gross_amount, row.currency),
            deductions=Deductions(
                taxes=row.taxes,
                social_security=row.social_security,
                health_insurance=row.health_insurance,
                other_deductions=row.other_deductions,
                currency=row.currency,
            ),
            status=PayrollStatus(row.status),
            processed_at=row.processed_at,
            paid_at=row.paid_at,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _apply(self, row: PayrollORM, payroll: Payroll) -> None:
        row.employee_id = payroll.employee_id
        row.period_start = payroll.period.start_date
        row.period_end = payroll.period.end_date
        row.currency = payroll.gross_salary.currency
        row.gross_amount = payroll.gross_salary.amount
        row.taxes = payroll.deductions.taxes
        row.social_security = payroll.deductions.social_security
        row.health_insurance = payroll.deductions.health_insurance
        row.other_deductions = payroll.deductions.other_deductions
        row.net_amount = payroll.net_salary.amount
        row.status = payroll.status.value
        row.processed_at = payroll.processed_at
        row.paid_at = payroll.paid_at
        row.created_at = payroll.created_at
        row.updated_at = payroll.updated_at

    async def find_by_employee_id(self, employee_id: UUID) -> list[Payroll]:
        """Get all payrolls of an employee, most recent period first.

        Args:
            employee_id: Employee UUID

        Returns:
            List of payrolls
        """
        return await self._fetch(
            select(PayrollORM)
            .where(PayrollORM.employee_id == employee_id)
            .order_by(PayrollORM.period_start.desc())
        )

    async def find_by_status(self, status: PayrollStatus) -> list[Payroll]:
        """Get payrolls in a given status.

        Args:
            status: Payroll status

        Returns:
            List of payrolls
        """
        return await self._fetch(
            select(PayrollORM)
            .where(PayrollORM.status == status.value)
            .order_by(PayrollORM.period_start.desc())
        )

    async def find_filtered(
        self,
        employee_id: UUID | None = None,
        status: PayrollStatus | None = None,
    ) -> list[Payroll]:
        """Get payrolls matching optional filters.

        Args:
            employee_id: Filter by employee
            status: Filter by status

        Returns:
            List of payrolls
        """
        query = select(PayrollORM)
        if employee_id is not None:
            query = query.where(PayrollORM.employee_id == employee_id)
        if status is not None:
            query = query.where(PayrollORM.status == status.value)
        return await self._fetch(query.order_by(PayrollORM.period_start.desc(), PayrollORM.created_at))

    async def find_by_employee_and_period(
        self, employee_id: UUID, period: PayrollPeriod
    ) -> Payroll | None:
        """Get the payroll of an employee for an exact period.

        Args:
            employee_id: Employee UUID
            period: Payroll period

        Returns:
            Payroll or None if not found
        """
        result = await self.session.execute(
            select(PayrollORM).where(
                PayrollORM.employee_id == employee_id,
                PayrollORM.period_start == period.start_date,
                PayrollORM.period_end == period.end_date,
            )
        )
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row is not None else None
