"""Payroll service: create payrolls and drive them through their lifecycle."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.exceptions import (
    EmployeeNotFoundError,
    PayrollAlreadyExistsError,
    PayrollNotFoundError,
)
from hr_api.models.domain.payroll import (
    Deductions,
    GrossSalary,
    Payroll,
    PayrollPeriod,
    PayrollStatus,
)
from hr_api.models.domain.repositories import (
    EmployeeRepositoryProtocol,
    PayrollRepositoryProtocol,
)
from hr_api.models.dto.payroll import (
    DeductionsPayload,
    DeductionsResponse,
    PayrollCreate,
    PayrollListResponse,
    PayrollResponse,
)
from hr_api.repositories.employee_repository import EmployeeRepository
from hr_api.repositories.payroll_repository import PayrollRepository

logger = logging.getLogger(__name__)


def _build_deductions(payload: DeductionsPayload, currency: str) -> Deductions:
    return Deductions(
        taxes=payload.taxes,
        social_security=payload.social_security,
        health_insurance=payload.health_insurance,
        other_deductions=payload.other_deductions,
        currency=payload.currency or currency,
    )


class PayrollService:
    """Service for payroll operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo: EmployeeRepositoryProtocol = EmployeeRepository(session)
        self.payroll_repo: PayrollRepositoryProtocol = PayrollRepository(session)

    async def create_payroll(self, request: PayrollCreate) -> PayrollResponse:
        """Create a pending payroll for an employee and period.

        Args:
            request: Payroll data

        Returns:
            Created payroll

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            InvalidValueError: If the period, amounts or currencies are invalid
            PayrollAlreadyExistsError: If the employee already has a payroll for the period
        """
        employee = await self.employee_repo.get_by_id(request.employee_id)
        if employee is None:
            raise EmployeeNotFoundError(request.employee_id)

        period = PayrollPeriod(request.period_start, request.period_end)
        gross = GrossSalary(request.gross_amount, request.currency)
        deductions = _build_deductions(request.deductions, gross.currency)

        if await self.payroll_repo.find_by_employee_and_period(employee.id, period) is not None:
            raise PayrollAlreadyExistsError(employee.id, period.format())

        payroll = Payroll.create(employee.id, period, gross, deductions)
        await self.payroll_repo.save(payroll)
        logger.info(f"Payroll created: {payroll.id} for employee {employee.id} ({period})")
        return self._build_response(payroll)

    async def get_payroll(self, payroll_id: UUID) -> PayrollResponse:
        """Get a payroll by ID.

        Raises:
            PayrollNotFoundError: If the payroll does not exist
        """
        return self._build_response(await self._get_or_raise(payroll_id))

    async def list_payrolls(
        self,
        employee_id: UUID | None = None,
        status: PayrollStatus | None = None,
    ) -> PayrollListResponse:
        """List payrolls, most recent period first.

        Args:
            employee_id: Filter by employee
            status: Filter by status

        Returns:
            PayrollListResponse
        """
        payrolls = await self.payroll_repo.find_filtered(employee_id=employee_id, status=status)
        return PayrollListResponse(
            items=[self._build_response(p) for p in payrolls],
            total=len(payrolls),
        )

    async def update_deductions(self, payroll_id: UUID, payload: DeductionsPayload) -> PayrollResponse:
        """Replace the deductions of a pending payroll.

        Raises:
            PayrollNotFoundError: If the payroll does not exist
            InvalidStateTransitionError: If the payroll is no longer pending
            InvalidValueError: If the deductions are invalid or exceed the gross salary
        """
        payroll = await self._get_or_raise(payroll_id)
        payroll.update_deductions(_build_deductions(payload, payroll.gross_salary.currency))
        await self.payroll_repo.save(payroll)
        return self._build_response(payroll)

    async def process_payroll(self, payroll_id: UUID) -> PayrollResponse:
        """Mark a pending payroll as processed.

        Raises:
            PayrollNotFoundError: If the payroll does not exist
            InvalidStateTransitionError: If the payroll is not pending
        """
        payroll = await self._get_or_raise(payroll_id)
        payroll.process()
        await self.payroll_repo.save(payroll)
        logger.info(f"Payroll processed: {payroll.id}")
        return self._build_response(payroll)

    async def pay_payroll(self, payroll_id: UUID) -> PayrollResponse:
        """Mark a processed payroll as paid.

        Raises:
            PayrollNotFoundError: If the payroll does not exist
            InvalidStateTransitionError: If the payroll is not processed
        """
        payroll = await self._get_or_raise(payroll_id)
        payroll.pay()
        await self.payroll_repo.save(payroll)
        logger.info(f"Payroll paid: {payroll.id}")
        return self._build_response(payroll)

    async def cancel_payroll(self, payroll_id: UUID) -> PayrollResponse:
        """Cancel a payroll that has not been processed.

        Raises:
            PayrollNotFoundError: If the payroll does not exist
            InvalidStateTransitionError: If the payroll is processed or paid
        """
        payroll = await self._get_or_raise(payroll_id)
        payroll.cancel()
        await self.payroll_repo.save(payroll)
        logger.info(f"Payroll cancelled: {payroll.id}")
        return self._build_response(payroll)

    async def delete_payroll(self, payroll_id: UUID) -> None:
        """Delete a payroll.

        Raises:
            PayrollNotFoundError: If the payroll does not exist
        """
        payroll = await self._get_or_raise(payroll_id)
        await self.payroll_repo.delete(payroll)
        logger.info(f"Payroll deleted: {payroll.id}")

    async def _get_or_raise(self, payroll_id: UUID) -> Payroll:
        payroll = await self.payroll_repo.get_by_id(payroll_id)
        if payroll is None:
            raise PayrollNotFoundError(payroll_id)
        return payroll

    def _build_response(self, payroll: Payroll) -> PayrollResponse:
        deductions = payroll.deductions
        return PayrollResponse(
            id=payroll.id,
            employee_id=payroll.employee_id,
            period_start=payroll.period.start_date,
            period_end=payroll.period.end_date,
            days_in_period=payroll.period.days_in_period,
            currency=payroll.gross_salary.currency,
            gross_amount=payroll.gross_salary.amount,
            deductions=DeductionsResponse(
                taxes=deductions.taxes,
                social_security=deductions.social_security,
                health_insurance=deductions.health_insurance,
                other_deductions=deductions.other_deductions,
                total=deductions.total,
                percentage_of_gross=round(deductions.percentage_of(payroll.gross_salary.amount), 2),
            ),
            net_amount=payroll.net_salary.amount,
            status=payroll.status,
            processed_at=payroll.processed_at,
            paid_at=payroll.paid_at,
            created_at=payroll.created_at,
            updated_at=payroll.updated_at,
        )
