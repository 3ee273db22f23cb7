"""Employee service: create, fetch, list, update and remove employees."""

import logging
import math
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.exceptions import EmployeeAlreadyExistsError, EmployeeNotFoundError
from hr_api.models.domain.employee import Employee, FullName, Position, Salary
from hr_api.models.domain.repositories import (
    EmployeeRepositoryProtocol,
    PayrollRepositoryProtocol,
    VacationRepositoryProtocol,
)
from hr_api.models.domain.shared import Email
from hr_api.models.dto.employee import (
    EmployeeCreate,
    EmployeeCreatedResponse,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from hr_api.repositories.employee_repository import EmployeeRepository
from hr_api.repositories.payroll_repository import PayrollRepository
from hr_api.repositories.vacation_repository import VacationRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for employee operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.employee_repo: EmployeeRepositoryProtocol = EmployeeRepository(session)
        self.vacation_repo: VacationRepositoryProtocol = VacationRepository(session)
        self.payroll_repo: PayrollRepositoryProtocol = PayrollRepository(session)

    async def create_employee(self, request: EmployeeCreate) -> EmployeeCreatedResponse:
        """Create an employee.

        Args:
            request: Employee data

        Returns:
            Created employee without tenure figures

        Raises:
            InvalidValueError: If any field fails validation
            EmployeeAlreadyExistsError: If the email is already in use
        """
        email = Email(request.email)
        employee = Employee.create(
            full_name=FullName(request.first_name, request.last_name),
            email=email,
            position=Position(request.position),
            salary=Salary(request.salary_amount, request.salary_currency),
            hired_at=request.hired_at,
        )

        if await self.employee_repo.get_by_email(email) is not None:
            raise EmployeeAlreadyExistsError(email.value)

        await self.employee_repo.save(employee)
        logger.info(f"Employee created: {employee.id}")
        return self._build_created_response(employee)

    async def get_employee(self, employee_id: UUID) -> EmployeeResponse:
        """Get employee by ID with tenure figures.

        Args:
            employee_id: Employee UUID

        Returns:
            EmployeeResponse

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self._get_or_raise(employee_id)
        return self._build_employee_response(employee)

    async def list_employees(self, page: int = 1, limit: int = 10) -> EmployeeListResponse:
        """List employees ordered by creation time.

        Args:
            page: 1-based page number
            limit: Page size

        Returns:
            EmployeeListResponse with pagination metadata
        """
        page = max(page, 1)
        limit = max(limit, 1)
        total = await self.employee_repo.count()
        employees = await self.employee_repo.find_page(offset=(page - 1) * limit, limit=limit)
        today = date.today()

        return EmployeeListResponse(
            items=[self._build_employee_response(e, today) for e in employees],
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit) if total else 0,
        )

    async def update_employee(self, employee_id: UUID, request: EmployeeUpdate) -> EmployeeResponse:
        """Apply a partial update through the aggregate's behaviour methods.

        Args:
            employee_id: Employee UUID
            request: Fields to change

        Returns:
            Updated EmployeeResponse

        Raises:
            EmployeeNotFoundError: If the employee does not exist
            EmployeeAlreadyExistsError: If the new email belongs to someone else
            InvalidValueError: If any field fails validation
        """
        employee = await self._get_or_raise(employee_id)

        if request.first_name is not None or request.last_name is not None:
            employee.update_full_name(
                FullName(
                    request.first_name if request.first_name is not None else employee.full_name.first_name,
                    request.last_name if request.last_name is not None else employee.full_name.last_name,
                )
            )

        if request.email is not None:
            email = Email(request.email)
            if email != employee.email:
                existing = await self.employee_repo.get_by_email(email)
                if existing is not None and existing.id != employee.id:
                    raise EmployeeAlreadyExistsError(email.value)
                employee.update_email(email)

        if request.position is not None:
            employee.update_position(Position(request.position))

        if request.salary_amount is not None or request.salary_currency is not None:
            employee.update_salary(
                Salary(
                    request.salary_amount if request.salary_amount is not None else employee.salary.amount,
                    request.salary_currency or employee.salary.currency,
                )
            )

        await self.employee_repo.save(employee)
        logger.info(f"Employee updated: {employee.id}")
        return self._build_employee_response(employee)

    async def delete_employee(self, employee_id: UUID) -> None:
        """Delete an employee together with their vacations and payrolls.

        Args:
            employee_id: Employee UUID

        Raises:
            EmployeeNotFoundError: If the employee does not exist
        """
        employee = await self._get_or_raise(employee_id)

        for vacation in await self.vacation_repo.find_by_employee_id(employee.id):
            await self.vacation_repo.delete(vacation)
        for payroll in await self.payroll_repo.find_by_employee_id(employee.id):
            await self.payroll_repo.delete(payroll)

        await self.employee_repo.delete(employee)
        logger.info(f"Employee deleted: {employee.id}")

    async def _get_or_raise(self, employee_id: UUID) -> Employee:
        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def _build_created_response(self, employee: Employee) -> EmployeeCreatedResponse:
        return EmployeeCreatedResponse(
            id=employee.id,
            first_name=employee.full_name.first_name,
            last_name=employee.full_name.last_name,
            full_name=employee.full_name.full_name,
            email=employee.email.value,
            position=employee.position.value,
            salary_amount=employee.salary.amount,
            salary_currency=employee.salary.currency,
            hired_at=employee.hired_at,
            created_at=employee.created_at,
        )

    def _build_employee_response(
        self, employee: Employee, today: date | None = None
    ) -> EmployeeResponse:
        """Build EmployeeResponse DTO including tenure figures.

        Args:
            employee: Employee aggregate
            today: Reference date for tenure figures

        Returns:
            EmployeeResponse DTO
        """
        today = today or date.today()
        return EmployeeResponse(
            **self._build_created_response(employee).model_dump(),
            updated_at=employee.updated_at,
            years_of_service=employee.years_of_service(today),
            months_of_service=employee.months_of_service(today),
            annual_vacation_days=employee.annual_vacation_days(today),
            vacation_eligible=employee.is_eligible_for_vacation(today),
            vacation_eligibility_date=employee.vacation_eligibility_date,
        )
