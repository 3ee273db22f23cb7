"""Employee repository."""

from sqlalchemy import select

from hr_api.models.domain.employee import Employee, FullName, Position, Salary
from hr_api.models.domain.shared import Email
from hr_api.models.orm.employee import EmployeeORM
from hr_api.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[EmployeeORM, Employee]):
    """Repository for employee operations."""

    model = EmployeeORM

    def _to_domain(self, row: EmployeeORM) -> Employee:
        return Employee(
            id=row.id,
            full_name=FullName(row.first_name, row.last_name),
            email=Email(row.email),
            position=Position(row.position),
            salary=Salary(row.salary_amount, row.salary_currency),
            hired_at=row.hired_at,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _apply(self, row: EmployeeORM, employee: Employee) -> None:
        row.first_name = employee.full_name.first_name
        row.last_name = employee.full_name.last_name
        row.email = employee.email.value
        row.position = employee.position.value
        row.salary_amount = employee.salary.amount
        row.salary_currency = employee.salary.currency
        row.hired_at = employee.hired_at
        row.created_at = employee.created_at
        row.updated_at = employee.updated_at

    async def get_by_email(self, email: Email) -> Employee | None:
        """Get employee by email.

        Args:
            email: Employee email address

        Returns:
            Employee or None if not found
        """
        result = await self.session.execute(
            select(EmployeeORM).where(EmployeeORM.email == email.value)
        )
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    async def find_page(self, offset: int = 0, limit: int = 10) -> list[Employee]:
        """Get a page of employees ordered by creation time.

        Args:
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            List of employees
        """
        return await self._fetch(
            select(EmployeeORM)
            .order_by(EmployeeORM.created_at, EmployeeORM.id)
            .offset(offset)
            .limit(limit)
        )
