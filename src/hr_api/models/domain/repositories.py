"""Repository contracts for the domain aggregates.

Services depend on these protocols; ``hr_api.repositories`` provides the
SQLAlchemy implementations.
"""

from typing import Protocol
from uuid import UUID

from hr_api.models.domain.employee import Employee
from hr_api.models.domain.payroll import Payroll, PayrollPeriod, PayrollStatus
from hr_api.models.domain.shared import Email
from hr_api.models.domain.user import User
from hr_api.models.domain.vacation import Vacation, VacationPeriod, VacationStatus


class EmployeeRepositoryProtocol(Protocol):
    async def save(self, employee: Employee) -> None: ...

    async def get_by_id(self, id: UUID) -> Employee | None: ...

    async def get_by_email(self, email: Email) -> Employee | None: ...

    async def find_all(self) -> list[Employee]: ...

    async def find_page(self, offset: int, limit: int) -> list[Employee]: ...

    async def count(self) -> int: ...

    async def delete(self, employee: Employee) -> bool: ...


class VacationRepositoryProtocol(Protocol):
    async def save(self, vacation: Vacation) -> None: ...

    async def get_by_id(self, id: UUID) -> Vacation | None: ...

    async def find_all(self) -> list[Vacation]: ...

    async def find_by_employee_id(self, employee_id: UUID) -> list[Vacation]: ...

    async def find_by_status(self, status: VacationStatus) -> list[Vacation]: ...

    async def find_filtered(
        self,
        employee_id: UUID | None = None,
        status: VacationStatus | None = None,
    ) -> list[Vacation]: ...

    async def find_overlapping(
        self,
        employee_id: UUID,
        period: VacationPeriod,
        exclude_id: UUID | None = None,
    ) -> list[Vacation]: ...

    async def delete(self, vacation: Vacation) -> bool: ...


class PayrollRepositoryProtocol(Protocol):
    async def save(self, payroll: Payroll) -> None: ...

    async def get_by_id(self, id: UUID) -> Payroll | None: ...

    async def find_all(self) -> list[Payroll]: ...

    async def find_by_employee_id(self, employee_id: UUID) -> list[Payroll]: ...

    async def find_by_status(self, status: PayrollStatus) -> list[Payroll]: ...

    async def find_filtered(
        self,
        employee_id: UUID | None = None,
        status: PayrollStatus | None = None,
    ) -> list[Payroll]: ...

    async def find_by_employee_and_period(
        self, employee_id: UUID, period: PayrollPeriod
    ) -> Payroll | None: ...

    async def delete(self, payroll: Payroll) -> bool: ...


class UserRepositoryProtocol(Protocol):
    async def save(self, user: User) -> None: ...

    async def get_by_id(self, id: UUID) -> User | None: ...

    async def get_by_email(self, email: Email) -> User | None: ...

    async def get_active_by_email(self, email: Email) -> User | None: ...

    async def find_all(self) -> list[User]: ...

    async def delete(self, user: User) -> bool: ...
