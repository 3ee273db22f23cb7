"""Domain models package."""

from hr_api.models.domain.employee import Employee, FullName, Position, Salary
from hr_api.models.domain.payroll import (
    Deductions,
    GrossSalary,
    NetSalary,
    Payroll,
    PayrollPeriod,
    PayrollStatus,
)
from hr_api.models.domain.shared import Email
from hr_api.models.domain.user import HashedPassword, User, UserRole
from hr_api.models.domain.vacation import Vacation, VacationPeriod, VacationStatus

__all__ = [
    "Deductions",
    "Email",
    "Employee",
    "FullName",
    "GrossSalary",
    "HashedPassword",
    "NetSalary",
    "Payroll",
    "PayrollPeriod",
    "PayrollStatus",
    "Position",
    "Salary",
    "User",
    "UserRole",
    "Vacation",
    "VacationPeriod",
    "VacationStatus",
]
