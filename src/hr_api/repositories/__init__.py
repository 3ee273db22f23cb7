"""Repositories package."""

from hr_api.repositories.base import BaseRepository
from hr_api.repositories.employee_repository import EmployeeRepository
from hr_api.repositories.payroll_repository import PayrollRepository
from hr_api.repositories.user_repository import UserRepository
from hr_api.repositories.vacation_repository import VacationRepository

__all__ = [
    "BaseRepository",
    "EmployeeRepository",
    "PayrollRepository",
    "UserRepository",
    "VacationRepository",
]
