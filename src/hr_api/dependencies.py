"""Centralized dependency injection factories for FastAPI."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.database import get_db
from hr_api.services.auth_service import AuthService
from hr_api.services.employee_service import EmployeeService
from hr_api.services.payroll_service import PayrollService
from hr_api.services.user_service import UserService
from hr_api.services.vacation_service import VacationService


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    """Get AuthService instance."""
    return AuthService(db)


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """Get UserService instance."""
    return UserService(db)


def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    """Get EmployeeService instance."""
    return EmployeeService(db)


def get_vacation_service(db: AsyncSession = Depends(get_db)) -> VacationService:
    """Get VacationService instance."""
    return VacationService(db)


def get_payroll_service(db: AsyncSession = Depends(get_db)) -> PayrollService:
    """Get PayrollService instance."""
    return PayrollService(db)
