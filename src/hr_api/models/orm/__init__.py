"""SQLAlchemy ORM models package."""

from hr_api.models.orm.base import Base
from hr_api.models.orm.employee import EmployeeORM
from hr_api.models.orm.payroll import PayrollORM
from hr_api.models.orm.user import UserORM
from hr_api.models.orm.vacation import VacationORM

__all__ = [
    "Base",
    "EmployeeORM",
    "PayrollORM",
    "UserORM",
    "VacationORM",
]
