"""Data Transfer Objects package."""

from hr_api.models.dto.auth import LoginRequest, LoginResponse
from hr_api.models.dto.employee import (
    EmployeeCreate,
    EmployeeCreatedResponse,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from hr_api.models.dto.payroll import PayrollCreate, PayrollListResponse, PayrollResponse
from hr_api.models.dto.user import UserCreateRequest, UserInfo, UserListResponse
from hr_api.models.dto.vacation import (
    VacationCreate,
    VacationListResponse,
    VacationResponse,
    VacationUpdate,
)

__all__ = [
    "EmployeeCreate",
    "EmployeeCreatedResponse",
    "EmployeeListResponse",
    "EmployeeResponse",
    "EmployeeUpdate",
    "LoginRequest",
    "LoginResponse",
    "PayrollCreate",
    "PayrollListResponse",
    "PayrollResponse",
    "UserCreateRequest",
    "UserInfo",
    "UserListResponse",
    "VacationCreate",
    "VacationListResponse",
    "VacationResponse",
    "VacationUpdate",
]
