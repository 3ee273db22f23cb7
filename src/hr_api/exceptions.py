"""Domain-specific exceptions for the HR API.

These exceptions provide a clean separation between domain/service-layer errors
and HTTP responses. The error handler middleware maps each family to a status code.
"""

from typing import Any


class HRAPIError(Exception):
    """Base exception for all HR API errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Resource Not Found Errors (404)
# =============================================================================


class NotFoundError(HRAPIError):
    """Base class for resource not found errors."""

    pass


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee cannot be found."""

    def __init__(self, employee_id: Any = None) -> None:
        details = {"employee_id": str(employee_id)} if employee_id else {}
        super().__init__("Employee not found", details)


class VacationNotFoundError(NotFoundError):
    """Raised when a vacation request cannot be found."""

    def __init__(self, vacation_id: Any = None) -> None:
        details = {"vacation_id": str(vacation_id)} if vacation_id else {}
        super().__init__("Vacation not found", details)


class PayrollNotFoundError(NotFoundError):
    """Raised when a payroll cannot be found."""

    def __init__(self, payroll_id: Any = None) -> None:
        details = {"payroll_id": str(payroll_id)} if payroll_id else {}
        super().__init__("Payroll not found", details)


class UserNotFoundError(NotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: Any = None) -> None:
        details = {"user_id": str(user_id)} if user_id else {}
        super().__init__("User not found", details)


# =============================================================================
# Conflict Errors (409)
# =============================================================================


class ConflictError(HRAPIError):
    """Base class for resource conflict errors."""

    pass


class EmployeeAlreadyExistsError(ConflictError):
    """Raised when an employee with the same email already exists."""

    def __init__(self, email: str | None = None) -> None:
        details = {"email": email} if email else {}
        super().__init__("Employee with this email already exists", details)


class UserAlreadyExistsError(ConflictError):
    """Raised when trying to create a user that already exists."""

    def __init__(self, email: str | None = None) -> None:
        details = {"email": email} if email else {}
        super().__init__("User with this email already exists", details)


class PayrollAlreadyExistsError(ConflictError):
    """Raised when a payroll already exists for the employee and period."""

    def __init__(self, employee_id: Any = None, period: str | None = None) -> None:
        details: dict[str, Any] = {}
        if employee_id:
            details["employee_id"] = str(employee_id)
        if period:
            details["period"] = period
        super().__init__("Payroll already exists for this employee and period", details)


class VacationOverlapError(ConflictError):
    """Raised when a vacation request overlaps an existing one."""

    def __init__(self, conflicting_id: Any = None) -> None:
        details = {"conflicting_vacation_id": str(conflicting_id)} if conflicting_id else {}
        super().__init__("Vacation period overlaps an existing request", details)


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(HRAPIError):
    """Base class for validation errors."""

    pass


class InvalidValueError(ValidationError, ValueError):
    """Raised when a value object rejects its input."""

    pass


class VacationNotAllowedError(ValidationError):
    """Raised when an employee is not yet eligible for vacation."""

    def __init__(self, eligibility_date: Any = None) -> None:
        details = {"eligible_from": str(eligibility_date)} if eligibility_date else {}
        super().__init__("Employee is not eligible for vacation yet", details)


# =============================================================================
# State Errors (422)
# =============================================================================


class InvalidStateTransitionError(HRAPIError):
    """Raised when an aggregate cannot move to the requested status."""

    def __init__(self, message: str, current_status: str | None = None) -> None:
        details = {"current_status": current_status} if current_status else {}
        super().__init__(message, details)


# =============================================================================
# Authentication Errors (401)
# =============================================================================


class InvalidCredentialsError(HRAPIError):
    """Raised when login credentials are rejected."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials")
