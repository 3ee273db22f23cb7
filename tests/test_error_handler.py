"""Error mapping and sanitization tests."""

import pytest

from hr_api.exceptions import (
    EmployeeAlreadyExistsError,
    EmployeeNotFoundError,
    InvalidCredentialsError,
    InvalidStateTransitionError,
    InvalidValueError,
    PayrollAlreadyExistsError,
    VacationNotAllowedError,
    VacationOverlapError,
)
from hr_api.middleware.error_handler import (
    build_violations,
    is_safe_error_message,
    sanitize_error_detail,
    status_for_domain_error,
)
from hr_api.utils.secure_logging import sanitize_exception_message


class TestDomainErrorStatus:
    @pytest.mark.parametrize(
        "error,expected",
        [
            (EmployeeNotFoundError("x"), 404),
            (EmployeeAlreadyExistsError("a@example.com"), 409),
            (PayrollAlreadyExistsError(), 409),
            (VacationOverlapError(), 409),
            (InvalidValueError("bad"), 400),
            (VacationNotAllowedError(), 400),
            (InvalidStateTransitionError("nope", "paid"), 422),
            (InvalidCredentialsError(), 401),
        ],
    )
    def test_status_codes(self, error, expected):
        assert status_for_domain_error(error) == expected

    def test_not_found_details(self):
        error = EmployeeNotFoundError("123")
        assert error.message == "Employee not found"
        assert error.details == {"employee_id": "123"}


class TestSanitization:
    def test_safe_messages_pass_through(self):
        assert is_safe_error_message("Invalid or expired token")
        assert sanitize_error_detail("Insufficient role", 403) == "Insufficient role"

    def test_unsafe_messages_are_replaced(self):
        detail = 'relation "employees" does not exist at character 15'
        assert not is_safe_error_message(detail)
        assert sanitize_error_detail(detail, 500) == "Internal server error"
        assert sanitize_error_detail({"x": 1}, 418) == "Request failed"

    def test_exception_messages_hide_connection_strings(self):
        error = Exception("could not connect to postgresql://hr:secret@db:5432/hr")
        assert "secret" not in sanitize_exception_message(error)


class TestViolations:
    def test_locations_are_flattened(self):
        errors = [
            {"loc": ("body", "deductions", "taxes"), "msg": "Input should be a valid decimal"},
            {"loc": ("query", "page"), "msg": "Input should be greater than or equal to 1"},
            {"loc": ("body",), "msg": "Field required"},
        ]
        assert build_violations(errors) == [
            {"field": "deductions.taxes", "message": "Input should be a valid decimal"},
            {"field": "page", "message": "Input should be greater than or equal to 1"},
            {"field": "body", "message": "Field required"},
        ]

    def test_violation_count_is_capped(self):
        errors = [{"loc": ("body", f"f{i}"), "msg": "bad"} for i in range(50)]
        assert len(build_violations(errors)) == 20
