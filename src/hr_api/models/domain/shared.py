"""Shared value objects and date helpers for the domain layer."""

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from email_validator import EmailNotValidError, validate_email

from hr_api.exceptions import InvalidValueError

# Currencies accepted for payroll amounts
SUPPORTED_CURRENCIES = ("USD", "EUR", "GBP", "JPY", "CAD", "AUD", "CHF", "CNY")

CENT = Decimal("0.01")


def utcnow() -> datetime:
    """Current timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def to_decimal(value: Decimal | int | float | str, field_name: str = "amount") -> Decimal:
    """Convert a numeric input to Decimal without float artefacts.

    Raises:
        InvalidValueError: If the value is not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise InvalidValueError(f"Invalid {field_name}: {value}") from e
    if not result.is_finite():
        raise InvalidValueError(f"Invalid {field_name}: {value}")
    return result


def to_money(value: Decimal | int | float | str, field_name: str = "amount") -> Decimal:
    """Convert to Decimal rounded half-up to cents."""
    return to_decimal(value, field_name).quantize(CENT, rounding=ROUND_HALF_UP)


def add_months(value: date, months: int) -> date:
    """Add calendar months, clamping to the last day of the target month."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def whole_months_between(start: date, end: date) -> int:
    """Number of complete calendar months from start to end (0 if end precedes start)."""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return max(months, 0)


def whole_years_between(start: date, end: date) -> int:
    """Number of complete calendar years from start to end."""
    return whole_months_between(start, end) // 12


@dataclass(frozen=True)
class Email:
    """Syntactically valid, lower-cased email address."""

    value: str

    def __post_init__(self) -> None:
        raw = (self.value or "").strip()
        try:
            validate_email(raw, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidValueError("Invalid email format") from e
        object.__setattr__(self, "value", raw.lower())

    def __str__(self) -> str:
        return self.value
