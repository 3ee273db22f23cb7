"""Employee domain model."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID, uuid4

from hr_api.exceptions import InvalidValueError
from hr_api.models.domain.shared import (
    Email,
    add_months,
    to_money,
    utcnow,
    whole_months_between,
    whole_years_between,
)

MAX_POSITION_LENGTH = 100

# Minimum tenure before an employee may request vacation
VACATION_ELIGIBILITY_MONTHS = 3

# (minimum years of service, annual vacation days), highest tier first
VACATION_DAY_TIERS = ((10, 25), (5, 20), (0, 15))


@dataclass(frozen=True)
class FullName:
    """Employee first and last name."""

    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        first = (self.first_name or "").strip()
        last = (self.last_name or "").strip()
        if not first:
            raise InvalidValueError("First name cannot be empty")
        if not last:
            raise InvalidValueError("Last name cannot be empty")
        object.__setattr__(self, "first_name", first)
        object.__setattr__(self, "last_name", last)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Position:
    """Job title held by an employee."""

    value: str

    def __post_init__(self) -> None:
        title = (self.value or "").strip()
        if not title:
            raise InvalidValueError("Position cannot be empty")
        if len(title) > MAX_POSITION_LENGTH:
            raise InvalidValueError(f"Position cannot exceed {MAX_POSITION_LENGTH} characters")
        object.__setattr__(self, "value", title)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Salary:
    """Non-negative salary amount in a three-letter currency."""

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        amount = to_money(self.amount, "salary amount")
        if amount < 0:
            raise InvalidValueError("Salary amount cannot be negative")
        currency = (self.currency or "").strip()
        if not currency:
            raise InvalidValueError("Currency cannot be empty")
        if len(currency) != 3 or not currency.isalpha():
            raise InvalidValueError("Currency must be a 3-letter code (e.g., USD, EUR)")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", currency.upper())

    def is_greater_than(self, other: "Salary") -> bool:
        """Compare two salaries in the same currency.

        Raises:
            InvalidValueError: If the currencies differ
        """
        if self.currency != other.currency:
            raise InvalidValueError("Cannot compare salaries with different currencies")
        return self.amount > other.amount

    def format(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    def __str__(self) -> str:
        return self.format()


@dataclass
class Employee:
    """Employee aggregate.

    Value objects guard each attribute; behaviour methods replace them and
    touch ``updated_at``. Tenure-based figures take an optional ``today`` so
    callers can evaluate them on a fixed date.
    """

    id: UUID
    full_name: FullName
    email: Email
    position: Position
    salary: Salary
    hired_at: date
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        full_name: FullName,
        email: Email,
        position: Position,
        salary: Salary,
        hired_at: date,
    ) -> "Employee":
        """Create a new employee with a fresh identifier."""
        return cls(
            id=uuid4(),
            full_name=full_name,
            email=email,
            position=position,
            salary=salary,
            hired_at=hired_at,
        )

    def update_full_name(self, full_name: FullName) -> None:
        self.full_name = full_name
        self._touch()

    def update_position(self, position: Position) -> None:
        self.position = position
        self._touch()

    def update_salary(self, salary: Salary) -> None:
        self.salary = salary
        self._touch()

    def update_email(self, email: Email) -> None:
        self.email = email
        self._touch()

    def years_of_service(self, today: date | None = None) -> int:
        return whole_years_between(self.hired_at, today or date.today())

    def months_of_service(self, today: date | None = None) -> int:
        return whole_months_between(self.hired_at, today or date.today())

    def annual_vacation_days(self, today: date | None = None) -> int:
        """Vacation allowance: 15 days, 20 from 5 years, 25 from 10 years of service."""
        years = self.years_of_service(today)
        for min_years, days in VACATION_DAY_TIERS:
            if years >= min_years:
                return days
        return VACATION_DAY_TIERS[-1][1]

    def is_eligible_for_vacation(self, today: date | None = None) -> bool:
        return (today or date.today()) >= self.vacation_eligibility_date

    @property
    def vacation_eligibility_date(self) -> date:
        return add_months(self.hired_at, VACATION_ELIGIBILITY_MONTHS)

    def _touch(self) -> None:
        self.updated_at = utcnow()
