"""Payroll domain model.

Money amounts are ``Decimal`` and every monetary value object is bound to one
of the supported currencies. Arithmetic across currencies is refused.
"""

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import StrEnum
from uuid import UUID, uuid4

from hr_api.exceptions import InvalidStateTransitionError, InvalidValueError
from hr_api.models.domain.shared import SUPPORTED_CURRENCIES, to_decimal, to_money, utcnow

MAX_PAYROLL_PERIOD_DAYS = 31
BIWEEKLY_PERIOD_DAYS = 14


def _check_currency(currency: str) -> None:
    if currency not in SUPPORTED_CURRENCIES:
        raise InvalidValueError(f"Invalid currency code: {currency}")


def _check_same_currency(operation: str, left: str, right: str) -> None:
    if left != right:
        raise InvalidValueError(f"Cannot {operation} different currencies: {left} and {right}")


class PayrollStatus(StrEnum):
    """Payroll status enum."""

    PENDING = "pending"
    PROCESSED = "processed"
    PAID = "paid"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class PayrollPeriod:
    """Inclusive date range covered by a payroll."""

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if self.start_date >= self.end_date:
            raise InvalidValueError("End date must be after start date")
        if (self.end_date - self.start_date).days + 1 > MAX_PAYROLL_PERIOD_DAYS:
            raise InvalidValueError(f"Payroll period cannot exceed {MAX_PAYROLL_PERIOD_DAYS} days")

    @classmethod
    def for_month(cls, year: int, month: int) -> "PayrollPeriod":
        """Period from the first to the last day of a calendar month."""
        if not 1 <= month <= 12:
            raise InvalidValueError(f"Invalid month: {month}")
        last_day = calendar.monthrange(year, month)[1]
        return cls(date(year, month, 1), date(year, month, last_day))

    @classmethod
    def biweekly(cls, start_date: date) -> "PayrollPeriod":
        """Fourteen-day period starting on the given day."""
        return cls(start_date, start_date + timedelta(days=BIWEEKLY_PERIOD_DAYS - 1))

    @property
    def days_in_period(self) -> int:
        return (self.end_date - self.start_date).days

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def format(self) -> str:
        return f"{self.start_date.isoformat()} to {self.end_date.isoformat()}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class GrossSalary:
    """Positive gross pay for one payroll period."""

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        amount = to_money(self.amount)
        if amount <= 0:
            raise InvalidValueError("Gross salary amount must be positive")
        _check_currency(self.currency)
        object.__setattr__(self, "amount", amount)

    def add(self, other: "GrossSalary") -> "GrossSalary":
        _check_same_currency("add", self.currency, other.currency)
        return GrossSalary(self.amount + other.amount, self.currency)

    def subtract(self, other: "GrossSalary") -> "GrossSalary":
        _check_same_currency("subtract", self.currency, other.currency)
        return GrossSalary(self.amount - other.amount, self.currency)

    def multiply(self, multiplier: Decimal | int | float) -> "GrossSalary":
        factor = to_decimal(multiplier, "multiplier")
        if factor <= 0:
            raise InvalidValueError("Multiplier must be positive")
        return GrossSalary(self.amount * factor, self.currency)

    def is_greater_than(self, other: "GrossSalary") -> bool:
        _check_same_currency("compare", self.currency, other.currency)
        return self.amount > other.amount

    def is_less_than(self, other: "GrossSalary") -> bool:
        _check_same_currency("compare", self.currency, other.currency)
        return self.amount < other.amount

    def format(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class NetSalary:
    """Positive take-home pay after deductions."""

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        amount = to_money(self.amount)
        if amount <= 0:
            raise InvalidValueError("Net salary amount must be positive")
        _check_currency(self.currency)
        object.__setattr__(self, "amount", amount)

    def is_greater_than(self, other: "NetSalary") -> bool:
        _check_same_currency("compare", self.currency, other.currency)
        return self.amount > other.amount

    def is_less_than(self, other: "NetSalary") -> bool:
        _check_same_currency("compare", self.currency, other.currency)
        return self.amount < other.amount

    def format(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class Deductions:
    """Amounts withheld from gross pay."""

    taxes: Decimal
    social_security: Decimal
    health_insurance: Decimal
    other_deductions: Decimal = Decimal("0")
    currency: str = "USD"

    def __post_init__(self) -> None:
        labels = {
            "taxes": "Taxes",
            "social_security": "Social security",
            "health_insurance": "Health insurance",
            "other_deductions": "Other deductions",
        }
        for name, label in labels.items():
            value = to_money(getattr(self, name), name)
            if value < 0:
                raise InvalidValueError(f"{label} cannot be negative")
            object.__setattr__(self, name, value)
        _check_currency(self.currency)

    @property
    def total(self) -> Decimal:
        return self.taxes + self.social_security + self.health_insurance + self.other_deductions

    def add(self, other: "Deductions") -> "Deductions":
        _check_same_currency("add", self.currency, other.currency)
        return Deductions(
            taxes=self.taxes + other.taxes,
            social_security=self.social_security + other.social_security,
            health_insurance=self.health_insurance + other.health_insurance,
            other_deductions=self.other_deductions + other.other_deductions,
            currency=self.currency,
        )

    def percentage_of(self, gross_amount: Decimal | int | float) -> Decimal:
        """Total deductions as a percentage of a gross amount.

        Raises:
            InvalidValueError: If the gross amount is not positive
        """
        gross = to_decimal(gross_amount, "gross salary")
        if gross <= 0:
            raise InvalidValueError("Gross salary must be positive")
        return self.total / gross * 100

    def format(self) -> str:
        c = self.currency
        return (
            f"Taxes: {self.taxes:.2f} {c}, "
            f"Social Security: {self.social_security:.2f} {c}, "
            f"Health Insurance: {self.health_insurance:.2f} {c}, "
            f"Other: {self.other_deductions:.2f} {c}, "
            f"Total: {self.total:.2f} {c}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass
class Payroll:
    """Payroll aggregate.

    Lifecycle: pending -> processed -> paid, or pending -> cancelled. The net
    salary is always gross minus deductions total.
    """

    id: UUID
    employee_id: UUID
    period: PayrollPeriod
    gross_salary: GrossSalary
    deductions: Deductions
    status: PayrollStatus = PayrollStatus.PENDING
    processed_at: datetime | None = None
    paid_at: datetime | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.net_salary = self._calculate_net_salary(self.deductions)

    @classmethod
    def create(
        cls,
        employee_id: UUID,
        period: PayrollPeriod,
        gross_salary: GrossSalary,
        deductions: Deductions,
    ) -> "Payroll":
        """Create a new pending payroll."""
        return cls(
            id=uuid4(),
            employee_id=employee_id,
            period=period,
            gross_salary=gross_salary,
            deductions=deductions,
        )

    def process(self) -> None:
        if self.status != PayrollStatus.PENDING:
            raise InvalidStateTransitionError(
                "Payroll can only be processed when in pending status", self.status.value
            )
        self.status = PayrollStatus.PROCESSED
        self.processed_at = utcnow()
        self._touch()

    def pay(self) -> None:
        if self.status != PayrollStatus.PROCESSED:
            raise InvalidStateTransitionError(
                "Payroll can only be paid when in processed status", self.status.value
            )
        self.status = PayrollStatus.PAID
        self.paid_at = utcnow()
        self._touch()

    def cancel(self) -> None:
        if self.status in (PayrollStatus.PROCESSED, PayrollStatus.PAID):
            raise InvalidStateTransitionError(
                f"Cannot cancel a {self.status.value} payroll", self.status.value
            )
        self.status = PayrollStatus.CANCELLED
        self._touch()

    def update_deductions(self, deductions: Deductions) -> None:
        if self.status != PayrollStatus.PENDING:
            raise InvalidStateTransitionError(
                "Cannot update deductions for non-pending payroll", self.status.value
            )
        # A rejected update leaves the payroll unchanged
        net_salary = self._calculate_net_salary(deductions)
        self.deductions = deductions
        self.net_salary = net_salary
        self._touch()

    def _calculate_net_salary(self, deductions: Deductions) -> NetSalary:
        _check_same_currency("subtract", self.gross_salary.currency, deductions.currency)
        return NetSalary(self.gross_salary.amount - deductions.total, self.gross_salary.currency)

    def _touch(self) -> None:
        self.updated_at = utcnow()
