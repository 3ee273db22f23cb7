"""Vacation request domain model."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import StrEnum
from uuid import UUID, uuid4

from hr_api.exceptions import InvalidStateTransitionError, InvalidValueError
from hr_api.models.domain.shared import utcnow

MAX_VACATION_DAYS = 365


class VacationStatus(StrEnum):
    """Vacation request status enum."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class VacationPeriod:
    """Inclusive date range of a vacation request."""

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if self.start_date >= self.end_date:
            raise InvalidValueError("End date must be after start date")
        if self.start_date < date.today():
            raise InvalidValueError("Vacation cannot start in the past")
        if self.days_count > MAX_VACATION_DAYS:
            raise InvalidValueError(f"Vacation period cannot exceed {MAX_VACATION_DAYS} days")

    @classmethod
    def restore(cls, start_date: date, end_date: date) -> "VacationPeriod":
        """Rebuild a stored period without re-checking that it starts in the future."""
        period = object.__new__(cls)
        object.__setattr__(period, "start_date", start_date)
        object.__setattr__(period, "end_date", end_date)
        return period

    @property
    def days_count(self) -> int:
        return (self.end_date - self.start_date).days + 1

    @property
    def working_days_count(self) -> int:
        """Monday to Friday days in the period. Public holidays are not excluded."""
        return sum(
            1
            for offset in range(self.days_count)
            if (self.start_date + timedelta(days=offset)).weekday() < 5
        )

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def overlaps(self, other: "VacationPeriod") -> bool:
        return self.start_date <= other.end_date and self.end_date >= other.start_date

    def format(self) -> str:
        return f"{self.start_date.isoformat()} to {self.end_date.isoformat()} ({self.days_count} days)"

    def __str__(self) -> str:
        return self.format()


@dataclass
class Vacation:
    """Vacation request aggregate.

    Only pending requests can be approved, rejected or edited. Rejected
    requests cannot be cancelled.
    """

    id: UUID
    employee_id: UUID
    period: VacationPeriod
    reason: str | None = None
    status: VacationStatus = VacationStatus.PENDING
    approved_at: datetime | None = None
    rejection_reason: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None

    @classmethod
    def create(cls, employee_id: UUID, period: VacationPeriod, reason: str | None = None) -> "Vacation":
        """Create a new pending vacation request."""
        return cls(id=uuid4(), employee_id=employee_id, period=period, reason=reason)

    def approve(self) -> None:
        if self.status != VacationStatus.PENDING:
            raise InvalidStateTransitionError(
                "Only pending vacation requests can be approved", self.status.value
            )
        self.status = VacationStatus.APPROVED
        self.approved_at = utcnow()
        self.rejection_reason = None
        self._touch()

    def reject(self, reason: str) -> None:
        if self.status != VacationStatus.PENDING:
            raise InvalidStateTransitionError(
                "Only pending vacation requests can be rejected", self.status.value
            )
        if not reason or not reason.strip():
            raise InvalidValueError("Rejection reason is required")
        self.status = VacationStatus.REJECTED
        self.rejection_reason = reason.strip()
        self.approved_at = None
        self._touch()

    def cancel(self) -> None:
        if self.status == VacationStatus.REJECTED:
            raise InvalidStateTransitionError(
                "Cannot cancel rejected vacation request", self.status.value
            )
        self.status = VacationStatus.CANCELLED
        self._touch()

    def update_reason(self, reason: str | None) -> None:
        if self.status != VacationStatus.PENDING:
            raise InvalidStateTransitionError(
                "Can only update reason for pending vacation requests", self.status.value
            )
        self.reason = reason
        self._touch()

    def ensure_period_editable(self) -> None:
        if self.status != VacationStatus.PENDING:
            raise InvalidStateTransitionError(
                "Can only update period for pending vacation requests", self.status.value
            )

    def update_period(self, period: VacationPeriod) -> None:
        self.ensure_period_editable()
        self.period = period
        self._touch()

    @property
    def days_requested(self) -> int:
        return self.period.days_count

    @property
    def working_days_requested(self) -> int:
        return self.period.working_days_count

    def is_active(self, today: date | None = None) -> bool:
        """Approved and in progress on the given day."""
        return self.status == VacationStatus.APPROVED and self.period.contains(today or date.today())

    def is_upcoming(self, today: date | None = None) -> bool:
        return self.status == VacationStatus.APPROVED and self.period.start_date > (today or date.today())

    def is_past(self, today: date | None = None) -> bool:
        return self.period.end_date < (today or date.today())

    def overlaps(self, other: "Vacation") -> bool:
        return self.employee_id == other.employee_id and self.period.overlaps(other.period)

    def _touch(self) -> None:
        self.updated_at = utcnow()
