"""Payroll ORM model."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Index, Numeric, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from hr_api.models.orm.base import Base, TimestampMixin, UTCDateTime, UUIDMixin


class PayrollORM(Base, UUIDMixin, TimestampMixin):
    """Payroll database model."""

    __tablename__ = "payrolls"

    employee_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )
    period_start: Mapped[date] = mapped_column(Date, nullable=False)
    period_end: Mapped[date] = mapped_column(Date, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    gross_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    taxes: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    social_security: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    health_insurance: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    other_deductions: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=0)
    net_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    processed_at: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True)
    paid_at: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True)

    __table_args__ = (
        UniqueConstraint(
            "employee_id", "period_start", "period_end", name="uq_payrolls_employee_period"
        ),
        Index("idx_payrolls_employee_id", "employee_id"),
        Index("idx_payrolls_status", "status"),
    )
