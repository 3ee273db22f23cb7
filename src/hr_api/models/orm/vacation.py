"""Vacation request ORM model."""

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from hr_api.models.orm.base import Base, TimestampMixin, UTCDateTime, UUIDMixin


class VacationORM(Base, UUIDMixin, TimestampMixin):
    """Vacation request database model."""

    __tablename__ = "vacations"

    employee_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    approved_at: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True)
    rejection_reason: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("idx_vacations_employee_id", "employee_id"),
        Index("idx_vacations_status", "status"),
        Index("idx_vacations_employee_period", "employee_id", "start_date", "end_date"),
    )
