"""Employee ORM model."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from hr_api.models.orm.base import Base, TimestampMixin, UUIDMixin


class EmployeeORM(Base, UUIDMixin, TimestampMixin):
    """Employee database model."""

    __tablename__ = "employees"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    position: Mapped[str] = mapped_column(String(100), nullable=False)
    salary_amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    salary_currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    hired_at: Mapped[date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        Index("idx_employees_created_at", "created_at"),
    )
