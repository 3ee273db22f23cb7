"""User ORM model."""

from datetime import datetime

from sqlalchemy import JSON, Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from hr_api.models.orm.base import Base, TimestampMixin, UTCDateTime, UUIDMixin


class UserORM(Base, UUIDMixin, TimestampMixin):
    """User database model with local auth."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(180), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    last_login_at: Mapped[datetime | None] = mapped_column(UTCDateTime(), nullable=True)
