"""User domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4

from hr_api.exceptions import InvalidValueError
from hr_api.models.domain.shared import Email, utcnow
from hr_api.security.password import PasswordService, get_password_service


class UserRole(StrEnum):
    """Roles a user can hold."""

    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"


@dataclass(frozen=True)
class HashedPassword:
    """A bcrypt password hash."""

    value: str

    def __post_init__(self) -> None:
        if not get_password_service().is_valid_hash(self.value):
            raise InvalidValueError("Invalid hashed password format")

    @classmethod
    def from_plain_password(cls, plain_password: str) -> "HashedPassword":
        """Hash a plain text password.

        Raises:
            InvalidValueError: If the password is shorter than 8 characters
                or longer than 72 bytes
        """
        if len(plain_password) < PasswordService.MIN_LENGTH:
            raise InvalidValueError(
                f"Password must be at least {PasswordService.MIN_LENGTH} characters long"
            )
        if len(plain_password.encode("utf-8")) > PasswordService.MAX_BYTES:
            raise InvalidValueError(f"Password cannot exceed {PasswordService.MAX_BYTES} bytes")
        return cls(get_password_service().hash_password(plain_password))

    def verify(self, plain_password: str) -> bool:
        return get_password_service().verify_password(plain_password, self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "HashedPassword(***)"


@dataclass
class User:
    """User aggregate. Every user holds ``ROLE_USER``."""

    id: UUID
    email: Email
    name: str
    password: HashedPassword
    roles: list[str] = field(default_factory=lambda: [UserRole.USER.value])
    is_active: bool = True
    last_login_at: datetime | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidValueError("Name cannot be empty")
        self.name = self.name.strip()
        roles = [str(role) for role in self.roles]
        if UserRole.USER.value not in roles:
            roles.insert(0, UserRole.USER.value)
        # Deduplicate while keeping order
        self.roles = list(dict.fromkeys(roles))

    @classmethod
    def create(
        cls,
        email: Email,
        name: str,
        password: HashedPassword,
        roles: list[str] | None = None,
    ) -> "User":
        """Create a new active user."""
        return cls(
            id=uuid4(),
            email=email,
            name=name,
            password=password,
            roles=list(roles) if roles else [UserRole.USER.value],
        )

    def update_email(self, email: Email) -> None:
        self.email = email
        self._touch()

    def update_password(self, password: HashedPassword) -> None:
        self.password = password
        self._touch()

    def add_role(self, role: str) -> None:
        if role not in self.roles:
            self.roles.append(role)
            self._touch()

    def remove_role(self, role: str) -> None:
        if role == UserRole.USER.value:
            return
        if role in self.roles:
            self.roles.remove(role)
            self._touch()

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def record_login(self) -> None:
        self.last_login_at = utcnow()

    def activate(self) -> None:
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    def _touch(self) -> None:
        self.updated_at = utcnow()
