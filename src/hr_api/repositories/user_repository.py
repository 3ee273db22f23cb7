"""User repository."""

from sqlalchemy import select

from hr_api.models.domain.shared import Email
from hr_api.models.domain.user import HashedPassword, User
from hr_api.models.orm.user import UserORM
from hr_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserORM, User]):
    """Repository for user operations."""

    model = UserORM

    def _to_domain(self, row: UserORM) -> User:
        return User(
            id=row.id,
            email=Email(row.email),
            name=row.name,
            password=HashedPassword(row.password_hash),
            roles=list(row.roles or []),
            is_active=row.is_active,
            last_login_at=row.last_login_at,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _apply(self, row: UserORM, user: User) -> None:
        row.email = user.email.value
        row.name = user.name
        row.password_hash = user.password.value
        row.roles = list(user.roles)
        row.is_active = user.is_active
        row.last_login_at = user.last_login_at
        row.created_at = user.created_at
        row.updated_at = user.updated_at

    async def get_by_email(self, email: Email) -> User | None:
        """Get user by email.

        Args:
            email: User email address

        Returns:
            User or None if not found
        """
        result = await self.session.execute(
            select(UserORM).where(UserORM.email == email.value)
        )
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    async def get_active_by_email(self, email: Email) -> User | None:
        """Get an active user by email.

        Args:
            email: User email address

        Returns:
            User or None if not found or disabled
        """
        result = await self.session.execute(
            select(UserORM).where(UserORM.email == email.value, UserORM.is_active.is_(True))
        )
        row = result.scalar_one_or_none()
        return self._to_domain(row) if row is not None else None
