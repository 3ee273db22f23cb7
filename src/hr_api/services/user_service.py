"""User service for managing API accounts."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.exceptions import UserAlreadyExistsError, UserNotFoundError
from hr_api.models.domain.repositories import UserRepositoryProtocol
from hr_api.models.domain.shared import Email
from hr_api.models.domain.user import HashedPassword, User
from hr_api.models.dto.user import UserCreateRequest, UserInfo, UserListResponse
from hr_api.repositories.user_repository import UserRepository
from hr_api.utils.security_events import SecurityEventType, log_security_event

logger = logging.getLogger(__name__)


def build_user_info(user: User) -> UserInfo:
    """Build UserInfo DTO from a user aggregate."""
    return UserInfo(
        id=user.id,
        email=user.email.value,
        name=user.name,
        roles=list(user.roles),
        is_active=user.is_active,
        last_login_at=user.last_login_at,
        created_at=user.created_at,
    )


class UserService:
    """Service for user operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.user_repo: UserRepositoryProtocol = UserRepository(session)

    async def create_user(
        self,
        request: UserCreateRequest,
        created_by_id: UUID | None = None,
        created_by_email: str | None = None,
    ) -> UserInfo:
        """Create a new user.

        Args:
            request: User creation data
            created_by_id: ID of the admin creating the user
            created_by_email: Email of the admin creating the user

        Returns:
            Created user info

        Raises:
            InvalidValueError: If the email, name or password is invalid
            UserAlreadyExistsError: If the email is already registered
        """
        email = Email(request.email)
        if await self.user_repo.get_by_email(email) is not None:
            raise UserAlreadyExistsError(email.value)

        user = User.create(
            email=email,
            name=request.name,
            password=HashedPassword.from_plain_password(request.password),
            roles=[role.value for role in request.roles],
        )
        await self.user_repo.save(user)

        log_security_event(
            SecurityEventType.USER_CREATED,
            actor_id=created_by_id,
            actor_email=created_by_email,
            subject_id=user.id,
            subject_email=user.email.value,
            roles=user.roles,
        )
        return build_user_info(user)

    async def get_user(self, user_id: UUID) -> UserInfo:
        """Get a user by ID.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return build_user_info(user)

    async def list_users(self) -> UserListResponse:
        """List all users, oldest first."""
        users = await self.user_repo.find_all()
        return UserListResponse(items=[build_user_info(u) for u in users], total=len(users))
