"""Authentication service."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from hr_api.config import get_settings
from hr_api.exceptions import InvalidCredentialsError, InvalidValueError
from hr_api.models.domain.repositories import UserRepositoryProtocol
from hr_api.models.domain.shared import Email
from hr_api.models.dto.auth import LoginResponse
from hr_api.repositories.user_repository import UserRepository
from hr_api.security.auth import create_access_token
from hr_api.security.password import get_password_service
from hr_api.services.user_service import build_user_info
from hr_api.utils.security_events import SecurityEventType, log_security_event

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session."""
        self.session = session
        self.user_repo: UserRepositoryProtocol = UserRepository(session)

    async def login(
        self,
        email: str,
        password: str,
        ip_address: str | None = None,
    ) -> LoginResponse:
        """Authenticate with email and password.

        Every failure produces the same error so callers cannot tell an
        unknown account from a wrong password.

        Args:
            email: User email
            password: User password
            ip_address: Client IP address

        Returns:
            LoginResponse with a bearer access token

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        try:
            user_email = Email(email)
        except InvalidValueError:
            get_password_service().consume_check(password)
            self._log_failure(email, ip_address, "malformed_email")
            raise InvalidCredentialsError() from None

        user = await self.user_repo.get_by_email(user_email)
        if user is None:
            get_password_service().consume_check(password)
            self._log_failure(user_email.value, ip_address, "unknown_user")
            raise InvalidCredentialsError()

        if not user.password.verify(password):
            self._log_failure(user_email.value, ip_address, "invalid_password", user.id)
            raise InvalidCredentialsError()

        if not user.is_active:
            self._log_failure(user_email.value, ip_address, "account_disabled", user.id)
            raise InvalidCredentialsError()

        user.record_login()
        await self.user_repo.save(user)

        log_security_event(
            SecurityEventType.LOGIN_SUCCESS,
            actor_id=user.id,
            actor_email=user.email.value,
            ip_address=ip_address,
        )

        settings = get_settings()
        access_token, expires_at = create_access_token(
            user_id=user.id,
            email=user.email.value,
            roles=user.roles,
        )

        return LoginResponse(
            access_token=access_token,
            expires_in=settings.jwt_expiration_seconds,
            expires_at=expires_at,
            user=build_user_info(user),
        )

    def _log_failure(
        self,
        email: str,
        ip_address: str | None,
        reason: str,
        user_id: UUID | None = None,
    ) -> None:
        log_security_event(
            SecurityEventType.LOGIN_FAILED,
            actor_id=user_id,
            actor_email=email,
            ip_address=ip_address,
            reason=reason,
        )
