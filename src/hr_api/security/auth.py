"""Authentication and authorization utilities."""

from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta, timezone
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel

from hr_api.config import get_settings
from hr_api.utils.security_events import SecurityEventType, log_security_event


class CurrentUser(BaseModel):
    """Identity carried by a verified access token."""

    id: UUID
    email: str
    roles: list[str]

    def has_role(self, role: str) -> bool:
        return role in self.roles


def create_access_token(user_id: UUID, email: str, roles: list[str]) -> tuple[str, datetime]:
    """Create a JWT access token.

    Args:
        user_id: User UUID
        email: User email
        roles: Roles granted to the user

    Returns:
        Tuple of (JWT token string, expiry timestamp)
    """
    settings = get_settings()
    issued_at = datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(seconds=settings.jwt_expiration_seconds)

    payload = {
        "sub": str(user_id),
        "email": email,
        "roles": list(roles),
        "iat": issued_at,
        "exp": expires_at,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return token, expires_at


def decode_token(token: str) -> dict:
    """Decode and verify a JWT token.

    Args:
        token: JWT token string

    Returns:
        Token payload

    Raises:
        HTTPException: If token is invalid or expired
    """
    settings = get_settings()

    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(HTTPBearer(auto_error=False))] = None,
) -> CurrentUser:
    """Get the current authenticated user from JWT token.

    Args:
        credentials: HTTP Bearer credentials

    Returns:
        CurrentUser built from the token claims

    Raises:
        HTTPException: If authentication fails
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_token(credentials.credentials)

    try:
        return CurrentUser(
            id=UUID(payload["sub"]),
            email=payload["email"],
            roles=list(payload.get("roles", [])),
        )
    except (KeyError, ValueError, TypeError) as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def require_role(role: str) -> Callable[..., Awaitable[CurrentUser]]:
    """Build a dependency that requires the current user to hold a role.

    Args:
        role: Role name, e.g. ``ROLE_ADMIN``

    Returns:
        FastAPI dependency returning the current user
    """

    async def dependency(
        request: Request,
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if not current_user.has_role(role):
            log_security_event(
                SecurityEventType.ACCESS_DENIED,
                actor_id=current_user.id,
                actor_email=current_user.email,
                ip_address=request.client.host if request.client else None,
                required_role=role,
                path=request.url.path,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role",
            )
        return current_user

    return dependency
