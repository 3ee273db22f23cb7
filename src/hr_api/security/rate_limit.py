"""Request rate limiting (slowapi)."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from hr_api.config import Settings, get_settings

# Redis database index reserved for limiter counters
RATE_LIMIT_REDIS_DB = 1


def _storage_uri(settings: Settings) -> str | None:
    """Redis URI for shared counters, or None for per-process memory storage.

    Raises:
        ValueError: If running in production without Redis
    """
    if settings.redis_url is None:
        if settings.environment == "production":
            raise ValueError("REDIS_URL is required in production so limits hold across workers")
        return None
    redis = settings.redis_url
    auth = f"{redis.username or ''}:{redis.password}@" if redis.password else ""
    return f"{redis.scheme}://{auth}{redis.host}:{redis.port or 6379}/{RATE_LIMIT_REDIS_DB}"


def build_limiter(settings: Settings) -> Limiter:
    return Limiter(
        key_func=get_remote_address,
        default_limits=[f"{settings.rate_limit_default}/minute"],
        storage_uri=_storage_uri(settings),
        enabled=settings.rate_limit_enabled,
    )


_settings = get_settings()
limiter = build_limiter(_settings)

AUTH_LOGIN_LIMIT = f"{_settings.rate_limit_auth_login}/minute"
API_DEFAULT_LIMIT = f"{_settings.rate_limit_default}/minute"
