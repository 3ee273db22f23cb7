"""Audit trail for authentication and account events.

Events go to the ``security`` logger as one structured record each, so they
can be shipped and retained apart from the application log.
"""

import logging
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any
from uuid import UUID

security_logger = logging.getLogger("security")


class SecurityEventType(StrEnum):
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    ACCESS_DENIED = "access_denied"
    USER_CREATED = "user_created"


# Events recorded at WARNING; everything else is INFO
FAILURE_EVENTS = frozenset({SecurityEventType.LOGIN_FAILED, SecurityEventType.ACCESS_DENIED})


def _identity(user_id: UUID | str | None, email: str | None) -> dict[str, str | None]:
    return {"user_id": str(user_id) if user_id else None, "email": email}


def log_security_event(
    event_type: SecurityEventType,
    *,
    actor_id: UUID | str | None = None,
    actor_email: str | None = None,
    ip_address: str | None = None,
    subject_id: UUID | str | None = None,
    subject_email: str | None = None,
    **details: Any,
) -> None:
    """Record a security event.

    Args:
        event_type: What happened
        actor_id: User performing the action, when known
        actor_email: Email of the acting user, or the email tried at login
        ip_address: Client address
        subject_id: User the action was applied to (account management)
        subject_email: Email of that user
        **details: Event-specific context, e.g. ``reason`` or ``required_role``
    """
    record: dict[str, Any] = {
        "event_type": event_type.value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "actor": {**_identity(actor_id, actor_email), "ip_address": ip_address},
    }
    if subject_id or subject_email:
        record["subject"] = _identity(subject_id, subject_email)
    if details:
        record["details"] = details

    level = logging.WARNING if event_type in FAILURE_EVENTS else logging.INFO
    security_logger.log(level, f"Security event: {event_type.value}", extra={"security_event": record})
