"""
Audit logging for identity operations.

Every dispatched operation produces one structured audit event. Emails are
masked so that audit output can be shipped to shared log storage.
"""

import logging
from typing import Any

import structlog

_audit_logger = structlog.wrap_logger(
    logging.getLogger("fusionauth.audit"),
    wrapper_class=structlog.stdlib.BoundLogger,
)


class AuditEvent:
    """Constants for audit event types."""

    # User events
    USER_CREATE = "user.create"
    USER_READ = "user.read"
    USER_SEARCH = "user.search"
    USER_UPDATE = "user.update"
    USER_DELETE = "user.delete"

    # Application events
    APPLICATION_CREATE = "application.create"
    APPLICATION_READ = "application.read"

    # Security events
    TOKEN_INVALID = "token.invalid"

    # Error events
    VALIDATION_ERROR = "validation.error"


def mask_email(email: str) -> str:
    """Mask the local part of an email address, keeping the domain."""
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


def audit_log(
    event: str,
    *,
    operation: str | None = None,
    user_id: str | None = None,
    email: str | None = None,
    application_id: str | None = None,
    success: bool = True,
    status_code: int | None = None,
    error: str | None = None,
    details: dict[str, Any] | None = None,
) -> None:
    """
    Log an audit event.

    Args:
        event: Event type from AuditEvent constants
        operation: Dispatched operation name
        user_id: FusionAuth user ID the operation targeted
        email: Email the operation targeted (masked before logging)
        application_id: FusionAuth application ID the operation targeted
        success: Whether the operation succeeded
        status_code: Status reported by FusionAuth
        error: Optional error message if failed
        details: Optional additional details
    """
    log_data: dict[str, Any] = {
        "audit_event": event,
        "success": success,
    }

    if operation:
        log_data["operation"] = operation
    if user_id:
        log_data["user_id"] = user_id
    if email:
        log_data["email"] = mask_email(email)
    if application_id:
        log_data["application_id"] = application_id
    if status_code is not None:
        log_data["status_code"] = status_code
    if error:
        log_data["error"] = error
    if details:
        log_data["details"] = details

    if success:
        _audit_logger.info(event, **log_data)
    else:
        _audit_logger.warning(event, **log_data)
