"""
Structured logging for the FusionAuth MCP gateway.

structlog renders JSON in production and a console view in development. Each
HTTP request gets a short correlation ID, and credential-bearing keys are
scrubbed from every event before rendering.
"""

import logging
import sys
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from typing import IO, Any

import structlog

from fusionauth_mcp.constants import SERVICE_NAME

REQUEST_ID_LENGTH = 8
REDACTED = "[REDACTED]"

# Event keys that may carry FusionAuth credentials or user secrets
SENSITIVE_KEYS = frozenset(
    {
        "api_key",
        "access_token",
        "accessToken",
        "authorization",
        "cookie",
        "password",
        "token",
    }
)

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "urllib3": logging.WARNING,
    "asyncio": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "mcp.server.lowlevel.server": logging.WARNING,
}

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    """Get the current request ID from context."""
    return request_id_var.get()


def set_request_id(request_id: str | None = None) -> str:
    """Set the request ID for the current context, generating one if needed."""
    new_id = request_id or uuid.uuid4().hex[:REQUEST_ID_LENGTH]
    request_id_var.set(new_id)
    return new_id


def add_request_id(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor to add request ID to log events."""
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def add_service_name(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor tagging events with the service name."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def redact_secrets(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor replacing credential values with a placeholder."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        if event_dict[key]:
            event_dict[key] = REDACTED
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
    stream: IO[str] | None = None,
) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        json_format: Render JSON; otherwise use the colored console renderer
        stream: Output stream, stdout by default. The stdio MCP transport
            owns stdout, so it passes stderr here.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Callable] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_service_name,
        add_request_id,
        redact_secrets,
    ]
    if json_format:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=log_level,
        force=True,
    )

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, usually named after the calling module."""
    return structlog.get_logger(name)
