"""
Error handling utilities for MCP tools.

Tools always answer with a result envelope; anything unexpected that escapes
the dispatcher is turned into one here.
"""

from typing import Any

from fusionauth_mcp.config.logging import get_logger
from fusionauth_mcp.errors import OperationNotFoundError, ValidationError
from fusionauth_mcp.models import ToolResult

logger = get_logger(__name__)


def error_response(message: str, status_code: int) -> dict[str, Any]:
    """Create a failed envelope."""
    return ToolResult.failure(message, status_code=status_code).to_dict()


def handle_exception(e: Exception, operation: str) -> dict[str, Any]:
    """
    Handle exceptions consistently.

    Known gateway errors keep their message; anything else is logged in full
    and returned with the thrown message attached.
    """
    if isinstance(e, ValidationError):
        return error_response(e.message, 400)

    if isinstance(e, OperationNotFoundError):
        return error_response(e.message, 404)

    logger.exception(f"{operation} failed", exc_info=e)
    return error_response(f"Internal server error: {e}", 500)
