"""
Shared response helpers for the REST routers.
"""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from fusionauth_mcp.config.logging import get_logger
from fusionauth_mcp.models import ToolResult
from fusionauth_mcp.services.dispatcher import dispatch

logger = get_logger(__name__)


class InvalidBodyError(Exception):
    """The request body is not valid JSON."""


async def read_json_body(request: Request) -> Any:
    """Parse the request body, treating an empty body as no arguments."""
    body = await request.body()
    if not body.strip():
        return None
    try:
        return await request.json()
    except ValueError as e:
        raise InvalidBodyError("Request body must be valid JSON") from e


def envelope_response(result: ToolResult, failure_status: int = 400) -> JSONResponse:
    """
    Mirror an envelope as an HTTP response.

    Success returns the payload with status 200. Failure returns
    {"error": message} with the envelope's status code, or failure_status
    when FusionAuth did not report one.
    """
    if result.success:
        return JSONResponse(content=result.data, status_code=200)
    return JSONResponse(
        content={"error": result.error},
        status_code=result.status_code or failure_status,
    )


async def run_operation(name: str, arguments: Any, failure_status: int = 400) -> JSONResponse:
    """Dispatch an operation and convert its envelope to a response."""
    try:
        result = await dispatch(name, arguments)
    except Exception:
        logger.exception("Route handler failed", operation=name)
        return JSONResponse(content={"error": "Internal server error"}, status_code=500)
    return envelope_response(result, failure_status)
