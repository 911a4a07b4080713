"""
MCP request utilities.

Helpers for reading the HTTP request behind an MCP tool call.
"""

from collections.abc import Mapping

from mcp.server.fastmcp import Context

from fusionauth_mcp.auth.token import extract_request_token


def get_request_headers(ctx: Context | None) -> Mapping[str, str]:
    """
    Headers of the HTTP request carrying the current tool call.

    Returns an empty mapping for the stdio transport or outside a request.
    """
    if ctx is None:
        return {}

    try:
        request = ctx.request_context.request
    except (AttributeError, LookupError, ValueError):
        return {}

    headers = getattr(request, "headers", None)
    return headers if headers is not None else {}


def get_access_token(ctx: Context | None) -> str | None:
    """
    Access token presented with the current tool call.

    Priority:
    1. FusionAuth's app.at cookie
    2. Bearer token from the Authorization header
    """
    return extract_request_token(get_request_headers(ctx))
