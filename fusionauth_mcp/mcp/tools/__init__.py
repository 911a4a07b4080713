"""
MCP Tools for the FusionAuth MCP gateway.

This package contains thin tool wrappers that delegate to the dispatcher.
"""

from fusionauth_mcp.mcp.tools.applications import register_application_tools
from fusionauth_mcp.mcp.tools.users import register_user_tools


def register_all_tools(mcp) -> None:
    """Register all MCP tools with the server."""
    register_user_tools(mcp)
    register_application_tools(mcp)


__all__ = [
    "register_all_tools",
    "register_user_tools",
    "register_application_tools",
]
