"""
MCP (Model Context Protocol) server for the FusionAuth MCP gateway.

Exposes FusionAuth user and application operations as tools, using the
native MCP Python SDK. The tools are thin wrappers around the same
dispatcher used by the REST API.

Usage:
    # Run standalone over stdio
    python -m fusionauth_mcp.mcp.server

    # Or via CLI
    fusionauth-mcp-stdio
"""

from fusionauth_mcp.mcp.server import create_mcp_server, mcp, run_mcp_stdio

__all__ = ["create_mcp_server", "mcp", "run_mcp_stdio"]
