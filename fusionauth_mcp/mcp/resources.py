"""
MCP Resources for the FusionAuth MCP gateway.

Exposes connection details and the operation catalog as MCP resources.
"""

import json

from mcp.server.fastmcp import FastMCP

from fusionauth_mcp.config.settings import get_settings
from fusionauth_mcp.services.dispatcher import list_operations


def register_resources(mcp: FastMCP) -> None:
    """Register MCP resources."""

    @mcp.resource(
        uri="fusionauth://config",
        name="FusionAuth Connection",
        description="FusionAuth instance this server talks to. Secrets are never included.",
        mime_type="application/json",
    )
    async def config_resource() -> str:
        """Non-secret connection details as JSON."""
        settings = get_settings()
        return json.dumps(
            {
                "base_url": settings.base_url,
                "tenant_id": settings.tenant_id,
                "application_id": settings.application_id,
                "api_key_configured": bool(settings.api_key),
            },
            indent=2,
        )

    @mcp.resource(
        uri="fusionauth://tools",
        name="Available Operations",
        description="Operations this server can perform against FusionAuth.",
        mime_type="application/json",
    )
    async def tools_resource() -> str:
        """Operation catalog as JSON."""
        operations = list_operations()
        return json.dumps({"operations": operations, "total": len(operations)}, indent=2)
