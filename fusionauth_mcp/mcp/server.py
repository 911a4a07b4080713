"""
MCP Server for the FusionAuth MCP gateway.

This is the main entry point that wires together all MCP components:
- Tools (users, applications)
- Resources (connection info, operation catalog)
- Prompts (user creation workflows)

Architecture:
- MCP tools are thin wrappers around the dispatcher
- The dispatcher validates input and calls the FusionAuth client adapter
- MCP is mounted in the same FastAPI app as the REST API, or run over stdio
"""

import sys
from urllib.parse import urlparse

from mcp.server.auth.settings import AuthSettings
from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from fusionauth_mcp.auth.token import FusionAuthTokenVerifier
from fusionauth_mcp.config.logging import configure_logging, get_logger
from fusionauth_mcp.config.settings import get_settings
from fusionauth_mcp.constants import SERVICE_NAME
from fusionauth_mcp.mcp.prompts import register_prompts
from fusionauth_mcp.mcp.resources import register_resources
from fusionauth_mcp.mcp.tools import register_all_tools

logger = get_logger(__name__)


def _get_transport_security() -> TransportSecuritySettings | None:
    """Build transport security settings from configuration."""
    settings = get_settings()

    if settings.mcp_allowed_hosts:
        if settings.mcp_allowed_hosts == "*":
            return TransportSecuritySettings(enable_dns_rebinding_protection=False)
        hosts = [h.strip() for h in settings.mcp_allowed_hosts.split(",") if h.strip()]
    else:
        # Derive from public_url
        host = urlparse(settings.public_url).netloc
        hosts = [host]
        base_host = host.rsplit(":", 1)[0] if ":" in host else host
        hosts.append(f"{base_host}:*")
        hosts.extend(["localhost:*", "127.0.0.1:*", "[::1]:*"])

    origins = []
    for h in hosts:
        origins.append(f"http://{h}")
        origins.append(f"https://{h}")

    logger.info("MCP transport security configured", allowed_hosts=hosts)

    return TransportSecuritySettings(
        enable_dns_rebinding_protection=True,
        allowed_hosts=hosts,
        allowed_origins=origins,
    )


def _get_auth() -> dict:
    """FastMCP auth arguments; empty unless bearer auth is required."""
    settings = get_settings()
    if not settings.mcp_require_auth:
        return {}

    logger.info("MCP bearer authentication enabled", issuer=settings.authorization_server_url)
    return {
        "auth": AuthSettings(
            issuer_url=settings.authorization_server_url,
            resource_server_url=f"{settings.public_url.rstrip('/')}/mcp",
        ),
        "token_verifier": FusionAuthTokenVerifier(),
    }


def create_mcp_server() -> FastMCP:
    """Create the MCP server with all tools, resources and prompts registered."""
    server = FastMCP(
        name=SERVICE_NAME,
        instructions=(
            "FusionAuth MCP Server manages users and applications in a FusionAuth instance. "
            "Every tool returns an envelope: {success, data?, error?, statusCode?}. "
            "Use search_users or get_user to find users before updating or deleting them."
        ),
        transport_security=_get_transport_security(),
        **_get_auth(),
    )

    register_all_tools(server)
    register_resources(server)
    register_prompts(server)

    logger.debug("MCP server configured with tools, resources, and prompts")
    return server


mcp = create_mcp_server()


def run_mcp_stdio() -> None:
    """Run the MCP server over stdio. Logs go to stderr."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json, stream=sys.stderr)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_mcp_stdio()
