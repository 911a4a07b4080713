"""
API routers for the FusionAuth MCP gateway.
"""

from fusionauth_mcp.routers.applications import router as applications_router
from fusionauth_mcp.routers.health import router as health_router
from fusionauth_mcp.routers.oauth import router as oauth_router
from fusionauth_mcp.routers.users import router as users_router

__all__ = [
    "applications_router",
    "health_router",
    "oauth_router",
    "users_router",
]
