"""
Health check endpoints.
"""

from fastapi import APIRouter

from fusionauth_mcp.config.settings import get_settings
from fusionauth_mcp.constants import SERVICE_NAME, SERVICE_VERSION
from fusionauth_mcp.services.dispatcher import OPERATIONS

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    """
    Health check endpoint.

    Reports service status and whether FusionAuth credentials are configured.
    Does not call FusionAuth.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "fusionauth_configured": bool(settings.api_key),
        "operations": len(OPERATIONS),
    }
