"""
OAuth discovery endpoints.

- GET /.well-known/oauth-protected-resource - RFC 9728 metadata
- GET /.well-known/oauth-protected-resource-fusionauth - same, with FusionAuth documentation link
- GET /.well-known/oauth-authorization-server - FusionAuth's OpenID configuration
"""

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from fusionauth_mcp.config.settings import get_settings
from fusionauth_mcp.services.oauth_metadata import (
    CORS_HEADERS,
    MetadataFetchError,
    fetch_authorization_server_metadata,
    generate_fusionauth_protected_resource_metadata,
    generate_protected_resource_metadata,
)

router = APIRouter(prefix="/.well-known", tags=["oauth"])

METADATA_PATHS = (
    "/oauth-protected-resource",
    "/oauth-protected-resource-fusionauth",
    "/oauth-authorization-server",
)


def _resource_url() -> str:
    return f"{get_settings().public_url.rstrip('/')}/mcp"


@router.get("/oauth-protected-resource")
async def protected_resource_metadata() -> JSONResponse:
    """Protected resource metadata for the MCP endpoint."""
    settings = get_settings()
    metadata = generate_protected_resource_metadata(
        auth_server_url=settings.authorization_server_url,
        resource_url=_resource_url(),
    )
    return JSONResponse(content=metadata, headers=CORS_HEADERS)


@router.get("/oauth-protected-resource-fusionauth")
async def fusionauth_protected_resource_metadata() -> JSONResponse:
    """Protected resource metadata pointing at FusionAuth's documentation."""
    settings = get_settings()
    metadata = generate_fusionauth_protected_resource_metadata(
        auth_server_url=settings.authorization_server_url,
        resource_url=_resource_url(),
    )
    return JSONResponse(content=metadata, headers=CORS_HEADERS)


@router.get("/oauth-authorization-server")
async def authorization_server_metadata() -> JSONResponse:
    """Relay FusionAuth's OpenID configuration as authorization server metadata."""
    settings = get_settings()
    try:
        metadata = await fetch_authorization_server_metadata(settings.authorization_server_url)
    except MetadataFetchError as e:
        return JSONResponse(content={"error": str(e)}, status_code=502, headers=CORS_HEADERS)
    return JSONResponse(content=metadata, headers=CORS_HEADERS)


async def metadata_preflight() -> Response:
    """CORS preflight for the discovery documents."""
    return Response(status_code=204, headers=CORS_HEADERS)


for _path in METADATA_PATHS:
    router.add_api_route(_path, metadata_preflight, methods=["OPTIONS"], include_in_schema=False)
