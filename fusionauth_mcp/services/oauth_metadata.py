"""
OAuth discovery documents.

Builds RFC 9728 protected-resource metadata for this server and relays
FusionAuth's authorization-server metadata. FusionAuth does not serve
/.well-known/oauth-authorization-server (RFC 8414), so the OpenID
configuration document is used in its place; RFC 8414 allows this.
"""

from typing import Any

import httpx

from fusionauth_mcp.config.logging import get_logger
from fusionauth_mcp.config.settings import get_settings
from fusionauth_mcp.constants import (
    ACCESS_TOKEN_TYPE,
    FUSIONAUTH_DOCS_URL,
    JWKS_PATH,
    OPENID_CONFIGURATION_PATH,
    PKCE_CHALLENGE_TYPE,
    TOKEN_ENDPOINT_PATH,
)

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "*",
    "Access-Control-Max-Age": "86400",
}


class MetadataFetchError(Exception):
    """Authorization-server metadata could not be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch authorization server metadata from {url}: {reason}")


def generate_protected_resource_metadata(
    auth_server_url: str,
    resource_url: str,
    properties: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build protected resource metadata.

    Args:
        auth_server_url: Base URL of the authorization server
        resource_url: URL of the protected resource
        properties: Extra members; these override the defaults

    Returns:
        JSON-serializable metadata document
    """
    auth_server_url = auth_server_url.rstrip("/")
    metadata: dict[str, Any] = {
        "resource": resource_url,
        "authorization_servers": [auth_server_url],
        "token_types_supported": [ACCESS_TOKEN_TYPE],
        "token_introspection_endpoint": f"{auth_server_url}{TOKEN_ENDPOINT_PATH}",
        "token_introspection_endpoint_auth_methods_supported": [
            "client_secret_post",
            "client_secret_basic",
        ],
        "jwks_uri": f"{auth_server_url}{JWKS_PATH}",
        "authorization_data_types_supported": ["oauth_scope"],
        "authorization_data_locations_supported": ["header", "body"],
        "key_challenges_supported": [
            {
                "challenge_type": PKCE_CHALLENGE_TYPE,
                "challenge_algs": ["S256"],
            }
        ],
    }
    if properties:
        metadata.update(properties)
    return metadata


def generate_fusionauth_protected_resource_metadata(
    auth_server_url: str,
    resource_url: str,
    properties: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Protected resource metadata for a FusionAuth-backed resource (RFC 9728)."""
    return generate_protected_resource_metadata(
        auth_server_url,
        resource_url,
        properties={"service_documentation": FUSIONAUTH_DOCS_URL, **(properties or {})},
    )


async def fetch_authorization_server_metadata(
    auth_server_url: str,
    timeout: float | None = None,
) -> dict[str, Any]:
    """
    Fetch FusionAuth's OpenID configuration.

    Raises:
        MetadataFetchError: On transport errors, non-200 responses or non-JSON bodies
    """
    url = f"{auth_server_url.rstrip('/')}{OPENID_CONFIGURATION_PATH}"
    timeout = timeout or get_settings().metadata_timeout

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(url, headers={"Accept": "application/json"})
    except httpx.HTTPError as e:
        logger.warning("Authorization server metadata request failed", url=url, error=str(e))
        raise MetadataFetchError(url, str(e)) from e

    if response.status_code != 200:
        raise MetadataFetchError(url, f"HTTP {response.status_code}")

    try:
        return response.json()
    except ValueError as e:
        raise MetadataFetchError(url, "response was not JSON") from e
