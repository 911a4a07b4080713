"""
Authentication helpers for the FusionAuth MCP gateway.
"""

from fusionauth_mcp.auth.token import (
    FusionAuthAccessToken,
    FusionAuthTokenVerifier,
    extract_bearer_token,
    extract_cookie_token,
    extract_request_token,
    verify_fusionauth_token,
)

__all__ = [
    "FusionAuthAccessToken",
    "FusionAuthTokenVerifier",
    "extract_bearer_token",
    "extract_cookie_token",
    "extract_request_token",
    "verify_fusionauth_token",
]
