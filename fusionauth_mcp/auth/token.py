"""
FusionAuth access token handling.

Maps validated FusionAuth JWT claims onto the MCP SDK's AccessToken, and
provides a TokenVerifier that asks FusionAuth to validate incoming bearer
tokens. Signature checks stay with FusionAuth; nothing here touches keys.
"""

from collections.abc import Mapping
from typing import Any

from mcp.server.auth.provider import AccessToken, TokenVerifier
from starlette.requests import cookie_parser

from fusionauth_mcp.audit import AuditEvent, audit_log
from fusionauth_mcp.config.logging import get_logger
from fusionauth_mcp.constants import ACCESS_TOKEN_COOKIE
from fusionauth_mcp.errors import InvalidTokenError
from fusionauth_mcp.services.fusionauth_client import FusionAuthTools

logger = get_logger(__name__)


class FusionAuthAccessToken(AccessToken):
    """AccessToken carrying the FusionAuth user ID (the `sub` claim)."""

    user_id: str


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Extract the bearer token from an Authorization header.

    Args:
        authorization: The Authorization header value (e.g., "Bearer eyJhbG...")

    Returns:
        The token string if present and valid, otherwise None
    """
    if authorization and authorization.startswith("Bearer "):
        return authorization[7:].strip() or None
    return None


def extract_cookie_token(cookie_header: str | None, name: str = ACCESS_TOKEN_COOKIE) -> str | None:
    """Read FusionAuth's access token cookie (app.at) from a Cookie header."""
    if not cookie_header:
        return None
    return cookie_parser(cookie_header).get(name) or None


def extract_request_token(headers: Mapping[str, str]) -> str | None:
    """Find an access token in the app.at cookie or a bearer Authorization header."""
    return extract_cookie_token(headers.get("cookie")) or extract_bearer_token(
        headers.get("authorization")
    )


def _scopes(claims: Mapping[str, Any]) -> list[str] | None:
    scope = claims.get("scope")
    if isinstance(scope, str):
        return scope.split()
    scopes = claims.get("scopes")
    if isinstance(scopes, list):
        return [str(s) for s in scopes]
    return None


def verify_fusionauth_token(
    claims: Mapping[str, Any] | None, token: str | None
) -> FusionAuthAccessToken | None:
    """
    Turn validated FusionAuth claims into an MCP AccessToken.

    Args:
        claims: Decoded JWT claims, as returned by FusionAuth's validate endpoint
        token: The raw access token

    Returns:
        FusionAuthAccessToken, or None when the token is absent or a
        required claim (exp, aud, scope, sub) is missing or malformed

    Raises:
        InvalidTokenError: If the token declares a type other than JWT
    """
    if not token or not claims:
        return None

    if not claims.get("exp"):
        logger.warning("Access token has no exp claim")
        return None
    try:
        expires_at = int(claims["exp"])
    except (TypeError, ValueError):
        logger.warning("Access token exp claim is not a timestamp", exp=claims["exp"])
        return None

    typ = claims.get("typ")
    if typ is not None and typ != "JWT":
        raise InvalidTokenError("must be a JWT token with typ=JWT in the header")

    audience = claims.get("aud")
    if isinstance(audience, list):
        audience = audience[0] if audience else None
    if not audience:
        logger.warning("Access token has no aud (client ID)")
        return None

    scopes = _scopes(claims)
    if scopes is None:
        logger.warning("Access token has no scopes")
        return None

    subject = claims.get("sub")
    if not subject:
        logger.warning("Access token has no sub (user ID)")
        return None

    return FusionAuthAccessToken(
        token=token,
        client_id=str(claims.get("clientId") or claims.get("applicationId") or audience),
        scopes=scopes,
        expires_at=expires_at,
        user_id=str(subject),
    )


class FusionAuthTokenVerifier(TokenVerifier):
    """Validates bearer tokens for the MCP endpoint through FusionAuth."""

    def __init__(self, tools: FusionAuthTools | None = None):
        self._tools = tools

    @property
    def tools(self) -> FusionAuthTools:
        if self._tools is None:
            self._tools = FusionAuthTools()
        return self._tools

    async def verify_token(self, token: str) -> AccessToken | None:
        result = await self.tools.validate_jwt(token)
        if not result.success:
            audit_log(
                AuditEvent.TOKEN_INVALID,
                success=False,
                status_code=result.status_code,
                error=result.error,
            )
            return None

        try:
            return verify_fusionauth_token(result.data, token)
        except InvalidTokenError as e:
            audit_log(AuditEvent.TOKEN_INVALID, success=False, error=e.message)
            return None
