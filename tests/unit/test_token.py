"""
Tests for access token extraction and verification.
"""

from unittest.mock import AsyncMock, patch

import pytest

from fusionauth_mcp.auth.token import (
    FusionAuthAccessToken,
    FusionAuthTokenVerifier,
    extract_bearer_token,
    extract_cookie_token,
    extract_request_token,
    verify_fusionauth_token,
)
from fusionauth_mcp.errors import InvalidTokenError
from fusionauth_mcp.models import ToolResult


class TestTokenExtraction:
    """Tests for reading tokens from request headers."""

    def test_bearer(self):
        assert extract_bearer_token("Bearer abc.def") == "abc.def"

    def test_bearer_missing_or_malformed(self):
        assert extract_bearer_token(None) is None
        assert extract_bearer_token("Basic dXNlcjpwYXNz") is None
        assert extract_bearer_token("Bearer   ") is None

    def test_cookie(self):
        assert extract_cookie_token("theme=dark; app.at=cookie-token") == "cookie-token"

    def test_cookie_absent(self):
        assert extract_cookie_token(None) is None
        assert extract_cookie_token("theme=dark") is None

    def test_cookie_after_json_valued_cookie(self):
        header = 'prefs={"theme":"dark","lang":"en"}; app.at=tok.abc.def'
        assert extract_cookie_token(header) == "tok.abc.def"

    def test_cookie_after_cookie_with_space(self):
        assert extract_cookie_token("greeting=hello there; app.at=tok.abc.def") == "tok.abc.def"

    def test_cookie_among_browser_cookies_in_request(self):
        headers = {
            "cookie": '_ga=GA1.1.42; cart={"items":[1,2]}; app.at=tok.abc.def',
            "authorization": "Bearer from-header",
        }
        assert extract_request_token(headers) == "tok.abc.def"

    def test_cookie_preferred_over_header(self):
        headers = {"cookie": "app.at=from-cookie", "authorization": "Bearer from-header"}
        assert extract_request_token(headers) == "from-cookie"

    def test_header_fallback(self):
        assert extract_request_token({"authorization": "Bearer from-header"}) == "from-header"
        assert extract_request_token({}) is None


class TestVerifyFusionAuthToken:
    """Tests for verify_fusionauth_token."""

    def test_maps_claims(self, sample_claims):
        token = verify_fusionauth_token(sample_claims, "raw-token")

        assert isinstance(token, FusionAuthAccessToken)
        assert token.token == "raw-token"
        assert token.client_id == sample_claims["applicationId"]
        assert token.scopes == ["openid", "offline_access"]
        assert token.expires_at == 1900000000
        assert token.user_id == sample_claims["sub"]

    def test_scopes_list(self, sample_claims):
        claims = {**sample_claims, "scopes": ["read", "write"]}
        del claims["scope"]

        assert verify_fusionauth_token(claims, "t").scopes == ["read", "write"]

    def test_aud_list(self, sample_claims):
        claims = {**sample_claims, "aud": ["aud-1", "aud-2"]}
        del claims["applicationId"]

        assert verify_fusionauth_token(claims, "t").client_id == "aud-1"

    @pytest.mark.parametrize("claim", ["exp", "aud", "scope", "sub"])
    def test_missing_required_claim(self, sample_claims, claim):
        claims = dict(sample_claims)
        del claims[claim]

        assert verify_fusionauth_token(claims, "t") is None

    def test_missing_token_or_claims(self, sample_claims):
        assert verify_fusionauth_token(sample_claims, None) is None
        assert verify_fusionauth_token(None, "t") is None

    @pytest.mark.parametrize("exp", ["soon", [1900000000], {"at": 1}])
    def test_malformed_exp(self, sample_claims, exp):
        assert verify_fusionauth_token({**sample_claims, "exp": exp}, "t") is None

    def test_numeric_string_exp(self, sample_claims):
        token = verify_fusionauth_token({**sample_claims, "exp": "1900000000"}, "t")
        assert token.expires_at == 1900000000

    def test_wrong_type(self, sample_claims):
        with pytest.raises(InvalidTokenError, match="typ=JWT"):
            verify_fusionauth_token({**sample_claims, "typ": "refresh"}, "t")


class TestFusionAuthTokenVerifier:
    """Tests for FusionAuthTokenVerifier."""

    @pytest.mark.asyncio
    async def test_valid_token(self, sample_claims):
        tools = AsyncMock()
        tools.validate_jwt.return_value = ToolResult.ok(sample_claims, status_code=200)

        token = await FusionAuthTokenVerifier(tools).verify_token("raw-token")

        assert token.user_id == sample_claims["sub"]
        tools.validate_jwt.assert_awaited_once_with("raw-token")

    @pytest.mark.asyncio
    async def test_rejected_by_fusionauth(self):
        tools = AsyncMock()
        tools.validate_jwt.return_value = ToolResult.failure("Invalid access token", 401)

        with patch("fusionauth_mcp.auth.token.audit_log") as mock_audit:
            token = await FusionAuthTokenVerifier(tools).verify_token("bad")

        assert token is None
        assert mock_audit.call_args[0][0] == "token.invalid"

    @pytest.mark.asyncio
    async def test_wrong_type_is_rejected(self, sample_claims):
        tools = AsyncMock()
        tools.validate_jwt.return_value = ToolResult.ok({**sample_claims, "typ": "refresh"})

        with patch("fusionauth_mcp.auth.token.audit_log") as mock_audit:
            token = await FusionAuthTokenVerifier(tools).verify_token("raw-token")

        assert token is None
        mock_audit.assert_called_once()

    @pytest.mark.asyncio
    async def test_uses_configured_client(self, configured_client, make_response, sample_claims):
        configured_client.validate_jwt.return_value = make_response(200, {"jwt": sample_claims})

        token = await FusionAuthTokenVerifier().verify_token("raw-token")

        assert token.scopes == ["openid", "offline_access"]
        configured_client.validate_jwt.assert_called_once_with("raw-token")

    @pytest.mark.asyncio
    async def test_malformed_exp_is_rejected(self, sample_claims):
        tools = AsyncMock()
        tools.validate_jwt.return_value = ToolResult.ok({**sample_claims, "exp": "soon"})

        assert await FusionAuthTokenVerifier(tools).verify_token("raw-token") is None

    @pytest.mark.asyncio
    async def test_missing_api_key_rejects_instead_of_raising(self, monkeypatch):
        from fusionauth_mcp.config.settings import reset_settings

        monkeypatch.delenv("FUSIONAUTH_API_KEY")
        reset_settings()

        with patch("fusionauth_mcp.auth.token.audit_log") as mock_audit:
            token = await FusionAuthTokenVerifier().verify_token("any")

        assert token is None
        assert mock_audit.call_args.kwargs["status_code"] == 500
        assert "FUSIONAUTH_API_KEY" in mock_audit.call_args.kwargs["error"]
