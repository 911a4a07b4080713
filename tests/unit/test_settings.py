"""
Tests for settings.
"""

import pytest
from pydantic import ValidationError

from fusionauth_mcp.config.settings import Settings, get_settings, reset_settings


class TestSettings:
    """Tests for Settings."""

    def test_reads_environment(self):
        settings = get_settings()

        assert settings.api_key == "test-api-key"
        assert settings.base_url == "http://fusionauth.test"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FUSIONAUTH_BASE_URL")
        monkeypatch.delenv("FUSIONAUTH_PUBLIC_URL")

        settings = Settings(_env_file=None)

        assert settings.base_url == "http://localhost:9011"
        assert settings.public_url == "http://localhost:8000"
        assert settings.tenant_id is None
        assert settings.mcp_require_auth is False
        assert settings.max_request_body_size == 1024 * 1024

    def test_fusionauth_url_alias(self, monkeypatch):
        monkeypatch.delenv("FUSIONAUTH_BASE_URL")
        monkeypatch.setenv("FUSIONAUTH_URL", "https://auth.example.com")

        assert Settings(_env_file=None).base_url == "https://auth.example.com"

    def test_rejects_non_http_base_url(self):
        with pytest.raises(ValidationError, match="http"):
            Settings(_env_file=None, base_url="ftp://fusionauth.test")

    def test_authorization_server_url(self, monkeypatch):
        assert Settings(_env_file=None).authorization_server_url == "http://fusionauth.test"

        monkeypatch.setenv("FUSIONAUTH_AUTH_SERVER_URL", "https://login.example.com/")
        assert Settings(_env_file=None).authorization_server_url == "https://login.example.com"

    def test_cors_credentials_only_with_explicit_origins(self):
        assert Settings(_env_file=None).cors_allow_credentials is False
        assert (
            Settings(_env_file=None, cors_origins="https://app.example.com").cors_allow_credentials
            is True
        )

    def test_cached_until_reset(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first

        monkeypatch.setenv("FUSIONAUTH_TENANT_ID", "tenant-1")
        reset_settings()

        assert get_settings().tenant_id == "tenant-1"
