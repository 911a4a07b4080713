"""
Application settings using pydantic-settings.

Environment variables are prefixed with FUSIONAUTH_.
"""

from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FUSIONAUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def validate_urls(self) -> "Settings":
        """Reject base URLs the vendor client cannot talk to."""
        for name in ("base_url", "public_url"):
            value = getattr(self, name)
            if urlparse(value).scheme not in ("http", "https"):
                raise ValueError(f"FUSIONAUTH_{name.upper()} must be an http(s) URL, got '{value}'")
        return self

    @property
    def cors_allow_credentials(self) -> bool:
        """Allow credentials only when specific origins are configured (not wildcard)."""
        return self.cors_origins != "*"

    @property
    def authorization_server_url(self) -> str:
        """Issuer used in OAuth metadata documents."""
        return (self.auth_server_url or self.base_url).rstrip("/")

    # FusionAuth connection
    api_key: str | None = None
    base_url: str = Field(
        default="http://localhost:9011",
        validation_alias=AliasChoices("FUSIONAUTH_BASE_URL", "FUSIONAUTH_URL"),
    )
    tenant_id: str | None = None
    application_id: str | None = None

    # OAuth metadata
    public_url: str = "http://localhost:8000"
    auth_server_url: str | None = None
    metadata_timeout: float = 10.0

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS settings
    cors_origins: str = "*"

    # MCP transport
    mcp_allowed_hosts: str = ""  # Comma-separated, "*" disables DNS rebinding protection
    mcp_require_auth: bool = False

    # Request limits
    max_request_body_size: int = 1024 * 1024  # 1 MB


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
