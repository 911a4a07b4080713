"""Configuration modules for the FusionAuth MCP gateway."""

from fusionauth_mcp.config.logging import configure_logging, get_logger
from fusionauth_mcp.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    "get_logger",
]
