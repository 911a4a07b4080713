"""
Service layer for the FusionAuth MCP gateway.

Contains the FusionAuth client adapter, the operation dispatcher, result
normalization and OAuth discovery documents.
"""

from fusionauth_mcp.services.dispatcher import OPERATIONS, dispatch, get_operation
from fusionauth_mcp.services.fusionauth_client import (
    FusionAuthClientFactory,
    FusionAuthTools,
    get_fusionauth_client,
    reset_fusionauth_client,
)
from fusionauth_mcp.services.results import normalize_exception, normalize_response

__all__ = [
    "OPERATIONS",
    "dispatch",
    "get_operation",
    "FusionAuthClientFactory",
    "FusionAuthTools",
    "get_fusionauth_client",
    "reset_fusionauth_client",
    "normalize_exception",
    "normalize_response",
]
