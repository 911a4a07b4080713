"""
Middleware for the FusionAuth MCP gateway.
"""

from fusionauth_mcp.middleware.security import (
    RequestIdMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)

__all__ = ["RequestIdMiddleware", "RequestSizeLimitMiddleware", "SecurityHeadersMiddleware"]
