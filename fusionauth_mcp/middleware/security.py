"""
HTTP middleware for the FusionAuth MCP gateway.

Adds security headers to all responses, enforces request size limits, and
tags each request with a correlation ID for logging.
"""

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from fusionauth_mcp.config.logging import set_request_id

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind a request ID to the logging context and echo it back."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER)
        # Client-supplied IDs are accepted only when short and printable
        if incoming and (len(incoming) > 64 or not incoming.isprintable()):
            incoming = None

        request_id = set_request_id(incoming)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared body size exceeds the configured limit."""

    def __init__(self, app, max_body_size: int = 1024 * 1024) -> None:
        """
        Initialize the middleware.

        Args:
            app: The ASGI application
            max_body_size: Maximum allowed request body size in bytes (default 1MB)
        """
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        content_length = request.headers.get("content-length")
        if content_length:
            try:
                length = int(content_length)
            except ValueError:
                return JSONResponse(status_code=400, content={"error": "Invalid Content-Length"})
            if length > self.max_body_size:
                return JSONResponse(
                    status_code=413,
                    content={
                        "error": f"Request body too large. Maximum size is {self.max_body_size} bytes."
                    },
                )

        return await call_next(request)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds security headers to responses."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers.setdefault("Cache-Control", "no-store")

        return response
