"""
FusionAuth MCP gateway - main application entry point.

Serves FusionAuth user and application operations as a REST API and as an
MCP server (streamable HTTP at /mcp) from one process.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fusionauth_mcp.config.logging import configure_logging, get_logger
from fusionauth_mcp.config.settings import get_settings
from fusionauth_mcp.constants import SERVICE_VERSION
from fusionauth_mcp.mcp.server import mcp
from fusionauth_mcp.middleware.security import (
    RequestIdMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)
from fusionauth_mcp.routers import applications_router, health_router, oauth_router, users_router
from fusionauth_mcp.services.fusionauth_client import reset_fusionauth_client

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)
    logger.info(
        "Starting FusionAuth MCP gateway",
        host=settings.host,
        port=settings.port,
        fusionauth_url=settings.base_url,
        tenant_id=settings.tenant_id,
    )
    if not settings.api_key:
        logger.warning("FUSIONAUTH_API_KEY is not set; FusionAuth operations will fail")

    async with mcp.session_manager.run():
        logger.info("Started MCP session manager")
        yield

    logger.info("Shutting down FusionAuth MCP gateway")
    reset_fusionauth_client()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="FusionAuth MCP Gateway",
        description="REST API and MCP server for FusionAuth user and application management",
        version=SERVICE_VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    origins = settings.cors_origins.split(",") if settings.cors_origins != "*" else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestSizeLimitMiddleware, max_body_size=settings.max_request_body_size)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(applications_router)
    app.include_router(oauth_router)

    # Mount MCP server at /mcp (streamable-http transport)
    mcp.settings.streamable_http_path = "/"
    app.mount("/mcp", mcp.streamable_http_app())
    logger.info("Mounted MCP server at /mcp")

    return app


app = create_app()


def run():
    """
    Run the gateway.

    Starts the REST API and MCP server on the same port via uvicorn.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json)

    uvicorn.run(
        "fusionauth_mcp.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
