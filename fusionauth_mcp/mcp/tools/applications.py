"""
Application management tools.
"""

from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from fusionauth_mcp.mcp.errors import handle_exception
from fusionauth_mcp.mcp.tools.users import compact
from fusionauth_mcp.services.dispatcher import dispatch


def register_application_tools(mcp: FastMCP) -> None:
    """Register application management tools."""

    @mcp.tool(description="Create a FusionAuth application, optionally with roles.")
    async def create_application(
        name: Annotated[str, Field(description="Application name")],
        roles: Annotated[
            list[dict[str, Any]] | None,
            Field(description="Roles, e.g. [{\"name\": \"admin\", \"description\": \"Administrators\"}]"),
        ] = None,
        oauthConfiguration: Annotated[
            dict[str, Any] | None, Field(description="FusionAuth OAuth configuration object")
        ] = None,
        jwtConfiguration: Annotated[
            dict[str, Any] | None, Field(description="FusionAuth JWT configuration object")
        ] = None,
    ) -> dict[str, Any]:
        """Create an application."""
        try:
            result = await dispatch(
                "create_application",
                compact(
                    name=name,
                    roles=roles,
                    oauthConfiguration=oauthConfiguration,
                    jwtConfiguration=jwtConfiguration,
                ),
            )
            return result.to_dict()
        except Exception as e:
            return handle_exception(e, "create_application")

    @mcp.tool(description="List all FusionAuth applications.")
    async def get_applications() -> dict[str, Any]:
        """List applications."""
        try:
            result = await dispatch("get_applications")
            return result.to_dict()
        except Exception as e:
            return handle_exception(e, "get_applications")
