"""
User management tools.

Thin wrappers around the operation dispatcher; every tool returns the result
envelope as its JSON result.
"""

from typing import Annotated, Any

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from fusionauth_mcp.mcp.errors import error_response, handle_exception
from fusionauth_mcp.mcp.session import get_access_token
from fusionauth_mcp.services.dispatcher import dispatch


def compact(**arguments: Any) -> dict[str, Any]:
    """Drop arguments the caller left unset."""
    return {key: value for key, value in arguments.items() if value is not None}


def register_user_tools(mcp: FastMCP) -> None:
    """Register user management tools."""

    @mcp.tool(
        description="Create a new FusionAuth user. Email is required; password, names, username and custom data are optional."
    )
    async def create_user(
        email: Annotated[str, Field(description="Email address of the new user")],
        password: Annotated[
            str | None, Field(description="Password, at least 8 characters")
        ] = None,
        firstName: Annotated[str | None, Field(description="Given name")] = None,
        lastName: Annotated[str | None, Field(description="Family name")] = None,
        username: Annotated[str | None, Field(description="Optional username")] = None,
        data: Annotated[
            dict[str, Any] | None, Field(description="Free-form custom data stored on the user")
        ] = None,
        sendSetPasswordEmail: Annotated[
            bool | None,
            Field(description="Email the user a link to set their password"),
        ] = None,
    ) -> dict[str, Any]:
        """Create a user."""
        try:
            result = await dispatch(
                "create_user",
                compact(
                    email=email,
                    password=password,
                    firstName=firstName,
                    lastName=lastName,
                    username=username,
                    data=data,
                    sendSetPasswordEmail=sendSetPasswordEmail,
                ),
            )
            return result.to_dict()
        except Exception as e:
            return handle_exception(e, "create_user")

    @mcp.tool(description="Get a FusionAuth user by user ID or by email. Provide exactly one.")
    async def get_user(
        userId: Annotated[str | None, Field(description="FusionAuth user ID (UUID)")] = None,
        email: Annotated[str | None, Field(description="Email address")] = None,
    ) -> dict[str, Any]:
        """Retrieve a single user."""
        try:
            result = await dispatch("get_user", compact(userId=userId, email=email))
            return result.to_dict()
        except Exception as e:
            return handle_exception(e, "get_user")

    @mcp.tool(
        description="Search FusionAuth users. Returns up to numberOfResults users (default 25, max 500) and the total match count."
    )
    async def search_users(
        queryString: Annotated[
            str | None,
            Field(description="Elasticsearch query string, e.g. 'email:*@example.com'. Defaults to all users."),
        ] = None,
        numberOfResults: Annotated[
            int | None, Field(description="Page size, between 1 and 500 (default 25)")
        ] = None,
        startRow: Annotated[
            int | None, Field(description="Offset of the first result (default 0)")
        ] = None,
        sortFields: Annotated[
            list[dict[str, Any]] | None,
            Field(description="Sort order, e.g. [{\"name\": \"email\", \"order\": \"asc\"}]"),
        ] = None,
    ) -> dict[str, Any]:
        """Search users by query."""
        try:
            result = await dispatch(
                "search_users",
                compact(
                    queryString=queryString,
                    numberOfResults=numberOfResults,
                    startRow=startRow,
                    sortFields=sortFields,
                ),
            )
            return result.to_dict()
        except Exception as e:
            return handle_exception(e, "search_users")

    @mcp.tool(
        description="Update a FusionAuth user. Only the fields given in `user` are changed."
    )
    async def update_user(
        userId: Annotated[str, Field(description="FusionAuth user ID (UUID)")],
        user: Annotated[
            dict[str, Any],
            Field(description="Fields to change: email, firstName, lastName, username, data"),
        ],
    ) -> dict[str, Any]:
        """Update a user."""
        try:
            result = await dispatch("update_user", {"userId": userId, "user": user})
            return result.to_dict()
        except Exception as e:
            return handle_exception(e, "update_user")

    @mcp.tool(
        description="Delete a FusionAuth user. Deletion is permanent unless hardDelete is false, which deactivates the user instead."
    )
    async def delete_user(
        userId: Annotated[str, Field(description="FusionAuth user ID (UUID)")],
        hardDelete: Annotated[
            bool | None, Field(description="Permanently delete (default true)")
        ] = None,
    ) -> dict[str, Any]:
        """Delete or deactivate a user."""
        try:
            result = await dispatch("delete_user", compact(userId=userId, hardDelete=hardDelete))
            return result.to_dict()
        except Exception as e:
            return handle_exception(e, "delete_user")

    @mcp.tool(
        description="Get data about the FusionAuth user that authorized this request, using the app.at cookie or bearer token."
    )
    async def get_fusionauth_user_data(ctx: Context) -> dict[str, Any]:
        """Look up the calling user from their access token."""
        token = get_access_token(ctx)
        if not token:
            return error_response("No access token found in cookies or Authorization header", 401)

        try:
            result = await dispatch("get_fusionauth_user_data", {"accessToken": token})
            return result.to_dict()
        except Exception as e:
            return handle_exception(e, "get_fusionauth_user_data")
