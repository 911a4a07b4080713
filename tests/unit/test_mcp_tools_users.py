"""
Tests for MCP user tools.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from mcp.server.fastmcp import FastMCP

from fusionauth_mcp.mcp.tools.users import compact, register_user_tools

USER_ID = "1f5b3c2a-8d4e-4b6f-9a7c-2e1d0f3b4a5c"


@pytest.fixture
def mcp():
    """Create MCP instance with registered tools."""
    mcp = FastMCP("test")
    register_user_tools(mcp)
    return mcp


def _ctx(headers: dict[str, str]) -> MagicMock:
    """Mock MCP context whose HTTP request carries the given headers."""
    ctx = MagicMock()
    ctx.request_context = MagicMock()
    ctx.request_context.request = MagicMock()
    ctx.request_context.request.headers = headers
    return ctx


class TestCompact:
    """Tests for compact()."""

    def test_drops_none(self):
        assert compact(a=1, b=None, c=False, d="") == {"a": 1, "c": False, "d": ""}


class TestCreateUser:
    """Tests for create_user tool."""

    @pytest.mark.asyncio
    async def test_create_user_minimal(self, mcp, configured_client, make_response, sample_user):
        """Should send only the fields that were provided."""
        configured_client.create_user.return_value = make_response(200, {"user": sample_user})
        create_user = mcp._tool_manager._tools["create_user"].fn

        result = await create_user(email="a@b.com", password="password123")

        assert result["success"] is True
        assert result["data"] == sample_user
        configured_client.create_user.assert_called_once_with(
            {"user": {"email": "a@b.com", "password": "password123"}}
        )

    @pytest.mark.asyncio
    async def test_create_user_invalid_email(self, mcp, configured_client):
        create_user = mcp._tool_manager._tools["create_user"].fn

        result = await create_user(email="not-an-email")

        assert result == {
            "success": False,
            "error": "email: must be a valid email",
            "statusCode": 400,
        }
        configured_client.create_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_user_vendor_error(
        self, mcp, configured_client, make_response, fusionauth_errors
    ):
        configured_client.create_user.return_value = make_response(
            400, error_response=fusionauth_errors
        )
        create_user = mcp._tool_manager._tools["create_user"].fn

        result = await create_user(email="a@b.com")

        assert result["success"] is False
        assert result["error"] == "user.email: A User with email already exists."
        assert "data" not in result


class TestGetUser:
    """Tests for get_user tool."""

    @pytest.mark.asyncio
    async def test_get_user_by_email(self, mcp, configured_client, make_response, sample_user):
        configured_client.retrieve_user_by_email.return_value = make_response(
            200, {"user": sample_user}
        )
        get_user = mcp._tool_manager._tools["get_user"].fn

        result = await get_user(email="jane.doe@example.com")

        assert result["data"]["id"] == sample_user["id"]

    @pytest.mark.asyncio
    async def test_get_user_no_arguments(self, mcp, configured_client):
        get_user = mcp._tool_manager._tools["get_user"].fn

        result = await get_user()

        assert result["success"] is False
        assert result["error"] == "Either userId or email must be provided"


class TestSearchUsers:
    """Tests for search_users tool."""

    @pytest.mark.asyncio
    async def test_search_users_too_many_results(self, mcp, configured_client):
        search_users = mcp._tool_manager._tools["search_users"].fn

        result = await search_users(numberOfResults=501)

        assert result["success"] is False
        assert "between 1 and 500" in result["error"]
        configured_client.search_users_by_query.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_users_returns_page(
        self, mcp, configured_client, make_response, sample_user
    ):
        configured_client.search_users_by_query.return_value = make_response(
            200, {"users": [sample_user], "total": 41}
        )
        search_users = mcp._tool_manager._tools["search_users"].fn

        result = await search_users(queryString="jane", numberOfResults=1)

        assert result["data"]["total"] == 41
        assert len(result["data"]["users"]) == 1


class TestUpdateAndDelete:
    """Tests for update_user and delete_user tools."""

    @pytest.mark.asyncio
    async def test_update_user(self, mcp, configured_client, make_response, sample_user):
        configured_client.patch_user.return_value = make_response(200, {"user": sample_user})
        update_user = mcp._tool_manager._tools["update_user"].fn

        result = await update_user(userId=USER_ID, user={"lastName": "Smith"})

        assert result["success"] is True
        configured_client.patch_user.assert_called_once_with(
            USER_ID, {"user": {"lastName": "Smith"}}
        )

    @pytest.mark.asyncio
    async def test_delete_user_soft(self, mcp, configured_client):
        delete_user = mcp._tool_manager._tools["delete_user"].fn

        result = await delete_user(userId=USER_ID, hardDelete=False)

        assert result["data"] == {"deleted": True, "hardDelete": False}
        configured_client.deactivate_user.assert_called_once_with(USER_ID)

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_envelope(self, mcp):
        """Should never raise out of a tool."""
        delete_user = mcp._tool_manager._tools["delete_user"].fn

        with patch(
            "fusionauth_mcp.mcp.tools.users.dispatch",
            new_callable=AsyncMock,
            side_effect=RuntimeError("boom"),
        ):
            result = await delete_user(userId=USER_ID)

        assert result == {
            "success": False,
            "error": "Internal server error: boom",
            "statusCode": 500,
        }


class TestGetFusionAuthUserData:
    """Tests for get_fusionauth_user_data tool."""

    @pytest.mark.asyncio
    async def test_uses_cookie_token(self, mcp, configured_client, make_response, sample_user):
        configured_client.retrieve_user_using_jwt.return_value = make_response(
            200, {"user": sample_user}
        )
        tool = mcp._tool_manager._tools["get_fusionauth_user_data"].fn

        result = await tool(ctx=_ctx({"cookie": "app.at=cookie-token; other=1"}))

        assert result["data"] == sample_user
        configured_client.retrieve_user_using_jwt.assert_called_once_with("cookie-token")

    @pytest.mark.asyncio
    async def test_cookie_token_behind_json_cookie(self, mcp, configured_client):
        tool = mcp._tool_manager._tools["get_fusionauth_user_data"].fn

        await tool(ctx=_ctx({"cookie": 'prefs={"theme":"dark"}; app.at=tok.abc.def'}))

        configured_client.retrieve_user_using_jwt.assert_called_once_with("tok.abc.def")

    @pytest.mark.asyncio
    async def test_falls_back_to_bearer(self, mcp, configured_client):
        tool = mcp._tool_manager._tools["get_fusionauth_user_data"].fn

        await tool(ctx=_ctx({"authorization": "Bearer header-token"}))

        configured_client.retrieve_user_using_jwt.assert_called_once_with("header-token")

    @pytest.mark.asyncio
    async def test_no_token(self, mcp, configured_client):
        tool = mcp._tool_manager._tools["get_fusionauth_user_data"].fn

        result = await tool(ctx=_ctx({}))

        assert result["success"] is False
        assert result["statusCode"] == 401
        configured_client.retrieve_user_using_jwt.assert_not_called()
