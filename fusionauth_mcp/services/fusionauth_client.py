"""
FusionAuth client adapter.

Builds the single configured FusionAuthClient and exposes the provider
operations the gateway needs, one method per operation. The vendor client is
synchronous (requests), so every call runs in a worker thread.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from fusionauth.fusionauth_client import FusionAuthClient

from fusionauth_mcp.config.logging import get_logger
from fusionauth_mcp.config.settings import get_settings
from fusionauth_mcp.constants import DEFAULT_QUERY_STRING
from fusionauth_mcp.errors import ConfigurationError, MissingConfigurationError
from fusionauth_mcp.models import (
    CreateApplicationParams,
    CreateUserParams,
    DeleteUserParams,
    GetUserParams,
    SearchUsersParams,
    ToolResult,
    UpdateUserParams,
)
from fusionauth_mcp.services.results import (
    INTERNAL_ERROR_STATUS,
    normalize_exception,
    normalize_response,
)

logger = get_logger(__name__)

_client: FusionAuthClient | None = None


class FusionAuthClientFactory:
    """Factory for the configured FusionAuth client."""

    @classmethod
    def create_client(
        cls,
        api_key: str | None = None,
        base_url: str | None = None,
        tenant_id: str | None = None,
    ) -> FusionAuthClient:
        """
        Create a FusionAuth client.

        Arguments left as None are read from settings.

        Raises:
            MissingConfigurationError: If no API key is available
        """
        settings = get_settings()
        api_key = api_key or settings.api_key
        base_url = (base_url or settings.base_url).rstrip("/")
        tenant_id = tenant_id or settings.tenant_id

        if not api_key:
            raise MissingConfigurationError(
                "FUSIONAUTH_API_KEY", "Create an API key in the FusionAuth admin UI"
            )

        client = FusionAuthClient(api_key, base_url)
        if tenant_id:
            client.set_tenant_id(tenant_id)

        logger.debug("Created FusionAuth client", base_url=base_url, tenant_id=tenant_id)
        return client


def get_fusionauth_client() -> FusionAuthClient:
    """Get the process-wide FusionAuth client, creating it on first use."""
    global _client
    if _client is None:
        _client = FusionAuthClientFactory.create_client()
    return _client


def reset_fusionauth_client() -> None:
    """Forget the cached client (tests and settings reloads)."""
    global _client
    _client = None


def _user(body: dict[str, Any]) -> Any:
    return body.get("user")


def _application(body: dict[str, Any]) -> Any:
    return body.get("application")


def _applications(body: dict[str, Any]) -> Any:
    return body.get("applications", [])


def _search_page(body: dict[str, Any]) -> dict[str, Any]:
    return {"users": body.get("users", []), "total": body.get("total", 0)}


def _jwt_claims(body: dict[str, Any]) -> Any:
    return body.get("jwt")


class FusionAuthTools:
    """
    Pass-through wrappers around the FusionAuth client.

    Each method makes exactly one vendor call and returns a ToolResult.
    Callers are expected to have validated the parameters already.
    """

    def __init__(self, client: FusionAuthClient | None = None):
        self._client = client

    @property
    def client(self) -> FusionAuthClient:
        if self._client is None:
            self._client = get_fusionauth_client()
        return self._client

    async def _call(
        self,
        operation: str,
        method_name: str,
        *args: Any,
        extract: Callable[[dict[str, Any]], Any] | None = None,
        default_error: str,
    ) -> ToolResult:
        # The client is resolved here so a missing API key ends up in the envelope
        try:
            method = getattr(self.client, method_name)
            response = await asyncio.to_thread(method, *args)
        except ConfigurationError as e:
            logger.error(
                "FusionAuth client is not configured", operation=operation, error=e.message
            )
            return ToolResult.failure(e.message, status_code=INTERNAL_ERROR_STATUS)
        except Exception as e:
            return normalize_exception(e, operation)
        return normalize_response(
            response, extract=extract, default_error=default_error, operation=operation
        )

    async def create_user(self, params: CreateUserParams) -> ToolResult:
        request: dict[str, Any] = {"user": params.user_fields()}
        application_id = get_settings().application_id
        if application_id:
            request["applicationId"] = application_id
        if params.send_set_password_email is not None:
            request["sendSetPasswordEmail"] = params.send_set_password_email

        return await self._call(
            "create_user",
            "create_user",
            request,
            extract=_user,
            default_error="Failed to create user",
        )

    async def get_user(self, params: GetUserParams) -> ToolResult:
        if params.user_id:
            return await self._call(
                "get_user",
                "retrieve_user",
                params.user_id,
                extract=_user,
                default_error="Failed to retrieve user",
            )
        return await self._call(
            "get_user",
            "retrieve_user_by_email",
            params.email,
            extract=_user,
            default_error="Failed to retrieve user",
        )

    async def search_users(self, params: SearchUsersParams) -> ToolResult:
        search: dict[str, Any] = {
            "queryString": params.query_string or DEFAULT_QUERY_STRING,
            "numberOfResults": params.number_of_results,
            "startRow": params.start_row,
        }
        if params.sort_fields:
            search["sortFields"] = [field.to_request() for field in params.sort_fields]

        return await self._call(
            "search_users",
            "search_users_by_query",
            {"search": search},
            extract=_search_page,
            default_error="Failed to search users",
        )

    async def update_user(self, params: UpdateUserParams) -> ToolResult:
        # PATCH merges, so fields left out of the request are kept
        return await self._call(
            "update_user",
            "patch_user",
            params.user_id,
            {"user": params.user.to_request()},
            extract=_user,
            default_error="Failed to update user",
        )

    async def delete_user(self, params: DeleteUserParams) -> ToolResult:
        hard_delete = params.hard_delete is not False
        method_name = "delete_user" if hard_delete else "deactivate_user"

        return await self._call(
            "delete_user",
            method_name,
            params.user_id,
            extract=lambda _body: {"deleted": True, "hardDelete": hard_delete},
            default_error="Failed to delete user",
        )

    async def create_application(self, params: CreateApplicationParams) -> ToolResult:
        return await self._call(
            "create_application",
            "create_application",
            {"application": params.to_request()},
            extract=_application,
            default_error="Failed to create application",
        )

    async def get_applications(self) -> ToolResult:
        return await self._call(
            "get_applications",
            "retrieve_applications",
            extract=_applications,
            default_error="Failed to retrieve applications",
        )

    async def get_user_by_jwt(self, access_token: str) -> ToolResult:
        """Look up the user an access token was issued to."""
        return await self._call(
            "get_fusionauth_user_data",
            "retrieve_user_using_jwt",
            access_token,
            extract=_user,
            default_error="Failed to retrieve user for token",
        )

    async def validate_jwt(self, access_token: str) -> ToolResult:
        """Have FusionAuth validate a token; data is the decoded claims."""
        return await self._call(
            "validate_jwt",
            "validate_jwt",
            access_token,
            extract=_jwt_claims,
            default_error="Invalid access token",
        )
