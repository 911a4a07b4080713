"""
Operation dispatch table.

Maps each operation name to its parameter schema and the single
FusionAuthTools method it triggers. Both the MCP tools and the REST routes
go through dispatch(), so validation, normalization and auditing behave the
same on either surface.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from fusionauth_mcp.audit import AuditEvent, audit_log
from fusionauth_mcp.config.logging import get_logger
from fusionauth_mcp.errors import OperationNotFoundError, ValidationError
from fusionauth_mcp.models import (
    CreateApplicationParams,
    CreateUserParams,
    CurrentUserParams,
    DeleteUserParams,
    GetUserParams,
    SearchUsersParams,
    ToolResult,
    UpdateUserParams,
)
from fusionauth_mcp.models.user import FusionAuthModel
from fusionauth_mcp.services.fusionauth_client import FusionAuthTools
from fusionauth_mcp.services.results import normalize_exception
from fusionauth_mcp.validation import validate_params

logger = get_logger(__name__)

VALIDATION_ERROR_STATUS = 400

Handler = Callable[[FusionAuthTools, Any], Awaitable[ToolResult]]


class NoParams(FusionAuthModel):
    """Input for operations that take no arguments."""


@dataclass(frozen=True)
class Operation:
    """A dispatchable operation."""

    name: str
    schema: type[BaseModel]
    handler: Handler
    audit_event: str
    description: str


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation(
            name="create_user",
            schema=CreateUserParams,
            handler=lambda tools, params: tools.create_user(params),
            audit_event=AuditEvent.USER_CREATE,
            description="Create a new user with an email and optional password, names and data.",
        ),
        Operation(
            name="get_user",
            schema=GetUserParams,
            handler=lambda tools, params: tools.get_user(params),
            audit_event=AuditEvent.USER_READ,
            description="Retrieve a user by ID or by email (exactly one).",
        ),
        Operation(
            name="search_users",
            schema=SearchUsersParams,
            handler=lambda tools, params: tools.search_users(params),
            audit_event=AuditEvent.USER_SEARCH,
            description="Search users with a query string, paging and sorting.",
        ),
        Operation(
            name="update_user",
            schema=UpdateUserParams,
            handler=lambda tools, params: tools.update_user(params),
            audit_event=AuditEvent.USER_UPDATE,
            description="Update selected fields of an existing user.",
        ),
        Operation(
            name="delete_user",
            schema=DeleteUserParams,
            handler=lambda tools, params: tools.delete_user(params),
            audit_event=AuditEvent.USER_DELETE,
            description="Delete a user permanently, or deactivate when hardDelete is false.",
        ),
        Operation(
            name="create_application",
            schema=CreateApplicationParams,
            handler=lambda tools, params: tools.create_application(params),
            audit_event=AuditEvent.APPLICATION_CREATE,
            description="Create an application with optional roles.",
        ),
        Operation(
            name="get_applications",
            schema=NoParams,
            handler=lambda tools, params: tools.get_applications(),
            audit_event=AuditEvent.APPLICATION_READ,
            description="List all applications.",
        ),
        Operation(
            name="get_fusionauth_user_data",
            schema=CurrentUserParams,
            handler=lambda tools, params: tools.get_user_by_jwt(params.access_token),
            audit_event=AuditEvent.USER_READ,
            description="Get the user that an access token was issued to.",
        ),
    )
}


def get_operation(name: str) -> Operation:
    """
    Look up an operation by name.

    Raises:
        OperationNotFoundError: If the name is not in the dispatch table
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise OperationNotFoundError(name) from None


def list_operations() -> list[dict[str, str]]:
    """Operation catalog for discovery."""
    return [{"name": op.name, "description": op.description} for op in OPERATIONS.values()]


def _audit_targets(params: BaseModel, result: ToolResult) -> dict[str, str | None]:
    user_id = getattr(params, "user_id", None)
    email = getattr(params, "email", None)
    application_id = None

    if result.success and isinstance(result.data, dict):
        if isinstance(params, CreateApplicationParams):
            application_id = result.data.get("id")
        else:
            user_id = user_id or result.data.get("id")

    return {"user_id": user_id, "email": email, "application_id": application_id}


async def dispatch(
    name: str,
    arguments: Any = None,
    tools: FusionAuthTools | None = None,
) -> ToolResult:
    """
    Validate arguments and run one operation.

    Args:
        name: Operation name
        arguments: Raw input (a JSON object); None means no arguments
        tools: FusionAuthTools to use, the configured client by default

    Returns:
        The operation's ToolResult. Validation failures come back as a
        failed envelope with status 400 and never reach FusionAuth.

    Raises:
        OperationNotFoundError: If the name is unknown
    """
    operation = get_operation(name)

    try:
        params = validate_params(operation.schema, arguments)
    except ValidationError as e:
        audit_log(
            AuditEvent.VALIDATION_ERROR,
            operation=name,
            success=False,
            status_code=VALIDATION_ERROR_STATUS,
            error=e.message,
        )
        return ToolResult.failure(e.message, status_code=VALIDATION_ERROR_STATUS)

    tools = tools or FusionAuthTools()
    try:
        result = await operation.handler(tools, params)
    except Exception as e:
        result = normalize_exception(e, name)

    audit_log(
        operation.audit_event,
        operation=name,
        success=result.success,
        status_code=result.status_code,
        error=result.error,
        **_audit_targets(params, result),
    )
    return result
