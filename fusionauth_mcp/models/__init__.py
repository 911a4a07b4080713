"""
Pydantic models for the FusionAuth MCP gateway.

This module contains models for:
- User operations (create, lookup, search, update, delete)
- Application operations
- The result envelope
"""

from fusionauth_mcp.models.application import ApplicationRole, CreateApplicationParams
from fusionauth_mcp.models.result import ToolResult
from fusionauth_mcp.models.user import (
    CreateUserParams,
    CurrentUserParams,
    DeleteUserParams,
    GetUserParams,
    SearchUsersParams,
    SortField,
    UpdateUserParams,
    UserPatch,
)

__all__ = [
    "ApplicationRole",
    "CreateApplicationParams",
    "CreateUserParams",
    "CurrentUserParams",
    "DeleteUserParams",
    "GetUserParams",
    "SearchUsersParams",
    "SortField",
    "ToolResult",
    "UpdateUserParams",
    "UserPatch",
]
