"""
Pydantic models for application operations.
"""

from typing import Any

from pydantic import Field

from fusionauth_mcp.models.user import FusionAuthModel, NonEmptyStr


class ApplicationRole(FusionAuthModel):
    """A role defined on an application."""

    name: NonEmptyStr = Field(description="Role name")
    description: str | None = Field(default=None, description="Role description")
    is_default: bool | None = Field(default=None, description="Granted on registration")
    is_super_role: bool | None = Field(default=None, description="Implies all other roles")


class CreateApplicationParams(FusionAuthModel):
    """Input for create_application."""

    name: NonEmptyStr = Field(description="Application name")
    roles: list[ApplicationRole] | None = Field(default=None, description="Roles to create")
    oauth_configuration: dict[str, Any] | None = Field(
        default=None, description="FusionAuth OAuth configuration object"
    )
    jwt_configuration: dict[str, Any] | None = Field(
        default=None, description="FusionAuth JWT configuration object"
    )
