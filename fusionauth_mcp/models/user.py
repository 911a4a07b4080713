"""
Pydantic models for user operations.

Wire names are camelCase to match FusionAuth; snake_case is accepted too.
"""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from fusionauth_mcp.constants import DEFAULT_NUMBER_OF_RESULTS, DEFAULT_START_ROW
from fusionauth_mcp.validation import (
    validate_email,
    validate_non_empty,
    validate_number_of_results,
    validate_password,
    validate_sort_order,
    validate_start_row,
    validate_uuid,
)

Email = Annotated[str, AfterValidator(validate_email)]
UserId = Annotated[str, AfterValidator(validate_uuid)]
Password = Annotated[str, AfterValidator(validate_password)]
NonEmptyStr = Annotated[str, AfterValidator(validate_non_empty)]
SortOrder = Annotated[str, AfterValidator(validate_sort_order)]


class FusionAuthModel(BaseModel):
    """Base for request models: camelCase aliases, unknown keys dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_request(self) -> dict[str, Any]:
        """Serialize for the vendor client, omitting unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CreateUserParams(FusionAuthModel):
    """Input for create_user."""

    email: Email = Field(description="Email address of the new user")
    password: Password | None = Field(default=None, description="Password, at least 8 characters")
    first_name: str | None = Field(default=None, description="Given name")
    last_name: str | None = Field(default=None, description="Family name")
    username: str | None = Field(default=None, description="Optional username")
    data: dict[str, Any] | None = Field(default=None, description="Free-form custom data")
    send_set_password_email: bool | None = Field(
        default=None,
        description="Ask FusionAuth to email a set-password link (useful without a password)",
    )

    def user_fields(self) -> dict[str, Any]:
        """The FusionAuth `user` object for this request."""
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"send_set_password_email"},
        )


class GetUserParams(FusionAuthModel):
    """Input for get_user: exactly one of userId or email."""

    user_id: UserId | None = Field(default=None, description="FusionAuth user ID (UUID)")
    email: Email | None = Field(default=None, description="Email address")

    @model_validator(mode="after")
    def _exactly_one_lookup_key(self) -> "GetUserParams":
        if not self.user_id and not self.email:
            raise ValueError("Either userId or email must be provided")
        if self.user_id and self.email:
            raise ValueError("Provide only one of userId or email")
        return self


class SortField(FusionAuthModel):
    """A single sort instruction for user search."""

    name: NonEmptyStr = Field(description="Field to sort by, e.g. 'email' or 'insertInstant'")
    order: SortOrder | None = Field(default=None, description="'asc' or 'desc'")


class SearchUsersParams(FusionAuthModel):
    """Input for search_users."""

    query_string: str | None = Field(default=None, description="Elasticsearch query string")
    number_of_results: Annotated[int, AfterValidator(validate_number_of_results)] = Field(
        default=DEFAULT_NUMBER_OF_RESULTS, description="Page size, between 1 and 500"
    )
    start_row: Annotated[int, AfterValidator(validate_start_row)] = Field(
        default=DEFAULT_START_ROW, description="Offset of the first result"
    )
    sort_fields: list[SortField] | None = Field(default=None, description="Sort order")


class UserPatch(FusionAuthModel):
    """Fields that update_user may change."""

    email: Email | None = None
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    data: dict[str, Any] | None = None


class UpdateUserParams(FusionAuthModel):
    """Input for update_user."""

    user_id: UserId = Field(description="FusionAuth user ID (UUID)")
    user: UserPatch = Field(description="Fields to change")

    @model_validator(mode="after")
    def _non_empty_patch(self) -> "UpdateUserParams":
        if not self.user.to_request():
            raise ValueError("user must contain at least one field to update")
        return self


class DeleteUserParams(FusionAuthModel):
    """Input for delete_user."""

    user_id: UserId = Field(description="FusionAuth user ID (UUID)")
    hard_delete: bool | None = Field(
        default=None,
        description="Permanently delete (default). Pass false to deactivate instead.",
    )


class CurrentUserParams(FusionAuthModel):
    """Input for looking up the user behind an access token."""

    access_token: NonEmptyStr = Field(description="FusionAuth access token (JWT)")
