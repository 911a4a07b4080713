"""
MCP Prompts for the FusionAuth MCP gateway.

Workflow templates that steer an agent through common user tasks.
"""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field


def register_prompts(mcp: FastMCP) -> None:
    """Register MCP prompts."""

    @mcp.prompt(
        description="Create a single FusionAuth user with the given email, password and optional full name."
    )
    async def create_single_user(
        email: Annotated[str, Field(description="Email address of the new user")],
        password: Annotated[str, Field(description="Password, at least 8 characters")],
        fullName: Annotated[str | None, Field(description="Optional full name")] = None,
    ) -> str:
        """Template for creating one user."""
        first_name, _, last_name = (fullName or "").strip().partition(" ")
        name_args = ""
        if first_name:
            name_args += f', firstName="{first_name}"'
        if last_name:
            name_args += f', lastName="{last_name}"'

        return f"""Create a new user with the following details: Email: {email}, Password: {password}, Name: {fullName or "(none)"}

Call the create_user tool exactly once:
```
create_user(email="{email}", password="{password}"{name_args})
```
Report the new user's id and email from the result's `data`. If `success` is false, report `error` instead.
"""

    @mcp.prompt(description="Create several FusionAuth users with generated test data.")
    async def create_multiple_users(
        numberOfUsers: Annotated[
            int, Field(description="How many users to create (at least 1)", ge=1)
        ],
    ) -> str:
        """Template for bulk test-user creation."""
        return f"""# Create {numberOfUsers} Test Users

## Step 1: Generate User Data
Invent {numberOfUsers} users, each with a universally unique email address,
a password of at least 8 characters, and a first and last name.

## Step 2: Create Each User
Call create_user once per user:
```
create_user(email="<email>", password="<password>", firstName="<first>", lastName="<last>")
```

## Step 3: Summarize
List each created user's `id` and `email`. Note any call where `success` was
false together with its `error`; do not retry automatically.
"""
