"""
Input validation for the FusionAuth MCP gateway.

Field-level checks raise ValueError with a short constraint message; the
pydantic models in fusionauth_mcp.models call them from field validators.
validate_params() runs a model over raw input and turns any failure into a
single ValidationError naming the field and the violated constraint.
"""

import re
import uuid
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from fusionauth_mcp.constants import (
    MAX_NUMBER_OF_RESULTS,
    MIN_NUMBER_OF_RESULTS,
    MIN_PASSWORD_LENGTH,
)
from fusionauth_mcp.errors import ValidationError

# Validation patterns
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
SORT_ORDERS = frozenset({"asc", "desc"})

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_email(email: str) -> str:
    """
    Validate email address format.

    Args:
        email: Email string to validate

    Returns:
        The email, stripped of surrounding whitespace

    Raises:
        ValueError: If format is invalid
    """
    email = email.strip()
    if not EMAIL_PATTERN.match(email):
        raise ValueError("must be a valid email")
    return email


def validate_uuid(value: str) -> str:
    """
    Validate that an identifier is UUID-shaped.

    Returns:
        The canonical lowercase hyphenated form

    Raises:
        ValueError: If the value is not a UUID
    """
    try:
        return str(uuid.UUID(value.strip()))
    except (ValueError, AttributeError):
        raise ValueError("must be a valid UUID") from None


def validate_number_of_results(count: int) -> int:
    """Validate the search page size."""
    if not MIN_NUMBER_OF_RESULTS <= count <= MAX_NUMBER_OF_RESULTS:
        raise ValueError(
            f"count must be between {MIN_NUMBER_OF_RESULTS} and {MAX_NUMBER_OF_RESULTS}"
        )
    return count


def validate_start_row(start_row: int) -> int:
    """Validate the search offset."""
    if start_row < 0:
        raise ValueError("must be greater than or equal to 0")
    return start_row


def validate_non_empty(value: str) -> str:
    """Validate that a string has visible content."""
    if not value or not value.strip():
        raise ValueError("must not be empty")
    return value.strip()


def validate_password(password: str) -> str:
    """Validate password length."""
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"must be at least {MIN_PASSWORD_LENGTH} characters long")
    return password


def validate_sort_order(order: str) -> str:
    """Validate a sort direction."""
    normalized = order.lower()
    if normalized not in SORT_ORDERS:
        raise ValueError("must be 'asc' or 'desc'")
    return normalized


def _format_error(error: dict[str, Any]) -> tuple[str, str | None]:
    """Render one pydantic error as (message, field)."""
    loc = [str(part) for part in error.get("loc", ())]
    field = ".".join(loc) if loc else None

    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        reason = str(error["ctx"]["error"])
    elif error.get("type") == "missing":
        reason = "is required"
    else:
        reason = error.get("msg", "is invalid")

    # Model-level checks carry a complete sentence and no location
    if not field:
        return reason, None
    return f"{field}: {reason}", field


def validate_params(model: type[ModelT], raw: Any) -> ModelT:
    """
    Validate raw operation input against a parameter model.

    Args:
        model: Pydantic model describing the operation input
        raw: Untrusted input, normally a JSON object

    Returns:
        A validated model instance

    Raises:
        ValidationError: Naming the first violated constraint
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValidationError("Arguments must be an object")

    try:
        return model.model_validate(dict(raw))
    except PydanticValidationError as e:
        errors = e.errors(include_url=False)
        message, field = _format_error(errors[0]) if errors else ("Invalid input", None)
        raise ValidationError(message, field=field) from e
