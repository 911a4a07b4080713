"""
The uniform result envelope returned by every operation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolResult(BaseModel):
    """Success/failure envelope around a single vendor call."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(description="Whether the operation succeeded")
    data: Any = Field(default=None, description="Vendor payload on success")
    error: str | None = Field(default=None, description="Error message on failure")
    status_code: int | None = Field(
        default=None, alias="statusCode", description="HTTP status reported by FusionAuth"
    )

    @classmethod
    def ok(cls, data: Any = None, status_code: int | None = None) -> "ToolResult":
        return cls(success=True, data=data, status_code=status_code)

    @classmethod
    def failure(cls, error: str, status_code: int | None = None) -> "ToolResult":
        return cls(success=False, error=error, status_code=status_code)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with wire names, leaving out unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
