"""
Custom error types for the FusionAuth MCP gateway.

Validation failures, unknown operations, token problems and configuration
gaps each get their own class so that the HTTP and MCP surfaces can map
them to status codes and envelopes consistently.
"""

from typing import Any


class FusionAuthGatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# Input Validation Errors


class ValidationError(FusionAuthGatewayError):
    """Raised when operation input does not match its schema."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message, details={"field": field} if field else None)


# Dispatch Errors


class OperationNotFoundError(FusionAuthGatewayError):
    """Raised when an operation name has no entry in the dispatch table."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation not found: {operation}", details={"operation": operation})


# Authentication Errors


class AuthenticationError(FusionAuthGatewayError):
    """Raised when authentication fails."""

    pass


class InvalidTokenError(AuthenticationError):
    """Raised when a token is structurally unacceptable."""

    def __init__(self, message: str = "Invalid access token"):
        super().__init__(message)


# Configuration Errors


class ConfigurationError(FusionAuthGatewayError):
    """Raised when there's a configuration error."""

    pass


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, config_key: str, description: str | None = None):
        self.config_key = config_key
        message = f"Missing required configuration: {config_key}"
        if description:
            message += f". {description}"
        super().__init__(
            message,
            details={"config_key": config_key, "description": description},
        )
