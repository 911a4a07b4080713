"""
Shared pytest fixtures for FusionAuth MCP gateway tests.
"""

import os
from typing import Any
from unittest.mock import MagicMock

import pytest

# Set test environment variables before importing fusionauth_mcp modules
# so that module-level settings lookups see them during collection
os.environ.setdefault("FUSIONAUTH_DEBUG", "true")
os.environ["FUSIONAUTH_API_KEY"] = "test-api-key"
os.environ["FUSIONAUTH_BASE_URL"] = "http://fusionauth.test"
os.environ["FUSIONAUTH_PUBLIC_URL"] = "http://gateway.test"
os.environ.pop("FUSIONAUTH_URL", None)
os.environ.pop("FUSIONAUTH_APPLICATION_ID", None)
os.environ.pop("FUSIONAUTH_TENANT_ID", None)
os.environ.pop("FUSIONAUTH_AUTH_SERVER_URL", None)

USER_ID = "1f5b3c2a-8d4e-4b6f-9a7c-2e1d0f3b4a5c"
APPLICATION_ID = "85a03867-dccf-4882-adde-1a79aeec50df"


class FakeClientResponse:
    """Stand-in for fusionauth.rest_client.ClientResponse."""

    def __init__(
        self,
        status: int = 200,
        success_response: Any = None,
        error_response: Any = None,
        exception: Exception | None = None,
    ):
        self.status = status
        self.success_response = success_response
        self.error_response = error_response
        self.exception = exception

    def was_successful(self) -> bool:
        return 200 <= self.status <= 299


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset singletons between tests to avoid state leakage."""
    from fusionauth_mcp.config.settings import reset_settings
    from fusionauth_mcp.services.fusionauth_client import reset_fusionauth_client

    reset_settings()
    reset_fusionauth_client()
    yield
    reset_fusionauth_client()
    reset_settings()


@pytest.fixture
def make_response():
    """Factory for fake FusionAuth client responses."""
    return FakeClientResponse


@pytest.fixture
def mock_client() -> MagicMock:
    """A mock FusionAuthClient; every method returns an empty success by default."""
    client = MagicMock()
    for method in (
        "create_user",
        "retrieve_user",
        "retrieve_user_by_email",
        "search_users_by_query",
        "patch_user",
        "delete_user",
        "deactivate_user",
        "create_application",
        "retrieve_applications",
        "retrieve_user_using_jwt",
        "validate_jwt",
    ):
        getattr(client, method).return_value = FakeClientResponse(200, {})
    return client


@pytest.fixture
def configured_client(monkeypatch, mock_client) -> MagicMock:
    """Install mock_client as the process-wide FusionAuth client."""
    import fusionauth_mcp.services.fusionauth_client as fusionauth_client

    monkeypatch.setattr(fusionauth_client, "_client", mock_client)
    return mock_client


@pytest.fixture
def sample_user() -> dict[str, Any]:
    """Sample FusionAuth user object."""
    return {
        "id": USER_ID,
        "email": "jane.doe@example.com",
        "firstName": "Jane",
        "lastName": "Doe",
        "username": "jdoe",
        "active": True,
        "verified": True,
        "tenantId": "2b1f6a4e-0c4d-4c7e-9d3a-6f5e4d3c2b1a",
        "insertInstant": 1700000000000,
        "data": {"plan": "pro"},
    }


@pytest.fixture
def sample_application() -> dict[str, Any]:
    """Sample FusionAuth application object."""
    return {
        "id": APPLICATION_ID,
        "name": "Pied Piper",
        "active": True,
        "roles": [
            {"name": "admin", "description": "Administrators", "isDefault": False},
            {"name": "user", "isDefault": True},
        ],
    }


@pytest.fixture
def sample_claims() -> dict[str, Any]:
    """Claims FusionAuth returns when validating an access token."""
    return {
        "aud": APPLICATION_ID,
        "applicationId": APPLICATION_ID,
        "exp": 1900000000,
        "iat": 1700000000,
        "iss": "http://fusionauth.test",
        "sub": USER_ID,
        "scope": "openid offline_access",
        "email": "jane.doe@example.com",
        "roles": ["user"],
    }


@pytest.fixture
def fusionauth_errors() -> dict[str, Any]:
    """A FusionAuth Errors body."""
    return {
        "fieldErrors": {
            "user.email": [
                {"code": "[duplicate]user.email", "message": "A User with email already exists."}
            ]
        },
        "generalErrors": [],
    }
