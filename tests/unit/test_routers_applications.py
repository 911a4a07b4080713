"""
Tests for application router endpoints.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fusionauth_mcp.routers.applications import router


@pytest.fixture
def client():
    """Create test client with the applications router."""
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


class TestApplicationsRouter:
    """Tests for /applications."""

    def test_list_applications(self, client, configured_client, make_response, sample_application):
        configured_client.retrieve_applications.return_value = make_response(
            200, {"applications": [sample_application]}
        )

        response = client.get("/applications")

        assert response.status_code == 200
        assert response.json() == [sample_application]

    def test_list_applications_vendor_failure(self, client, configured_client, make_response):
        configured_client.retrieve_applications.return_value = make_response(
            401, error_response={"generalErrors": [{"code": "401", "message": "Unauthorized"}]}
        )

        response = client.get("/applications")

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_create_application(self, client, configured_client, make_response, sample_application):
        configured_client.create_application.return_value = make_response(
            200, {"application": sample_application}
        )

        response = client.post(
            "/applications", json={"name": "Pied Piper", "roles": [{"name": "admin"}]}
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Pied Piper"

    def test_create_application_missing_name(self, client, configured_client):
        response = client.post("/applications", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "name: is required"}
        configured_client.create_application.assert_not_called()
