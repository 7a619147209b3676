"""Unit tests for the X-API-Key authentication dependency."""

from unittest.mock import AsyncMock

import pytest
from fastapi import Depends, FastAPI, status
from fastapi.testclient import TestClient

from iam.application.services import TenantRegistry
from iam.dependencies import API_KEY_HEADER_NAME, get_current_tenant, get_tenant_registry
from iam.domain.aggregates import Tenant
from iam.ports.exceptions import UnauthenticatedError
from shared_kernel.exceptions import PersistenceError


@pytest.fixture
def mock_registry() -> AsyncMock:
    """Mock TenantRegistry for testing."""
    return AsyncMock(spec=TenantRegistry)


@pytest.fixture
def tenant() -> Tenant:
    return Tenant.create(name="acme", key_hash="$2b$12$hash", prefix="cq_AbCdEfGhI")


@pytest.fixture
def test_client(mock_registry: AsyncMock) -> TestClient:
    """App with one route protected by get_current_tenant."""
    app = FastAPI()
    app.dependency_overrides[get_tenant_registry] = lambda: mock_registry

    @app.get("/whoami")
    async def whoami(tenant: Tenant = Depends(get_current_tenant)) -> dict:
        return {"tenant_id": tenant.id.value}

    return TestClient(app)


class TestGetCurrentTenant:
    """Tests for get_current_tenant."""

    def test_passes_header_value_to_registry(
        self, test_client: TestClient, mock_registry: AsyncMock, tenant: Tenant
    ) -> None:
        mock_registry.authenticate.return_value = tenant

        response = test_client.get("/whoami", headers={API_KEY_HEADER_NAME: "cq_secret_value"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"tenant_id": tenant.id.value}
        mock_registry.authenticate.assert_awaited_once_with("cq_secret_value")

    def test_missing_header_passes_none(
        self, test_client: TestClient, mock_registry: AsyncMock
    ) -> None:
        mock_registry.authenticate.side_effect = UnauthenticatedError("API key is missing")

        response = test_client.get("/whoami")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        mock_registry.authenticate.assert_awaited_once_with(None)

    def test_invalid_key_returns_401_with_challenge(
        self, test_client: TestClient, mock_registry: AsyncMock
    ) -> None:
        mock_registry.authenticate.side_effect = UnauthenticatedError("API key is invalid")

        response = test_client.get("/whoami", headers={API_KEY_HEADER_NAME: "cq_bogus"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["WWW-Authenticate"] == API_KEY_HEADER_NAME
        assert response.json()["detail"] == "API key is invalid"

    def test_store_failure_returns_500(
        self, test_client: TestClient, mock_registry: AsyncMock
    ) -> None:
        mock_registry.authenticate.side_effect = PersistenceError("connection refused")

        response = test_client.get("/whoami", headers={API_KEY_HEADER_NAME: "cq_secret_value"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "connection refused" not in response.text
