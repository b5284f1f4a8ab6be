"""Health endpoint tests."""

from unittest.mock import AsyncMock

import psycopg
import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from menuauth.interfaces.api.resources.health import HealthResource


def _client(pool=None) -> TestClient:
    app = App()
    health = HealthResource(pool)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    return _client()


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_checks_pool() -> None:
    pool = AsyncMock()
    result = _client(pool).simulate_get("/v1/health/ready")
    assert result.status_code == 200
    pool.check.assert_awaited_once()


def test_health_ready_database_down() -> None:
    """GET /v1/health/ready returns 503 when the pool check fails."""
    pool = AsyncMock()
    pool.check.side_effect = psycopg.OperationalError("connection refused")
    result = _client(pool).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"
