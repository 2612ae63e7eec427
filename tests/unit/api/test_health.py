"""Tests for health API routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


class TestHealthRouteConfiguration:
    """Tests for health route configuration."""

    def test_router_has_health_tag(self) -> None:
        """Router is tagged as 'Health'."""
        from citation_service.api.routes.health import router

        assert "Health" in router.tags


class TestHealthEndpoints:
    """Tests for GET /health, /health/ready and /health/live."""

    @pytest.fixture
    def app(self) -> FastAPI:
        """Create test FastAPI app with health router."""
        from citation_service.api.routes.health import router

        app = FastAPI()
        app.include_router(router)
        return app

    @pytest.fixture
    def client(self, app: FastAPI) -> TestClient:
        """Create test client."""
        return TestClient(app)

    def test_health_returns_healthy(self, client: TestClient) -> None:
        """Health reports healthy with service metadata."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "citation-service"
        assert "timestamp" in data

    def test_liveness(self, client: TestClient) -> None:
        """Liveness is always true."""
        response = client.get("/health/live")

        assert response.json()["alive"] is True

    def test_readiness_after_start(self, client: TestClient) -> None:
        """Readiness is true once a start time is recorded."""
        from citation_service.api.routes.health import set_service_start_time

        set_service_start_time()
        response = client.get("/health/ready")

        assert response.json()["ready"] is True
        assert response.json()["checks"] == {"started": True}

    def test_not_ready_before_start(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Readiness is false until the lifespan records a start time."""
        from citation_service.api.routes import health

        monkeypatch.setattr(health, "_service_start_time", None)
        response = client.get("/health/ready")

        assert response.json()["ready"] is False
        assert response.json()["checks"] == {"started": False}


class TestApplicationLifespan:
    """Tests for the full application."""

    def test_lifespan_sets_uptime(self) -> None:
        """Starting the app records a start time used for uptime."""
        from citation_service.main import create_app

        with TestClient(create_app()) as client:
            response = client.get("/health")

        assert response.json()["uptime_seconds"] is not None
