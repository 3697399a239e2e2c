"""Tests for the basic and detailed health endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.core.config import get_settings


class TestHealthRoutes:
    def test_basic_health_check(self, client: TestClient) -> None:
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["uptime"] >= 0
        assert set(data["memory"]) == {"rss", "vms"}
        assert "timestamp" in data

    def test_basic_health_ignores_missing_configuration(self, client: TestClient, settings_factory) -> None:
        client.app.dependency_overrides[get_settings] = lambda: settings_factory(
            FACEBOOK_APP_ID=None, FACEBOOK_APP_SECRET=None
        )

        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health_when_configured(self, client: TestClient) -> None:
        response = client.get("/api/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "test"
        for key in ("pythonVersion", "platform", "arch", "uptime", "memory"):
            assert key in data
        assert "missingEnvironmentVariables" not in data

    def test_detailed_health_reports_missing_configuration(self, client: TestClient, settings_factory) -> None:
        client.app.dependency_overrides[get_settings] = lambda: settings_factory(
            FACEBOOK_APP_ID=None, FACEBOOK_APP_SECRET=None
        )

        response = client.get("/api/health/detailed")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["missingEnvironmentVariables"] == ["FACEBOOK_APP_ID", "FACEBOOK_APP_SECRET"]

    def test_detailed_health_reports_single_missing_key(self, client: TestClient, settings_factory) -> None:
        client.app.dependency_overrides[get_settings] = lambda: settings_factory(FACEBOOK_APP_ID="")

        response = client.get("/api/health/detailed")

        assert response.status_code == 503
        assert response.json()["missingEnvironmentVariables"] == ["FACEBOOK_APP_ID"]

    def test_root_status(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {"status": "LiveCast backend running."}
