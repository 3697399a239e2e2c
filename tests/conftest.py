from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.core.errors import GraphAPIError
from app.core.limiter import limiter
from app.deps.facebook import get_graph_transport
from app.main import app


class FakeGraphTransport:
    """Records Graph API calls and answers from a queue of canned results."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.results: List[Any] = []

    def respond(self, body: Dict[str, Any]) -> None:
        self.results.append(body)

    def fail(self, payload: Optional[Dict[str, Any]] = None, status_code: Optional[int] = 400) -> None:
        self.results.append(GraphAPIError("Graph API error", payload=payload, status_code=status_code))

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        bearer_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        self.calls.append(
            {"method": method, "path": path, "params": params, "json": json, "bearer_token": bearer_token}
        )
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def make_settings(**overrides: Any) -> Settings:
    values: Dict[str, Any] = {
        "FACEBOOK_APP_ID": "test-app-id",
        "FACEBOOK_APP_SECRET": "test-app-secret",
        "ENVIRONMENT": "test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def fake_transport() -> FakeGraphTransport:
    return FakeGraphTransport()


@pytest.fixture
def test_settings() -> Settings:
    return make_settings()


@pytest.fixture
def client(fake_transport: FakeGraphTransport, test_settings: Settings):
    """TestClient with fake credentials, a fake Graph API and rate limiting off."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_graph_transport] = lambda: fake_transport
    limiter.enabled = False
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True


@pytest.fixture
def settings_factory():
    """Builds Settings with fake credentials; keyword overrides win."""
    return make_settings
