"""
Integration tests for the /api/v1/ascii routes using the Starlette TestClient
"""

from unittest.mock import AsyncMock

import pytest
from starlette.testclient import TestClient

from app.application.use_cases.resolve_image import ResolveImageUseCase
from app.core.config import settings
from app.core.exceptions import NetworkError, UpstreamResponseError
from app.infrastructure.adapters.bundles.resolver import get_keyword_table
from app.presentation.api.v1.dependencies.resolver import get_resolve_image_use_case
from app.presentation.main import create_application


@pytest.fixture
def client(fake_adapters, keyword_table):
    app = create_application()
    app.dependency_overrides[get_resolve_image_use_case] = lambda: ResolveImageUseCase(
        fake_adapters
    )
    app.dependency_overrides[get_keyword_table] = lambda: keyword_table
    with TestClient(app) as c:
        yield c


def test_resolve_local_keyword(client, fake_adapters):
    resp = client.get("/api/v1/ascii/moon")

    assert resp.status_code == 200
    assert resp.json() == {
        "image": "/images/moon/moon01.jpg",
        "alt": "moon (local)",
        "matchedKeyword": "moon",
        "displayChars": "あいうえお",
    }
    fake_adapters.image_search.random_photo.assert_not_awaited()


def test_resolve_local_keyword_uppercase(client, keyword_table):
    resp = client.get("/api/v1/ascii/RIVER")

    assert resp.status_code == 200
    body = resp.json()
    assert body["matchedKeyword"] == "river"
    assert body["image"] in keyword_table.lookup("river")


def test_resolve_upstream_keyword_with_chars(client, fake_adapters):
    resp = client.get("/api/v1/ascii/ocean", params={"chars": "abc"})

    assert resp.status_code == 200
    assert resp.json() == {
        "image": "https://img/x.jpg",
        "alt": "a calm ocean",
        "matchedKeyword": "ocean",
        "displayChars": "abc",
    }
    fake_adapters.image_search.random_photo.assert_awaited_once_with("ocean")


def test_empty_chars_uses_default(client):
    resp = client.get("/api/v1/ascii/moon?chars=")

    assert resp.status_code == 200
    assert resp.json()["displayChars"] == settings.default_display_chars


@pytest.mark.parametrize(
    "error, error_code",
    [
        (NetworkError("connection refused"), "NETWORK_ERROR"),
        (UpstreamResponseError("Unsplash returned HTTP 403", 403), "UPSTREAM_RESPONSE_ERROR"),
    ],
)
def test_upstream_failures_surface_as_bad_gateway(client, fake_adapters, error, error_code):
    fake_adapters.image_search.random_photo = AsyncMock(side_effect=error)

    resp = client.get("/api/v1/ascii/ocean")

    assert resp.status_code == 502
    detail = resp.json()["detail"]
    assert detail["error_code"] == error_code
    assert detail["details"] == error.message


def test_list_local_keywords(client):
    resp = client.get("/api/v1/ascii")

    assert resp.status_code == 200
    assert resp.json() == {"keywords": ["moon", "river"]}


def test_health_reports_resolver_state(client, monkeypatch):
    monkeypatch.setattr(settings, "unsplash_key", "")

    resp = client.get("/api/v1/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["local_keywords"] == 2
    assert body["upstream_configured"] is False
    assert body["status"] in ("warning", "unhealthy")


def test_root(client):
    resp = client.get("/api/v1/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_rate_limit(fake_adapters, keyword_table, monkeypatch):
    monkeypatch.setattr(settings, "max_requests_per_minute", 2)
    app = create_application()
    app.dependency_overrides[get_resolve_image_use_case] = lambda: ResolveImageUseCase(
        fake_adapters
    )
    app.dependency_overrides[get_keyword_table] = lambda: keyword_table

    with TestClient(app) as c:
        assert c.get("/api/v1/ascii/moon").status_code == 200
        assert c.get("/api/v1/ascii/moon").status_code == 200
        resp = c.get("/api/v1/ascii/moon")
        # Health checks are never limited
        health = c.get("/api/v1/health")

    assert resp.status_code == 429
    assert resp.json()["detail"]["error"] == "Rate limit exceeded"
    assert health.status_code == 200
