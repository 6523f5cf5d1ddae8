"""
Tests for the precache HTTP API.
"""

import httpx
import pytest
from conftest import CACHE_NAME, ORIGIN
from fastapi.testclient import TestClient

from precache_handler.api.app import app
from precache_handler.api.dependencies import get_cache_store, get_handler


@pytest.fixture
def client_for(build_handler, store):
    """Create a test client whose handler is built from ``entries``."""

    def _client(entries, fallback_to_network=True):
        handler = build_handler(entries, fallback_to_network=fallback_to_network)
        app.dependency_overrides[get_handler] = lambda: handler
        app.dependency_overrides[get_cache_store] = lambda: store
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


def test_hit_is_served_from_cache(client_for, store, fetcher):
    store.responses = {
        f"{ORIGIN}/app.js?__WB_REVISION__=abc123": httpx.Response(
            200, headers={"content-type": "application/javascript"}, text="cached js"
        )
    }
    client = client_for([{"url": "/app.js", "revision": "abc123"}])

    response = client.get("/app.js")

    assert response.status_code == 200
    assert response.text == "cached js"
    assert response.headers["content-type"] == "application/javascript"
    assert fetcher.calls == []


def test_miss_falls_back_to_network(client_for, fetcher):
    fetcher.responses = [httpx.Response(200, text="from network")]
    client = client_for(["/app.js"])

    response = client.get("/app.js?v=2")

    assert response.status_code == 200
    assert response.text == "from network"
    assert fetcher.calls == [f"{ORIGIN}/app.js?v=2"]


def test_missing_precache_entry_maps_to_503(client_for):
    client = client_for(["/app.js"], fallback_to_network=False)

    response = client.get("/app.js")

    assert response.status_code == 503
    data = response.json()
    assert data["code"] == "missing-precache-entry"
    assert data["details"] == {"url": f"{ORIGIN}/app.js", "cacheName": CACHE_NAME}


def test_not_precached_maps_to_404(client_for, store):
    client = client_for(["/app.js"])

    response = client.get("/other.js")

    assert response.status_code == 404
    assert response.json()["code"] == "not-precached"
    assert store.calls == []


def test_network_error_maps_to_502(client_for, fetcher):
    fetcher.error = httpx.ConnectError("connection refused")
    client = client_for(["/app.js"])

    response = client.get("/app.js")

    assert response.status_code == 502
    assert response.json()["code"] == "network-error"


def test_health(client_for, store):
    client = client_for([])

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cache_healthy": True, "cache_name": CACHE_NAME}

    store.healthy = False
    assert client.get("/health").json()["status"] == "unhealthy"
