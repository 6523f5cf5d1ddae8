"""Shared fixtures and protocol fakes."""

import httpx
import pytest

from precache_handler.handlers import create_handler
from precache_handler.repositories import PrecacheManifest
from precache_handler.services import PrecacheService

ORIGIN = "http://localhost:8000"
SCOPE_URL = f"{ORIGIN}/test/workbox-precaching/sw/"
CACHE_NAME = f"workbox-precache-v2-{SCOPE_URL}"


class FakeCacheStore:
    """In-memory CacheStore that records every key it is asked for."""

    def __init__(self, cache_name: str = CACHE_NAME, responses: dict[str, httpx.Response] | None = None) -> None:
        self._cache_name = cache_name
        self.responses = dict(responses or {})
        self.calls: list[str] = []
        self.healthy = True

    @property
    def cache_name(self) -> str:
        return self._cache_name

    async def get(self, cache_key: str) -> httpx.Response | None:
        self.calls.append(cache_key)
        return self.responses.get(cache_key)

    async def health_check(self) -> bool:
        return self.healthy


class FakeNetworkFetcher:
    """NetworkFetcher that replays queued responses or raises ``error``."""

    def __init__(self, responses: list[httpx.Response] | None = None, error: Exception | None = None) -> None:
        self.responses = list(responses or [])
        self.error = error
        self.calls: list[str] = []

    async def fetch(self, url: str) -> httpx.Response:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, text=f"network {url}")


@pytest.fixture
def store():
    return FakeCacheStore()


@pytest.fixture
def fetcher():
    return FakeNetworkFetcher()


@pytest.fixture
def build_handler(store, fetcher):
    """Build a handler over a manifest of ``entries`` and the shared fakes."""

    def _build(entries=(), fallback_to_network=True):
        manifest = PrecacheManifest(entries, origin=ORIGIN)
        service = PrecacheService(resolver=manifest, cache_store=store, origin=ORIGIN)
        return create_handler(fallback_to_network, service=service, fetcher=fetcher)

    return _build
