"""Precache Handler - cache-first serving of revisioned static assets.

This package provides a layered architecture for precache lookups:

Layers:
    - protocols: Interface contracts (CacheStore, PrecacheEntryResolver, NetworkFetcher)
    - repositories: Implementations (PrecacheManifest, RedisCacheStore, HttpxNetworkFetcher)
    - services: Resolution and store lookup
    - handlers: Request handler with the fallback policy
    - dto: Manifest file format and HTTP payloads
    - entities: Domain models (internal)

Usage:
    ```python
    from precache_handler import (
        HttpxNetworkFetcher,
        PrecacheManifest,
        PrecacheService,
        RedisCacheStore,
        create_handler,
    )

    manifest = PrecacheManifest(["/index.html", {"url": "/app.js", "revision": "abc123"}])
    service = PrecacheService.create(resolver=manifest, cache_store=RedisCacheStore.create())
    handler = create_handler(False, service=service, fetcher=HttpxNetworkFetcher.create())
    response = await handler("/app.js")
    ```

For HTTP API:
    ```python
    from precache_handler.api.app import app
    ```
"""

from precache_handler.config import get_default_cache_name, get_redis_client, settings
from precache_handler.entities import LookupResult, PrecacheEntry
from precache_handler.exceptions import (
    ConflictingPrecacheEntriesError,
    InvalidPrecacheEntryError,
    MissingPrecacheEntryError,
    PrecacheError,
)
from precache_handler.handlers import PASS_THROUGH, PrecacheHandler, create_handler
from precache_handler.protocols import CacheStore, NetworkFetcher, PrecacheEntryResolver
from precache_handler.repositories import HttpxNetworkFetcher, PrecacheManifest, RedisCacheStore
from precache_handler.services import PrecacheService
from precache_handler.urls import REVISION_SEARCH_PARAM, create_cache_key, get_precache_name

__all__ = [
    # Configuration
    "settings",
    "get_default_cache_name",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "NetworkFetcher",
    "PrecacheEntryResolver",
    # Services
    "PrecacheService",
    # Handlers
    "PASS_THROUGH",
    "PrecacheHandler",
    "create_handler",
    # Repositories
    "HttpxNetworkFetcher",
    "PrecacheManifest",
    "RedisCacheStore",
    # Entities
    "LookupResult",
    "PrecacheEntry",
    # Errors
    "PrecacheError",
    "MissingPrecacheEntryError",
    "InvalidPrecacheEntryError",
    "ConflictingPrecacheEntriesError",
    # Cache keys
    "REVISION_SEARCH_PARAM",
    "create_cache_key",
    "get_precache_name",
]
