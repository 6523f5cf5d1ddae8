"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Collaborators and handler stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from precache_handler.config import configure_logging, get_default_cache_name, settings
from precache_handler.handlers import PrecacheHandler, create_handler
from precache_handler.repositories import HttpxNetworkFetcher, PrecacheManifest, RedisCacheStore
from precache_handler.services import PrecacheService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> PrecacheHandler:
    """Dependency injection for PrecacheHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "precache_handler", None)
    if handler is None:
        raise RuntimeError("PrecacheHandler not initialized. Check lifespan setup.")
    return handler


def get_cache_store(request: Request) -> RedisCacheStore:
    """Dependency injection for the cache store from app.state.

    Raises:
        RuntimeError: If store is not initialized
    """
    store = getattr(request.app.state, "cache_store", None)
    if store is None:
        raise RuntimeError("Cache store not initialized. Check lifespan setup.")
    return store


def load_manifest() -> PrecacheManifest:
    """Load the manifest named by PRECACHE_MANIFEST, or an empty one."""
    if settings.manifest_path:
        return PrecacheManifest.from_file(settings.manifest_path)
    logger.warning("PRECACHE_MANIFEST is not set; no URLs will be served from the precache")
    return PrecacheManifest.create()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Manifest and Redis store (data access)
    2. Service (lookups) - app.state.precache_service
    3. Handler (fallback policy) - app.state.precache_handler

    Cleanup closes the HTTP client and the Redis pool.
    """
    configure_logging()

    cache_name = get_default_cache_name()
    manifest = load_manifest()
    cache_store = RedisCacheStore.create(cache_name=cache_name)
    fetcher = HttpxNetworkFetcher.create()

    service = PrecacheService.create(resolver=manifest, cache_store=cache_store)
    handler = create_handler(settings.fallback_to_network, service=service, fetcher=fetcher)

    app.state.cache_store = cache_store
    app.state.fetcher = fetcher
    app.state.precache_service = service
    app.state.precache_handler = handler

    logger.info("Precache handler initialized")
    logger.info("Cache name: %s", cache_name)
    logger.info("Entries: %d, fallback to network: %s", len(manifest), handler.fallback_to_network)

    yield

    await fetcher.close()
    await cache_store.close()

    del app.state.precache_handler
    del app.state.precache_service
    del app.state.fetcher
    del app.state.cache_store
    logger.info("Precache handler shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[PrecacheHandler, Depends(get_handler)]
CacheStoreDep = Annotated[RedisCacheStore, Depends(get_cache_store)]
