"""Precache lookup service.

Turns a request URL into a stored response: normalize the URL, resolve it
to a precache entry, derive the cache key and query the store once.
The fallback decision is left to the handler.
"""

import inspect
import logging

import httpx

from precache_handler.config import settings
from precache_handler.entities import LookupResult, PrecacheEntry
from precache_handler.protocols import CacheStore, PrecacheEntryResolver
from precache_handler.urls import normalize_url, resolve_url

logger = logging.getLogger(__name__)


class PrecacheService:
    """Read-only precache lookups over an injected resolver and store.

    This service depends on PROTOCOLS, not concrete implementations:
    - PrecacheEntryResolver: the manifest, or anything with ``lookup``
    - CacheStore: Redis, or anything with an async ``get``

    Example:
        ```python
        service = PrecacheService(
            resolver=PrecacheManifest(["/app.js"], origin="https://example.com"),
            cache_store=RedisCacheStore.create("workbox-precache-v2-https://example.com/"),
            origin="https://example.com",
        )
        ```
    """

    def __init__(
        self,
        resolver: PrecacheEntryResolver,
        cache_store: CacheStore,
        cache_name: str | None = None,
        origin: str | None = None,
    ) -> None:
        """Initialize the precache service.

        Args:
            resolver: Precache entry lookup table (required).
            cache_store: Response store to read from (required).
            cache_name: Namespace reported in errors. Defaults to the store's.
            origin: Base for relative request URLs. Defaults to settings.
        """
        self._resolver = resolver
        self._store = cache_store
        self._cache_name = cache_name or cache_store.cache_name
        self._origin = origin or settings.origin

    @classmethod
    def create(
        cls,
        resolver: PrecacheEntryResolver,
        cache_store: CacheStore,
        origin: str | None = None,
    ) -> "PrecacheService":
        """Factory method to create PrecacheService with defaults from settings."""
        return cls(resolver=resolver, cache_store=cache_store, origin=origin)

    def absolute_url(self, url: str) -> str:
        """Fully qualified form of ``url``, query kept, fragment dropped."""
        return resolve_url(url, self._origin)

    def normalize(self, url: str) -> str:
        """Reduce ``url`` to the origin and path used for entry matching."""
        return normalize_url(url, self._origin)

    async def resolve(self, url: str) -> PrecacheEntry | None:
        """Find the precache entry a request URL maps to.

        Args:
            url: Request URL, absolute or relative to the origin

        Returns:
            The matching entry, or None if the URL is not precached
        """
        entry = self._resolver.lookup(self.normalize(url))
        if inspect.isawaitable(entry):
            entry = await entry
        return entry

    async def lookup(self, entry: PrecacheEntry) -> LookupResult:
        """Query the store once for ``entry``'s cache key.

        Args:
            entry: A resolved precache entry

        Returns:
            LookupResult with the stored response, or a miss
        """
        cache_key = entry.cache_key
        response = await self._store.get(cache_key)
        return LookupResult(entry=entry, cache_key=cache_key, response=response)

    async def match_precache(self, url: str) -> httpx.Response | None:
        """Return the stored response for a precached URL.

        Returns None both when the URL is not precached and when the store
        has nothing for it.
        """
        entry = await self.resolve(url)
        if entry is None:
            return None
        return (await self.lookup(entry)).response

    async def get_cache_key_for_url(self, url: str) -> str | None:
        """Return the cache key a request URL would be looked up under."""
        entry = await self.resolve(url)
        return entry.cache_key if entry else None

    @property
    def cache_name(self) -> str:
        return self._cache_name

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def cache_store(self) -> CacheStore:
        """Get the underlying store (for testing)."""
        return self._store

    @property
    def resolver(self) -> PrecacheEntryResolver:
        """Get the underlying resolver (for testing)."""
        return self._resolver
