"""Repository layer for the handler's collaborators.

Concrete implementations of the protocols in ``precache_handler.protocols``:
- PrecacheManifest: in-memory PrecacheEntryResolver
- RedisCacheStore: read-only CacheStore backed by Redis
- HttpxNetworkFetcher: NetworkFetcher backed by httpx

The repositories are protocol-based (structural typing), not inheritance-based.
"""

from precache_handler.protocols import CacheStore, NetworkFetcher, PrecacheEntryResolver

from .httpx_fetcher import HttpxNetworkFetcher
from .manifest_resolver import PrecacheManifest
from .redis_cache_store import RedisCacheStore

__all__ = [
    "CacheStore",
    "NetworkFetcher",
    "PrecacheEntryResolver",
    "HttpxNetworkFetcher",
    "PrecacheManifest",
    "RedisCacheStore",
]
