"""Protocol interfaces for the collaborators the handler consults.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the backing store (Redis -> anything with an async ``get``)
- Unit testing with fake implementations
- Keeping the handler free of registration and storage concerns

Usage:
    ```python
    from precache_handler.protocols import CacheStore, NetworkFetcher, PrecacheEntryResolver

    store: CacheStore = RedisCacheStore.create(cache_name)
    fetcher: NetworkFetcher = HttpxNetworkFetcher.create()
    resolver: PrecacheEntryResolver = PrecacheManifest(entries, origin)
    ```
"""

from .cache_store import CacheStore
from .entry_resolver import PrecacheEntryResolver
from .network_fetcher import NetworkFetcher

__all__ = [
    "CacheStore",
    "NetworkFetcher",
    "PrecacheEntryResolver",
]
