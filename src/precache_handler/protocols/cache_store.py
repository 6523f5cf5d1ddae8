"""Cache storage protocol.

Defines the read side of a response store scoped to one precache
namespace. Population of the store happens elsewhere; nothing in this
package ever writes to it.

Implementations can include:
- Redis hashes (default)
- An in-process dictionary (tests)
- Any key-value store that can return a full HTTP response
"""

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for precache response stores.

    Example:
        ```python
        store: CacheStore = RedisCacheStore.create("workbox-precache-v2-https://example.com/")
        response = await store.get("https://example.com/app.js?__WB_REVISION__=abc123")
        ```
    """

    @property
    def cache_name(self) -> str:
        """Return the namespace this store is scoped to."""
        ...

    async def get(self, cache_key: str) -> httpx.Response | None:
        """Look up a stored response.

        Args:
            cache_key: The exact key the response was stored under

        Returns:
            The stored response, or None when nothing is stored at that key
        """
        ...
