"""Cache lookup result entity."""

from dataclasses import dataclass

import httpx

from .precache_entry import PrecacheEntry


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one store lookup for a resolved entry.

    Attributes:
        entry: The precache entry the request resolved to
        cache_key: The key the store was queried with
        response: The stored response, or None on a miss
    """

    entry: PrecacheEntry
    cache_key: str
    response: httpx.Response | None = None

    @property
    def is_hit(self) -> bool:
        return self.response is not None
