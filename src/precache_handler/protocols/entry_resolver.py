"""Precache entry resolver protocol."""

from collections.abc import Awaitable
from typing import Protocol, runtime_checkable

from precache_handler.entities import PrecacheEntry


@runtime_checkable
class PrecacheEntryResolver(Protocol):
    """Read-only lookup table from request URL to precache entry.

    ``lookup`` may be a plain method or a coroutine; callers await the
    result when it is awaitable.
    """

    def lookup(
        self, normalized_url: str
    ) -> PrecacheEntry | None | Awaitable[PrecacheEntry | None]:
        """Find the entry for a normalized (query-less, absolute) URL.

        Args:
            normalized_url: Origin plus path of the incoming request

        Returns:
            The matching entry, or None if the URL is not precached
        """
        ...
