"""Network fetcher protocol."""

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class NetworkFetcher(Protocol):
    """Protocol for live network fetches on a cache miss."""

    async def fetch(self, url: str) -> httpx.Response:
        """Fetch ``url`` from the network.

        Transport failures are raised as-is (e.g. ``httpx.ConnectError``).
        Error status codes are returned, not raised.
        """
        ...
