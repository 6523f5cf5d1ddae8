"""httpx-based network fetcher.

Used on a precache miss when network fallback is enabled. Responses are
returned exactly as received: error statuses are not raised and transport
failures (``httpx.ConnectError``, ``httpx.ReadTimeout``, ...) propagate to
the caller untouched.
"""

import httpx

from precache_handler.config import settings


class HttpxNetworkFetcher:
    """httpx implementation of the NetworkFetcher protocol.

    Example:
        ```python
        fetcher = HttpxNetworkFetcher.create()
        response = await fetcher.fetch("https://example.com/app.js")
        await fetcher.close()
        ```
    """

    def __init__(
        self,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds. Defaults to settings.fetch_timeout.
            client: Preconfigured client. If None, one is created on first use.
        """
        self._timeout = timeout or settings.fetch_timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @classmethod
    def create(cls, timeout: float | None = None) -> "HttpxNetworkFetcher":
        """Factory method to create HttpxNetworkFetcher with defaults."""
        return cls(timeout=timeout)

    async def fetch(self, url: str) -> httpx.Response:
        """Fetch ``url`` with a GET request.

        Args:
            url: Fully qualified URL to fetch

        Returns:
            The network response, whatever its status

        Raises:
            httpx.TransportError: If the request could not be completed
        """
        return await self.client.get(url)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
