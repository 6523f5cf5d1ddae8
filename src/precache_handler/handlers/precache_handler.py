"""Cache-first request handler for precached assets.

Per request the handler runs one linear chain:

    normalize -> resolve entry -> cache key -> store lookup
        hit  -> stored response
        miss -> network fetch (fallback on) | MissingPrecacheEntryError (fallback off)

A request that resolves to no entry is not a precache candidate. With
fallback on the handler returns ``PASS_THROUGH`` so the caller can route it
elsewhere; with fallback off nothing can serve it and the handler raises
MissingPrecacheEntryError.
"""

import logging
from typing import Any

import httpx

from precache_handler.exceptions import MissingPrecacheEntryError
from precache_handler.protocols import NetworkFetcher
from precache_handler.services import PrecacheService

logger = logging.getLogger(__name__)

PASS_THROUGH = None


class PrecacheHandler:
    """Callable request handler bound to a fallback policy.

    Holds no mutable state: the policy and collaborators are fixed at
    construction, so one instance serves concurrent requests.

    Example:
        ```python
        handler = create_handler(service=service, fetcher=HttpxNetworkFetcher.create())
        response = await handler(httpx.Request("GET", "https://example.com/app.js"))
        ```
    """

    def __init__(
        self,
        service: PrecacheService,
        fetcher: NetworkFetcher,
        fallback_to_network: bool = True,
    ) -> None:
        """Initialize the handler.

        Args:
            service: Precache lookup service (required).
            fetcher: Network fetcher used on a miss (required).
            fallback_to_network: Fetch from the network on a miss instead of
                raising MissingPrecacheEntryError.
        """
        self._service = service
        self._fetcher = fetcher
        self._fallback_to_network = bool(fallback_to_network)

    @classmethod
    def create(
        cls,
        service: PrecacheService,
        fetcher: NetworkFetcher,
        fallback_to_network: bool = True,
    ) -> "PrecacheHandler":
        """Factory method, equivalent to ``create_handler``."""
        return cls(service=service, fetcher=fetcher, fallback_to_network=fallback_to_network)

    @property
    def fallback_to_network(self) -> bool:
        return self._fallback_to_network

    async def __call__(
        self,
        request: httpx.Request | str,
        event: Any = None,
    ) -> httpx.Response | None:
        """Serve one intercepted request.

        Args:
            request: The request, or its URL. Relative URLs resolve against
                the service origin.
            event: Opaque context from the interception layer. Unused.

        Returns:
            The stored response on a hit, the network response on a miss with
            fallback on, or ``PASS_THROUGH`` for URLs that are not precached.

        Raises:
            MissingPrecacheEntryError: No stored response and fallback is off
            httpx.TransportError: The fallback fetch failed
        """
        url = self._service.absolute_url(str(request.url) if isinstance(request, httpx.Request) else request)

        entry = await self._service.resolve(url)
        if entry is None:
            if self._fallback_to_network:
                logger.debug("Not precached, passing through: %s", url)
                return PASS_THROUGH
            logger.debug("Not precached and fallback disabled: %s", url)
            raise MissingPrecacheEntryError(url=url, cache_name=self._service.cache_name)

        result = await self._service.lookup(entry)
        if result.is_hit:
            logger.debug("Precache hit: %s -> %s", url, result.cache_key)
            return result.response

        if not self._fallback_to_network:
            logger.debug("Precache miss, fallback disabled: %s -> %s", url, result.cache_key)
            raise MissingPrecacheEntryError(url=url, cache_name=self._service.cache_name)

        logger.debug("Precache miss, fetching from network: %s", url)
        return await self._fetcher.fetch(url)


def create_handler(
    fallback_to_network: bool = True,
    *,
    service: PrecacheService,
    fetcher: NetworkFetcher,
) -> PrecacheHandler:
    """Create a request handler bound to a fallback policy.

    Args:
        fallback_to_network: Fetch from the network when the store misses.
        service: Precache lookup service.
        fetcher: Network fetcher used on a miss.

    Returns:
        A reusable, stateless PrecacheHandler
    """
    return PrecacheHandler.create(service=service, fetcher=fetcher, fallback_to_network=fallback_to_network)
