#!/usr/bin/env python3
"""
Demo script for the precache handler.

Runs the handler against an in-memory store and a mocked network, printing
which branch each request takes. No Redis or network access needed.
"""

import asyncio

import httpx

from precache_handler import (
    HttpxNetworkFetcher,
    MissingPrecacheEntryError,
    PrecacheManifest,
    PrecacheService,
    create_handler,
    get_precache_name,
)

ORIGIN = "https://example.com"


class DictCacheStore:
    """Minimal CacheStore over a dict."""

    def __init__(self, cache_name: str, responses: dict[str, httpx.Response]) -> None:
        self.cache_name = cache_name
        self._responses = responses

    async def get(self, cache_key: str) -> httpx.Response | None:
        return self._responses.get(cache_key)


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def main() -> None:
    manifest = PrecacheManifest(
        ["/index.html", {"url": "/app.js", "revision": "abc123"}, {"url": "/app.css", "revision": "def456"}],
        origin=ORIGIN,
    )
    store = DictCacheStore(
        get_precache_name("workbox", f"{ORIGIN}/"),
        {
            f"{ORIGIN}/index.html": httpx.Response(200, text="<h1>cached index</h1>"),
            f"{ORIGIN}/app.js?__WB_REVISION__=abc123": httpx.Response(200, text="console.log('cached')"),
        },
    )
    network = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, text=f"live {request.url}")))
    fetcher = HttpxNetworkFetcher(client=network)
    service = PrecacheService.create(resolver=manifest, cache_store=store, origin=ORIGIN)

    print_section("Cache keys")
    for url in manifest.cached_urls:
        print(f"  {url} -> {manifest.get_cache_key_for_url(url)}")

    print_section("Fallback to network (default)")
    handler = create_handler(service=service, fetcher=fetcher)
    for path in ["/", "/app.js", "/app.css", "/robots.txt"]:
        response = await handler(path)
        print(f"  {path:12} -> {response.text if response is not None else 'pass-through'}")

    print_section("Cache only")
    handler = create_handler(False, service=service, fetcher=fetcher)
    for path in ["/app.js", "/app.css"]:
        try:
            response = await handler(path)
            print(f"  {path:12} -> {response.text}")
        except MissingPrecacheEntryError as e:
            print(f"  {path:12} -> {e.code}: {e.details}")

    await fetcher.close()


if __name__ == "__main__":
    asyncio.run(main())
