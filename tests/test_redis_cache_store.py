"""
Tests for the Redis-backed cache store.
"""

import json
from unittest.mock import AsyncMock

import pytest

from precache_handler.protocols import CacheStore
from precache_handler.repositories import RedisCacheStore

CACHE_NAME = "workbox-precache-v2-https://example.com/"


@pytest.fixture
def redis_client():
    return AsyncMock()


@pytest.fixture
def cache_store(redis_client):
    return RedisCacheStore(cache_name=CACHE_NAME, redis_client=redis_client)


def test_satisfies_protocol(cache_store):
    assert isinstance(cache_store, CacheStore)
    assert cache_store.cache_name == CACHE_NAME


@pytest.mark.asyncio
async def test_get_hit(cache_store, redis_client):
    redis_client.hgetall.return_value = {
        b"status": b"200",
        b"headers": json.dumps([["content-type", "application/javascript"], ["etag", '"v1"']]).encode(),
        b"body": b"console.log(1)",
    }

    response = await cache_store.get("https://example.com/app.js?__WB_REVISION__=abc123")

    redis_client.hgetall.assert_awaited_once_with(f"{CACHE_NAME}:https://example.com/app.js?__WB_REVISION__=abc123")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/javascript"
    assert response.headers["etag"] == '"v1"'
    assert response.text == "console.log(1)"


@pytest.mark.asyncio
async def test_get_miss(cache_store, redis_client):
    redis_client.hgetall.return_value = {}

    assert await cache_store.get("https://example.com/missing.js") is None


@pytest.mark.asyncio
async def test_get_never_writes(cache_store, redis_client):
    redis_client.hgetall.return_value = {}

    await cache_store.get("https://example.com/a.js")

    redis_client.hset.assert_not_called()
    redis_client.set.assert_not_called()
    redis_client.delete.assert_not_called()


@pytest.mark.asyncio
async def test_malformed_record_raises(cache_store, redis_client):
    redis_client.hgetall.return_value = {b"body": b"no status"}

    with pytest.raises(ValueError, match="Malformed cached response"):
        await cache_store.get("https://example.com/a.js")


@pytest.mark.asyncio
async def test_health_check(cache_store, redis_client):
    redis_client.ping.return_value = True
    assert await cache_store.health_check() is True

    redis_client.ping.side_effect = ConnectionError("down")
    assert await cache_store.health_check() is False


@pytest.mark.asyncio
async def test_close(cache_store, redis_client):
    await cache_store.close()
    redis_client.aclose.assert_awaited_once()
