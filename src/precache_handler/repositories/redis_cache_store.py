"""Redis implementation of CacheStore.

Stored responses live in Redis hashes keyed ``<cache_name>:<cache_key>``
with three fields:

- ``status``: decimal status code
- ``headers``: JSON array of ``[name, value]`` pairs
- ``body``: raw response bytes

This repository only reads. Whatever populates the precache writes the
same layout.
"""

import json
import logging

import httpx
import redis.asyncio as redis

from precache_handler.config import get_default_cache_name, get_redis_client

logger = logging.getLogger(__name__)


class RedisCacheStore:
    """Read-only Redis response store for one precache namespace.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        cache_name: str,
        redis_client: redis.Redis | None = None,
    ) -> None:
        """Initialize the Redis cache store.

        Args:
            cache_name: Precache namespace, used as the key prefix.
            redis_client: Async Redis client. If None, creates default.
        """
        self._cache_name = cache_name
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(
        cls,
        cache_name: str | None = None,
        redis_client: redis.Redis | None = None,
    ) -> "RedisCacheStore":
        """Factory method to create RedisCacheStore with defaults.

        Args:
            cache_name: Precache namespace. If None, derived from settings.
            redis_client: Async Redis client. If None, creates default.

        Returns:
            Configured RedisCacheStore
        """
        return cls(cache_name=cache_name or get_default_cache_name(), redis_client=redis_client)

    @property
    def cache_name(self) -> str:
        return self._cache_name

    def storage_key(self, cache_key: str) -> str:
        """Redis key holding the response for ``cache_key``."""
        return f"{self._cache_name}:{cache_key}"

    async def get(self, cache_key: str) -> httpx.Response | None:
        """Look up a stored response.

        Args:
            cache_key: The exact key the response was stored under

        Returns:
            The stored response, or None on a miss

        Raises:
            ValueError: If the stored record is malformed
            redis.RedisError: If Redis is unreachable
        """
        key = self.storage_key(cache_key)
        record: dict[bytes, bytes] = await self._client.hgetall(key)  # type: ignore[misc]
        if not record:
            return None
        return self._to_response(key, record)

    @staticmethod
    def _to_response(key: str, record: dict[bytes, bytes]) -> httpx.Response:
        try:
            status_code = int(record[b"status"])
            headers = [(name, value) for name, value in json.loads(record.get(b"headers", b"[]"))]
        except (KeyError, ValueError, TypeError) as e:
            raise ValueError(f"Malformed cached response at {key}: {e}") from e

        return httpx.Response(
            status_code=status_code,
            headers=headers,
            content=record.get(b"body", b""),
        )

    async def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except Exception:
            logger.warning("Redis health check failed", exc_info=True)
            return False

    async def close(self) -> None:
        """Close the Redis connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
