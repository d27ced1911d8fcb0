"""Redis cache backend implementation."""

import math
from datetime import timedelta
from typing import Optional

import redis.asyncio as redis


class RedisCacheBackend:
    """Redis cache backend for distributed deployments.

    Keys are stored as given. Wrap the backend in a
    ``PrefixingCacheBackend`` to share a database with other consumers.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        default_ttl: Optional[int] = 300,
        client: Optional[redis.Redis] = None,
    ) -> None:
        """Initialize the Redis cache backend.

        Args:
            redis_url: Redis connection URL.
            default_ttl: Default TTL in seconds. None stores without expiry.
            client: An existing client to use instead of connecting to redis_url.
        """
        self._redis: redis.Redis = client or redis.from_url(redis_url)  # type: ignore
        self._default_ttl = default_ttl

    async def get(self, key: str) -> Optional[bytes]:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value as bytes, or None if not found or expired.
        """
        return await self._redis.get(key)

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: Optional[timedelta] = None,
    ) -> None:
        """Store value with optional TTL.

        TTLs are rounded up to whole seconds, since SETEX rejects zero.

        Args:
            key: The cache key.
            value: The value to store as bytes.
            ttl: Optional time-to-live. If None, uses default.
        """
        if ttl is not None:
            await self._redis.setex(key, max(1, math.ceil(ttl.total_seconds())), value)
        elif self._default_ttl is not None:
            await self._redis.setex(key, self._default_ttl, value)
        else:
            await self._redis.set(key, value)

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheBackend":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
