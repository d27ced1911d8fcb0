"""Redis backend for fullquerycache."""

from fullquerycache_redis.backend import RedisCacheBackend

__all__ = ["RedisCacheBackend"]
