"""Infrastructure layer implementations for fullquerycache."""

from fullquerycache.infrastructure.backends import (
    InMemoryCacheBackend,
    PrefixingCacheBackend,
)
from fullquerycache.infrastructure.key_builders import CacheKeyBuilder
from fullquerycache.infrastructure.serializers import JsonSerializer

__all__ = [
    "InMemoryCacheBackend",
    "PrefixingCacheBackend",
    "CacheKeyBuilder",
    "JsonSerializer",
]
