"""Cache backend implementations."""

from fullquerycache.infrastructure.backends.memory import InMemoryCacheBackend
from fullquerycache.infrastructure.backends.prefixing import PrefixingCacheBackend

__all__ = ["InMemoryCacheBackend", "PrefixingCacheBackend"]
