"""Cache key builder implementations."""

from fullquerycache.infrastructure.key_builders.default import (
    DEFAULT_KEY_PREFIX,
    CacheKeyBuilder,
)

__all__ = ["CacheKeyBuilder", "DEFAULT_KEY_PREFIX"]
