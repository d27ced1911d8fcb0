"""Key builder interface."""

from typing import Protocol

from fullquerycache.core.entities.cache_key import BaseCacheKey, CachePartition


class IKeyBuilder(Protocol):
    """Contract for turning a base cache key into a store key.

    Implementations must be pure and deterministic: the same base key
    and partition always produce the same string, and distinct inputs
    produce distinct strings.
    """

    def build(self, base_key: BaseCacheKey, partition: CachePartition) -> str:
        """Build the store key for a query in a partition.

        Args:
            base_key: The query identification.
            partition: The session partition to read or write.

        Returns:
            The namespaced store key.
        """
        ...
