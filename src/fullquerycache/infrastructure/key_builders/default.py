"""Default key builder implementation."""

from fullquerycache.core.entities.cache_key import BaseCacheKey, CachePartition
from fullquerycache.utils.hashing import hash_value

DEFAULT_KEY_PREFIX = "fqc:"


class CacheKeyBuilder:
    """Key builder hashing the base key together with its partition.

    Keys have the form ``<prefix><sha256 hex>`` where the digest covers
    the document, operation name, variables, extra key data, the session
    id for private partitions, and the session mode.
    """

    def __init__(self, prefix: str = DEFAULT_KEY_PREFIX) -> None:
        """Initialize the key builder.

        Args:
            prefix: Namespace prepended to every key.
        """
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        """The namespace prepended to every key."""
        return self._prefix

    def build(self, base_key: BaseCacheKey, partition: CachePartition) -> str:
        """Build the store key for a query in a partition.

        Args:
            base_key: The query identification.
            partition: The session partition to read or write.

        Returns:
            The namespaced store key.
        """
        return f"{self._prefix}{hash_value(base_key.to_dict(partition))}"
