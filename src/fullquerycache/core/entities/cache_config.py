"""Cache configuration entity."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class CacheConfig:
    """Cache configuration.

    Provides configuration options for the full query cache,
    including the key namespace, the default TTL and feature toggles.

    The default TTL is used by the default cache policy, which stores
    every successful response. Pass a CacheHintPolicy to FullQueryCache
    to derive TTL and scope from cache hints instead.
    """

    enabled: bool = True
    default_ttl: timedelta | None = None
    key_prefix: str = "fqc:"

    # Mutations are executed without consulting or filling the cache
    cache_mutations: bool = False

    # Treat store failures as a miss on read and a skip on write
    fail_open: bool = True

    def __post_init__(self) -> None:
        """Set default TTL if not provided."""
        if self.default_ttl is None:
            self.default_ttl = timedelta(minutes=5)
