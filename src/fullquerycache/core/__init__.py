"""Core domain layer for fullquerycache."""

from fullquerycache.core.entities import (
    BaseCacheKey,
    CacheConfig,
    CacheConsistencyError,
    CachePartition,
    RequestContext,
    SessionContext,
    SessionMode,
)
from fullquerycache.core.interfaces import (
    ICacheBackend,
    ICachePolicy,
    IKeyBuilder,
    ISerializer,
)
from fullquerycache.core.services import (
    FullQueryCache,
    LookupCoordinator,
    SessionClassifier,
    WriteGuard,
)

__all__ = [
    # Entities
    "BaseCacheKey",
    "CacheConfig",
    "CacheConsistencyError",
    "CachePartition",
    "RequestContext",
    "SessionContext",
    "SessionMode",
    # Interfaces
    "ICacheBackend",
    "ICachePolicy",
    "IKeyBuilder",
    "ISerializer",
    # Services
    "FullQueryCache",
    "LookupCoordinator",
    "SessionClassifier",
    "WriteGuard",
]
