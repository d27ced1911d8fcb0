"""Domain entities for fullquerycache."""

from fullquerycache.core.entities.cache_config import CacheConfig
from fullquerycache.core.entities.cache_control import (
    CacheControlContext,
    CacheHint,
    CacheScope,
    FieldCacheHint,
    ResponseCachePolicy,
)
from fullquerycache.core.entities.cache_key import (
    BaseCacheKey,
    CachePartition,
    SessionMode,
)
from fullquerycache.core.entities.session import (
    CacheConsistencyError,
    RequestContext,
    SessionContext,
)

__all__ = [
    "BaseCacheKey",
    "CachePartition",
    "SessionMode",
    "SessionContext",
    "RequestContext",
    "CacheConsistencyError",
    "CacheConfig",
    "CacheControlContext",
    "CacheHint",
    "CacheScope",
    "FieldCacheHint",
    "ResponseCachePolicy",
]
