"""Domain services for fullquerycache."""

from fullquerycache.core.services.cache_policy import (
    CacheHintPolicy,
    DefaultCachePolicy,
)
from fullquerycache.core.services.full_query_cache import FullQueryCache
from fullquerycache.core.services.lookup_coordinator import (
    LookupCoordinator,
    LookupResult,
)
from fullquerycache.core.services.session_classifier import SessionClassifier
from fullquerycache.core.services.write_guard import (
    WriteGuard,
    is_cacheable_response,
)

__all__ = [
    "FullQueryCache",
    "SessionClassifier",
    "LookupCoordinator",
    "LookupResult",
    "WriteGuard",
    "is_cacheable_response",
    # Cache policies
    "DefaultCachePolicy",
    "CacheHintPolicy",
]
