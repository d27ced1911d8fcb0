"""fullquerycache - Session-aware full response caching for GraphQL APIs.

Serves whole GraphQL responses from a key-value store before a query
executes and stores fresh successful responses afterwards. Keys are
SHA-256 digests of the printed document, operation name, variables and
optional extra key data, partitioned by session:

- no session: callers without a session id share one entry.
- private: an entry scoped to one session id.
- authenticated public: an entry shared by every caller with a session.

Callers with a session read their private entry first and fall back to
the authenticated-public one.

Example with Ariadne:
    from ariadne import make_executable_schema
    from fullquerycache import (
        CacheHintPolicy,
        FullQueryCache,
        InMemoryCacheBackend,
    )
    from fullquerycache.adapters.ariadne import FullQueryCacheGraphQL

    def session_id(request_context):
        return request_context.request.headers.get("x-session-id")

    cache = FullQueryCache(
        backend=InMemoryCacheBackend(),
        session_id=session_id,
        policy=CacheHintPolicy(),
    )

    schema = make_executable_schema(type_defs, query)
    app = FullQueryCacheGraphQL(schema, cache=cache)

Dynamic cache hints in resolvers:
    from fullquerycache.hints import private_cache

    @query.field("me")
    async def resolve_me(_, info):
        private_cache(info, max_age=60)
        return await get_current_user(info)
"""

from fullquerycache.core.entities import (
    BaseCacheKey,
    CacheConfig,
    CacheConsistencyError,
    CacheControlContext,
    CacheHint,
    CachePartition,
    CacheScope,
    FieldCacheHint,
    RequestContext,
    ResponseCachePolicy,
    SessionContext,
    SessionMode,
)
from fullquerycache.core.interfaces import (
    ICacheBackend,
    ICachePolicy,
    IKeyBuilder,
    ISerializer,
    SerializationError,
)
from fullquerycache.core.services import (
    CacheHintPolicy,
    DefaultCachePolicy,
    FullQueryCache,
    LookupCoordinator,
    LookupResult,
    SessionClassifier,
    WriteGuard,
)
from fullquerycache.infrastructure import (
    CacheKeyBuilder,
    InMemoryCacheBackend,
    JsonSerializer,
    PrefixingCacheBackend,
)
__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "BaseCacheKey",
    "CacheConfig",
    "CachePartition",
    "SessionMode",
    "SessionContext",
    "RequestContext",
    "CacheConsistencyError",
    # Cache control
    "CacheHint",
    "CacheScope",
    "FieldCacheHint",
    "ResponseCachePolicy",
    "CacheControlContext",
    # Core interfaces
    "ICacheBackend",
    "ICachePolicy",
    "IKeyBuilder",
    "ISerializer",
    # Core services
    "FullQueryCache",
    "SessionClassifier",
    "LookupCoordinator",
    "LookupResult",
    "WriteGuard",
    "DefaultCachePolicy",
    "CacheHintPolicy",
    # Infrastructure implementations
    "CacheKeyBuilder",
    "InMemoryCacheBackend",
    "PrefixingCacheBackend",
    "JsonSerializer",
    "SerializationError",
]
