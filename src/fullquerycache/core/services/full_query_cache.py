"""Full query cache - main orchestrator for caching operations."""

import logging
from typing import Any

from fullquerycache.core.entities.cache_config import CacheConfig
from fullquerycache.core.entities.cache_control import CacheControlContext
from fullquerycache.core.entities.cache_key import BaseCacheKey
from fullquerycache.core.entities.session import RequestContext, SessionContext
from fullquerycache.core.interfaces.cache_backend import ICacheBackend
from fullquerycache.core.interfaces.cache_policy import ICachePolicy
from fullquerycache.core.interfaces.key_builder import IKeyBuilder
from fullquerycache.core.interfaces.serializer import ISerializer
from fullquerycache.core.services.cache_policy import DefaultCachePolicy
from fullquerycache.core.services.lookup_coordinator import (
    LookupCoordinator,
    LookupResult,
)
from fullquerycache.core.services.session_classifier import (
    ExtraCacheKeyDataHook,
    SessionClassifier,
    SessionIdHook,
)
from fullquerycache.core.services.write_guard import WriteGuard
from fullquerycache.infrastructure.key_builders.default import CacheKeyBuilder
from fullquerycache.infrastructure.serializers.json import JsonSerializer

logger = logging.getLogger(__name__)


class FullQueryCache:
    """Caches whole GraphQL responses per query, variables and session.

    This is the main entry point used by the framework adapters,
    composing the session classifier, lookup coordinator and write
    guard over a single backend. It keeps no per-request state: each
    request carries its own SessionContext from classify() to write().

    Typical request flow::

        session = await cache.classify(request_context)
        base_key = cache.base_key(document, operation_name, variables, session)
        result = await cache.lookup(base_key, session)
        if result.hit:
            return result.response
        response = await execute()
        await cache.write(base_key, session, response)
    """

    def __init__(
        self,
        backend: ICacheBackend,
        session_id: SessionIdHook | None = None,
        extra_cache_key_data: ExtraCacheKeyDataHook | None = None,
        policy: ICachePolicy | None = None,
        key_builder: IKeyBuilder | None = None,
        serializer: ISerializer | None = None,
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            backend: The cache backend to use for storage.
            session_id: Hook returning the caller's session id, or None.
            extra_cache_key_data: Hook returning additional key data.
            policy: Decides TTL and scope. Defaults to DefaultCachePolicy
                with the configured default TTL.
            key_builder: Builds store keys. Defaults to CacheKeyBuilder
                with the configured key prefix.
            serializer: Encodes responses. Defaults to JsonSerializer.
            config: Optional cache configuration. Uses defaults if not provided.
        """
        self._config = config or CacheConfig()
        self._backend = backend
        self._classifier = SessionClassifier(
            session_id=session_id,
            extra_cache_key_data=extra_cache_key_data,
        )
        self._policy = policy or DefaultCachePolicy(ttl=self._config.default_ttl)
        self._key_builder = key_builder or CacheKeyBuilder(prefix=self._config.key_prefix)
        self._serializer = serializer or JsonSerializer()

        self._coordinator = LookupCoordinator(
            backend=backend,
            key_builder=self._key_builder,
            serializer=self._serializer,
            fail_open=self._config.fail_open,
        )
        self._guard = WriteGuard(
            backend=backend,
            key_builder=self._key_builder,
            serializer=self._serializer,
            policy=self._policy,
            has_session_hook=self._classifier.has_session_hook,
            fail_open=self._config.fail_open,
        )

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def backend(self) -> ICacheBackend:
        """Get the cache backend."""
        return self._backend

    @property
    def key_builder(self) -> IKeyBuilder:
        """Get the key builder."""
        return self._key_builder

    async def classify(self, request_context: RequestContext) -> SessionContext:
        """Resolve the session of a request by running the hooks.

        Hook exceptions propagate.
        """
        return await self._classifier.classify(request_context)

    def base_key(
        self,
        document: str,
        operation_name: str | None,
        variables: dict[str, Any] | None,
        session: SessionContext,
    ) -> BaseCacheKey:
        """Build the base cache key of a classified request.

        Args:
            document: The canonical printed query document.
            operation_name: The operation name, if any.
            variables: The request variables, if any.
            session: The classified session, providing the extra key data.

        Returns:
            The BaseCacheKey used for both lookup and write.
        """
        return BaseCacheKey(
            document=document,
            operation_name=operation_name,
            variables=variables or {},
            extra=session.extra_cache_key_data,
        )

    async def lookup(
        self,
        base_key: BaseCacheKey,
        session: SessionContext,
    ) -> LookupResult:
        """Try to get the cached response for a request.

        Returns:
            The hit, or a miss when nothing is cached or caching is disabled.
        """
        if not self._config.enabled:
            return LookupResult.miss()
        return await self._coordinator.lookup(base_key, session)

    async def write(
        self,
        base_key: BaseCacheKey,
        session: SessionContext,
        response: dict[str, Any],
        cache_control: CacheControlContext | None = None,
    ) -> bool:
        """Cache a freshly executed response if it is eligible.

        Returns:
            True if the response was written to the store.
        """
        if not self._config.enabled:
            return False
        return await self._guard.write(base_key, session, response, cache_control)

    def new_cache_control(self) -> CacheControlContext:
        """Create the per-request hint collector passed to resolvers."""
        return CacheControlContext()
