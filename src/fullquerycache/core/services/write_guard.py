"""Post-execution cache write."""

import logging
from datetime import timedelta
from typing import Any

from fullquerycache.core.entities.cache_control import (
    CacheControlContext,
    CacheScope,
    ResponseCachePolicy,
)
from fullquerycache.core.entities.cache_key import BaseCacheKey, CachePartition
from fullquerycache.core.entities.session import (
    CacheConsistencyError,
    SessionContext,
)
from fullquerycache.core.interfaces.cache_backend import ICacheBackend
from fullquerycache.core.interfaces.cache_policy import ICachePolicy
from fullquerycache.core.interfaces.key_builder import IKeyBuilder
from fullquerycache.core.interfaces.serializer import ISerializer

logger = logging.getLogger(__name__)


def is_cacheable_response(response: Any) -> bool:
    """Whether a response may be cached at all.

    Responses with errors or without data are never cached.
    """
    if not isinstance(response, dict):
        return False
    if response.get("errors"):
        return False
    return response.get("data") is not None


class WriteGuard:
    """Stores a freshly executed response in the right partition.

    Partition selection:

    - PRIVATE policy with a session id: the session's private partition.
    - PRIVATE policy without a session id: not stored. When no session
      id hook is configured at all a warning is logged, since PRIVATE
      hints can then never be honored.
    - PUBLIC policy: no-session partition for anonymous callers,
      authenticated-public partition for callers with a session.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
        policy: ICachePolicy,
        has_session_hook: bool = False,
        fail_open: bool = True,
    ) -> None:
        """Initialize the write guard.

        Args:
            backend: The store to write to.
            key_builder: Builds the store key for the chosen partition.
            serializer: Encodes the response.
            policy: Decides TTL and scope of eligible responses.
            has_session_hook: Whether a session id hook is configured.
            fail_open: Swallow store errors (logged) instead of raising.
        """
        self._backend = backend
        self._key_builder = key_builder
        self._serializer = serializer
        self._policy = policy
        self._has_session_hook = has_session_hook
        self._fail_open = fail_open

    async def write(
        self,
        base_key: BaseCacheKey,
        session: SessionContext,
        response: dict[str, Any],
        cache_control: CacheControlContext | None = None,
    ) -> bool:
        """Store the response if it is eligible.

        Args:
            base_key: The query identification used for the lookup.
            session: The request's session context.
            response: The final response.
            cache_control: Hints collected during execution.

        Returns:
            True if a store write was issued.

        Raises:
            CacheConsistencyError: If a cacheable response is written for
                a request that was never classified.
        """
        if not is_cacheable_response(response):
            logger.debug("Not caching response with errors or without data")
            return False

        # The partition depends on the classified session id.
        if not session.hooks_invoked:
            raise CacheConsistencyError(
                "Cache write attempted without session classification"
            )

        policy = self._policy.decide(response, cache_control)
        if not policy.is_cacheable:
            logger.debug("Not caching response: policy max_age is 0")
            return False

        partition = self._select_partition(policy, session)
        if partition is None:
            return False

        key = self._key_builder.build(base_key, partition)
        value = self._serializer.serialize(self._stored_response(response))

        try:
            await self._backend.set(key, value, timedelta(seconds=policy.max_age))
        except Exception:
            if not self._fail_open:
                raise
            logger.warning("Cache write failed for %s, skipping", key, exc_info=True)
            return False

        logger.debug("Cached %s (TTL: %ss)", partition.mode.name, policy.max_age)
        return True

    def _select_partition(
        self,
        policy: ResponseCachePolicy,
        session: SessionContext,
    ) -> CachePartition | None:
        if policy.scope is CacheScope.PRIVATE:
            if session.session_id is not None:
                return CachePartition.private(session.session_id)
            if not self._has_session_hook:
                logger.warning(
                    "PRIVATE response not cached: no session_id hook configured"
                )
            else:
                logger.debug("PRIVATE response not cached: no session")
            return None
        if policy.scope is CacheScope.PUBLIC:
            if session.session_id is None:
                return CachePartition.no_session()
            return CachePartition.authenticated_public()
        raise ValueError(f"Unknown cache scope: {policy.scope!r}")

    @staticmethod
    def _stored_response(response: dict[str, Any]) -> dict[str, Any]:
        # Only data is replayed; extensions belong to the original execution.
        return {"data": response["data"]}
