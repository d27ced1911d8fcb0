"""Pre-execution cache lookup."""

import logging
from dataclasses import dataclass
from typing import Any

from fullquerycache.core.entities.cache_key import BaseCacheKey, CachePartition
from fullquerycache.core.entities.session import (
    CacheConsistencyError,
    SessionContext,
)
from fullquerycache.core.interfaces.cache_backend import ICacheBackend
from fullquerycache.core.interfaces.key_builder import IKeyBuilder
from fullquerycache.core.interfaces.serializer import ISerializer, SerializationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a cache lookup.

    ``partition`` is the partition the response was found in, or None
    on a miss.
    """

    response: Any = None
    partition: CachePartition | None = None

    @property
    def hit(self) -> bool:
        return self.partition is not None

    @classmethod
    def miss(cls) -> "LookupResult":
        return cls()


class LookupCoordinator:
    """Reads a cached response for a request before it executes.

    Without a session a single read is made in the no-session partition.
    With a session the private partition is read first and returned on a
    hit; only on a private miss is the authenticated-public partition
    read. A logged-in caller therefore never sees the shared answer when
    a personalized one exists, and still benefits from the shared answer
    otherwise.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        key_builder: IKeyBuilder,
        serializer: ISerializer,
        fail_open: bool = True,
    ) -> None:
        """Initialize the coordinator.

        Args:
            backend: The store to read from.
            key_builder: Builds the store key for each partition.
            serializer: Decodes stored responses.
            fail_open: Treat store errors as a miss instead of raising.
        """
        self._backend = backend
        self._key_builder = key_builder
        self._serializer = serializer
        self._fail_open = fail_open

    async def lookup(
        self,
        base_key: BaseCacheKey,
        session: SessionContext,
    ) -> LookupResult:
        """Look up the cached response for a classified request.

        Args:
            base_key: The query identification.
            session: The request's session context.

        Returns:
            The hit, or LookupResult.miss().

        Raises:
            CacheConsistencyError: If the request was not classified.
        """
        if not session.hooks_invoked:
            raise CacheConsistencyError(
                "Cache lookup attempted before session classification"
            )

        if session.session_id is None:
            return await self._get(base_key, CachePartition.no_session())

        private = await self._get(
            base_key, CachePartition.private(session.session_id)
        )
        if private.hit:
            return private
        return await self._get(base_key, CachePartition.authenticated_public())

    async def _get(
        self,
        base_key: BaseCacheKey,
        partition: CachePartition,
    ) -> LookupResult:
        key = self._key_builder.build(base_key, partition)

        try:
            data = await self._backend.get(key)
        except Exception:
            if not self._fail_open:
                raise
            logger.warning("Cache read failed for %s, treating as miss", key, exc_info=True)
            return LookupResult.miss()

        if data is None:
            logger.debug("MISS (%s)", partition.mode.name)
            return LookupResult.miss()

        try:
            response = self._serializer.deserialize(data)
        except SerializationError:
            logger.warning("Ignoring undecodable cache entry %s", key, exc_info=True)
            return LookupResult.miss()

        if not isinstance(response, dict):
            logger.warning("Ignoring cache entry %s: not a response object", key)
            return LookupResult.miss()

        logger.debug("HIT (%s)", partition.mode.name)
        return LookupResult(response=response, partition=partition)
