"""Key-prefixing backend decorator."""

from datetime import timedelta

from fullquerycache.core.interfaces.cache_backend import ICacheBackend


class PrefixingCacheBackend:
    """Wraps any backend and prefixes every key before delegating.

    Lets several consumers share one store without their keys
    colliding. Wrappers can be nested; prefixes concatenate from the
    outermost wrapper inwards.
    """

    def __init__(self, backend: ICacheBackend, prefix: str) -> None:
        """Initialize the wrapper.

        Args:
            backend: The backend to delegate to.
            prefix: Prefix prepended to every key.
        """
        self._backend = backend
        self._prefix = prefix

    @property
    def backend(self) -> ICacheBackend:
        """The wrapped backend."""
        return self._backend

    async def get(self, key: str) -> bytes | None:
        return await self._backend.get(self._prefix + key)

    async def set(
        self,
        key: str,
        value: bytes,
        ttl: timedelta | None = None,
    ) -> None:
        await self._backend.set(self._prefix + key, value, ttl)
