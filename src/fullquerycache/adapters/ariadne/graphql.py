"""Full query caching ASGI app for Ariadne."""

from collections.abc import Callable
from typing import Any

from ariadne.asgi import GraphQL

from fullquerycache.adapters.ariadne.handler import FullQueryCacheHandler
from fullquerycache.core.services.full_query_cache import FullQueryCache


class FullQueryCacheGraphQL(GraphQL):
    """Drop-in replacement for Ariadne's GraphQL with full query caching.

    Example::

        cache = FullQueryCache(
            backend=InMemoryCacheBackend(),
            session_id=lambda ctx: ctx.request.headers.get("x-session"),
        )
        app = FullQueryCacheGraphQL(schema, cache=cache)
    """

    def __init__(
        self,
        schema: Any,
        cache: FullQueryCache,
        should_cache: Callable[[dict[str, Any]], bool] | None = None,
        **kwargs: Any,
    ) -> None:
        http_handler = FullQueryCacheHandler(
            cache=cache,
            should_cache=should_cache,
        )

        super().__init__(schema, http_handler=http_handler, **kwargs)

        self._cache = cache
        self._caching_handler = http_handler

    @property
    def cache(self) -> FullQueryCache:
        return self._cache
