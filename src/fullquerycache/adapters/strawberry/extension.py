"""Strawberry extension for full query response caching."""

import logging
from collections.abc import AsyncIterator, Callable
from typing import TYPE_CHECKING, Any

from graphql import ExecutionResult, OperationType
from strawberry.extensions import SchemaExtension

from fullquerycache.core.entities.cache_control import CacheControlContext
from fullquerycache.core.entities.cache_key import BaseCacheKey
from fullquerycache.core.entities.session import RequestContext, SessionContext
from fullquerycache.core.services.full_query_cache import FullQueryCache
from fullquerycache.hints import inject_cache_control_context
from fullquerycache.utils.documents import operation_type, print_document

if TYPE_CHECKING:
    from strawberry.types import ExecutionContext

logger = logging.getLogger(__name__)


def create_cache_extension(
    cache: FullQueryCache,
    should_cache: Callable[["ExecutionContext"], bool] | None = None,
) -> type[SchemaExtension]:
    """Create a Strawberry SchemaExtension serving responses from a cache.

    Usage:
        from strawberry import Schema
        from fullquerycache import FullQueryCache, InMemoryCacheBackend
        from fullquerycache.adapters.strawberry import create_cache_extension

        cache = FullQueryCache(backend=InMemoryCacheBackend())

        schema = Schema(
            query=Query,
            extensions=[create_cache_extension(cache)],
        )

    Args:
        cache: The cache to use.
        should_cache: Optional callback to determine if a request should
            be cached. Receives the execution context and returns True/False.

    Returns:
        A SchemaExtension subclass; Strawberry creates one instance per
        operation.
    """

    class _FullQueryCacheExtension(SchemaExtension):
        async def on_execute(self) -> AsyncIterator[None]:
            self._hit = False
            self._base_key: BaseCacheKey | None = None
            self._session: SessionContext | None = None
            self._cache_control: CacheControlContext | None = None

            await self._check_cache()

            yield  # Execution happens here, unless a result was set

            await self._cache_response()

        async def _check_cache(self) -> None:
            ctx = self.execution_context

            document = _cacheable_document(cache, ctx, should_cache)
            if document is None:
                return

            self._session = await cache.classify(
                RequestContext(
                    request=_request_from_context(ctx.context),
                    context_value=ctx.context,
                    query=ctx.query,
                    operation_name=ctx.operation_name,
                    variables=ctx.variables,
                )
            )
            self._base_key = cache.base_key(
                document, ctx.operation_name, ctx.variables, self._session
            )

            result = await cache.lookup(self._base_key, self._session)
            if result.hit:
                self._hit = True
                ctx.result = ExecutionResult(data=result.response.get("data"))
                return

            self._cache_control = cache.new_cache_control()
            inject_cache_control_context(ctx.context, self._cache_control)

        async def _cache_response(self) -> None:
            if self._hit or self._base_key is None or self._session is None:
                return

            result = self.execution_context.result
            if result is None:
                return

            response: dict[str, Any] = {
                "data": getattr(result, "data", None),
                "errors": getattr(result, "errors", None),
            }
            await cache.write(
                self._base_key, self._session, response, self._cache_control
            )

    return _FullQueryCacheExtension


def _cacheable_document(
    cache: FullQueryCache,
    ctx: "ExecutionContext",
    should_cache: Callable[["ExecutionContext"], bool] | None,
) -> str | None:
    """Return the printed document if the operation may be cached."""
    if not cache.config.enabled:
        return None

    document = getattr(ctx, "graphql_document", None)
    if document is None:
        return None

    op_type = operation_type(document, ctx.operation_name)
    if op_type is OperationType.MUTATION:
        if not cache.config.cache_mutations:
            return None
    elif op_type is not OperationType.QUERY:
        return None

    if should_cache and not should_cache(ctx):
        logger.debug("Skipping cache per should_cache callback")
        return None

    return print_document(document)


def _request_from_context(context: Any) -> Any:
    if isinstance(context, dict):
        return context.get("request")
    return getattr(context, "request", None)
