"""Full query caching HTTP handler for Ariadne GraphQL."""

import logging
from collections.abc import Callable
from typing import Any

from ariadne.asgi.handlers import GraphQLHTTPHandler
from graphql import DocumentNode, GraphQLError, OperationType, parse

from fullquerycache.core.entities.session import RequestContext
from fullquerycache.core.services.full_query_cache import FullQueryCache
from fullquerycache.core.services.lookup_coordinator import LookupResult
from fullquerycache.hints import inject_cache_control_context
from fullquerycache.utils.documents import operation_type, print_document

logger = logging.getLogger(__name__)


class FullQueryCacheHandler(GraphQLHTTPHandler):
    """HTTP handler that serves whole responses from a FullQueryCache.

    Before execution the session hooks run and the cache is consulted;
    a hit is returned without executing the query. After execution a
    successful response is offered to the cache's write guard.

    Requests that are not cached:
    - Mutations (unless ``cache_mutations`` is enabled) and subscriptions.
    - Query text that does not parse; execution reports the error.
    - Variables that are not an object; execution reports the error.
    - Requests rejected by the ``should_cache`` callback.
    """

    def __init__(
        self,
        cache: FullQueryCache,
        should_cache: Callable[[dict[str, Any]], bool] | None = None,
    ) -> None:
        super().__init__()
        self._cache = cache
        self._should_cache = should_cache

    @property
    def cache(self) -> FullQueryCache:
        return self._cache

    async def execute_graphql_query(
        self,
        request: Any,
        data: Any,
        *,
        context_value: Any = None,
        query_document: Any = None,
    ) -> tuple[bool, dict[str, Any]]:
        document = self._cacheable_document(data)
        if document is None:
            return await super().execute_graphql_query(
                request, data,
                context_value=context_value,
                query_document=query_document,
            )

        query = data["query"]
        variables = data.get("variables")
        operation_name = data.get("operationName")

        # Resolve context before classification so hooks can read it
        if context_value is None:
            context_value = await self.get_context_for_request(request, data)

        session = await self._cache.classify(
            RequestContext(
                request=request,
                context_value=context_value,
                query=query,
                operation_name=operation_name,
                variables=variables,
            )
        )
        base_key = self._cache.base_key(
            print_document(document), operation_name, variables, session
        )

        result = await self._cache.lookup(base_key, session)
        if result.hit:
            self._mark_cache_hit(request, result)
            return True, result.response

        cache_control = self._cache.new_cache_control()
        inject_cache_control_context(context_value, cache_control)

        success, response = await super().execute_graphql_query(
            request, data, context_value=context_value, query_document=query_document
        )

        if isinstance(response, dict):
            await self._cache.write(base_key, session, response, cache_control)

        return success, response

    def _cacheable_document(self, data: Any) -> DocumentNode | None:
        """Parse the request if its response may come from the cache."""
        if not isinstance(data, dict) or not self._cache.config.enabled:
            return None

        query = data.get("query")
        if not isinstance(query, str) or not query:
            return None

        # Ariadne rejects anything else with a 400 during execution.
        variables = data.get("variables")
        if variables is not None and not isinstance(variables, dict):
            return None

        if self._should_cache and not self._should_cache(data):
            logger.debug("Skipping cache per should_cache callback")
            return None

        try:
            document = parse(query)
        except GraphQLError:
            return None

        op_type = operation_type(document, data.get("operationName"))
        if op_type is OperationType.QUERY:
            return document
        if op_type is OperationType.MUTATION and self._cache.config.cache_mutations:
            return document
        logger.debug("Skipping cache for %s operation", op_type)
        return None

    def _mark_cache_hit(self, request: Any, result: LookupResult) -> None:
        if hasattr(request, "state"):
            request.state.cache_hit = True
            request.state.cache_partition = result.partition.mode.name
