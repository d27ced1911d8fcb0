"""Dynamic cache hints for GraphQL resolvers.

Resolvers restrict the cache policy of the response they contribute to.
Hints only take effect when the cache is configured with
``CacheHintPolicy``; the default policy ignores them.

Usage with Ariadne:
    from fullquerycache.hints import set_cache_hint

    @query.field("me")
    async def resolve_me(_, info):
        set_cache_hint(info, max_age=60, scope="PRIVATE")
        return await get_current_user(info)

Usage with Strawberry:
    from fullquerycache.hints import public_cache

    @strawberry.field
    async def posts(self, info: Info) -> list[Post]:
        public_cache(info, max_age=300)
        return await get_posts()
"""

from typing import Any

from fullquerycache.core.entities.cache_control import (
    CacheControlContext,
    CacheScope,
)

# Context key for cache control
CACHE_CONTROL_CONTEXT_KEY = "_fullquerycache_cache_control"


def get_cache_control(info: Any) -> CacheControlContext | None:
    """Get the cache control context from GraphQL info.

    Args:
        info: The GraphQL resolver info object.

    Returns:
        The CacheControlContext, or None if not available.
    """
    context = _get_context_dict(info)
    if context is None:
        return None
    return context.get(CACHE_CONTROL_CONTEXT_KEY)


def set_cache_hint(
    info: Any,
    max_age: int | None = None,
    scope: CacheScope | str | None = None,
) -> bool:
    """Set a cache hint for the current field.

    Args:
        info: The GraphQL resolver info object.
        max_age: Maximum cache age in seconds.
        scope: Cache scope ("PUBLIC" or "PRIVATE").

    Returns:
        True if the hint was set, False if cache control is not available.
    """
    cache_control = get_cache_control(info)
    if cache_control is None:
        return False

    cache_control.set_cache_hint(max_age=max_age, scope=scope, path=_field_path(info))
    return True


def no_cache(info: Any) -> bool:
    """Disable caching for the whole response."""
    return set_cache_hint(info, max_age=0)


def private_cache(info: Any, max_age: int) -> bool:
    """Set a private cache hint for user-specific data."""
    return set_cache_hint(info, max_age=max_age, scope=CacheScope.PRIVATE)


def public_cache(info: Any, max_age: int) -> bool:
    """Set a public cache hint for shared data."""
    return set_cache_hint(info, max_age=max_age, scope=CacheScope.PUBLIC)


def inject_cache_control_context(
    context: Any,
    cache_control: CacheControlContext,
) -> bool:
    """Inject cache control context into GraphQL context.

    Args:
        context: The GraphQL context (a dict or an object with attributes).
        cache_control: The cache control context to inject.

    Returns:
        True if injected, False if the context cannot hold it.
    """
    if isinstance(context, dict):
        context[CACHE_CONTROL_CONTEXT_KEY] = cache_control
        return True
    if hasattr(context, "__dict__"):
        setattr(context, CACHE_CONTROL_CONTEXT_KEY, cache_control)
        return True
    return False


def _field_path(info: Any) -> tuple[str, ...]:
    path = getattr(info, "path", None)
    if path is None or not hasattr(path, "as_list"):
        return ()
    return tuple(str(p) for p in path.as_list())


def _get_context_dict(info: Any) -> dict[str, Any] | None:
    """Extract the context dictionary from resolver info.

    Handles different GraphQL framework info structures.

    Args:
        info: The GraphQL resolver info object.

    Returns:
        The context dictionary, or None if not found.
    """
    # Ariadne/graphql-core style
    if hasattr(info, "context"):
        context = info.context
        if isinstance(context, dict):
            return context
        # Strawberry style (context is an object with attributes)
        if hasattr(context, "__dict__"):
            ctx_dict: dict[str, Any] = context.__dict__
            return ctx_dict

    return None
