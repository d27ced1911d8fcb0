"""Cache policies deciding whether a successful response is stored.

Two policies are provided:

- DefaultCachePolicy stores every successful response as PUBLIC with a
  fixed TTL. It is what FullQueryCache uses unless told otherwise.
- CacheHintPolicy derives TTL and scope from the hints resolvers record
  during execution (see ``fullquerycache.hints``):
    - max_age: the LOWEST value across all hints
    - scope: PRIVATE if ANY hint is PRIVATE
  With the default ``default_max_age=0`` a response without a positive
  max_age hint is never stored.
"""

import math
from datetime import timedelta
from typing import Any

from fullquerycache.core.entities.cache_control import (
    CacheControlContext,
    CacheScope,
    ResponseCachePolicy,
)


class DefaultCachePolicy:
    """Stores every successful response as PUBLIC with a fixed TTL."""

    def __init__(self, ttl: timedelta = timedelta(minutes=5)) -> None:
        """Initialize the policy.

        Args:
            ttl: How long responses are kept, rounded up to whole seconds.

        Raises:
            ValueError: If ttl is negative.
        """
        if ttl < timedelta(0):
            raise ValueError(f"ttl must not be negative, got {ttl}")
        self._max_age = math.ceil(ttl.total_seconds())

    def decide(
        self,
        response: dict[str, Any],
        cache_control: CacheControlContext | None = None,
    ) -> ResponseCachePolicy:
        return ResponseCachePolicy(max_age=self._max_age, scope=CacheScope.PUBLIC)


class CacheHintPolicy:
    """Aggregates the cache hints recorded while the query executed."""

    def __init__(self, default_max_age: int = 0) -> None:
        """Initialize the policy.

        Args:
            default_max_age: max_age used when no hint sets one.
        """
        self._default_max_age = default_max_age

    def decide(
        self,
        response: dict[str, Any],
        cache_control: CacheControlContext | None = None,
    ) -> ResponseCachePolicy:
        """Calculate the policy from the recorded hints.

        Args:
            response: The final response.
            cache_control: Hints collected during execution.

        Returns:
            The aggregated policy.
        """
        hints = cache_control.hints if cache_control is not None else []
        return ResponseCachePolicy.from_hints(hints, self._default_max_age)
