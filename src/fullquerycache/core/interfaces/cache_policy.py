"""Cache policy interface."""

from typing import Any, Protocol

from fullquerycache.core.entities.cache_control import (
    CacheControlContext,
    ResponseCachePolicy,
)


class ICachePolicy(Protocol):
    """Contract for deciding whether and how long a response is cached.

    Only called for responses that already passed the error/data check.
    """

    def decide(
        self,
        response: dict[str, Any],
        cache_control: CacheControlContext | None = None,
    ) -> ResponseCachePolicy:
        """Decide the cache policy for a successful response.

        Args:
            response: The final response, with ``data`` and no errors.
            cache_control: Hints collected while the query executed.

        Returns:
            The policy to apply. A policy with max_age 0 is not stored.
        """
        ...
