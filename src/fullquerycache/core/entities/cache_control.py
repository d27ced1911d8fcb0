"""Cache control entities.

Cache hints describe how long a piece of a response may be reused and
whether it is shared (PUBLIC) or specific to the caller (PRIVATE). The
cache policy of a whole response decides whether it is written at all,
with which TTL, and whether it lands in the private partition.
"""

from dataclasses import dataclass, field
from enum import Enum


class CacheScope(Enum):
    """Cache scope for cache control.

    PUBLIC: Response can be shared by every caller of the same partition.
    PRIVATE: Response contains user-specific data, only cache per-session.
    """

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"

    @classmethod
    def parse(cls, scope: "CacheScope | str | None") -> "CacheScope | None":
        """Parse a scope given as an enum member or a case-insensitive name."""
        if scope is None or isinstance(scope, CacheScope):
            return scope
        return cls(scope.upper())


@dataclass
class CacheHint:
    """Cache hint for part of a response.

    Attributes:
        max_age: Maximum cache validity in seconds. None means not set.
        scope: PUBLIC or PRIVATE scope. None means not set.
    """

    max_age: int | None = None
    scope: CacheScope | None = None

    def merge_with(self, other: "CacheHint") -> "CacheHint":
        """Merge this hint with another, applying most restrictive rules.

        - max_age: Use the LOWEST value
        - scope: Use PRIVATE if either is PRIVATE

        Args:
            other: The other cache hint to merge with.

        Returns:
            A new CacheHint with merged values.
        """
        if self.max_age is None:
            new_max_age = other.max_age
        elif other.max_age is None:
            new_max_age = self.max_age
        else:
            new_max_age = min(self.max_age, other.max_age)

        new_scope: CacheScope | None
        if self.scope == CacheScope.PRIVATE or other.scope == CacheScope.PRIVATE:
            new_scope = CacheScope.PRIVATE
        elif self.scope is not None:
            new_scope = self.scope
        else:
            new_scope = other.scope

        return CacheHint(max_age=new_max_age, scope=new_scope)


@dataclass
class FieldCacheHint:
    """Cache hint associated with a specific field path."""

    path: tuple[str, ...]
    hint: CacheHint


@dataclass
class ResponseCachePolicy:
    """Overall cache policy for a GraphQL response."""

    max_age: int
    scope: CacheScope = CacheScope.PUBLIC

    @property
    def is_cacheable(self) -> bool:
        """Check if the response is cacheable."""
        return self.max_age > 0

    @classmethod
    def no_store(cls) -> "ResponseCachePolicy":
        """Create a policy that disables caching."""
        return cls(max_age=0)

    @classmethod
    def from_hints(
        cls,
        hints: list[FieldCacheHint],
        default_max_age: int = 0,
    ) -> "ResponseCachePolicy":
        """Calculate response cache policy from field hints.

        - max_age: Use the LOWEST value across all hints
        - scope: Use PRIVATE if any hint is PRIVATE

        Args:
            hints: List of field cache hints.
            default_max_age: max_age used when no hint sets one.

        Returns:
            The calculated ResponseCachePolicy.
        """
        merged = CacheHint()
        for field_hint in hints:
            merged = merged.merge_with(field_hint.hint)

        return cls(
            max_age=merged.max_age if merged.max_age is not None else default_max_age,
            scope=merged.scope or CacheScope.PUBLIC,
        )


@dataclass
class CacheControlContext:
    """Cache hints collected while a single request executes.

    One instance is created per request and placed in the GraphQL
    context so resolvers can restrict the response's cache policy.
    """

    hints: list[FieldCacheHint] = field(default_factory=list)

    def set_cache_hint(
        self,
        max_age: int | None = None,
        scope: CacheScope | str | None = None,
        path: tuple[str, ...] = (),
    ) -> None:
        """Record a cache hint for a field.

        Args:
            max_age: Maximum cache age in seconds.
            scope: Cache scope (PUBLIC, PRIVATE, or string).
            path: Response path of the field the hint belongs to.
        """
        hint = CacheHint(max_age=max_age, scope=CacheScope.parse(scope))
        self.hints.append(FieldCacheHint(path=path, hint=hint))

