"""Cache key value objects."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Any

from fullquerycache.core.entities.session import CacheConsistencyError


class SessionMode(IntEnum):
    """Cache partition an entry belongs to.

    The integer value is serialized into the key, so members must never
    be renumbered.
    """

    NO_SESSION = 0
    PRIVATE = 1
    AUTHENTICATED_PUBLIC = 2


@dataclass(frozen=True)
class CachePartition:
    """A session mode together with the session id it is scoped to.

    Only PRIVATE partitions carry a session id. Any other combination is
    rejected at construction, so a key can never mix one caller's id into
    a shared partition or drop it from a private one.
    """

    mode: SessionMode
    session_id: str | None = None

    def __post_init__(self) -> None:
        if self.mode is SessionMode.PRIVATE:
            if not isinstance(self.session_id, str) or not self.session_id:
                raise CacheConsistencyError(
                    "PRIVATE partition requires a non-empty session id"
                )
        elif self.session_id is not None:
            raise CacheConsistencyError(
                f"{self.mode.name} partition must not carry a session id"
            )

    @classmethod
    def no_session(cls) -> "CachePartition":
        """Partition for callers without a session."""
        return cls(mode=SessionMode.NO_SESSION)

    @classmethod
    def private(cls, session_id: str) -> "CachePartition":
        """Partition scoped to a single session."""
        return cls(mode=SessionMode.PRIVATE, session_id=session_id)

    @classmethod
    def authenticated_public(cls) -> "CachePartition":
        """Partition shared by every caller that has a session."""
        return cls(mode=SessionMode.AUTHENTICATED_PUBLIC)


@dataclass(frozen=True)
class BaseCacheKey:
    """Immutable identification of a query before session scoping.

    Encapsulates all components that make up a cache key,
    providing a structured representation before hashing.
    """

    document: str
    operation_name: str | None = None
    variables: Mapping[str, Any] = field(default_factory=dict)
    extra: Any = None

    def __post_init__(self) -> None:
        # Freeze the mapping so the key cannot drift after lookup.
        object.__setattr__(
            self, "variables", MappingProxyType(dict(self.variables or {}))
        )

    def to_dict(self, partition: CachePartition) -> dict[str, Any]:
        """Return the structure that is hashed for the given partition.

        Args:
            partition: The partition the key is built for.

        Returns:
            The key fields in their serialized order.
        """
        key: dict[str, Any] = {
            "document": self.document,
            "operationName": self.operation_name,
            "variables": dict(self.variables),
            "extra": self.extra,
        }
        if partition.mode is SessionMode.PRIVATE:
            key["sessionId"] = partition.session_id
        key["sessionMode"] = int(partition.mode)
        return key
