"""Per-request session entities."""

from dataclasses import dataclass
from typing import Any


class CacheConsistencyError(RuntimeError):
    """Raised when a cache operation would break partition isolation."""

    pass


@dataclass
class RequestContext:
    """Request information handed to the session classifier hooks.

    Attributes:
        request: The framework request object (e.g. a Starlette request).
        context_value: The GraphQL context value for the request.
        query: The raw query text as sent by the client.
        operation_name: The requested operation name, if any.
        variables: The request variables, if any.
    """

    request: Any = None
    context_value: Any = None
    query: str | None = None
    operation_name: str | None = None
    variables: dict[str, Any] | None = None


@dataclass
class SessionContext:
    """Session classification for a single request.

    Created at request start and filled in by the SessionClassifier.
    ``hooks_invoked`` stays False until classification has completed,
    which the write path checks before storing anything.
    """

    session_id: str | None = None
    extra_cache_key_data: Any = None
    hooks_invoked: bool = False
