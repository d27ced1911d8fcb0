"""Session classification service."""

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fullquerycache.core.entities.session import RequestContext, SessionContext

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Hooks may be plain functions or coroutine functions.
SessionIdHook = Callable[[RequestContext], "str | None | Awaitable[str | None]"]
ExtraCacheKeyDataHook = Callable[[RequestContext], Any]


async def _await_maybe(value: "T | Awaitable[T]") -> T:
    if inspect.isawaitable(value):
        return await value
    return value  # type: ignore[return-value]


class SessionClassifier:
    """Resolves the session id and extra cache key data of a request.

    Both hooks are optional. The session id hook should return an id
    when the caller is logged in and None otherwise. The extra data hook
    may return anything JSON-serializable that the cache key should vary
    on, e.g. a value derived from the Accept-Language header.
    """

    def __init__(
        self,
        session_id: SessionIdHook | None = None,
        extra_cache_key_data: ExtraCacheKeyDataHook | None = None,
    ) -> None:
        """Initialize the classifier.

        Args:
            session_id: Hook returning the caller's session id, or None.
            extra_cache_key_data: Hook returning additional key data.
        """
        self._session_id = session_id
        self._extra_cache_key_data = extra_cache_key_data

    @property
    def has_session_hook(self) -> bool:
        """Whether a session id hook is configured."""
        return self._session_id is not None

    async def classify(self, request_context: RequestContext) -> SessionContext:
        """Run the hooks for a request and return its session context.

        The session id hook completes before the extra data hook starts.
        Exceptions raised by either hook propagate to the caller, and no
        classified context is produced for the request.

        Args:
            request_context: The request being classified.

        Returns:
            A SessionContext with ``hooks_invoked`` set.
        """
        session = SessionContext()

        if self._session_id is not None:
            session_id = await _await_maybe(self._session_id(request_context))
            if session_id is not None and not isinstance(session_id, str):
                raise TypeError(
                    "session_id hook must return a str or None, "
                    f"got {type(session_id).__name__}"
                )
            # An empty id cannot identify a session.
            session.session_id = session_id or None

        if self._extra_cache_key_data is not None:
            session.extra_cache_key_data = await _await_maybe(
                self._extra_cache_key_data(request_context)
            )

        session.hooks_invoked = True
        logger.debug(
            "Classified request: session=%s extra=%s",
            "yes" if session.session_id is not None else "no",
            "yes" if session.extra_cache_key_data is not None else "no",
        )
        return session
