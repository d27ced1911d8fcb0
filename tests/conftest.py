"""Pytest configuration for fullquerycache tests."""

from datetime import timedelta

import pytest

from fullquerycache import (
    BaseCacheKey,
    CacheConfig,
    CacheKeyBuilder,
    InMemoryCacheBackend,
    JsonSerializer,
    SessionContext,
)


@pytest.fixture
def backend() -> InMemoryCacheBackend:
    """Create an in-memory backend for testing."""
    return InMemoryCacheBackend(maxsize=100)


@pytest.fixture
def key_builder() -> CacheKeyBuilder:
    """Create a key builder with the default prefix."""
    return CacheKeyBuilder()


@pytest.fixture
def serializer() -> JsonSerializer:
    """Create a serializer for testing."""
    return JsonSerializer()


@pytest.fixture
def config() -> CacheConfig:
    """Create a cache configuration for testing."""
    return CacheConfig(default_ttl=timedelta(minutes=5))


@pytest.fixture
def base_key() -> BaseCacheKey:
    """A base key for a simple query."""
    return BaseCacheKey(
        document="query GetUser($id: ID!) {\n  user(id: $id) {\n    id\n  }\n}",
        operation_name="GetUser",
        variables={"id": "123"},
    )


@pytest.fixture
def anonymous_session() -> SessionContext:
    """A classified request without a session."""
    return SessionContext(session_id=None, hooks_invoked=True)


@pytest.fixture
def user_session() -> SessionContext:
    """A classified request with session id u1."""
    return SessionContext(session_id="u1", hooks_invoked=True)
