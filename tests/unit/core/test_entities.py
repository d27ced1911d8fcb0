"""Tests for core entities."""

from datetime import timedelta

import pytest

from fullquerycache.core.entities import (
    BaseCacheKey,
    CacheConfig,
    CacheConsistencyError,
    CachePartition,
    SessionContext,
    SessionMode,
)


class TestSessionMode:
    """Tests for SessionMode."""

    def test_serialized_values(self) -> None:
        """Test the integer values that end up in keys."""
        assert int(SessionMode.NO_SESSION) == 0
        assert int(SessionMode.PRIVATE) == 1
        assert int(SessionMode.AUTHENTICATED_PUBLIC) == 2

    def test_closed_set(self) -> None:
        """Test there are exactly three modes."""
        assert len(SessionMode) == 3


class TestCachePartition:
    """Tests for CachePartition."""

    def test_private_carries_session_id(self) -> None:
        """Test private partitions keep their session id."""
        partition = CachePartition.private("u1")

        assert partition.mode is SessionMode.PRIVATE
        assert partition.session_id == "u1"

    def test_shared_partitions_have_no_session_id(self) -> None:
        """Test the shared partitions carry no session id."""
        assert CachePartition.no_session().session_id is None
        assert CachePartition.authenticated_public().session_id is None

    @pytest.mark.parametrize("session_id", [None, ""])
    def test_private_requires_session_id(self, session_id: str | None) -> None:
        """Test a private partition cannot be built without a session id."""
        with pytest.raises(CacheConsistencyError):
            CachePartition(mode=SessionMode.PRIVATE, session_id=session_id)

    @pytest.mark.parametrize(
        "mode", [SessionMode.NO_SESSION, SessionMode.AUTHENTICATED_PUBLIC]
    )
    def test_shared_partition_rejects_session_id(self, mode: SessionMode) -> None:
        """Test a shared partition cannot embed a session id."""
        with pytest.raises(CacheConsistencyError):
            CachePartition(mode=mode, session_id="u1")

    def test_is_immutable(self) -> None:
        """Test partitions are frozen."""
        partition = CachePartition.no_session()

        with pytest.raises(AttributeError):
            partition.session_id = "u1"  # type: ignore[misc]


class TestBaseCacheKey:
    """Tests for BaseCacheKey."""

    def test_defaults(self) -> None:
        """Test the optional fields default to empty values."""
        key = BaseCacheKey(document="{ a }")

        assert key.operation_name is None
        assert dict(key.variables) == {}
        assert key.extra is None

    def test_none_variables_become_empty(self) -> None:
        """Test None variables are treated as no variables."""
        key = BaseCacheKey(document="{ a }", variables=None)  # type: ignore[arg-type]

        assert dict(key.variables) == {}

    def test_variables_are_read_only(self) -> None:
        """Test variables cannot be mutated after construction."""
        key = BaseCacheKey(document="{ a }", variables={"id": "1"})

        with pytest.raises(TypeError):
            key.variables["id"] = "2"  # type: ignore[index]

    def test_variables_copied_from_input(self) -> None:
        """Test later changes to the input mapping do not leak in."""
        variables = {"id": "1"}
        key = BaseCacheKey(document="{ a }", variables=variables)
        variables["id"] = "2"

        assert key.variables["id"] == "1"

    def test_to_dict_field_order_no_session(self) -> None:
        """Test the serialized field order for the no-session partition."""
        key = BaseCacheKey(document="{ a }")

        assert list(key.to_dict(CachePartition.no_session())) == [
            "document",
            "operationName",
            "variables",
            "extra",
            "sessionMode",
        ]

    def test_to_dict_private_embeds_session_id(self) -> None:
        """Test only the private partition embeds the session id."""
        key = BaseCacheKey(document="{ a }")

        private = key.to_dict(CachePartition.private("u1"))
        public = key.to_dict(CachePartition.authenticated_public())

        assert list(private)[-2:] == ["sessionId", "sessionMode"]
        assert private["sessionId"] == "u1"
        assert private["sessionMode"] == 1
        assert "sessionId" not in public
        assert public["sessionMode"] == 2

    def test_equality(self) -> None:
        """Test structurally equal keys compare equal."""
        first = BaseCacheKey(document="{ a }", variables={"a": 1, "b": 2})
        second = BaseCacheKey(document="{ a }", variables={"b": 2, "a": 1})

        assert first == second


class TestSessionContext:
    """Tests for SessionContext."""

    def test_defaults_unclassified(self) -> None:
        """Test a new context has not been classified."""
        session = SessionContext()

        assert session.session_id is None
        assert session.extra_cache_key_data is None
        assert session.hooks_invoked is False


class TestCacheConfig:
    """Tests for CacheConfig."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = CacheConfig()

        assert config.enabled is True
        assert config.default_ttl == timedelta(minutes=5)
        assert config.key_prefix == "fqc:"
        assert config.cache_mutations is False
        assert config.fail_open is True

    def test_custom_ttl(self) -> None:
        """Test a custom default TTL is kept."""
        config = CacheConfig(default_ttl=timedelta(seconds=30))

        assert config.default_ttl == timedelta(seconds=30)
