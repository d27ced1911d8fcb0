"""Tests for InMemoryCacheBackend."""

from datetime import timedelta

import pytest

from fullquerycache import InMemoryCacheBackend


class FakeTimer:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestInMemoryCacheBackend:
    """Tests for InMemoryCacheBackend."""

    @pytest.mark.asyncio
    async def test_get_missing_key(self, backend: InMemoryCacheBackend) -> None:
        assert await backend.get("missing") is None

    @pytest.mark.asyncio
    async def test_set_and_get(self, backend: InMemoryCacheBackend) -> None:
        await backend.set("key", b"value", timedelta(minutes=1))

        assert await backend.get("key") == b"value"
        assert len(backend) == 1

    @pytest.mark.asyncio
    async def test_overwrite(self, backend: InMemoryCacheBackend) -> None:
        await backend.set("key", b"old")
        await backend.set("key", b"new")

        assert await backend.get("key") == b"new"
        assert len(backend) == 1

    @pytest.mark.asyncio
    async def test_entries_expire_individually(self) -> None:
        timer = FakeTimer()
        backend = InMemoryCacheBackend(timer=timer)

        await backend.set("short", b"1", timedelta(seconds=10))
        await backend.set("long", b"2", timedelta(seconds=60))
        timer.now = 30.0

        assert await backend.get("short") is None
        assert await backend.get("long") == b"2"

    @pytest.mark.asyncio
    async def test_default_ttl(self) -> None:
        timer = FakeTimer()
        backend = InMemoryCacheBackend(default_ttl=5.0, timer=timer)

        await backend.set("key", b"value")
        timer.now = 4.0
        assert await backend.get("key") == b"value"

        timer.now = 6.0
        assert await backend.get("key") is None

    @pytest.mark.asyncio
    async def test_lru_eviction(self) -> None:
        backend = InMemoryCacheBackend(maxsize=2)

        await backend.set("a", b"1")
        await backend.set("b", b"2")
        await backend.get("a")
        await backend.set("c", b"3")

        assert await backend.get("a") == b"1"
        assert await backend.get("b") is None
        assert await backend.get("c") == b"3"

    def test_maxsize(self) -> None:
        assert InMemoryCacheBackend(maxsize=42).maxsize == 42
