"""Tests for InMemoryStorageAdapter."""

import asyncio

import pytest

from keyvy.infrastructure.backends.memory import InMemoryStorageAdapter


class TestInMemoryStorageAdapter:
    """Tests for InMemoryStorageAdapter."""

    @pytest.fixture
    def backend(self) -> InMemoryStorageAdapter:
        """Create a backend for testing."""
        return InMemoryStorageAdapter()

    @pytest.mark.asyncio
    async def test_set_and_get(self, backend: InMemoryStorageAdapter) -> None:
        """Test basic set and get operations."""
        await backend.set("key1", b"value1")
        result = await backend.get("key1")
        assert result == b"value1"

    @pytest.mark.asyncio
    async def test_get_missing_key(self, backend: InMemoryStorageAdapter) -> None:
        """Test getting a missing key returns None."""
        result = await backend.get("nonexistent")
        assert result is None

    @pytest.mark.asyncio
    async def test_overwrite(self, backend: InMemoryStorageAdapter) -> None:
        """Test set overwrites an existing value."""
        await backend.set("key1", "old")
        await backend.set("key1", "new")
        assert await backend.get("key1") == "new"

    @pytest.mark.asyncio
    async def test_delete(self, backend: InMemoryStorageAdapter) -> None:
        """Test deleting a key."""
        await backend.set("key1", b"value1")

        # Delete existing key
        deleted = await backend.delete("key1")
        assert deleted is True

        # Verify deleted
        result = await backend.get("key1")
        assert result is None

        # Delete non-existing key
        deleted = await backend.delete("key1")
        assert deleted is False

    @pytest.mark.asyncio
    async def test_clear(self, backend: InMemoryStorageAdapter) -> None:
        """Test clearing all keys."""
        await backend.set("key1", b"value1")
        await backend.set("key2", b"value2")
        await backend.set("key3", b"value3")

        await backend.clear()

        assert await backend.get("key1") is None
        assert await backend.get("key2") is None
        assert await backend.get("key3") is None
        assert len(backend) == 0

    @pytest.mark.asyncio
    async def test_clear_scoped_to_namespace(self) -> None:
        """Test clear only removes keys in the adapter's namespace."""
        backend = InMemoryStorageAdapter(namespace="users")
        await backend.set("users:1", b"alice")
        await backend.set("users:2", b"bob")
        await backend.set("posts:1", b"hello")

        await backend.clear()

        assert await backend.get("users:1") is None
        assert await backend.get("users:2") is None
        assert await backend.get("posts:1") == b"hello"

    @pytest.mark.asyncio
    async def test_ttl_is_not_enforced(self) -> None:
        """Test items written with a TTL stay until deleted."""
        backend = InMemoryStorageAdapter()

        await backend.set("short", b"1", ttl=1)
        await asyncio.sleep(0.01)
        await backend.set("other", b"2")

        assert len(backend) == 2
        assert await backend.get("short") == b"1"
        assert await backend.delete("short") is True

    @pytest.mark.asyncio
    async def test_maxsize_bounds_store(self) -> None:
        """Test the store never holds more than maxsize items."""
        backend = InMemoryStorageAdapter(maxsize=3)

        for i in range(4):
            await backend.set(f"key{i}", b"v")

        assert len(backend) == 3
        assert await backend.get("key3") == b"v"

    @pytest.mark.asyncio
    async def test_batch_operations(self, backend: InMemoryStorageAdapter) -> None:
        """Test mset and mget keep key order."""
        await backend.mset(["a", "b", "c"], [1, 2, 3])

        assert await backend.mget(["c", "missing", "a"]) == [3, None, 1]

    def test_len(self) -> None:
        """Test getting store size."""
        backend = InMemoryStorageAdapter(maxsize=100)
        assert len(backend) == 0

    def test_properties(self) -> None:
        """Test maxsize and namespace properties."""
        backend = InMemoryStorageAdapter(maxsize=500, namespace="ns")
        assert backend.maxsize == 500
        assert backend.namespace == "ns"
