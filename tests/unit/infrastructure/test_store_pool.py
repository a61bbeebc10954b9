"""Tests for StorePool."""

from unittest.mock import MagicMock

import pytest

from persistcache import InMemoryTaggedStore, StorePool


class TestStorePool:
    """Tests for StorePool."""

    def test_get_unknown(self) -> None:
        """Test that unknown identifiers resolve to None."""
        assert StorePool().get("persistent") is None

    def test_of(self) -> None:
        """Test creating a pool around one store."""
        store = InMemoryTaggedStore()
        pool = StorePool.of("persistent", store)

        assert pool.get("persistent") is store
        assert "persistent" in pool

    def test_factory_called_once(self) -> None:
        """Test that factories build the store on first lookup only."""
        factory = MagicMock(side_effect=InMemoryTaggedStore)
        pool = StorePool({"persistent": factory})

        factory.assert_not_called()

        first = pool.get("persistent")
        second = pool.get("persistent")

        assert first is second
        factory.assert_called_once_with()

    def test_factory_errors_propagate(self) -> None:
        """Test that factory failures reach the caller."""
        pool = StorePool()
        pool.register("persistent", MagicMock(side_effect=ConnectionError("down")))

        with pytest.raises(ConnectionError):
            pool.get("persistent")

    def test_register_replaces_built_store(self) -> None:
        """Test that re-registering drops the previously built store."""
        pool = StorePool.of("persistent", InMemoryTaggedStore())
        replacement = InMemoryTaggedStore()

        pool.register("persistent", lambda: replacement)

        assert pool.get("persistent") is replacement

    def test_identifiers(self) -> None:
        """Test listing known stores."""
        pool = StorePool({"lazy": InMemoryTaggedStore})
        pool.add("eager", InMemoryTaggedStore())

        assert pool.identifiers == ["eager", "lazy"]
        assert "missing" not in pool
