"""Pytest configuration for persistcache tests."""

import logging
from unittest.mock import MagicMock

import pytest

from persistcache import CacheRepository, StorePool


@pytest.fixture
def store() -> MagicMock:
    """Create a mocked backing store."""
    return MagicMock(name="store")


@pytest.fixture
def logger() -> MagicMock:
    """Create a recording logger."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def repository(store: MagicMock, logger: MagicMock) -> CacheRepository:
    """Create a repository backed by the mocked store."""
    return CacheRepository(store_provider=StorePool.of("persistent", store), logger=logger)
