"""Core domain layer for persistcache."""

from persistcache.core.entities import CacheEntry, CleanMode, RepositoryConfig
from persistcache.core.interfaces import (
    IBackingStore,
    ICacheRepository,
    IHasher,
    IKeyBuilder,
    IStoreProvider,
)
from persistcache.core.services import CacheRepository

__all__ = [
    # Entities
    "CacheEntry",
    "CleanMode",
    "RepositoryConfig",
    # Interfaces
    "IBackingStore",
    "ICacheRepository",
    "IHasher",
    "IKeyBuilder",
    "IStoreProvider",
    # Services
    "CacheRepository",
]
