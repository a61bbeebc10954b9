"""Core interfaces (Protocol classes) for persistcache."""

from persistcache.core.interfaces.backing_store import IBackingStore
from persistcache.core.interfaces.cache_repository import ICacheRepository
from persistcache.core.interfaces.hasher import IHasher
from persistcache.core.interfaces.key_builder import IKeyBuilder
from persistcache.core.interfaces.store_provider import IStoreProvider

__all__ = [
    "IBackingStore",
    "ICacheRepository",
    "IHasher",
    "IKeyBuilder",
    "IStoreProvider",
]
