"""persistcache - Tag-addressable caching layer.

A small facade that stores, retrieves and invalidates string payloads
under hashed keys, invalidates groups of entries by tag, and flushes
everything, while hiding the backing store's errors from callers.

Example:
    from persistcache import CacheRepository, InMemoryTaggedStore, StorePool

    pool = StorePool.of("persistent", InMemoryTaggedStore(maxsize=500))
    repository = CacheRepository(store_provider=pool)

    repository.save("user:42", '{"name": "a"}', tags=["users"])
    repository.get("user:42")          # '{"name": "a"}'
    repository.delete_by_tags(["users"])
    repository.get("user:42")          # None

Redis backing store (requires the ``redis`` extra):
    from persistcache.infrastructure.stores.redis import RedisTaggedStore

    pool = StorePool()
    pool.register("persistent", lambda: RedisTaggedStore("redis://localhost:6379"))
    repository = CacheRepository(store_provider=pool)
"""

from persistcache.core.entities import CacheEntry, CleanMode, RepositoryConfig
from persistcache.core.exceptions import (
    CacheDeleteError,
    CacheError,
    CacheFlushError,
    CacheOperation,
    CacheReadError,
    CacheTagDeleteError,
    CacheWriteError,
    InvalidArgumentError,
)
from persistcache.core.interfaces import (
    IBackingStore,
    ICacheRepository,
    IHasher,
    IKeyBuilder,
    IStoreProvider,
)
from persistcache.core.services import CacheRepository
from persistcache.infrastructure import (
    HashlibHasher,
    InMemoryTaggedStore,
    PrefixedKeyBuilder,
    StorePool,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheEntry",
    "CleanMode",
    "RepositoryConfig",
    # Errors
    "CacheError",
    "CacheOperation",
    "InvalidArgumentError",
    "CacheWriteError",
    "CacheReadError",
    "CacheDeleteError",
    "CacheTagDeleteError",
    "CacheFlushError",
    # Core interfaces
    "IBackingStore",
    "ICacheRepository",
    "IHasher",
    "IKeyBuilder",
    "IStoreProvider",
    # Core services
    "CacheRepository",
    # Infrastructure implementations
    "HashlibHasher",
    "InMemoryTaggedStore",
    "PrefixedKeyBuilder",
    "StorePool",
]
