"""Infrastructure layer implementations for persistcache."""

from persistcache.infrastructure.hashers import HashlibHasher
from persistcache.infrastructure.key_builders import PrefixedKeyBuilder
from persistcache.infrastructure.pool import StorePool
from persistcache.infrastructure.stores import InMemoryTaggedStore

__all__ = [
    "HashlibHasher",
    "InMemoryTaggedStore",
    "PrefixedKeyBuilder",
    "StorePool",
]
