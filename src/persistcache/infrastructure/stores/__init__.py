"""Backing store implementations.

RedisTaggedStore lives in persistcache.infrastructure.stores.redis and
needs the ``redis`` extra.
"""

from persistcache.infrastructure.stores.memory import InMemoryTaggedStore

__all__ = ["InMemoryTaggedStore"]
