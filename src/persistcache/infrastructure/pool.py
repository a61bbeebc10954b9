"""Named pool of backing stores."""

import logging
import threading
from collections.abc import Callable

from persistcache.core.interfaces.backing_store import IBackingStore

logger = logging.getLogger(__name__)

StoreFactory = Callable[[], IBackingStore]


class StorePool:
    """Registry that resolves backing stores by identifier.

    Stores are either added prebuilt or registered as factories that
    run on first lookup. Each identifier resolves to a single instance
    for the pool's lifetime.
    """

    def __init__(self, factories: dict[str, StoreFactory] | None = None) -> None:
        """Initialize the pool.

        Args:
            factories: Optional mapping of identifier to store factory.
        """
        self._factories: dict[str, StoreFactory] = dict(factories or {})
        self._stores: dict[str, IBackingStore] = {}
        self._lock = threading.Lock()

    @classmethod
    def of(cls, identifier: str, store: IBackingStore) -> "StorePool":
        """Create a pool holding a single prebuilt store.

        Args:
            identifier: The store name.
            store: The store instance.

        Returns:
            A new StorePool.
        """
        pool = cls()
        pool.add(identifier, store)
        return pool

    def register(self, identifier: str, factory: StoreFactory) -> None:
        """Register a factory for lazily built stores.

        Replaces any store already built under the identifier.

        Args:
            identifier: The store name.
            factory: Zero-argument callable returning the store.
        """
        with self._lock:
            self._factories[identifier] = factory
            self._stores.pop(identifier, None)

    def add(self, identifier: str, store: IBackingStore) -> None:
        """Add a prebuilt store.

        Args:
            identifier: The store name.
            store: The store instance.
        """
        with self._lock:
            self._factories.pop(identifier, None)
            self._stores[identifier] = store

    def get(self, identifier: str) -> IBackingStore | None:
        """Resolve a store, building it on first lookup.

        Args:
            identifier: The store name.

        Returns:
            The store, or None if nothing is registered under the name.

        Raises:
            Exception: Whatever the registered factory raises.
        """
        with self._lock:
            store = self._stores.get(identifier)
            if store is not None:
                return store

            factory = self._factories.get(identifier)
            if factory is None:
                return None

            store = factory()
            self._stores[identifier] = store
            logger.debug("Created cache store %r", identifier)
            return store

    @property
    def identifiers(self) -> list[str]:
        """Return the names of all known stores."""
        with self._lock:
            return sorted(set(self._factories) | set(self._stores))

    def __contains__(self, identifier: object) -> bool:
        """Check if a store is known under the identifier."""
        with self._lock:
            return identifier in self._factories or identifier in self._stores
