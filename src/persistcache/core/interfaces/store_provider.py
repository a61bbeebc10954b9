"""Store provider interface."""

from typing import Protocol

from persistcache.core.interfaces.backing_store import IBackingStore


class IStoreProvider(Protocol):
    """Contract for resolving backing stores by name."""

    def get(self, identifier: str) -> IBackingStore | None:
        """Resolve a backing store.

        Args:
            identifier: The store name.

        Returns:
            The store, or None if no store is known under the name.
        """
        ...
