"""Key builder interface."""

from typing import Protocol


class IKeyBuilder(Protocol):
    """Contract for deriving cache keys from caller keys.

    Key builders must be pure: the same caller key always yields the
    same cache key.
    """

    def build(self, key: str) -> str:
        """Build the cache key for a caller key.

        Args:
            key: The caller-supplied key.

        Returns:
            The key used in the backing store.
        """
        ...
