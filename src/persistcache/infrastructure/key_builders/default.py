"""Default key builder implementation."""

from persistcache.core.interfaces.hasher import IHasher


class PrefixedKeyBuilder:
    """Key builder that prefixes the hash of the caller key.

    Creates deterministic cache keys of the form ``prefix + hash(key)``.
    """

    def __init__(self, prefix: str, hasher: IHasher) -> None:
        """Initialize the key builder.

        Args:
            prefix: Prefix for all cache keys.
            hasher: The hash function applied to caller keys.
        """
        self._prefix = prefix
        self._hasher = hasher

    @property
    def prefix(self) -> str:
        """Return the key prefix."""
        return self._prefix

    def build(self, key: str) -> str:
        """Build the cache key for a caller key.

        Args:
            key: The caller-supplied key. Any string, including empty.

        Returns:
            The prefixed, hashed cache key.
        """
        return self._prefix + self._hasher.hash(key)
