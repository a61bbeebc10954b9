"""Hasher interface."""

from typing import Protocol


class IHasher(Protocol):
    """Contract for one-way hash functions used in cache keys.

    Implementations must be deterministic across processes and must
    not use a secret or per-instance salt.
    """

    def hash(self, value: str) -> str:
        """Hash a string.

        Args:
            value: The string to hash.

        Returns:
            A fixed-length digest string.
        """
        ...
