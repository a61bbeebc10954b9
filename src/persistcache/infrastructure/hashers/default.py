"""Default hasher implementation."""

import hashlib

from persistcache.utils.hashing import hash_string


class HashlibHasher:
    """Hasher backed by hashlib.

    Produces hex digests with no secret or salt, so keys stay stable
    across processes and repository instances.
    """

    def __init__(self, algorithm: str = "sha256", encoding: str = "utf-8") -> None:
        """Initialize the hasher.

        Args:
            algorithm: The hashlib algorithm name.
            encoding: Encoding used to turn strings into bytes.

        Raises:
            ValueError: If the algorithm is not available or has no
                fixed digest length (such as shake_128).
        """
        try:
            digest_size = hashlib.new(algorithm).digest_size
        except (TypeError, ValueError) as e:
            raise ValueError(f"Unsupported hash algorithm: {algorithm}") from e
        if not digest_size:
            raise ValueError(f"Hash algorithm has no fixed digest length: {algorithm}")
        self._algorithm = algorithm
        self._encoding = encoding

    @property
    def algorithm(self) -> str:
        """Return the hashlib algorithm name."""
        return self._algorithm

    def hash(self, value: str) -> str:
        """Hash a string.

        Args:
            value: The string to hash.

        Returns:
            The hexadecimal digest.
        """
        return hash_string(value, self._algorithm, self._encoding)
