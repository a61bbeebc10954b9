"""Hashing utilities for cache key generation."""

import hashlib


def hash_string(value: str, algorithm: str = "sha256", encoding: str = "utf-8") -> str:
    """Create a deterministic, unkeyed hash of a string.

    Args:
        value: The string to hash.
        algorithm: Any algorithm name accepted by hashlib.new().
        encoding: Encoding used to turn the string into bytes.

    Returns:
        The full hexadecimal digest.
    """
    digest = hashlib.new(algorithm)
    digest.update(value.encode(encoding))
    return digest.hexdigest()
