"""Hasher implementations."""

from persistcache.infrastructure.hashers.default import HashlibHasher

__all__ = ["HashlibHasher"]
