"""Key builder implementations."""

from persistcache.infrastructure.key_builders.default import PrefixedKeyBuilder

__all__ = ["PrefixedKeyBuilder"]
