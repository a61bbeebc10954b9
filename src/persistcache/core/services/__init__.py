"""Domain services for persistcache."""

from persistcache.core.services.cache_repository import CacheRepository

__all__ = ["CacheRepository"]
