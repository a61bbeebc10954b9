"""Domain entities for persistcache."""

from persistcache.core.entities.cache_config import RepositoryConfig
from persistcache.core.entities.cache_entry import CacheEntry
from persistcache.core.entities.clean_mode import CleanMode

__all__ = [
    "CacheEntry",
    "CleanMode",
    "RepositoryConfig",
]
