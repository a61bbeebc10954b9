"""In-memory tagged store implementation."""

import math
import threading
import time
from collections.abc import Callable, Sequence

from cachetools import TLRUCache  # type: ignore[import-untyped]

from persistcache.core.entities.cache_entry import CacheEntry
from persistcache.core.entities.clean_mode import CleanMode


class InMemoryTaggedStore:
    """In-memory backing store using LRU with per-entry TTL.

    Suitable for single-process deployments and tests. Uses cachetools
    TLRUCache so each entry expires after its own lifetime, and keeps
    tags on the stored CacheEntry for invalidation.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_lifetime: int | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory store.

        Args:
            maxsize: Maximum number of entries in the store.
            default_lifetime: Lifetime in seconds for entries saved without
                one. None or 0 means entries never expire.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._default_lifetime = default_lifetime
        self._lock = threading.RLock()
        self._cache: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=maxsize,
            ttu=self._time_to_use,
            timer=timer,
        )

    @staticmethod
    def _time_to_use(key: str, entry: CacheEntry, now: float) -> float:
        if not entry.expires:
            return math.inf
        return now + entry.lifetime

    def save(
        self,
        value: str,
        key: str,
        tags: Sequence[str] = (),
        lifetime: int | None = None,
    ) -> None:
        """Store a payload, replacing any entry under the same key.

        Args:
            value: The payload to store.
            key: The cache key.
            tags: Tags to associate with the entry.
            lifetime: Lifetime in seconds. None uses the store default.
        """
        entry = CacheEntry.create(
            key=key,
            value=value,
            tags=tags,
            lifetime=lifetime if lifetime is not None else self._default_lifetime,
        )
        with self._lock:
            self._cache[key] = entry

    def load(self, key: str) -> str | None:
        """Retrieve a payload by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The payload, or None if not found or expired.
        """
        with self._lock:
            entry = self._cache.get(key)
        return entry.value if entry is not None else None

    def remove(self, key: str) -> None:
        """Remove an entry. Missing keys are ignored.

        Args:
            key: The cache key to remove.
        """
        with self._lock:
            self._cache.pop(key, None)

    def clean(self, mode: CleanMode, tags: Sequence[str] = ()) -> None:
        """Remove entries selected by mode.

        Args:
            mode: The cleaning mode.
            tags: Tags used by the tag-matching modes.

        Raises:
            ValueError: If the mode is not supported.
        """
        with self._lock:
            if mode is CleanMode.ALL:
                self._cache.clear()
                return
            if mode is CleanMode.MATCH_TAGS:
                match_all = False
            elif mode is CleanMode.MATCH_ALL_TAGS:
                match_all = True
            else:
                raise ValueError(f"Unsupported clean mode: {mode!r}")

            self._cache.expire()
            for key in list(self._cache.keys()):
                entry = self._cache.get(key)
                if entry is not None and entry.matches(tags, match_all=match_all):
                    self._cache.pop(key, None)

    def tags(self, key: str) -> tuple[str, ...]:
        """Return the tags stored with an entry.

        Args:
            key: The cache key.

        Returns:
            The entry's tags, or an empty tuple if the key is missing.
        """
        with self._lock:
            entry = self._cache.get(key)
        return entry.tags if entry is not None else ()

    def __len__(self) -> int:
        """Return the number of live entries in the store."""
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the store."""
        return self._maxsize
