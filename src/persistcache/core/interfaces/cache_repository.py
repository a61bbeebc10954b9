"""Cache repository interface."""

from collections.abc import Iterable
from typing import Protocol


class ICacheRepository(Protocol):
    """Contract for the tag-addressable cache facade.

    Every method raises a single error kind from
    persistcache.core.exceptions on failure.
    """

    def save(
        self,
        key: str,
        data: str,
        tags: Iterable[str] | str = (),
        lifetime: int | None = None,
    ) -> None:
        """Save data to the cache.

        Raises:
            CacheWriteError: If the data cannot be saved.
        """
        ...

    def get(self, key: str) -> str | None:
        """Get data from the cache.

        Raises:
            CacheReadError: If the data cannot be fetched.
        """
        ...

    def delete(self, key: str) -> None:
        """Delete data from the cache by key.

        Raises:
            CacheDeleteError: If the data cannot be deleted.
        """
        ...

    def delete_by_tags(self, tags: Iterable[str] | str) -> None:
        """Delete data from the cache by tags.

        Raises:
            InvalidArgumentError: If tags is empty.
            CacheTagDeleteError: If the data cannot be deleted.
        """
        ...

    def delete_all(self) -> None:
        """Delete all cache data.

        Raises:
            CacheFlushError: If the cache cannot be flushed.
        """
        ...
