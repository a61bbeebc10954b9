"""Cache entry entity."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Represents a stored payload with the tags used for invalidation
    and its lifetime in seconds.
    """

    key: str
    value: str
    tags: tuple[str, ...] = ()
    lifetime: int | None = None

    @property
    def expires(self) -> bool:
        """Check if the entry has a finite lifetime.

        Returns:
            True if the entry expires, False if it lives until removed.
        """
        return bool(self.lifetime)

    def matches(self, tags: Sequence[str], match_all: bool = False) -> bool:
        """Check the entry's tags against a tag selection.

        Args:
            tags: Tags to look for.
            match_all: If True, every tag must be present. Otherwise a
                single shared tag is enough.

        Returns:
            True if the entry is selected by the tags.
        """
        if not tags:
            return False
        own = set(self.tags)
        if match_all:
            return all(tag in own for tag in tags)
        return any(tag in own for tag in tags)

    @classmethod
    def create(
        cls,
        key: str,
        value: str,
        tags: Sequence[str] | None = None,
        lifetime: int | None = None,
    ) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            value: The payload to store.
            tags: Optional tags for invalidation.
            lifetime: Optional lifetime in seconds.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            value=value,
            tags=tuple(tags) if tags else (),
            lifetime=lifetime,
        )
