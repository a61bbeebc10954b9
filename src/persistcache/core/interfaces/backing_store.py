"""Backing store interface."""

from collections.abc import Sequence
from typing import Protocol

from persistcache.core.entities.clean_mode import CleanMode


class IBackingStore(Protocol):
    """Contract for tag-aware key-value stores.

    The store owns entry lifecycle: eviction, expiry and tag indexing
    all happen here. Implementations must be safe for concurrent use.
    """

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
        ...

    def load(self, key: str) -> str | None:
        """Retrieve a payload by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The payload, or None if not found or expired.
        """
        ...

    def remove(self, key: str) -> None:
        """Remove an entry. Missing keys are ignored.

        Args:
            key: The cache key to remove.
        """
        ...

    def clean(self, mode: CleanMode, tags: Sequence[str] = ()) -> None:
        """Remove entries selected by mode.

        CleanMode.MATCH_TAGS removes every entry carrying at least one
        of the tags (logical OR). CleanMode.MATCH_ALL_TAGS requires all
        of them (logical AND). CleanMode.ALL ignores tags.

        Args:
            mode: The cleaning mode.
            tags: Tags used by the tag-matching modes.
        """
        ...
