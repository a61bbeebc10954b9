"""Repository configuration entity."""

from dataclasses import dataclass


@dataclass
class RepositoryConfig:
    """Cache repository configuration.

    Attributes:
        store_identifier: Name of the backing store to resolve from the
            store provider.
        key_prefix: Prefix prepended to every hashed cache key.
        system_tag: Tag attached to every entry saved by the repository.
            Must differ from key_prefix so keys and tags never share a
            literal in stores that index both in one table.
        default_lifetime: Lifetime in seconds used when save() is called
            without one.
    """

    store_identifier: str = "persistent"
    key_prefix: str = "persistent_"
    system_tag: str = "persistent"
    default_lifetime: int = 60 * 60  # 1 hour

    def __post_init__(self) -> None:
        """Validate the configuration."""
        if not self.system_tag:
            raise ValueError("system_tag cannot be empty")
        if self.key_prefix == self.system_tag:
            raise ValueError("key_prefix must differ from system_tag")
        if self.default_lifetime < 0:
            raise ValueError("default_lifetime cannot be negative")
