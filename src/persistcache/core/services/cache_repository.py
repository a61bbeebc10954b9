"""Cache repository - tag-addressable facade over a backing store."""

import contextlib
import logging
import traceback
from collections.abc import Iterable, Iterator

from persistcache.core.entities.cache_config import RepositoryConfig
from persistcache.core.entities.clean_mode import CleanMode
from persistcache.core.exceptions import (
    CacheDeleteError,
    CacheError,
    CacheFlushError,
    CacheReadError,
    CacheTagDeleteError,
    CacheWriteError,
    InvalidArgumentError,
    StoreUnavailableError,
)
from persistcache.core.interfaces.backing_store import IBackingStore
from persistcache.core.interfaces.hasher import IHasher
from persistcache.core.interfaces.key_builder import IKeyBuilder
from persistcache.core.interfaces.store_provider import IStoreProvider
from persistcache.infrastructure.hashers.default import HashlibHasher
from persistcache.infrastructure.key_builders.default import PrefixedKeyBuilder

_STORE_METHODS = ("save", "load", "remove", "clean")


class CacheRepository:
    """Domain service that stores, fetches and invalidates cached strings.

    Caller keys are hashed into cache keys, every entry is tagged with
    the configured system tag, and all backing store failures are
    logged and replaced by one error kind per operation.
    """

    def __init__(
        self,
        store_provider: IStoreProvider,
        hasher: IHasher | None = None,
        logger: logging.Logger | None = None,
        config: RepositoryConfig | None = None,
        key_builder: IKeyBuilder | None = None,
    ) -> None:
        """Initialize the cache repository.

        Args:
            store_provider: Resolves the backing store on first use.
            hasher: Hash function for caller keys. Defaults to SHA-256.
            logger: Logger for error events. Defaults to the module logger.
            config: Optional repository configuration. Uses defaults if not
                provided.
            key_builder: Optional key builder. Defaults to prefixing the
                hashed key with config.key_prefix.
        """
        self._store_provider = store_provider
        self._config = config or RepositoryConfig()
        self._hasher = hasher or HashlibHasher()
        self._key_builder = key_builder or PrefixedKeyBuilder(
            self._config.key_prefix, self._hasher
        )
        self._logger = logger or logging.getLogger(__name__)
        self._store: IBackingStore | None = None

    @property
    def config(self) -> RepositoryConfig:
        """Get the repository configuration."""
        return self._config

    def save(
        self,
        key: str,
        data: str,
        tags: Iterable[str] | str = (),
        lifetime: int | None = None,
    ) -> None:
        """Save data to the cache.

        Args:
            key: The caller key.
            data: The payload to store.
            tags: Extra tags. The system tag is always added first.
            lifetime: Lifetime in seconds. Uses config default if not provided.

        Raises:
            CacheWriteError: If the data cannot be saved.
        """
        with self._translate_errors(CacheWriteError, "Error while saving cache.", key=key):
            cache_key = self._key_builder.build(key)
            cache_tags = [self._config.system_tag, *_as_tag_list(tags)]
            cache_lifetime = lifetime if lifetime is not None else self._config.default_lifetime
            self._get_store().save(data, cache_key, cache_tags, cache_lifetime)

    def get(self, key: str) -> str | None:
        """Get data from the cache.

        Args:
            key: The caller key.

        Returns:
            The cached payload, or None on a miss or a non-string value.

        Raises:
            CacheReadError: If the data cannot be fetched.
        """
        with self._translate_errors(CacheReadError, "Error while getting cache.", key=key):
            cache_key = self._key_builder.build(key)
            cached_data = self._get_store().load(cache_key)

        return cached_data if isinstance(cached_data, str) else None

    def delete(self, key: str) -> None:
        """Delete data from the cache by key.

        Deleting a missing key is not an error.

        Args:
            key: The caller key.

        Raises:
            CacheDeleteError: If the data cannot be deleted.
        """
        with self._translate_errors(CacheDeleteError, "Error while deleting cache.", key=key):
            cache_key = self._key_builder.build(key)
            self._get_store().remove(cache_key)

    def delete_by_tags(self, tags: Iterable[str] | str) -> None:
        """Delete every entry carrying at least one of the tags.

        Args:
            tags: Tags to invalidate. Any iterable is read once; a bare
                string counts as one tag.

        Raises:
            InvalidArgumentError: If tags is empty.
            CacheTagDeleteError: If the data cannot be deleted.
        """
        tag_list = _as_tag_list(tags)
        if not tag_list:
            raise InvalidArgumentError("Tags cannot be empty.")

        with self._translate_errors(
            CacheTagDeleteError, "Error while deleting cache by tags.", tags=tag_list
        ):
            self._get_store().clean(CleanMode.MATCH_TAGS, tag_list)

    def delete_all(self) -> None:
        """Delete all cache data.

        Raises:
            CacheFlushError: If the cache cannot be flushed.
        """
        with self._translate_errors(CacheFlushError, "Error while deleting all cache."):
            self._get_store().clean(CleanMode.ALL, [])

    def _get_store(self) -> IBackingStore:
        """Get the backing store, resolving it on first use.

        Returns:
            The backing store.

        Raises:
            StoreUnavailableError: If the provider has no usable store.
        """
        if self._store is None:
            store = self._store_provider.get(self._config.store_identifier)
            if not _is_usable_store(store):
                raise StoreUnavailableError(
                    f"Cannot instantiate cache store {self._config.store_identifier!r}."
                )
            self._store = store

        return self._store

    @contextlib.contextmanager
    def _translate_errors(
        self,
        error_cls: type[CacheError],
        message: str,
        **context: object,
    ) -> Iterator[None]:
        """Log any failure once and replace it with error_cls.

        Args:
            error_cls: The error kind raised to the caller.
            message: The log message.
            **context: Extra fields for the log record, such as the key.

        Raises:
            CacheError: An instance of error_cls.
        """
        try:
            yield
        except Exception as exc:
            self._logger.error(
                message,
                extra={
                    "operation": error_cls.operation.value if error_cls.operation else None,
                    **context,
                    "error": str(exc),
                    "stack_trace": "".join(traceback.format_exception(exc)),
                },
            )
            raise error_cls() from None


def _is_usable_store(store: object) -> bool:
    """Check that an object provides every IBackingStore method."""
    return store is not None and all(
        callable(getattr(store, name, None)) for name in _STORE_METHODS
    )


def _as_tag_list(tags: Iterable[str] | str) -> list[str]:
    """Materialize tags once; a bare string is a single tag."""
    if isinstance(tags, str):
        return [tags]
    return list(tags)
