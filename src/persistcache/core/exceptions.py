"""Error taxonomy for persistcache.

Every public repository operation fails with exactly one error kind.
The backing store's native exception never crosses the repository
boundary; it is logged and replaced by the operation's kind.
"""

from enum import Enum


class CacheOperation(Enum):
    """Repository operation that produced an error."""

    SAVE = "save"
    GET = "get"
    DELETE = "delete"
    DELETE_BY_TAGS = "delete_by_tags"
    DELETE_ALL = "delete_all"


class CacheError(Exception):
    """Base class for all persistcache errors.

    Attributes:
        operation: The repository operation that failed, or None when
            the error was raised outside of an operation.
    """

    operation: CacheOperation | None = None
    default_message = "Cache operation failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidArgumentError(CacheError, ValueError):
    """Raised when a caller violates an operation's preconditions."""

    operation = CacheOperation.DELETE_BY_TAGS
    default_message = "Tags cannot be empty."


class CacheWriteError(CacheError):
    """Raised when an entry cannot be saved."""

    operation = CacheOperation.SAVE
    default_message = "Unable to save data to the cache."


class CacheReadError(CacheError):
    """Raised when an entry cannot be fetched."""

    operation = CacheOperation.GET
    default_message = "Unable to fetch data from the cache."


class CacheDeleteError(CacheError):
    """Raised when an entry cannot be deleted by key."""

    operation = CacheOperation.DELETE
    default_message = "Unable to delete data from the cache by key."


class CacheTagDeleteError(CacheError):
    """Raised when entries cannot be deleted by tags."""

    operation = CacheOperation.DELETE_BY_TAGS
    default_message = "Unable to delete data from the cache by tags."


class CacheFlushError(CacheError):
    """Raised when the cache cannot be flushed."""

    operation = CacheOperation.DELETE_ALL
    default_message = "Unable to delete all data from the cache."


class StoreUnavailableError(CacheError):
    """Raised internally when the backing store cannot be resolved.

    Never reaches callers of CacheRepository: it is translated into the
    error kind of the operation that triggered resolution.
    """

    default_message = "Cannot instantiate the cache store."
