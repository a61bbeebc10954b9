"""Redis tagged store implementation."""

from collections.abc import Iterable, Sequence

import redis

from persistcache.core.entities.clean_mode import CleanMode

# TTL replies for keys that are missing or have no expiry.
_TTL_MISSING = -2
_TTL_PERSISTENT = -1


class RedisTaggedStore:
    """Redis backing store for distributed deployments.

    Entries live at ``{namespace}:entry:{key}``. Each tag is a Redis set
    at ``{namespace}:tag:{tag}`` holding the keys it labels, and each
    entry remembers its own tags at ``{namespace}:entry_tags:{key}`` so
    stale memberships are dropped when the entry is replaced or removed.

    A tag set expires no earlier than the longest-lived entry it labels,
    and becomes persistent once it labels an entry without a lifetime.
    Members left behind by expired entries are dropped by clean() for the
    tags it touches, and by prune() for every tag.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        namespace: str = "persistcache",
        default_lifetime: int | None = None,
        client: redis.Redis | None = None,
    ) -> None:
        """Initialize the Redis store.

        Args:
            redis_url: Redis connection URL. Ignored when client is given.
            namespace: Prefix for every Redis key written by the store.
            default_lifetime: Lifetime in seconds for entries saved without
                one. None or 0 means entries never expire.
            client: Optional preconfigured Redis client.
        """
        if client is None:
            client = redis.Redis.from_url(redis_url, decode_responses=True)
        self._redis = client
        self._namespace = namespace
        self._default_lifetime = default_lifetime

    def save(
        self,
        value: str,
        key: str,
        tags: Sequence[str] = (),
        lifetime: int | None = None,
    ) -> None:
        """Store a payload, replacing any entry under the same key.

        The entry's previous tags are read under WATCH, so concurrent
        saves of the same key retry instead of leaving stale memberships.

        Args:
            value: The payload to store.
            key: The cache key.
            tags: Tags to associate with the entry.
            lifetime: Lifetime in seconds. None uses the store default.
        """
        effective_lifetime = lifetime if lifetime is not None else self._default_lifetime
        entry_key = self._entry_key(key)
        entry_tags_key = self._entry_tags_key(key)
        tag_keys = [self._tag_key(tag) for tag in tags]

        def write(pipe: redis.client.Pipeline) -> None:
            previous_tags = pipe.smembers(entry_tags_key)
            tag_ttls = [pipe.ttl(tag_key) for tag_key in tag_keys] if effective_lifetime else []

            pipe.multi()
            for tag in previous_tags:
                pipe.srem(self._tag_key(self._decode(tag)), key)
            pipe.delete(entry_tags_key)

            if effective_lifetime:
                pipe.setex(entry_key, effective_lifetime, value)
            else:
                pipe.set(entry_key, value)

            if not tags:
                return

            pipe.sadd(entry_tags_key, *tags)
            if effective_lifetime:
                pipe.expire(entry_tags_key, effective_lifetime)

            for index, tag_key in enumerate(tag_keys):
                pipe.sadd(tag_key, key)
                if not effective_lifetime:
                    pipe.persist(tag_key)
                elif tag_ttls[index] == _TTL_MISSING:
                    pipe.expire(tag_key, effective_lifetime)
                elif tag_ttls[index] != _TTL_PERSISTENT:
                    pipe.expire(tag_key, effective_lifetime, gt=True)

        self._redis.transaction(write, entry_tags_key)

    def load(self, key: str) -> str | None:
        """Retrieve a payload by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The payload, or None if not found or expired.
        """
        value = self._redis.get(self._entry_key(key))
        if value is None:
            return None
        return self._decode(value)

    def remove(self, key: str) -> None:
        """Remove an entry. Missing keys are ignored.

        Args:
            key: The cache key to remove.
        """
        self._purge([key])

    def clean(self, mode: CleanMode, tags: Sequence[str] = ()) -> None:
        """Remove entries selected by mode.

        Args:
            mode: The cleaning mode.
            tags: Tags used by the tag-matching modes.

        Raises:
            ValueError: If the mode is not supported.
        """
        if mode is CleanMode.ALL:
            self._delete_by_pattern(f"{self._namespace}:*")
            return
        if mode not in (CleanMode.MATCH_TAGS, CleanMode.MATCH_ALL_TAGS):
            raise ValueError(f"Unsupported clean mode: {mode!r}")
        if not tags:
            return

        tag_keys = [self._tag_key(tag) for tag in tags]
        if mode is CleanMode.MATCH_TAGS:
            members = self._redis.sunion(tag_keys)
            self._purge(self._decode(member) for member in members)
            # Every member of these sets is gone now, dead ones included.
            self._redis.delete(*tag_keys)
        else:
            members = self._redis.sinter(tag_keys)
            self._purge(self._decode(member) for member in members)
            for tag_key in tag_keys:
                self._prune_tag_key(tag_key)

    def prune(self) -> int:
        """Drop tag memberships whose entries no longer exist.

        Returns:
            Number of memberships removed.
        """
        removed = 0
        for tag_key in self._redis.scan_iter(match=self._tag_key("*"), count=100):
            removed += self._prune_tag_key(self._decode(tag_key))
        return removed

    def _prune_tag_key(self, tag_key: str) -> int:
        """Drop members of one tag set whose entries no longer exist.

        Args:
            tag_key: The Redis key of the tag set.

        Returns:
            Number of memberships removed.
        """
        members = [self._decode(member) for member in self._redis.smembers(tag_key)]
        if not members:
            return 0

        reader = self._redis.pipeline(transaction=False)
        for member in members:
            reader.exists(self._entry_key(member))
        alive = reader.execute()

        dead = [member for member, exists in zip(members, alive) if not exists]
        if not dead:
            return 0
        return self._redis.srem(tag_key, *dead)

    def _purge(self, keys: Iterable[str]) -> None:
        """Delete entries and their tag memberships.

        Args:
            keys: Cache keys to delete.
        """
        keys = list(keys)
        if not keys:
            return

        reader = self._redis.pipeline(transaction=False)
        for key in keys:
            reader.smembers(self._entry_tags_key(key))
        tag_sets = reader.execute()

        pipe = self._redis.pipeline(transaction=True)
        for key, entry_tags in zip(keys, tag_sets):
            for tag in entry_tags:
                pipe.srem(self._tag_key(self._decode(tag)), key)
            pipe.delete(self._entry_key(key), self._entry_tags_key(key))
        pipe.execute()

    def _delete_by_pattern(self, pattern: str) -> int:
        """Delete keys matching a pattern using SCAN.

        Uses SCAN instead of KEYS for production safety.

        Args:
            pattern: Redis glob pattern.

        Returns:
            Number of keys deleted.
        """
        count = 0
        cursor = 0

        while True:
            cursor, keys = self._redis.scan(cursor, match=pattern, count=100)

            if keys:
                count += self._redis.delete(*keys)

            if cursor == 0:
                break

        return count

    def _entry_key(self, key: str) -> str:
        return f"{self._namespace}:entry:{key}"

    def _entry_tags_key(self, key: str) -> str:
        return f"{self._namespace}:entry_tags:{key}"

    def _tag_key(self, tag: str) -> str:
        return f"{self._namespace}:tag:{tag}"

    @staticmethod
    def _decode(value: str | bytes) -> str:
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def close(self) -> None:
        """Close the Redis connection."""
        self._redis.close()

    def __enter__(self) -> "RedisTaggedStore":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
