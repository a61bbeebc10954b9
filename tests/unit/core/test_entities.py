"""Tests for core entities."""

import pytest

from persistcache import CacheEntry, CleanMode, RepositoryConfig


class TestCacheEntry:
    """Tests for CacheEntry."""

    def test_create(self) -> None:
        """Test creating an entry from a tag list."""
        entry = CacheEntry.create(
            key="persistent_abc",
            value="payload",
            tags=["persistent", "users"],
            lifetime=60,
        )

        assert entry.key == "persistent_abc"
        assert entry.value == "payload"
        assert entry.tags == ("persistent", "users")
        assert entry.lifetime == 60

    def test_create_without_tags(self) -> None:
        """Test that missing tags become an empty tuple."""
        entry = CacheEntry.create(key="k", value="v")

        assert entry.tags == ()
        assert entry.lifetime is None

    def test_entry_is_immutable(self) -> None:
        """Test that entries cannot be modified."""
        entry = CacheEntry.create(key="k", value="v")

        with pytest.raises(AttributeError):
            entry.value = "other"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("lifetime", "expires"),
        [(None, False), (0, False), (1, True), (3600, True)],
    )
    def test_expires(self, lifetime: int | None, expires: bool) -> None:
        """Test that only positive lifetimes expire."""
        assert CacheEntry.create(key="k", value="v", lifetime=lifetime).expires is expires

    def test_matches_any_tag(self) -> None:
        """Test OR matching of tags."""
        entry = CacheEntry.create(key="k", value="v", tags=["a", "b"])

        assert entry.matches(["a"]) is True
        assert entry.matches(["x", "b"]) is True
        assert entry.matches(["x", "y"]) is False

    def test_matches_all_tags(self) -> None:
        """Test AND matching of tags."""
        entry = CacheEntry.create(key="k", value="v", tags=["a", "b"])

        assert entry.matches(["a", "b"], match_all=True) is True
        assert entry.matches(["a", "x"], match_all=True) is False

    def test_matches_empty_selection(self) -> None:
        """Test that an empty tag selection matches nothing."""
        entry = CacheEntry.create(key="k", value="v", tags=["a"])

        assert entry.matches([]) is False
        assert entry.matches([], match_all=True) is False


class TestRepositoryConfig:
    """Tests for RepositoryConfig."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = RepositoryConfig()

        assert config.store_identifier == "persistent"
        assert config.key_prefix == "persistent_"
        assert config.system_tag == "persistent"
        assert config.default_lifetime == 3600

    def test_prefix_equal_to_tag_rejected(self) -> None:
        """Test that the key prefix must differ from the system tag."""
        with pytest.raises(ValueError, match="key_prefix"):
            RepositoryConfig(key_prefix="cache", system_tag="cache")

    def test_empty_system_tag_rejected(self) -> None:
        """Test that the system tag is required."""
        with pytest.raises(ValueError, match="system_tag"):
            RepositoryConfig(system_tag="")

    def test_negative_lifetime_rejected(self) -> None:
        """Test that the default lifetime cannot be negative."""
        with pytest.raises(ValueError, match="default_lifetime"):
            RepositoryConfig(default_lifetime=-1)


class TestCleanMode:
    """Tests for CleanMode."""

    def test_modes_are_distinct(self) -> None:
        """Test that every mode has its own value."""
        assert len({mode.value for mode in CleanMode}) == 3
