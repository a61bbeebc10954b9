"""Cleaning modes understood by backing stores."""

from enum import Enum


class CleanMode(Enum):
    """How a backing store selects entries to remove on clean.

    ALL: Remove every entry, tags are ignored.
    MATCH_TAGS: Remove entries carrying at least one of the given tags.
    MATCH_ALL_TAGS: Remove entries carrying every one of the given tags.
    """

    ALL = "all"
    MATCH_TAGS = "matching_any_tag"
    MATCH_ALL_TAGS = "matching_all_tags"
