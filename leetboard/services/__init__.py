"""Service layer: the profile store and the LeetCode client."""

from .leetcode import LeetCodeClient, LeetCodeStats, parse_user_stats
from .profiles import ProfileStore, profile_to_dict

__all__ = [
    "LeetCodeClient",
    "LeetCodeStats",
    "ProfileStore",
    "parse_user_stats",
    "profile_to_dict",
]
