"""LeetBoard: profile leaderboard API with live LeetCode lookups."""

__version__ = "0.1.0"
