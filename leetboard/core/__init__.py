"""Core configuration and infrastructure helpers."""

from .config import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    DATABASE_URL,
    DB_RESET,
    FRONTEND_ORIGIN,
    HOST,
    LEADERBOARD_DEFAULT_LIMIT,
    LEADERBOARD_DEFAULT_PAGE,
    LEETCODE_GRAPHQL_URL,
    LEETCODE_TIMEOUT,
    LOG_LEVEL,
    PORT,
)
from .database import make_engine
from .logging import setup_logging

__all__ = [
    "CORS_ALLOW_HEADERS",
    "CORS_ALLOW_METHODS",
    "DATABASE_URL",
    "DB_RESET",
    "FRONTEND_ORIGIN",
    "HOST",
    "LEADERBOARD_DEFAULT_LIMIT",
    "LEADERBOARD_DEFAULT_PAGE",
    "LEETCODE_GRAPHQL_URL",
    "LEETCODE_TIMEOUT",
    "LOG_LEVEL",
    "PORT",
    "make_engine",
    "setup_logging",
]
