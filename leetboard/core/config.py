"""Application settings and environment helpers."""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number") from exc


# Storage --------------------------------------------------------------------
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./leaderboard.db")
DB_RESET = _env_bool("DB_RESET", False)


# HTTP surface ---------------------------------------------------------------
# Only one origin is allowed to call the API.
FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN", "http://localhost:3000").strip()
CORS_ALLOW_METHODS = ["GET", "POST", "DELETE", "PUT", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type"]

HOST = os.getenv("HOST", "127.0.0.1")
PORT = _env_int("PORT", 3001)


# Leaderboard ----------------------------------------------------------------
LEADERBOARD_DEFAULT_PAGE = 1
LEADERBOARD_DEFAULT_LIMIT = _env_int("LEADERBOARD_DEFAULT_LIMIT", 5)
if LEADERBOARD_DEFAULT_LIMIT < 1:
    raise RuntimeError("LEADERBOARD_DEFAULT_LIMIT must be positive")


# LeetCode provider ----------------------------------------------------------
LEETCODE_GRAPHQL_URL = os.getenv("LEETCODE_GRAPHQL_URL", "https://leetcode.com/graphql/")
LEETCODE_TIMEOUT = _env_float("LEETCODE_TIMEOUT", 10.0)


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()


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
]
