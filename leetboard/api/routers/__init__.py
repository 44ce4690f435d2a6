"""Aggregate API routers."""

from fastapi import APIRouter

from .leaderboard import router as leaderboard_router
from .leetcode import router as leetcode_router
from .profiles import router as profiles_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    profiles_router,
    leaderboard_router,
    leetcode_router,
)

__all__ = ["ALL_ROUTERS"]
