"""FastAPI dependencies resolving the services owned by the app."""

from __future__ import annotations

from fastapi import Request

from ..services import LeetCodeClient, ProfileStore


def get_store(request: Request) -> ProfileStore:
    """Return the profile store created at application startup."""

    return request.app.state.store


def get_stats_client(request: Request) -> LeetCodeClient:
    return request.app.state.stats_client


__all__ = ["get_stats_client", "get_store"]
