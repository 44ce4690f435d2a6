"""LeetCode lookup endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...services import LeetCodeClient
from ..deps import get_stats_client

router = APIRouter(tags=["leetcode"])


@router.get("/leetcode/{username}")
async def get_leetcode_stats(
    username: str, client: LeetCodeClient = Depends(get_stats_client)
):
    """Live stats for ``username`` straight from LeetCode."""

    return await client.fetch_stats(username)


__all__ = ["router"]
