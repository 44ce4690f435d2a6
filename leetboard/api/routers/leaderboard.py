"""Leaderboard endpoint."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends

from ...core import LEADERBOARD_DEFAULT_LIMIT, LEADERBOARD_DEFAULT_PAGE
from ...services import ProfileStore
from ..deps import get_store
from ..params import positive_int_param

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    store: ProfileStore = Depends(get_store),
):
    """Ranked profiles, best first, one page at a time."""

    return store.list_ranked(
        positive_int_param(page, LEADERBOARD_DEFAULT_PAGE),
        positive_int_param(limit, LEADERBOARD_DEFAULT_LIMIT),
    )


__all__ = ["router"]
