"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...services import ProfileStore
from ..deps import get_store

router = APIRouter(tags=["system"])


@router.get("/health")
def health(store: ProfileStore = Depends(get_store)) -> Dict[str, Any]:
    """Readiness probe that also checks the profile table is readable."""

    return {"ok": True, "profiles": store.ping()}


__all__ = ["router"]
