"""Profile endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from ...errors import DuplicateOrInvalid
from ...models import ProfileCreate
from ...services import ProfileStore, profile_to_dict
from ..deps import get_store
from ..params import profile_id_param

router = APIRouter(tags=["profiles"])


@router.post("/profiles", status_code=201)
def create_profile(body: Any = Body(None), store: ProfileStore = Depends(get_store)):
    """Add a profile to the leaderboard."""

    try:
        data = ProfileCreate.model_validate(body)
    except ValidationError as exc:
        raise DuplicateOrInvalid() from exc

    return profile_to_dict(store.create(data))


@router.get("/profiles/{profile_id}")
def get_profile(profile_id: str, store: ProfileStore = Depends(get_store)):
    return profile_to_dict(store.get(profile_id_param(profile_id)))


@router.delete("/profiles/{profile_id}")
def delete_profile(
    profile_id: str, store: ProfileStore = Depends(get_store)
) -> Dict[str, str]:
    """Delete a profile by ID."""

    message = store.delete(profile_id_param(profile_id))
    return {"message": message}


__all__ = ["router"]
