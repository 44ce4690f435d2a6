"""Profile store backed by a relational database."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, func, select

from ..errors import DuplicateOrInvalid, NotFound, StoreError
from ..models import MAX_SQL_INTEGER, Profile, ProfileCreate

logger = logging.getLogger(__name__)


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Serialise a profile to the API shape."""

    return {
        "id": profile.id,
        "username": profile.username,
        "solved": profile.solved,
        "contests": profile.contests,
    }


def _store_error(exc: SQLAlchemyError) -> StoreError:
    # The driver message only; the SQL statement stays in the logs.
    return StoreError(str(getattr(exc, "orig", None) or exc))


class ProfileStore:
    """Owns the engine and performs every profile read and write.

    Each call runs in its own session so the store can be shared by
    concurrent requests.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def create_tables(self, reset: bool = False) -> None:
        """Create the profiles table if it does not exist yet."""

        if reset:
            SQLModel.metadata.drop_all(self.engine)
        SQLModel.metadata.create_all(self.engine)
        logger.info("Profile store ready at %s", self.engine.url)

    def ping(self) -> int:
        """Return the number of stored profiles, proving the table is readable."""

        try:
            with Session(self.engine) as session:
                return session.exec(select(func.count(Profile.id))).one()
        except SQLAlchemyError as exc:
            logger.error("Profile store unreachable: %s", exc)
            raise _store_error(exc) from exc

    def create(self, data: ProfileCreate) -> Profile:
        profile = Profile(
            username=data.username, solved=data.solved, contests=data.contests
        )
        with Session(self.engine) as session:
            session.add(profile)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                logger.warning("Rejected profile %r: %s", data.username, exc.orig)
                raise DuplicateOrInvalid() from exc
            except SQLAlchemyError as exc:
                session.rollback()
                logger.error("Insert of profile %r failed: %s", data.username, exc)
                raise DuplicateOrInvalid() from exc
            session.refresh(profile)

        logger.info("Created profile %s (%s)", profile.id, profile.username)
        return profile

    def get(self, profile_id: int) -> Profile:
        try:
            with Session(self.engine) as session:
                profile = session.get(Profile, profile_id)
        except SQLAlchemyError as exc:
            logger.error("Lookup of profile %s failed: %s", profile_id, exc)
            raise _store_error(exc) from exc

        if profile is None:
            raise NotFound("Profile not found.")
        return profile

    def delete(self, profile_id: int) -> str:
        try:
            with Session(self.engine) as session:
                profile = session.get(Profile, profile_id)
                if profile is None:
                    raise NotFound("Profile not found.")
                session.delete(profile)
                session.commit()
        except SQLAlchemyError as exc:
            logger.error("Delete of profile %s failed: %s", profile_id, exc)
            raise _store_error(exc) from exc

        logger.info("Deleted profile %s", profile_id)
        return "Profile deleted successfully."

    def list_ranked(self, page: int, limit: int) -> Dict[str, Any]:
        """Return one leaderboard page and the total page count.

        Ranking is by solved count, then contest count, both descending.
        Profiles equal on both keys come back in storage order. Offsets
        beyond the 64-bit range are capped, which still yields an empty page.
        """

        limit = min(limit, MAX_SQL_INTEGER)
        offset = min((page - 1) * limit, MAX_SQL_INTEGER)
        try:
            with Session(self.engine) as session:
                profiles = session.exec(
                    select(Profile)
                    .order_by(Profile.solved.desc(), Profile.contests.desc())
                    .limit(limit)
                    .offset(offset)
                ).all()
                total = session.exec(select(func.count(Profile.id))).one()
        except SQLAlchemyError as exc:
            logger.error("Leaderboard query failed: %s", exc)
            raise _store_error(exc) from exc

        return {
            "profiles": [profile_to_dict(profile) for profile in profiles],
            "totalPages": math.ceil(total / limit),
        }


__all__ = ["ProfileStore", "profile_to_dict"]
