"""Database model and inbound schema for leaderboard profiles."""

from __future__ import annotations

from typing import Optional

from pydantic import StrictInt, StrictStr
from sqlmodel import Field as ORMField, SQLModel

# SQLite INTEGER columns are signed 64-bit.
MAX_SQL_INTEGER = 2**63 - 1
MIN_SQL_INTEGER = -(2**63)


class ProfileCreate(SQLModel):
    """Payload accepted by ``POST /profiles``."""

    username: StrictStr = ORMField(min_length=1)
    solved: StrictInt = ORMField(default=0, ge=MIN_SQL_INTEGER, le=MAX_SQL_INTEGER)
    contests: StrictInt = ORMField(default=0, ge=MIN_SQL_INTEGER, le=MAX_SQL_INTEGER)


class Profile(SQLModel, table=True):
    """Competitive-programming user ranked on the leaderboard."""

    __tablename__ = "profiles"
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str = ORMField(unique=True, nullable=False)
    solved: int = ORMField(default=0)
    contests: int = ORMField(default=0)


__all__ = ["MAX_SQL_INTEGER", "MIN_SQL_INTEGER", "Profile", "ProfileCreate"]
