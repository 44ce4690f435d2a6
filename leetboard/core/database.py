"""Database engine construction."""

from __future__ import annotations

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine


def make_engine(url: str) -> Engine:
    """Build an engine for ``url``.

    SQLite connections are shared across the threadpool that serves sync
    endpoints, and an in-memory database must stay on a single connection
    or every new session would see an empty schema.
    """

    if not url.startswith("sqlite"):
        return create_engine(url)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url in {"sqlite://", "sqlite:///:memory:"}:
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


__all__ = ["make_engine"]
