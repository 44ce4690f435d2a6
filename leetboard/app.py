"""FastAPI application factory and configuration."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_error_handlers, register_routes
from .core import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    DATABASE_URL,
    DB_RESET,
    FRONTEND_ORIGIN,
    LEETCODE_GRAPHQL_URL,
    LEETCODE_TIMEOUT,
    LOG_LEVEL,
    make_engine,
    setup_logging,
)
from .services import LeetCodeClient, ProfileStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store.create_tables(reset=DB_RESET)
    yield
    app.state.store.engine.dispose()


def create_app(
    store: Optional[ProfileStore] = None,
    stats_client: Optional[LeetCodeClient] = None,
) -> FastAPI:
    setup_logging(LOG_LEVEL)

    app = FastAPI(title="LeetBoard API", version="0.1.0", lifespan=lifespan)
    app.state.store = store or ProfileStore(make_engine(DATABASE_URL))
    app.state.stats_client = stats_client or LeetCodeClient(
        LEETCODE_GRAPHQL_URL, timeout=LEETCODE_TIMEOUT
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[FRONTEND_ORIGIN],
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    register_error_handlers(app)
    register_routes(app)
    logger.debug("Application created; CORS origin %s", FRONTEND_ORIGIN)
    return app


app = create_app()
