"""Translate service errors into JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import DuplicateOrInvalid, LeetBoardError

logger = logging.getLogger(__name__)


async def _leetboard_error(request: Request, exc: LeetBoardError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only the profile payload is validated by FastAPI itself.
    logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    error = DuplicateOrInvalid()
    return JSONResponse({"error": error.message}, status_code=error.status_code)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""

    app.add_exception_handler(LeetBoardError, _leetboard_error)
    app.add_exception_handler(RequestValidationError, _invalid_request)


__all__ = ["register_error_handlers"]
