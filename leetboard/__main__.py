"""Run the API with uvicorn."""

from __future__ import annotations

import uvicorn

from .core import HOST, LOG_LEVEL, PORT


def main() -> None:
    uvicorn.run("leetboard.app:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
