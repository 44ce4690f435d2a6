"""Logging configuration shared by the API and the CLI entry point."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_HANDLER_NAME = "leetboard"


def setup_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the root logger.

    Calling this again only updates the level.
    """

    root = logging.getLogger()
    root.setLevel(level)
    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)


__all__ = ["setup_logging"]
