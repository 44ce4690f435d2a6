"""Coercion of loosely typed path and query parameters."""

from __future__ import annotations

import re
from typing import Optional

from ..errors import NotFound
from ..models import MAX_SQL_INTEGER

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(raw: Optional[str]) -> Optional[int]:
    """Parse the integer prefix of ``raw``.

    ``"3.7"`` gives 3 and ``"2abc"`` gives 2; anything without a leading
    integer gives ``None``.
    """

    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def positive_int_param(raw: Optional[str], default: int) -> int:
    """Missing, junk, zero and negative values all select ``default``.

    Values past the 64-bit range are clamped to its maximum.
    """

    value = parse_leading_int(raw)
    if value is None or value < 1:
        return default
    return min(value, MAX_SQL_INTEGER)


def profile_id_param(raw: str) -> int:
    # Row ids are positive 64-bit integers, so anything else cannot match.
    if not raw.isdigit() or int(raw) > MAX_SQL_INTEGER:
        raise NotFound("Profile not found.")
    return int(raw)


__all__ = ["parse_leading_int", "positive_int_param", "profile_id_param"]
