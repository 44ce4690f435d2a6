"""Error taxonomy shared by the store, the provider client and the API."""

from __future__ import annotations


class LeetBoardError(Exception):
    """Base error carrying the HTTP status and the message shown to clients."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class DuplicateOrInvalid(LeetBoardError):
    """Profile creation conflicted with an existing username or had bad input."""

    status_code = 400
    message = "Username already exists or invalid input."


class NotFound(LeetBoardError):
    status_code = 404
    message = "Not found"


class StoreError(LeetBoardError):
    """The underlying storage failed."""

    status_code = 500
    message = "Storage failure"


class FetchError(LeetBoardError):
    """The provider call failed or answered with an unexpected shape."""

    status_code = 500
    message = "Error fetching data from LeetCode"


__all__ = [
    "DuplicateOrInvalid",
    "FetchError",
    "LeetBoardError",
    "NotFound",
    "StoreError",
]
