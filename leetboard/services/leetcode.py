"""
LeetCode stats client
Looks up live statistics for a username through LeetCode's GraphQL API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, TypedDict

import httpx

from ..errors import FetchError, NotFound

logger = logging.getLogger(__name__)

USER_PROFILE_QUERY = """
query getUserProfile($username: String!) {
  matchedUser(username: $username) {
    username
    profile {
      realName
      ranking
    }
    submitStatsGlobal {
      acSubmissionNum {
        count
      }
    }
  }
}
"""


class LeetCodeStats(TypedDict):
    username: str
    realName: Optional[str]
    ranking: Optional[int]
    problemsSolved: int


def _solved_count(user: Dict[str, Any]) -> int:
    """Return the accepted count of the first breakdown row.

    LeetCode lists the "All" difficulty first; the rows are never summed.
    """

    stats = user.get("submitStatsGlobal")
    if not isinstance(stats, dict):
        raise FetchError()
    rows = stats.get("acSubmissionNum")
    if not isinstance(rows, list) or not rows or not isinstance(rows[0], dict):
        raise FetchError()
    count = rows[0].get("count")
    if not isinstance(count, int) or isinstance(count, bool):
        raise FetchError()
    return count


def parse_user_stats(body: Any) -> LeetCodeStats:
    """Normalise a GraphQL response body.

    Raises ``NotFound`` when LeetCode reports no matching user and
    ``FetchError`` for any other unexpected shape.
    """

    if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
        raise FetchError()
    user = body["data"].get("matchedUser")
    if not user:
        raise NotFound("User not found")
    if not isinstance(user, dict) or not isinstance(user.get("profile"), dict):
        raise FetchError()

    profile = user["profile"]
    return {
        "username": user.get("username"),
        "realName": profile.get("realName"),
        "ranking": profile.get("ranking"),
        "problemsSolved": _solved_count(user),
    }


class LeetCodeClient:
    """Issues one GraphQL request per lookup; nothing is cached or retried."""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def fetch_stats(self, username: str) -> LeetCodeStats:
        logger.info("Fetching LeetCode stats for %s", username)
        payload = {"query": USER_PROFILE_QUERY, "variables": {"username": username}}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    self.url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching data from LeetCode for %s: %s", username, exc)
            raise FetchError() from exc

        try:
            return parse_user_stats(body)
        except FetchError:
            logger.error("Unexpected LeetCode response for %s: %r", username, body)
            raise


__all__ = ["LeetCodeClient", "LeetCodeStats", "USER_PROFILE_QUERY", "parse_user_stats"]
