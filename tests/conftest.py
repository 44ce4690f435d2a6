# tests/conftest.py
from typing import Any, Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from leetboard.app import create_app
from leetboard.core import make_engine
from leetboard.services import LeetCodeClient, ProfileStore

GRAPHQL_URL = "https://leetcode.test/graphql/"


def matched_user_body(
    username: str = "known_user",
    real_name: str = "Known User",
    ranking: int = 1234,
    counts: tuple = (250, 100, 120, 30),
) -> Dict[str, Any]:
    """GraphQL body as LeetCode returns it for an existing user."""
    return {
        "data": {
            "matchedUser": {
                "username": username,
                "profile": {"realName": real_name, "ranking": ranking},
                "submitStatsGlobal": {
                    "acSubmissionNum": [{"count": c} for c in counts],
                },
            }
        }
    }


class FakeLeetCode:
    """
    Stand-in for the LeetCode GraphQL endpoint, served through httpx.MockTransport.
    Swap ``responder`` to change the answer; every request is recorded.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=matched_user_body())
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def client(self) -> LeetCodeClient:
        return LeetCodeClient(
            GRAPHQL_URL, timeout=2.0, transport=httpx.MockTransport(self.handler)
        )


@pytest.fixture(scope="function")
def store() -> ProfileStore:
    """Fresh in-memory store for each test."""
    profile_store = ProfileStore(make_engine("sqlite://"))
    profile_store.create_tables()
    yield profile_store
    profile_store.engine.dispose()


@pytest.fixture(scope="function")
def leetcode() -> FakeLeetCode:
    return FakeLeetCode()


@pytest.fixture(scope="function")
def client(store: ProfileStore, leetcode: FakeLeetCode) -> TestClient:
    """TestClient for an app wired to the test store and the fake LeetCode."""
    app = create_app(store=store, stats_client=leetcode.client())
    with TestClient(app) as c:
        yield c
