# tests/test_store.py

import pytest

from leetboard.errors import DuplicateOrInvalid, NotFound
from leetboard.models import ProfileCreate
from leetboard.services import ProfileStore


def _add(store: ProfileStore, username: str, solved: int = 0, contests: int = 0):
    return store.create(
        ProfileCreate(username=username, solved=solved, contests=contests)
    )


def test_create_assigns_increasing_ids(store: ProfileStore):
    first = _add(store, "alice")
    second = _add(store, "bob")

    assert first.id is not None
    assert second.id > first.id


def test_create_defaults_counts_to_zero(store: ProfileStore):
    profile = store.create(ProfileCreate(username="newbie"))

    assert profile.solved == 0
    assert profile.contests == 0


def test_ids_are_not_reused_after_delete(store: ProfileStore):
    _add(store, "alice")
    last = _add(store, "bob")
    store.delete(last.id)

    again = _add(store, "carl")
    assert again.id > last.id


def test_duplicate_username_keeps_original(store: ProfileStore):
    original = _add(store, "alice", solved=10, contests=2)

    with pytest.raises(DuplicateOrInvalid):
        _add(store, "alice", solved=99, contests=99)

    kept = store.get(original.id)
    assert (kept.username, kept.solved, kept.contests) == ("alice", 10, 2)
    assert store.list_ranked(1, 10)["profiles"] == [
        {"id": original.id, "username": "alice", "solved": 10, "contests": 2}
    ]


def test_usernames_are_case_sensitive(store: ProfileStore):
    _add(store, "Alice")
    _add(store, "alice")

    assert len(store.list_ranked(1, 10)["profiles"]) == 2


def test_delete_missing_id_raises_not_found(store: ProfileStore):
    _add(store, "alice")

    with pytest.raises(NotFound):
        store.delete(12345)

    assert len(store.list_ranked(1, 10)["profiles"]) == 1


def test_delete_removes_exactly_one(store: ProfileStore):
    alice = _add(store, "alice")
    bob = _add(store, "bob")

    assert store.delete(alice.id) == "Profile deleted successfully."

    with pytest.raises(NotFound):
        store.get(alice.id)
    assert store.get(bob.id).username == "bob"
    assert len(store.list_ranked(1, 10)["profiles"]) == 1


def test_list_ranked_breaks_ties_on_contests(store: ProfileStore):
    _add(store, "alice", solved=10, contests=2)
    _add(store, "bob", solved=10, contests=5)
    _add(store, "carl", solved=3, contests=1)

    page = store.list_ranked(1, 2)

    assert [p["username"] for p in page["profiles"]] == ["bob", "alice"]
    assert page["totalPages"] == 2


def test_list_ranked_order_holds_across_pages(store: ProfileStore):
    rows = [(5, 1), (7, 0), (5, 4), (0, 9), (7, 3), (1, 1), (5, 4)]
    for idx, (solved, contests) in enumerate(rows):
        _add(store, f"user{idx}", solved=solved, contests=contests)

    ranked = []
    for page in (1, 2, 3):
        ranked.extend(store.list_ranked(page, 3)["profiles"])

    assert len(ranked) == len(rows)
    for a, b in zip(ranked, ranked[1:]):
        assert a["solved"] > b["solved"] or (
            a["solved"] == b["solved"] and a["contests"] >= b["contests"]
        )


@pytest.mark.parametrize(
    "total, limit, pages",
    [(0, 5, 0), (1, 5, 1), (5, 5, 1), (12, 5, 3), (12, 4, 3), (12, 1, 12)],
)
def test_total_pages_is_ceiling(store: ProfileStore, total: int, limit: int, pages: int):
    for idx in range(total):
        _add(store, f"user{idx}", solved=idx)

    assert store.list_ranked(1, limit)["totalPages"] == pages


def test_page_past_the_end_is_empty(store: ProfileStore):
    _add(store, "alice")

    page = store.list_ranked(4, 5)
    assert page == {"profiles": [], "totalPages": 1}
