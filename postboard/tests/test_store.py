from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from postboard.domain.posts.exceptions import PostForbiddenError, PostNotFoundError
from postboard.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from postboard.infrastructure.repositories.in_memory_store import InMemoryStore
from postboard.shared.errors.base import ValidationError


def _seed_posts(store: InMemoryStore, count: int) -> list[str]:
    author = store.create_user("author@x.com", "author", "hash")
    return [store.create_post(f"title {i}", f"content {i}", author.id).id for i in range(count)]


def test_create_user_assigns_unique_ids(store: InMemoryStore) -> None:
    first = store.create_user("a@x.com", "a", "hash-a")
    second = store.create_user("b@x.com", "b", "hash-b")

    assert first.id != second.id
    assert store.get_user(first.id) == first
    assert store.find_user_by_email("b@x.com") == second


def test_create_user_duplicate_email_conflicts(store: InMemoryStore) -> None:
    store.create_user("a@x.com", "a", "hash")

    with pytest.raises(UserAlreadyExistsError):
        store.create_user("a@x.com", "someone-else", "hash")

    assert store.count_users() == 1


def test_email_equality_is_case_sensitive(store: InMemoryStore) -> None:
    store.create_user("a@x.com", "a", "hash")
    store.create_user("A@x.com", "a", "hash")

    assert store.find_user_by_email("A@X.COM") is None
    assert store.count_users() == 2


def test_lookups_for_unknown_keys_return_none(store: InMemoryStore) -> None:
    assert store.get_user("missing") is None
    assert store.find_user_by_email("nobody@x.com") is None
    assert store.get_post("missing") is None


def test_timestamps_come_from_clock() -> None:
    store = InMemoryStore(clock=lambda: 1_700_000_000.9)
    user = store.create_user("a@x.com", "a", "hash")
    post = store.create_post("t", "c", user.id)

    assert user.created_at == 1_700_000_000
    assert post.created_at == post.updated_at == 1_700_000_000


def test_create_post_requires_existing_author(store: InMemoryStore) -> None:
    with pytest.raises(UserNotFoundError):
        store.create_post("t", "c", "ghost")


def test_list_posts_newest_first(store: InMemoryStore) -> None:
    ids = _seed_posts(store, 3)

    page = store.list_posts(1, 10)

    assert [post.id for post in page.items] == list(reversed(ids))
    assert page.total == 3


def test_list_posts_is_repeatable(store: InMemoryStore) -> None:
    _seed_posts(store, 15)

    assert store.list_posts(1, 10) == store.list_posts(1, 10)


def test_pages_cover_every_post_once(store: InMemoryStore) -> None:
    ids = _seed_posts(store, 23)

    seen: list[str] = []
    for page_number in range(1, 4):
        page = store.list_posts(page_number, 10)
        assert page.total == 23
        seen.extend(post.id for post in page.items)

    assert len(seen) == len(set(seen)) == 23
    assert set(seen) == set(ids)


def test_page_past_the_end_is_empty(store: InMemoryStore) -> None:
    _seed_posts(store, 3)

    page = store.list_posts(5, 10)

    assert list(page.items) == []
    assert page.total == 3
    assert (page.page, page.limit) == (5, 10)


def test_limit_larger_than_remaining_returns_rest(store: InMemoryStore) -> None:
    _seed_posts(store, 12)

    assert len(store.list_posts(2, 10).items) == 2


@pytest.mark.parametrize(("page", "limit"), [(0, 10), (-1, 10), (1, 0), (1, -5)])
def test_list_posts_rejects_non_positive_bounds(
    store: InMemoryStore, page: int, limit: int
) -> None:
    with pytest.raises(ValidationError):
        store.list_posts(page, limit)


def test_delete_post_by_owner(store: InMemoryStore) -> None:
    owner = store.create_user("a@x.com", "a", "hash")
    post = store.create_post("t", "c", owner.id)

    store.delete_post(post.id, owner.id)

    assert store.get_post(post.id) is None
    assert store.count_posts() == 0


def test_delete_post_by_other_user_is_forbidden(store: InMemoryStore) -> None:
    owner = store.create_user("a@x.com", "a", "hash")
    other = store.create_user("b@x.com", "b", "hash")
    post = store.create_post("t", "c", owner.id)

    with pytest.raises(PostForbiddenError):
        store.delete_post(post.id, other.id)

    assert store.get_post(post.id) == post


def test_delete_missing_post_is_not_found(store: InMemoryStore) -> None:
    owner = store.create_user("a@x.com", "a", "hash")

    with pytest.raises(PostNotFoundError):
        store.delete_post("missing", owner.id)


@pytest.mark.parametrize("attempts", [2, 8, 32])
def test_concurrent_signups_with_same_email(attempts: int) -> None:
    store = InMemoryStore()
    barrier = threading.Barrier(attempts)

    def attempt(i: int) -> str:
        barrier.wait()
        try:
            store.create_user("race@x.com", f"user{i}", "hash")
        except UserAlreadyExistsError:
            return "conflict"
        return "ok"

    with ThreadPoolExecutor(max_workers=attempts) as pool:
        results = list(pool.map(attempt, range(attempts)))

    assert results.count("ok") == 1
    assert results.count("conflict") == attempts - 1
    assert store.count_users() == 1


def test_concurrent_deletes_remove_exactly_once(store: InMemoryStore) -> None:
    owner = store.create_user("a@x.com", "a", "hash")
    post = store.create_post("t", "c", owner.id)
    attempts = 16
    barrier = threading.Barrier(attempts)

    def attempt(_: int) -> str:
        barrier.wait()
        try:
            store.delete_post(post.id, owner.id)
        except PostNotFoundError:
            return "missing"
        return "deleted"

    with ThreadPoolExecutor(max_workers=attempts) as pool:
        results = list(pool.map(attempt, range(attempts)))

    assert results.count("deleted") == 1
    assert results.count("missing") == attempts - 1


def test_concurrent_writers_keep_counts_consistent(store: InMemoryStore) -> None:
    author = store.create_user("a@x.com", "a", "hash")

    def write(i: int) -> None:
        store.create_post(f"t{i}", "c", author.id)
        store.list_posts(1, 5)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(write, range(200)))

    page = store.list_posts(1, 1000)
    assert page.total == 200
    assert len({post.id for post in page.items}) == 200
