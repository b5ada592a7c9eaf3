"""Tests for the in-memory candy store."""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from domains.candy_hub import Candy, CandyStore
from domains.core import CandyNotFoundError, EmptyStoreError, NotFoundError


@pytest.fixture
def store():
    return CandyStore(rng=random.Random(42))


# --- insert / get ---

def test_insert_returns_record_with_generated_id(store):
    candy = store.insert("gummy", "bear")
    assert candy.name == "gummy"
    assert candy.kind == "bear"
    assert candy.id


def test_get_returns_inserted_record(store):
    candy = store.insert("gummy", "bear")
    assert store.get(candy.id) == candy


def test_get_unknown_id_raises_not_found(store):
    store.insert("gummy", "bear")
    with pytest.raises(CandyNotFoundError) as exc_info:
        store.get("does-not-exist")
    assert isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.http_status_code == 404


def test_records_are_immutable(store):
    candy = store.insert("gummy", "bear")
    with pytest.raises(AttributeError):
        candy.name = "sour"
    assert store.get(candy.id).name == "gummy"


def test_ids_are_unique_across_inserts(store):
    ids = {store.insert(f"candy-{i}", "bar").id for i in range(200)}
    assert len(ids) == 200
    assert len(store) == 200


def test_colliding_id_is_redrawn():
    ids = iter(["a", "a", "b"])
    store = CandyStore(id_factory=lambda: next(ids))

    first = store.insert("gummy", "bear")
    second = store.insert("sour", "worm")

    assert first.id == "a"
    assert second.id == "b"


# --- list_all ---

def test_list_all_empty(store):
    assert store.list_all() == []


def test_list_all_matches_key_set(store):
    inserted = {store.insert(f"candy-{i}", "drop").id for i in range(5)}
    assert {c.id for c in store.list_all()} == inserted


def test_list_all_returns_fresh_list(store):
    store.insert("gummy", "bear")
    listing = store.list_all()
    listing.clear()
    assert len(store.list_all()) == 1


# --- random_id ---

def test_random_id_on_empty_store_raises(store):
    with pytest.raises(EmptyStoreError):
        store.random_id()


def test_random_id_single_record(store):
    candy = store.insert("gummy", "bear")
    assert store.random_id() == candy.id


def test_random_id_reaches_every_record(store):
    ids = {store.insert(f"candy-{i}", "chew").id for i in range(3)}
    drawn = {store.random_id() for _ in range(300)}
    assert drawn == ids


# --- concurrency ---

def test_concurrent_inserts_keep_every_record(store):
    with ThreadPoolExecutor(max_workers=8) as pool:
        candies = list(pool.map(lambda i: store.insert(f"candy-{i}", "mint"), range(500)))

    assert len({c.id for c in candies}) == 500
    assert store.count() == 500
    assert {c.id for c in store.list_all()} == {c.id for c in candies}


def test_concurrent_readers_and_writers(store):
    seed = store.insert("gummy", "bear")

    def work(i):
        if i % 2:
            return store.insert(f"candy-{i}", "toffee")
        assert store.get(seed.id) == seed
        assert store.random_id()
        return store.list_all()

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(work, range(200)))

    assert store.count() == 101


def test_to_dict_uses_kind_field():
    assert Candy(id="1", name="gummy", kind="bear").to_dict() == {
        "id": "1",
        "name": "gummy",
        "kind": "bear",
    }


def test_core_package_exports():
    import domains.candy_hub.core as core

    assert sorted(core.__all__) == ["Candy", "CandyStore"]
