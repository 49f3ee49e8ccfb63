"""
Unit Tests for the Client Store.

Tests ID minting, full replacement, deletion and thread safety.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from client_registry.core.exceptions import NotFoundError
from client_registry.repositories.client import ClientStore, build_client_store
from client_registry.schemas.client import ClientPayload


class TestClientStoreCreate:
    """Tests for ID minting on create."""

    def test_first_id_is_one_on_empty_store(self, store, ana_payload):
        """Counter is pre-incremented from zero."""
        client = store.create(ana_payload)

        assert client.id == "1"

    def test_create_copies_payload_fields(self, store, ana_payload):
        """Stored record should carry every payload field."""
        client = store.create(ana_payload)

        assert client.name == "Ana"
        assert client.birth_date == "02/02/1991"
        assert client.address == "Rua A"
        assert client.phone == "111"
        assert store.get(client.id) == client

    def test_ids_are_sequential_strings(self, store, ana_payload):
        """IDs should be consecutive decimal strings."""
        ids = [store.create(ana_payload).id for _ in range(3)]

        assert ids == ["1", "2", "3"]

    def test_ids_not_reused_after_delete(self, store, ana_payload):
        """Deleting the newest record must not free its ID."""
        first = store.create(ana_payload)
        store.delete(first.id)

        second = store.create(ana_payload)

        assert second.id == "2"


class TestClientStoreRead:
    """Tests for lookups and listing."""

    def test_get_missing_raises_not_found(self, store):
        """get should raise NotFoundError for unknown IDs."""
        with pytest.raises(NotFoundError) as exc_info:
            store.get("42")

        assert exc_info.value.message == "Cliente não encontrado"

    def test_exists(self, seeded_store):
        """exists should reflect membership."""
        assert seeded_store.exists("1") is True
        assert seeded_store.exists("2") is False

    def test_list_all_empty(self, store):
        """An empty store lists nothing."""
        assert store.list_all() == []
        assert len(store) == 0

    def test_list_all_is_a_snapshot(self, seeded_store, ana_payload):
        """Mutating the store should not change an earlier listing."""
        listing = seeded_store.list_all()
        seeded_store.create(ana_payload)

        assert len(listing) == 1
        assert len(seeded_store) == 2


class TestClientStoreReplace:
    """Tests for full replacement."""

    def test_replace_discards_old_fields(self, seeded_store):
        """Fields absent from the payload become empty strings."""
        client = seeded_store.replace("1", ClientPayload(name="Bruno"))

        assert client.id == "1"
        assert client.name == "Bruno"
        assert client.birth_date == ""
        assert client.address == ""
        assert client.phone == ""
        assert seeded_store.get("1") == client

    def test_replace_missing_raises_not_found(self, store, ana_payload):
        """replace should not insert unknown IDs."""
        with pytest.raises(NotFoundError):
            store.replace("9", ana_payload)

        assert len(store) == 0

    def test_replace_does_not_advance_counter(self, seeded_store, ana_payload):
        """Only create mints IDs."""
        seeded_store.replace("1", ana_payload)

        assert seeded_store.create(ana_payload).id == "2"


class TestClientStoreDelete:
    """Tests for deletion."""

    def test_delete_removes_record(self, seeded_store):
        """Deleted records are no longer reachable."""
        seeded_store.delete("1")

        assert seeded_store.exists("1") is False
        assert len(seeded_store) == 0

    def test_delete_missing_raises_and_keeps_store(self, seeded_store):
        """Deleting an unknown ID leaves the store untouched."""
        with pytest.raises(NotFoundError):
            seeded_store.delete("2")

        assert [c.id for c in seeded_store.list_all()] == ["1"]


class TestBuildClientStore:
    """Tests for seeding."""

    def test_seed_takes_id_one(self, seeded_store, seed_payload):
        """The single seed record occupies ID "1"."""
        seed = seeded_store.get("1")

        assert seed.name == seed_payload.name
        assert len(seeded_store) == 1

    def test_first_create_after_seed_gets_two(self, seeded_store, ana_payload):
        """The counter continues after the seed."""
        assert seeded_store.create(ana_payload).id == "2"

    def test_no_seed_gives_empty_store(self):
        """Without seed records the store starts empty."""
        store = build_client_store()

        assert len(store) == 0
        assert store.create(ClientPayload()).id == "1"

    def test_multiple_seeds_take_ids_in_order(self):
        """Seed records are numbered in the order given."""
        store = build_client_store(
            [ClientPayload(name="A"), ClientPayload(name="B")]
        )

        assert store.get("1").name == "A"
        assert store.get("2").name == "B"


class TestClientStoreConcurrency:
    """Tests for concurrent access."""

    def test_concurrent_creates_get_unique_ids(self, ana_payload):
        """Parallel creates must never mint the same ID twice."""
        store = ClientStore()
        workers = 16
        per_worker = 200
        barrier = threading.Barrier(workers)

        def create_many() -> list[str]:
            barrier.wait()
            return [store.create(ana_payload).id for _ in range(per_worker)]

        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(create_many) for _ in range(workers)]
            ids = [client_id for f in futures for client_id in f.result()]

        total = workers * per_worker
        assert len(set(ids)) == total
        assert len(store) == total
        assert sorted(map(int, ids)) == list(range(1, total + 1))

    def test_concurrent_deletes_only_one_succeeds(self, seeded_store):
        """Exactly one of several racing deletes of the same ID wins."""
        workers = 8
        barrier = threading.Barrier(workers)

        def delete_seed() -> bool:
            barrier.wait()
            try:
                seeded_store.delete("1")
            except NotFoundError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda _: delete_seed(), range(workers)))

        assert results.count(True) == 1
        assert len(seeded_store) == 0
