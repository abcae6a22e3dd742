"""Tests for the cached-then-live store."""

import json

from bizpulse.infrastructure.persistence.cached_store import LocalCache, cached_store
from bizpulse.infrastructure.persistence.json_store import json_store
from bizpulse.infrastructure.persistence.memory_store import in_memory_store
from tests.fakes import product


class TestCachedStore:

    def test_first_run_has_no_cache(self, tmp_path):
        store = cached_store(in_memory_store(products=[product()]), tmp_path / "cache.json")
        deliveries = []
        store.products.subscribe(lambda ps: deliveries.append([p.id for p in ps]))
        assert deliveries == [["1"]]

    def test_live_delivery_writes_cache(self, tmp_path):
        cache_file = tmp_path / "cache.json"
        store = cached_store(in_memory_store(products=[product()]), cache_file)
        store.products.subscribe(lambda ps: None)

        blobs = json.loads(cache_file.read_text())
        assert [p["id"] for p in blobs["products"]] == ["1"]

    def test_cache_pre_populates_then_live_overwrites(self, tmp_path):
        cache_file = tmp_path / "cache.json"
        warm = cached_store(in_memory_store(products=[product(id="old")]), cache_file)
        warm.products.subscribe(lambda ps: None)

        store = cached_store(in_memory_store(products=[product(id="new")]), cache_file)
        deliveries = []
        store.products.subscribe(lambda ps: deliveries.append([p.id for p in ps]))

        assert deliveries == [["old"], ["new"]]
        assert store.products.cached()[0].id == "new"

    def test_cached_list_goes_to_prefill_listener(self, tmp_path):
        cache_file = tmp_path / "cache.json"
        warm = cached_store(in_memory_store(products=[product(id="old")]), cache_file)
        warm.products.subscribe(lambda ps: None)

        store = cached_store(in_memory_store(products=[product(id="new")]), cache_file)
        prefilled, live = [], []
        store.products.subscribe(
            lambda ps: live.append([p.id for p in ps]),
            on_prefill=lambda ps: prefilled.append([p.id for p in ps]),
        )

        assert prefilled == [["old"]]
        assert live == [["new"]]

    def test_no_prefill_without_cache(self, tmp_path):
        store = cached_store(in_memory_store(products=[product()]), tmp_path / "cache.json")
        prefilled = []
        store.products.subscribe(lambda ps: None, on_prefill=prefilled.append)
        assert prefilled == []

    def test_writes_go_to_live_store(self, tmp_path):
        live = json_store(tmp_path / "data")
        store = cached_store(live, tmp_path / "cache.json")

        pid = store.products.create(product(id=None))
        store.products.update_fields(pid, {"stock": 1})

        assert live.products.get_by_id(pid).stock == 1
        store.products.delete(pid)
        assert live.products.list_all() == []

    def test_corrupt_cache_is_ignored(self, tmp_path):
        cache_file = tmp_path / "cache.json"
        cache_file.write_text("garbage")
        store = cached_store(in_memory_store(products=[product()]), cache_file)

        deliveries = []
        store.products.subscribe(lambda ps: deliveries.append(len(ps)))

        assert deliveries == [1]

    def test_stale_records_in_cache_are_ignored(self, tmp_path):
        cache_file = tmp_path / "cache.json"
        LocalCache(cache_file).put("products", [{"id": "1"}])
        store = cached_store(in_memory_store(), cache_file)

        deliveries = []
        store.products.subscribe(lambda ps: deliveries.append(len(ps)))

        assert deliveries == [0]


class TestLocalCache:

    def test_keys_are_independent(self, tmp_path):
        cache = LocalCache(tmp_path / "cache.json")
        cache.put("sales", [{"id": "s1"}])
        cache.put("ads", [])
        assert cache.get("sales") == [{"id": "s1"}]
        assert cache.get("ads") == []
        assert cache.get("products") is None
