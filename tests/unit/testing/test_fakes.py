"""Unit tests for the in-memory store fake and strategies."""
import asyncio
import re

import hypothesis.strategies as st
import pytest
from hypothesis import given

from viewcache.kernel.errors import StoreUnavailableError
from viewcache.kernel.ports import KeyValueStore
from viewcache.testing.fakes import InMemoryKeyValueStore
from viewcache.testing.generators import entity_id_strategy, shuffled_scope_strategy


class TestInMemoryKeyValueStore:
    def test_satisfies_port(self):
        assert isinstance(InMemoryKeyValueStore(), KeyValueStore)

    def test_set_get(self):
        store = InMemoryKeyValueStore()
        asyncio.run(store.set("k", "v"))
        assert asyncio.run(store.get("k")) == "v"

    def test_increment(self):
        store = InMemoryKeyValueStore()
        assert asyncio.run(store.increment_and_get("g")) == 1
        assert asyncio.run(store.increment_and_get("g")) == 2
        assert asyncio.run(store.get("g")) == "2"

    def test_increment_non_integer_fails(self):
        store = InMemoryKeyValueStore({"g": "abc"})
        with pytest.raises(StoreUnavailableError):
            asyncio.run(store.increment_and_get("g"))

    def test_enumerate_by_prefix_is_literal(self):
        store = InMemoryKeyValueStore({"a*:1": "x", "ab:1": "y"})

        async def run():
            return [k async for k in store.enumerate_by_prefix("a*:")]

        assert asyncio.run(run()) == ["a*:1"]

    def test_invalidate_by_prefix(self):
        store = InMemoryKeyValueStore({"p:1": "x", "p:2": "y", "q:1": "z"})
        assert asyncio.run(store.invalidate_by_prefix("p:")) == 2
        assert store.keys() == ["q:1"]

    def test_bulk_delete_counts_removed(self):
        store = InMemoryKeyValueStore({"a": "1"})
        assert asyncio.run(store.bulk_delete(["a", "b"])) == 1

    def test_fail_with(self):
        store = InMemoryKeyValueStore()
        store.fail_with = StoreUnavailableError("get")
        with pytest.raises(StoreUnavailableError):
            asyncio.run(store.get("k"))
        assert store.calls == [("get", "k")]


class TestStrategies:
    @given(st.data())
    def test_shuffled_scope_keeps_tokens(self, data):
        tokens = data.draw(st.lists(st.sampled_from(["a/*.read", "b/*.*", "c"]), max_size=5))
        scope = data.draw(shuffled_scope_strategy(tokens))
        assert sorted(scope.split()) == sorted(tokens)

    @given(entity_id_strategy())
    def test_entity_ids_are_fhir_ids(self, entity_id):
        assert re.fullmatch(r"[A-Za-z0-9\-.]{1,64}", entity_id)
