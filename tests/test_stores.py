"""Tests for key-value store adapters."""

import asyncio
import threading
from dataclasses import dataclass, field

from wegig.adapters.memory_store import InMemoryKeyValueStore
from wegig.adapters.supabase_store import SupabaseKeyValueStore


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: list[dict[str, object]] = field(default_factory=list)
    last_payload: dict[str, object] | None = None
    last_on_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    executed_in: int | None = None

    def select(self, *_args) -> "FakeTable":
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def upsert(self, payload, on_conflict: str = "") -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def execute(self) -> FakeResponse:
        self.executed_in = threading.get_ident()
        return FakeResponse(data=self.rows)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_store_get_returns_value() -> None:
    client = FakeSupabaseClient()
    client.table("kv_store").rows = [{"value": [{"id": "1"}]}]
    store = SupabaseKeyValueStore(client)

    value = asyncio.run(store.get("gigs"))

    assert value == [{"id": "1"}]
    assert client.table("kv_store").last_filters == [("key", "gigs")]


def test_supabase_store_get_missing_returns_none() -> None:
    store = SupabaseKeyValueStore(FakeSupabaseClient())

    assert asyncio.run(store.get("gigs")) is None


def test_supabase_store_set_upserts_by_key() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client)

    asyncio.run(store.set("gigs", [{"id": "1"}]))

    table = client.table("kv_store")
    assert table.last_on_conflict == "key"
    assert table.last_payload is not None
    assert table.last_payload["key"] == "gigs"
    assert table.last_payload["value"] == [{"id": "1"}]
    assert "updated_at" in table.last_payload


def test_memory_store_isolates_stored_values() -> None:
    store = InMemoryKeyValueStore()
    value = [{"id": "1"}]

    asyncio.run(store.set("gigs", value))
    value.append({"id": "2"})
    loaded = asyncio.run(store.get("gigs"))

    assert loaded == [{"id": "1"}]


def test_supabase_store_queries_run_off_the_event_loop_thread() -> None:
    client = FakeSupabaseClient()
    store = SupabaseKeyValueStore(client)

    asyncio.run(store.get("gigs"))

    executed_in = client.table("kv_store").executed_in
    assert executed_in is not None
    assert executed_in != threading.get_ident()
