"""
Tests for the in-memory store adapters.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from marketroute.adapters.memory import (
    InMemoryAliasStore,
    InMemoryRedirectStore,
    InMemoryTranslationStore,
)
from marketroute.components.languages import TranslationSet
from marketroute.components.redirects import RedirectRecord

T0 = datetime(2024, 3, 1, tzinfo=UTC)


class TestInMemoryRedirectStore:
    def test_add_assigns_ids(self) -> None:
        store = InMemoryRedirectStore()
        a = store.add("/a", "/x")
        b = store.add("/b", "/y")
        assert a.id != b.id

    def test_add_skips_taken_ids(self) -> None:
        store = InMemoryRedirectStore([RedirectRecord(1, "/a", "/x", 0, True, T0)])
        assert store.add("/b", "/y").id == 2

    def test_find_exact_source(self) -> None:
        store = InMemoryRedirectStore()
        store.add("/a", "/x")
        assert store.find_active_by_source("/a") is not None
        assert store.find_active_by_source("/a/") is None
        assert store.find_active_by_source("/A") is None

    def test_find_ignores_inactive(self) -> None:
        store = InMemoryRedirectStore()
        store.add("/a", "/x", active=False)
        assert store.find_active_by_source("/a") is None

    def test_find_newest(self) -> None:
        store = InMemoryRedirectStore()
        store.add("/a", "/old", published_at=T0)
        store.add("/a", "/new", published_at=T0 + timedelta(minutes=5))
        record = store.find_active_by_source("/a")
        assert record is not None
        assert record.target_url == "/new"

    def test_find_tie_breaks_on_id(self) -> None:
        store = InMemoryRedirectStore()
        store.add("/a", "/first", published_at=T0)
        store.add("/a", "/second", published_at=T0)
        record = store.find_active_by_source("/a")
        assert record is not None
        assert record.target_url == "/second"

    def test_list_active(self) -> None:
        store = InMemoryRedirectStore()
        for i in range(5):
            store.add(f"/s{i}", "/t", published_at=T0 + timedelta(days=i), active=i != 2)
        records = store.list_active(10)
        assert [r.source_url for r in records] == ["/s4", "/s3", "/s1", "/s0"]
        assert len(store.list_active(2)) == 2

    def test_naive_publish_time_is_stored_as_utc(self) -> None:
        store = InMemoryRedirectStore()
        record = store.add("/a", "/x", published_at=datetime(2024, 3, 1))
        assert record.published_at == T0
        assert record.published_at.tzinfo is UTC

    def test_mixed_naive_and_aware_publish_times(self) -> None:
        store = InMemoryRedirectStore([RedirectRecord(1, "/a", "/saved", 0, True, datetime(2024, 3, 2))])
        store.add("/a", "/aware", published_at=T0)
        store.add("/a", "/naive", published_at=datetime(2024, 3, 1, 12))
        record = store.find_active_by_source("/a")
        assert record is not None
        assert record.target_url == "/saved"
        assert [r.target_url for r in store.list_active(10)] == ["/saved", "/naive", "/aware"]

    def test_delete_and_clear(self) -> None:
        store = InMemoryRedirectStore()
        a = store.add("/a", "/x")
        store.add("/b", "/y")
        store.delete(a.id)
        assert store.find_active_by_source("/a") is None
        store.clear()
        assert store.list_active(10) == []


class TestInMemoryTranslationStore:
    def test_put_and_get(self) -> None:
        store = InMemoryTranslationStore()
        ts = TranslationSet(1, frozenset({"eng-GB"}), "eng-GB", "/about")
        store.put(ts)
        assert store.get_translation_set(1) is ts
        assert store.get_translation_set(2) is None


class TestInMemoryAliasStore:
    def test_create_and_list(self) -> None:
        store = InMemoryAliasStore()
        store.create_alias(1, "/news/a", "eng-GB")
        store.create_alias(1, "/th/news/a", "eng-TH")
        assert [a.path for a in store.list_aliases(1, "eng-GB")] == ["/news/a"]
        assert store.list_aliases(2, "eng-GB") == []
        assert len(store.all()) == 2
