import sqlite3
from datetime import UTC, datetime, timedelta

import pytest

from marketroute.adapters.sqlite import SQLiteRedirectStore
from marketroute.components.redirects import RedirectKind, create_redirect_service, kind_of

T0 = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "test.db")


@pytest.fixture
def store(db_path):
    store = SQLiteRedirectStore(db_path)
    store.init_schema()
    return store


def test_init_schema_is_idempotent(store, db_path):
    store.init_schema()
    conn = sqlite3.connect(db_path)
    tables = conn.execute("SELECT name FROM sqlite_master WHERE type='table' AND name='redirects'").fetchall()
    conn.close()
    assert len(tables) == 1


def test_add_and_find(store):
    saved = store.add("/old", "/new", redirect_type=RedirectKind.PERMANENT, published_at=T0)
    assert saved.id > 0

    found = store.find_active_by_source("/old")
    assert found is not None
    assert found.id == saved.id
    assert found.target_url == "/new"
    assert found.active is True
    assert found.published_at == T0
    assert kind_of(found.redirect_type) is RedirectKind.PERMANENT


def test_find_missing_returns_none(store):
    assert store.find_active_by_source("/nothing") is None


def test_find_is_exact(store):
    store.add("/Old-Page", "/new")
    assert store.find_active_by_source("/old-page") is None
    assert store.find_active_by_source("/Old-Page/") is None
    assert store.find_active_by_source("/Old-Page") is not None


def test_find_skips_inactive(store):
    record = store.add("/old", "/new")
    store.set_active(record.id, False)
    assert store.find_active_by_source("/old") is None


def test_newest_published_wins(store):
    store.add("/old", "/first", published_at=T0 + timedelta(days=1))
    store.add("/old", "/second", published_at=T0)
    found = store.find_active_by_source("/old")
    assert found.target_url == "/first"


def test_equal_publish_higher_id_wins(store):
    store.add("/old", "/first", published_at=T0)
    store.add("/old", "/second", published_at=T0)
    assert store.find_active_by_source("/old").target_url == "/second"


@pytest.mark.parametrize(
    ("stored", "status"),
    [(0, 301), (1, 302), (301, 301), (302, 302), ("permanent", 301), (None, 302), ("weird", 302)],
)
def test_stored_type_maps_to_status(store, stored, status):
    store.add("/old", "/new", redirect_type=stored)
    decision = create_redirect_service(store).resolve("/old")
    assert decision.status_code == status


def test_null_target_never_redirects(store):
    store.add("/old", None)
    assert create_redirect_service(store).resolve("/old") is None


def test_list_active_order_and_limit(store):
    for i in range(6):
        store.add(f"/s{i}", "/t", published_at=T0 + timedelta(hours=i))
    hidden = store.add("/hidden", "/t", published_at=T0 + timedelta(days=9))
    store.set_active(hidden.id, False)

    records = store.list_active(4)
    assert [r.source_url for r in records] == ["/s5", "/s4", "/s3", "/s2"]



def test_mixed_naive_and_aware_publish_times(store, db_path):
    store.add("/a", "/aware", published_at=T0)
    naive = store.add("/a", "/naive", published_at=datetime(2024, 6, 1, 13, 0))
    assert naive.published_at.tzinfo is UTC

    # Row written without an offset by an older writer
    conn = sqlite3.connect(db_path)
    conn.execute(
        "INSERT INTO redirects (source_url, target_url, redirect_type, active, published_at) VALUES (?, ?, ?, ?, ?)",
        ("/b", "/legacy", "0", 1, "2024-06-01T14:00:00.000000"),
    )
    conn.commit()
    conn.close()

    found = store.find_active_by_source("/a")
    assert found is not None
    assert found.target_url == "/naive"
    assert found.published_at == T0 + timedelta(hours=1)

    service = create_redirect_service(store)
    listed = service.list_active()
    assert [r.target_url for r in listed] == ["/legacy", "/naive", "/aware"]
    assert all(r.published_at.utcoffset() == timedelta(0) for r in listed)

def test_service_wraps_sqlite_errors(tmp_path):
    # Schema never created
    store = SQLiteRedirectStore(str(tmp_path / "empty.db"))
    service = create_redirect_service(store)
    assert service.resolve_safely("/old") is None
