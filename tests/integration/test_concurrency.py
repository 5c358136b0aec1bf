"""
Concurrent requests must not leak redirect decisions into each other.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from marketroute.adapters.memory import InMemoryRedirectStore
from marketroute.components.redirects import create_redirect_service
from marketroute.components.registry import create_registry
from marketroute.components.urls import create_url_codec


def test_parallel_resolution_is_isolated():
    store = InMemoryRedirectStore()
    for i in range(50):
        store.add(f"/src-{i}", f"/dst-{i}", redirect_type=i % 2)
    service = create_redirect_service(store)

    def resolve(i: int) -> tuple[int, str | None, int | None]:
        path = f"/src-{i % 50}" if i % 3 else f"/miss-{i}"
        decision = service.resolve_safely(path)
        if decision is None:
            return i, None, None
        return i, decision.target_url, decision.status_code

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(resolve, range(600)))

    for i, target, status in results:
        if i % 3 == 0:
            assert target is None
        else:
            assert target == f"/dst-{i % 50}"
            assert status == (301 if (i % 50) % 2 == 0 else 302)


def test_parallel_parsing_is_deterministic():
    codec = create_url_codec(create_registry())
    paths = ["/th-th/a", "/my-en/b", "/th-en", "/x", "/admin/y", "/th-enable"] * 100

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(codec.parse_url, paths))

    assert results == [codec.parse_url(p) for p in paths]


def test_parallel_requests_through_interceptor(client: TestClient, redirect_store: InMemoryRedirectStore):
    for i in range(20):
        redirect_store.add(f"/go-{i}", f"/landed-{i}")

    def fetch(i: int) -> tuple[int, int, str | None]:
        response = client.get(f"/go-{i % 20}", follow_redirects=False)
        return i, response.status_code, response.headers.get("location")

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(fetch, range(100)))

    for i, status, location in results:
        assert status == 301
        assert location == f"/landed-{i % 20}"
