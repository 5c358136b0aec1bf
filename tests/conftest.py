import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from marketroute.adapters.memory import InMemoryRedirectStore, InMemoryTranslationStore
from marketroute.api.deps import get_redirect_store, get_rules, get_translation_query
from marketroute.api.main import create_app
from marketroute.components.registry import LocaleRegistry, create_registry
from marketroute.components.urls import UrlCodec, create_url_codec
from marketroute.rules import RoutingRules, default_rules


@pytest.fixture
def rules() -> RoutingRules:
    return default_rules()


@pytest.fixture
def registry(rules: RoutingRules) -> LocaleRegistry:
    return create_registry(rules)


@pytest.fixture
def codec(registry: LocaleRegistry) -> UrlCodec:
    return create_url_codec(registry)


@pytest.fixture
def redirect_store() -> InMemoryRedirectStore:
    return InMemoryRedirectStore()


@pytest.fixture
def translation_store() -> InMemoryTranslationStore:
    return InMemoryTranslationStore()


@pytest.fixture
def app(
    redirect_store: InMemoryRedirectStore,
    translation_store: InMemoryTranslationStore,
) -> FastAPI:
    """
    Full app with in-memory stores swapped in.
    No SQLite file is created.
    """
    app = create_app()
    app.dependency_overrides[get_rules] = default_rules
    app.dependency_overrides[get_redirect_store] = lambda: redirect_store
    app.dependency_overrides[get_translation_query] = lambda: translation_store
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
