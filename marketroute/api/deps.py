import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from marketroute.adapters.memory import InMemoryTranslationStore
from marketroute.adapters.sqlite import SQLiteRedirectStore
from marketroute.components.languages import (
    LanguageSwitcherService,
    TranslationQueryPort,
    create_language_switcher,
)
from marketroute.components.redirects import (
    RedirectConfig,
    RedirectService,
    RedirectStorePort,
    create_redirect_service,
)
from marketroute.components.registry import LocaleRegistry, create_registry
from marketroute.components.urls import UrlCodec, create_url_codec
from marketroute.rules import RoutingRules, default_rules, load_rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("MARKETROUTE_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "marketroute.db")
        rules_path = os.environ.get("MARKETROUTE_RULES_PATH")
        self.rules_path = Path(rules_path) if rules_path else None


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> RoutingRules:
    settings = get_settings()
    if settings.rules_path is None:
        return default_rules()
    return load_rules(settings.rules_path)


def get_registry(rules: RoutingRules = Depends(get_rules)) -> LocaleRegistry:
    return create_registry(rules)


def get_codec(registry: LocaleRegistry = Depends(get_registry)) -> UrlCodec:
    return create_url_codec(registry)


# --- Stores ---
@lru_cache
def get_redirect_store() -> RedirectStorePort:
    settings = get_settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    store = SQLiteRedirectStore(settings.db_path)
    store.init_schema()
    return store


# Content repository is external; the dev app serves an in-memory one
_translation_store = InMemoryTranslationStore()


def get_translation_query() -> TranslationQueryPort:
    return _translation_store


# --- Services ---
def redirect_config_from(rules: RoutingRules) -> RedirectConfig:
    return RedirectConfig(list_limit=rules.redirects.list_limit)


def get_redirect_service(
    store: RedirectStorePort = Depends(get_redirect_store),
    rules: RoutingRules = Depends(get_rules),
) -> RedirectService:
    return create_redirect_service(store, redirect_config_from(rules))


def get_language_switcher(
    registry: LocaleRegistry = Depends(get_registry),
    codec: UrlCodec = Depends(get_codec),
) -> LanguageSwitcherService:
    return create_language_switcher(registry, codec)
