import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from marketroute import __version__
from marketroute.api.deps import (
    get_redirect_store,
    get_rules,
    redirect_config_from,
)
from marketroute.api.routes import admin_redirects, languages, redirects, routing, slugs
from marketroute.components.redirects import RedirectDecision, create_redirect_service
from marketroute.shell.http import (
    InterceptorConfig,
    RedirectInterceptor,
    RedirectInterceptorMiddleware,
)

logger = logging.getLogger(__name__)


def check_rules_on_startup(app: FastAPI) -> None:
    """Load and validate routing rules, exiting the process if they are broken."""
    try:
        rules = app.dependency_overrides.get(get_rules, get_rules)()
        logger.info(
            "Routing rules loaded: %d siteaccesses, %d markets",
            len(rules.siteaccesses),
            len(rules.markets),
        )
    except Exception as e:
        logger.critical("Routing rules load failed: %s", e)
        sys.exit(1)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    check_rules_on_startup(app)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Market Route API",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # --- Routers ---
    app.include_router(routing.router, prefix="/api/routing", tags=["Routing"])
    app.include_router(slugs.router, prefix="/api/slugs", tags=["Slugs"])
    app.include_router(redirects.router, prefix="/api/redirects", tags=["Redirects"])
    app.include_router(languages.router, prefix="/api/content", tags=["Languages"])
    app.include_router(admin_redirects.router, prefix="/admin", tags=["Admin Redirects"])

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "marketroute"}

    # Overrides are looked up per request so tests can swap rules and stores
    def resolve(path: str) -> RedirectDecision | None:
        store = app.dependency_overrides.get(get_redirect_store, get_redirect_store)()
        rules = app.dependency_overrides.get(get_rules, get_rules)()
        service = create_redirect_service(store, redirect_config_from(rules))
        return service.resolve_safely(path)

    def interceptor_factory() -> RedirectInterceptor:
        rules = app.dependency_overrides.get(get_rules, get_rules)()
        return RedirectInterceptor(resolver=resolve, config=InterceptorConfig.from_rules(rules))

    # Added last so it is the outermost layer
    app.add_middleware(RedirectInterceptorMiddleware, interceptor_factory=interceptor_factory)

    return app


app = create_app()
