"""
Redirect interceptor.

Pure ASGI middleware that runs before routing. For each eligible request
it asks the redirect service for a decision and either sends the redirect
or hands the request on untouched.

Key behaviors:
- Only http scopes with GET/HEAD are considered
- Admin paths and static assets never reach the store
- At most one store lookup per request
- Lookup failures are logged and the request continues
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import parse_qs, urlencode, urlparse

from fastapi.responses import RedirectResponse
from starlette.concurrency import run_in_threadpool
from starlette.types import ASGIApp, Receive, Scope, Send

from marketroute.components.redirects import RedirectDecision
from marketroute.rules.models import RoutingRules

logger = logging.getLogger(__name__)

UTM_PARAMS = frozenset(
    {
        "utm_source",
        "utm_medium",
        "utm_campaign",
        "utm_content",
        "utm_term",
    }
)


# --- Configuration ---


@dataclass(frozen=True)
class InterceptorConfig:
    """Interceptor settings derived from routing rules."""

    admin_prefix: str = "/admin"
    asset_prefixes: tuple[str, ...] = ("/bundles", "/assets")
    methods: frozenset[str] = field(default_factory=lambda: frozenset({"GET", "HEAD"}))
    preserve_utm_params: bool = False
    enabled: bool = True

    @classmethod
    def from_rules(cls, rules: RoutingRules) -> InterceptorConfig:
        return cls(
            admin_prefix=rules.admin.url_prefix,
            asset_prefixes=tuple(rules.interceptor.asset_prefixes),
            methods=frozenset(m.upper() for m in rules.interceptor.methods),
            preserve_utm_params=rules.interceptor.preserve_utm_params,
            enabled=rules.interceptor.enabled,
        )


class InterceptState(str, Enum):
    """Outcome of one interception."""

    UNCHECKED = "unchecked"  # not yet evaluated
    PASSTHROUGH = "passthrough"
    SHORT_CIRCUITED = "short_circuited"


# --- Pure helpers ---


def should_check(path: str, config: InterceptorConfig) -> bool:
    """
    Decide whether a path is eligible for a redirect lookup.

    Admin and asset prefixes match as plain string prefixes, so
    /administrator is skipped along with /admin. Paths whose last
    segment contains a dot (files) are skipped too.
    """
    if path.startswith(config.admin_prefix):
        return False

    if any(path.startswith(prefix) for prefix in config.asset_prefixes if prefix):
        return False

    last_segment = path.rsplit("/", 1)[-1]
    if "." in last_segment:
        return False

    return True


def preserve_query_params(original_url: str, target_url: str) -> str:
    """
    Carry UTM params from the request over to the redirect target.

    Target params take precedence if duplicated.
    """
    original_params = parse_qs(urlparse(original_url).query, keep_blank_values=True)
    target_parsed = urlparse(target_url)
    target_params = parse_qs(target_parsed.query, keep_blank_values=True)

    merged: dict[str, list[str]] = {}
    for key, values in original_params.items():
        if key.lower() in UTM_PARAMS:
            merged[key] = values
    for key, values in target_params.items():
        merged[key] = values

    if not merged or merged == target_params:
        return target_url

    base = target_url.split("?", 1)[0].split("#", 1)[0]
    query = urlencode(merged, doseq=True)
    fragment = f"#{target_parsed.fragment}" if target_parsed.fragment else ""
    return f"{base}?{query}{fragment}"


# --- Interceptor ---


class RedirectInterceptor:
    """Applies the exclusion rules, then asks the resolver for a decision."""

    def __init__(
        self,
        resolver: Callable[[str], RedirectDecision | None],
        config: InterceptorConfig | None = None,
    ) -> None:
        self._resolve = resolver
        self.config = config or InterceptorConfig()

    def intercept(self, path: str) -> tuple[InterceptState, RedirectDecision | None]:
        if not should_check(path, self.config):
            return InterceptState.PASSTHROUGH, None

        decision = self._resolve(path)
        if decision is None:
            return InterceptState.PASSTHROUGH, None

        return InterceptState.SHORT_CIRCUITED, decision


# --- ASGI middleware ---


class RedirectInterceptorMiddleware:
    """Send content-managed redirects before the app routes the request.

    Register as the outermost middleware.

    Args:
        app: The next ASGI application in the middleware stack.
        interceptor_factory: Returns the interceptor to use for a request.
            Called once per eligible request so rule and store overrides
            take effect without rebuilding the stack.
    """

    def __init__(
        self,
        app: ASGIApp,
        interceptor_factory: Callable[[], RedirectInterceptor],
    ) -> None:
        self.app = app
        self._factory = interceptor_factory

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        interceptor = self._factory()
        config = interceptor.config
        if not config.enabled or scope.get("method", "GET").upper() not in config.methods:
            await self.app(scope, receive, send)
            return

        path: str = scope["path"]
        # Store lookups are blocking; keep them off the event loop
        state, decision = await run_in_threadpool(interceptor.intercept, path)

        if state is not InterceptState.SHORT_CIRCUITED or decision is None:
            await self.app(scope, receive, send)
            return

        target_url = decision.target_url
        query = scope.get("query_string", b"").decode("latin-1")
        if config.preserve_utm_params and query:
            target_url = preserve_query_params(f"{path}?{query}", target_url)

        logger.info(
            "redirect.short_circuit",
            extra={
                "from_path": path,
                "to_url": target_url,
                "status_code": decision.status_code,
            },
        )
        response = RedirectResponse(url=target_url, status_code=decision.status_code)
        await response(scope, receive, send)
