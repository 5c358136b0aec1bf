"""
Redirects component - content-driven HTTP redirects.

Invariants:
- I1: Source matches are exact
- I2: Status code is 301 for permanent, 302 otherwise
- I3: An empty target never produces a redirect
- I4: Listing is newest-first and capped at 1000 records
"""

from __future__ import annotations

from ._impl import RedirectConfig, RedirectService
from .models import (
    ListRedirectsInput,
    RedirectListOutput,
    RedirectLookupError,
    RedirectValidationError,
    ResolveOutput,
    ResolveRedirectInput,
)
from .ports import RedirectStorePort


def _create_service(store: RedirectStorePort, config: RedirectConfig | None) -> RedirectService:
    return RedirectService(store=store, config=config)


def run_resolve(
    inp: ResolveRedirectInput,
    *,
    store: RedirectStorePort,
    config: RedirectConfig | None = None,
) -> ResolveOutput:
    """
    Resolve a path to a redirect decision.

    Args:
        inp: Input containing the request path.
        store: Redirect store port.
        config: Optional redirect configuration.

    Returns:
        ResolveOutput with the decision (None when nothing matches) or a
        lookup error when the store failed.
    """
    service = _create_service(store, config)

    try:
        decision = service.resolve(inp.path)
    except RedirectLookupError as e:
        return ResolveOutput(
            decision=None,
            errors=[RedirectValidationError(code="lookup_failed", message=str(e), field="path")],
            success=False,
        )

    return ResolveOutput(decision=decision, errors=[], success=True)


def run_list(
    inp: ListRedirectsInput,
    *,
    store: RedirectStorePort,
    config: RedirectConfig | None = None,
) -> RedirectListOutput:
    """
    List active redirects.

    Args:
        inp: Input with an optional limit.
        store: Redirect store port.
        config: Optional redirect configuration.

    Returns:
        RedirectListOutput with records, newest first.
    """
    service = _create_service(store, config)

    try:
        records = service.list_active(inp.limit)
    except RedirectLookupError as e:
        return RedirectListOutput(
            redirects=(),
            errors=[RedirectValidationError(code="lookup_failed", message=str(e))],
            success=False,
        )

    return RedirectListOutput(redirects=tuple(records), errors=[], success=True)


def run(
    inp: ResolveRedirectInput | ListRedirectsInput,
    *,
    store: RedirectStorePort,
    config: RedirectConfig | None = None,
) -> ResolveOutput | RedirectListOutput:
    """
    Main entry point for the redirects component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ResolveRedirectInput):
        return run_resolve(inp, store=store, config=config)
    elif isinstance(inp, ListRedirectsInput):
        return run_list(inp, store=store, config=config)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
