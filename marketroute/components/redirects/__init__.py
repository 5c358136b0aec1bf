"""
Redirects component - content-driven redirect resolution.
"""

from ._impl import (
    MAX_LIST_LIMIT,
    RedirectConfig,
    RedirectService,
    as_utc,
    build_decision,
    create_redirect_service,
    kind_of,
    select_latest,
    status_code_for,
)
from .component import run, run_list, run_resolve
from .models import (
    ListRedirectsInput,
    RedirectDecision,
    RedirectKind,
    RedirectListOutput,
    RedirectLookupError,
    RedirectRecord,
    RedirectValidationError,
    ResolveOutput,
    ResolveRedirectInput,
)
from .ports import RedirectStorePort

__all__ = [
    # Entry points
    "run",
    "run_list",
    "run_resolve",
    # Input models
    "ListRedirectsInput",
    "ResolveRedirectInput",
    # Output models
    "RedirectDecision",
    "RedirectKind",
    "RedirectListOutput",
    "RedirectLookupError",
    "RedirectRecord",
    "RedirectValidationError",
    "ResolveOutput",
    # Ports
    "RedirectStorePort",
    # _impl re-exports
    "MAX_LIST_LIMIT",
    "RedirectConfig",
    "RedirectService",
    "as_utc",
    "build_decision",
    "create_redirect_service",
    "kind_of",
    "select_latest",
    "status_code_for",
]
