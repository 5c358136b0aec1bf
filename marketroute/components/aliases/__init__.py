"""
Aliases component - URL aliases with market and content-type segments.
"""

from ._impl import (
    ALIASED_CONTENT_TYPES,
    CONTENT_TYPE_SEGMENTS,
    UrlAliasService,
    build_alias_path,
    content_type_segment,
    create_alias_service,
    market_from_language_code,
    title_of,
    uses_virtual_segments,
)
from .component import run_build, run_publish
from .models import AliasOutput, BuildAliasInput, PublishedContent, UrlAlias
from .ports import AliasStorePort

__all__ = [
    # Entry points
    "run_build",
    "run_publish",
    # Models
    "AliasOutput",
    "BuildAliasInput",
    "PublishedContent",
    "UrlAlias",
    # Ports
    "AliasStorePort",
    # _impl re-exports
    "ALIASED_CONTENT_TYPES",
    "CONTENT_TYPE_SEGMENTS",
    "UrlAliasService",
    "build_alias_path",
    "content_type_segment",
    "create_alias_service",
    "market_from_language_code",
    "title_of",
    "uses_virtual_segments",
]
