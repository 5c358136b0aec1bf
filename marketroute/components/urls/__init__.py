"""
URL codec component - market/locale URL building and parsing.
"""

from ._impl import UrlCodec, create_url_codec, has_prefix, normalize_path
from .component import run, run_build, run_parse, run_strip
from .models import (
    BuildUrlInput,
    ParseUrlInput,
    ParseUrlOutput,
    StripPrefixInput,
    UrlOutput,
)

__all__ = [
    # Entry points
    "run",
    "run_build",
    "run_parse",
    "run_strip",
    # Input models
    "BuildUrlInput",
    "ParseUrlInput",
    "StripPrefixInput",
    # Output models
    "ParseUrlOutput",
    "UrlOutput",
    # _impl re-exports
    "UrlCodec",
    "create_url_codec",
    "has_prefix",
    "normalize_path",
]
