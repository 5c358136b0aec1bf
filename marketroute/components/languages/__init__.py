"""
Languages component - translation availability and the language switcher.
"""

from ._impl import LanguageSwitcherService, create_language_switcher
from .component import run_markets, run_switcher
from .models import (
    AvailableMarketsInput,
    AvailableMarketsOutput,
    LanguageError,
    LanguageOption,
    LanguageSwitcherInput,
    LanguageSwitcherOutput,
    Translation,
    TranslationSet,
)
from .ports import TranslationQueryPort

__all__ = [
    # Entry points
    "run_markets",
    "run_switcher",
    # Input models
    "AvailableMarketsInput",
    "LanguageSwitcherInput",
    # Output models
    "AvailableMarketsOutput",
    "LanguageError",
    "LanguageOption",
    "LanguageSwitcherOutput",
    "Translation",
    "TranslationSet",
    # Ports
    "TranslationQueryPort",
    # _impl re-exports
    "LanguageSwitcherService",
    "create_language_switcher",
]
