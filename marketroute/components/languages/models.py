"""
Languages component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TranslationSet:
    """Published translations of one content item (read-only)."""

    content_id: int | str
    language_codes: frozenset[str]
    initial_language_code: str
    path: str = "/"  # canonical path without siteaccess prefix


@dataclass(frozen=True)
class Translation:
    """Translation chosen for a requested locale."""

    content_id: int | str
    language_code: str
    requested_language_code: str

    @property
    def is_fallback(self) -> bool:
        return self.language_code != self.requested_language_code


@dataclass(frozen=True)
class LanguageOption:
    """One entry of the language switcher."""

    siteaccess: str
    locale: str
    market: str
    display_name: str
    url: str
    available: bool
    current: bool


@dataclass(frozen=True)
class LanguageError:
    """Language lookup error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class LanguageSwitcherInput:
    """Input for building the language switcher."""

    content_id: int | str
    current_siteaccess: str | None = None


@dataclass(frozen=True)
class AvailableMarketsInput:
    """Input for listing markets a content item is available in."""

    content_id: int | str


# --- Output Models ---


@dataclass(frozen=True)
class LanguageSwitcherOutput:
    """Output of the language switcher."""

    languages: dict[str, LanguageOption]
    errors: list[LanguageError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class AvailableMarketsOutput:
    markets: frozenset[str]
    errors: list[LanguageError] = field(default_factory=list)
    success: bool = True
