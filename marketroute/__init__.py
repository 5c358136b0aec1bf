"""Locale/market-aware URL routing, redirect resolution and slug generation."""

__version__ = "0.1.0"
