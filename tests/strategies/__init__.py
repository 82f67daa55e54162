"""Hypothesis strategies for desktopentry property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- locale: Locale components and well-formed locale tokens
- desktop: Key names, values and complete desktop entry sources

Usage:
    from tests.strategies import locales, desktop_sources
    from tests.strategies.desktop import key_names, line_values
"""

from .desktop import (
    boolean_literals,
    desktop_sources,
    extension_keys,
    group_names,
    key_names,
    line_values,
    list_values,
)
from .locale import (
    country_codes,
    encodings,
    language_codes,
    locale_tokens,
    locales,
    modifiers,
)

__all__ = [
    "boolean_literals",
    "country_codes",
    "desktop_sources",
    "encodings",
    "extension_keys",
    "group_names",
    "key_names",
    "language_codes",
    "line_values",
    "list_values",
    "locale_tokens",
    "locales",
    "modifiers",
]
