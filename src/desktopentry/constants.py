"""Shared constants for desktopentry.

Centralizes format tokens and configuration defaults used across the
syntax, model and loading packages. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Format tokens
    "DESKTOP_ENTRY_GROUP",
    "DESKTOP_ACTION_PREFIX",
    "LIST_SEPARATOR",
    "COMMENT_PREFIX",
    "BOOLEAN_TRUE",
    "BOOLEAN_FALSE",
    "KEY_PATTERN",
    # Input limits
    "MAX_SOURCE_SIZE",
    # I/O
    "DEFAULT_ENCODING",
    "LOCALE_ENV_VARS",
    "PSEUDO_LOCALES",
]

# ============================================================================
# FORMAT TOKENS
# ============================================================================

# Name of the mandatory main group.
DESKTOP_ENTRY_GROUP: str = "Desktop Entry"

# Prefix of action groups referenced by the Actions key.
DESKTOP_ACTION_PREFIX: str = "Desktop Action "

# Separator for string(s) and localestring(s) values.
LIST_SEPARATOR: str = ";"

COMMENT_PREFIX: str = "#"

# Boolean values are case-sensitive literals; anything else is not a boolean.
BOOLEAN_TRUE: str = "true"
BOOLEAN_FALSE: str = "false"

# Keys are restricted to ASCII letters, digits and '-'.
KEY_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z0-9-]+")

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source size accepted by DesktopEntryParser (characters).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# I/O
# ============================================================================

DEFAULT_ENCODING: str = "utf-8"

# Environment variables consulted for the message locale, highest precedence first.
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")

# Locale names that do not identify a language.
PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})
