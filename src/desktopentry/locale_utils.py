"""Locale utilities for environment detection and Babel interop.

Centralizes the two places where desktop entry locales meet the outside
world: the message locale configured in the process environment, and
Babel's CLDR-backed Locale objects.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from desktopentry.constants import LOCALE_ENV_VARS, PSEUDO_LOCALES

if TYPE_CHECKING:
    from collections.abc import Mapping

    from babel import Locale as BabelLocale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "strip_encoding",
]

logger = logging.getLogger(__name__)


def strip_encoding(locale_code: str) -> str:
    """Remove the ``.ENCODING`` part of a POSIX locale token.

    The modifier is kept, unlike a naive ``split(".")[0]``.

    Args:
        locale_code: POSIX locale token (e.g., "sr_RS.UTF-8@latin")

    Returns:
        Token without encoding (e.g., "sr_RS@latin")

    Example:
        >>> strip_encoding("de_DE.UTF-8")
        'de_DE'
        >>> strip_encoding("sr_RS.UTF-8@latin")
        'sr_RS@latin'
        >>> strip_encoding("en")
        'en'
    """
    base, at, modifier = locale_code.partition("@")
    if "." in base:
        base = base[: base.rindex(".")]
    return f"{base}{at}{modifier}"


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> BabelLocale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: POSIX locale token, optionally with encoding and modifier

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("pt_BR")
        >>> locale.language
        'pt'
        >>> locale.territory
        'BR'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(strip_encoding(locale_code))


def clear_locale_cache() -> None:
    """Clear the get_babel_locale cache."""
    get_babel_locale.cache_clear()


def get_system_locale(environ: Mapping[str, str] | None = None) -> str | None:
    """Detect the message locale from environment variables.

    Detection order follows POSIX precedence for message catalogs:
    1. LC_ALL (overrides all)
    2. LC_MESSAGES (message catalogs)
    3. LANG (default locale)

    The first non-empty value that is not the "C" or "POSIX" pseudo-locale
    is used. Its encoding is stripped since desktop entry files are UTF-8;
    the modifier is kept because it selects a different translation.

    Args:
        environ: Mapping to read instead of os.environ (for tests)

    Returns:
        Locale token such as "de_DE" or "sr_RS@latin", or None if unset.

    Example:
        >>> get_system_locale({"LANG": "de_DE.UTF-8"})
        'de_DE'
        >>> get_system_locale({"LC_ALL": "C", "LANG": "fr_FR"}) is None
        True
    """
    env = os.environ if environ is None else environ
    for var in LOCALE_ENV_VARS:
        value = env.get(var)
        if not value:
            continue
        if value in PSEUDO_LOCALES or strip_encoding(value) in PSEUDO_LOCALES:
            # An explicit C locale at higher precedence disables translation
            return None
        return strip_encoding(value)

    logger.debug("No message locale set in %s", ", ".join(LOCALE_ENV_VARS))
    return None
