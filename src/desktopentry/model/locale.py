"""Locale identifiers of localized keys.

A locale token has the form ``lang[_COUNTRY][.ENCODING][@MODIFIER]``.
Locale is an immutable value type with structural equality over all four
components (encoding included) so it can key the localized-value maps.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from desktopentry.locale_utils import get_babel_locale, get_system_locale

if TYPE_CHECKING:
    from collections.abc import Mapping

    from babel import Locale as BabelLocale

__all__ = ["Locale"]


@dataclass(frozen=True, slots=True)
class Locale:
    """Decomposed locale token.

    Attributes:
        lang: Language code (e.g., "en", "sr")
        country: Country code (e.g., "US", "YU")
        encoding: Encoding (e.g., "UTF-8"); kept for equality and round trips
        modifier: Modifier (e.g., "Latn", "euro")

    Example:
        >>> Locale.parse("sr_YU@Latn")
        Locale(lang='sr', country='YU', encoding=None, modifier='Latn')
        >>> str(Locale.parse("en_US.UTF-8@euro"))
        'en_US.UTF-8@euro'
    """

    lang: str
    country: str | None = None
    encoding: str | None = None
    modifier: str | None = None

    @classmethod
    def parse(cls, token: str) -> Locale:
        """Decompose a locale token, rightmost component first.

        Precedence:
        1. Modifier: after the last '@'
        2. Encoding: after the last '.' of what remains
        3. Country: after the first '_' of what remains
        4. Language: the remainder

        Never fails; malformed tokens yield whatever the split produces.
        """
        rest = token
        modifier: str | None = None
        encoding: str | None = None
        country: str | None = None

        if "@" in rest:
            rest, _, modifier = rest.rpartition("@")
        if "." in rest:
            rest, _, encoding = rest.rpartition(".")
        if "_" in rest:
            rest, _, country = rest.partition("_")

        return cls(lang=rest, country=country, encoding=encoding, modifier=modifier)

    def to_string(self) -> str:
        """Recompose as ``lang[_country][.encoding][@modifier]``."""
        parts = [self.lang]
        if self.country is not None:
            parts.append(f"_{self.country}")
        if self.encoding is not None:
            parts.append(f".{self.encoding}")
        if self.modifier is not None:
            parts.append(f"@{self.modifier}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    # ------------------------------------------------------------------
    # Coarser keys used by the fallback cascade
    # ------------------------------------------------------------------

    def without_country(self) -> Locale:
        return replace(self, country=None)

    def without_modifier(self) -> Locale:
        return replace(self, modifier=None)

    def without_encoding(self) -> Locale:
        return replace(self, encoding=None)

    def language_only(self) -> Locale:
        """Locale carrying the language alone."""
        return Locale(lang=self.lang)

    # ------------------------------------------------------------------
    # Environment and Babel interop
    # ------------------------------------------------------------------

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> Locale | None:
        """Locale of LC_ALL / LC_MESSAGES / LANG, or None when unset or "C"."""
        token = get_system_locale(environ)
        if token is None:
            return None
        return cls.parse(token)

    @classmethod
    def from_babel(cls, locale: BabelLocale) -> Locale:
        """Build from a babel.Locale (script is not representable and is dropped)."""
        return cls(
            lang=locale.language,
            country=locale.territory,
            modifier=locale.modifier,
        )

    def to_babel(self) -> BabelLocale:
        """Return the matching babel.Locale.

        Raises:
            babel.core.UnknownLocaleError: If CLDR has no data for the locale
            ValueError: If the token is not a valid locale identifier
        """
        return get_babel_locale(self.to_string())

    def display_name(self, in_locale: Locale | None = None) -> str | None:
        """Human-readable locale name from CLDR, e.g. "English (United States)".

        Args:
            in_locale: Language to render the name in (defaults to this locale)
        """
        babel_locale = self.to_babel()
        target = in_locale.to_babel() if in_locale is not None else None
        return babel_locale.get_display_name(target)
