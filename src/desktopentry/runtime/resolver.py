"""Locale fallback resolution for localized values.

Implements the freedesktop.org Desktop Entry matching cascade: for a
query ``lang_COUNTRY.ENCODING@MODIFIER`` the candidates are tried in this
exact order, each step skipped when the query lacks the component it drops:

1. Exact match on the query as parsed (all four components)
2. ``lang@MODIFIER``  (query has country and modifier)
3. ``lang_COUNTRY``   (query has modifier)
4. ``lang``           (query has country or modifier)
5. The default value

Encoding is never stripped by the cascade: a stored ``Name[de_DE.UTF-8]``
only matches a query carrying the same encoding, and a query with an
encoding only matches stored keys with that encoding at step 1. Callers
wanting encoding-insensitive matching pass ``ignore_encoding=True``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from desktopentry.model.locale import Locale
    from desktopentry.model.values import LocalizedValue

__all__ = ["candidate_locales", "resolve"]


def candidate_locales(query: Locale) -> Iterator[Locale]:
    """Yield lookup keys for ``query`` in cascade order (default excluded).

    Example:
        >>> [str(c) for c in candidate_locales(Locale.parse("sr_YU@Latn"))]
        ['sr_YU@Latn', 'sr@Latn', 'sr_YU', 'sr']
    """
    yield query

    has_country = query.country is not None
    has_modifier = query.modifier is not None

    if has_country and has_modifier:
        yield query.without_country()
    if has_modifier:
        yield query.without_modifier()
    if has_country or has_modifier:
        yield query.language_only()


def _encoding_insensitive(localized: Mapping[Locale, object]) -> dict[Locale, object]:
    # Later entries win, same as later lines in the file
    return {locale.without_encoding(): value for locale, value in localized.items()}


def resolve[T](
    value: LocalizedValue[T],
    query: Locale,
    *,
    ignore_encoding: bool = False,
) -> T:
    """Return the variant of ``value`` best matching ``query``.

    Args:
        value: Localized value to search
        query: Requested locale
        ignore_encoding: Drop encoding from the query and stored keys first

    Returns:
        First candidate found in ``value.localized``, else ``value.default``

    Example:
        >>> name = LocalizedValue("Default", {Locale("en"): "English"})
        >>> resolve(name, Locale("en", "GB"))
        'English'
        >>> resolve(name, Locale("de"))
        'Default'
    """
    localized: Mapping[Locale, T] = value.localized
    if ignore_encoding:
        localized = _encoding_insensitive(localized)  # type: ignore[assignment]
        query = query.without_encoding()

    for candidate in candidate_locales(query):
        if candidate in localized:
            return localized[candidate]
    return value.default
