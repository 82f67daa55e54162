"""Hypothesis strategies for locale tokens.

Generated components never contain the separators ('_', '.', '@') that
would move text into a different component, so every generated Locale
survives to_string() followed by parse() unchanged.

Usage:
    from hypothesis import given
    from tests.strategies.locale import locales

    @given(locale=locales())
    def test_roundtrip(locale):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from desktopentry.model.locale import Locale

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# COMPONENTS
# ============================================================================

language_codes: SearchStrategy[str] = st.from_regex(r"[a-z]{2,3}", fullmatch=True)

country_codes: SearchStrategy[str] = st.from_regex(r"[A-Z]{2}", fullmatch=True)

encodings: SearchStrategy[str] = st.sampled_from(
    ["UTF-8", "utf8", "ISO-8859-1", "ISO-8859-15", "KOI8-R", "EUC-JP"]
)

modifiers: SearchStrategy[str] = st.sampled_from(
    ["euro", "latin", "Latn", "Cyrl", "valencia", "saaho", "devanagari"]
)


# ============================================================================
# LOCALES
# ============================================================================


@composite
def locales(draw: st.DrawFn) -> Locale:
    """Well-formed Locale with any combination of optional components."""
    locale = Locale(
        lang=draw(language_codes),
        country=draw(st.none() | country_codes),
        encoding=draw(st.none() | encodings),
        modifier=draw(st.none() | modifiers),
    )
    present = [
        name
        for name, value in (
            ("country", locale.country),
            ("encoding", locale.encoding),
            ("modifier", locale.modifier),
        )
        if value is not None
    ]
    event(f"locale_components={'+'.join(present) or 'lang'}")
    return locale


def locale_tokens() -> SearchStrategy[str]:
    """Textual form of well-formed locales, e.g. "sr_RS.UTF-8@latin"."""
    return locales().map(str)
