"""Localizable values.

Name, GenericName, Comment and Icon are localestring/iconstring keys;
Keywords is a localestring(s) key. All share one representation: a default
plus a map from Locale to the translated value.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from desktopentry.model.locale import Locale
from desktopentry.runtime.resolver import resolve

__all__ = [
    "LocalizedString",
    "LocalizedStringList",
    "LocalizedValue",
]


@dataclass(slots=True)
class LocalizedValue[T]:
    """Default value plus locale-tagged variants.

    Type Parameters:
        T: str for localestring keys, list[str] for localestring(s) keys

    Attributes:
        default: Value of the untagged line
        localized: Variants keyed by decomposed locale, in file order

    Example:
        >>> name = LocalizedValue("Default", {Locale.parse("fr"): "Défaut"})
        >>> name.get(Locale.parse("fr_CA"))
        'Défaut'
    """

    default: T
    localized: dict[Locale, T] = field(default_factory=dict)

    @classmethod
    def of(cls, default: T) -> LocalizedValue[T]:
        """Value without translations."""
        return cls(default=default)

    def add_localized(self, locale: Locale, value: T) -> None:
        """Insert or overwrite the variant for ``locale``."""
        self.localized[locale] = value

    def get(self, locale: Locale | None = None, *, ignore_encoding: bool = False) -> T:
        """Resolve the best variant for ``locale``.

        Args:
            locale: Query locale; the environment locale when None
            ignore_encoding: Treat encoding as match-irrelevant

        Returns:
            Best matching variant, or the default
        """
        query = locale if locale is not None else Locale.from_environment()
        if query is None:
            return self.default
        return resolve(self, query, ignore_encoding=ignore_encoding)

    @property
    def locales(self) -> tuple[Locale, ...]:
        """Locales with a variant, in insertion order."""
        return tuple(self.localized)


LocalizedString = LocalizedValue[str]
LocalizedStringList = LocalizedValue[list[str]]
