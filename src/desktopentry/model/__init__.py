"""Desktop entry data model.

Locale identifiers, localizable values, raw entries and groups, and the
typed DesktopEntry document.

Python 3.13+.
"""

from .document import Comment, DesktopEntry, Entry, Group
from .fields import KNOWN_FIELDS, KNOWN_KEYS, TYPE_KEY, FieldSpec
from .locale import Locale
from .values import LocalizedString, LocalizedStringList, LocalizedValue

__all__ = [
    "KNOWN_FIELDS",
    "KNOWN_KEYS",
    "TYPE_KEY",
    "Comment",
    "DesktopEntry",
    "Entry",
    "FieldSpec",
    "Group",
    "Locale",
    "LocalizedString",
    "LocalizedStringList",
    "LocalizedValue",
]
