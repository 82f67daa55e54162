"""Enumerations for desktopentry type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class EntryType(StrEnum):
    """Value of the required ``Type`` key.

    StrEnum provides automatic string conversion: str(EntryType.LINK) == "Link"
    """

    APPLICATION = "Application"
    """Launchable application (type 1)"""

    LINK = "Link"
    """Link to a URL (type 2)"""

    DIRECTORY = "Directory"
    """Menu directory (type 3)"""

    @classmethod
    def from_value(cls, raw: str) -> "EntryType | None":
        """Return the member for an exact ``Type`` literal, or None."""
        try:
            return cls(raw)
        except ValueError:
            return None


class FieldKind(StrEnum):
    """Value type of a recognized ``[Desktop Entry]`` key.

    StrEnum provides automatic string conversion: str(FieldKind.BOOLEAN) == "boolean"
    """

    STRING = "string"
    """Single string, first untagged line wins: Exec=app %U"""

    BOOLEAN = "boolean"
    """Literal true or false: Terminal=false"""

    STRING_LIST = "string(s)"
    """Semicolon separated list: Categories=Utility;TextEditor;"""

    LOCALE_STRING = "localestring"
    """Localizable string: Name[fr]=Éditeur"""

    LOCALE_STRING_LIST = "localestring(s)"
    """Localizable semicolon separated list: Keywords[de]=Text;Editor;"""


class LineKind(StrEnum):
    """Structural classification of one physical line.

    StrEnum provides automatic string conversion: str(LineKind.BLANK) == "blank"
    """

    BLANK = "blank"
    """Empty or whitespace-only line"""

    COMMENT = "comment"
    """Line starting with '#'"""

    GROUP_HEADER = "group_header"
    """Bracketed group name: [Desktop Entry]"""

    KEY_VALUE = "key_value"
    """Key=value or Key[locale]=value"""


__all__ = [
    "EntryType",
    "FieldKind",
    "LineKind",
]
