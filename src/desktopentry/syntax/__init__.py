"""Desktop entry grammar: line classification, parsing and serialization.

Python 3.13+.
"""

from desktopentry.model.document import DesktopEntry

from .builder import build_entry, parse_boolean, split_list
from .lines import (
    BlankLine,
    CommentLine,
    GroupHeader,
    KeyValue,
    LineEvent,
    classify_line,
    iter_lines,
)
from .parser import DesktopEntryParser
from .serializer import DesktopEntrySerializer, serialize

__all__ = [
    "BlankLine",
    "CommentLine",
    "DesktopEntryParser",
    "DesktopEntrySerializer",
    "GroupHeader",
    "KeyValue",
    "LineEvent",
    "build_entry",
    "classify_line",
    "iter_lines",
    "parse",
    "parse_boolean",
    "serialize",
    "split_list",
]


def parse(source: str) -> DesktopEntry:
    """Parse desktop entry source with the default parser.

    Convenience function for the common case.

    Args:
        source: Decoded file content

    Returns:
        Typed document

    Raises:
        DesktopEntryError: First grammar or required-key violation

    Example:
        >>> from desktopentry.syntax import parse
        >>> entry = parse("[Desktop Entry]\\nType=Application\\nName=Editor\\nExec=edit\\n")
        >>> entry.exec
        'edit'
    """
    parser = DesktopEntryParser()
    return parser.parse(source)
