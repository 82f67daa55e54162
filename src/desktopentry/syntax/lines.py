"""Line classification for desktop entry sources.

Each physical line is turned into one structural event independently of
its neighbours. Grammar violations local to a single line (unclosed group
header, missing '=', unclosed locale suffix, bad key characters) raise
immediately; rules that need state (duplicate groups, keys outside a
group) are enforced by the parser.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from desktopentry.constants import COMMENT_PREFIX, KEY_PATTERN
from desktopentry.diagnostics import (
    InvalidGroupHeaderError,
    InvalidKeyNameError,
    InvalidLineError,
)
from desktopentry.enums import LineKind
from desktopentry.model.document import Entry
from desktopentry.model.locale import Locale

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = [
    "BlankLine",
    "CommentLine",
    "GroupHeader",
    "KeyValue",
    "LineEvent",
    "classify_line",
    "iter_lines",
    "split_key_value",
]


# ============================================================================
# LINE EVENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class BlankLine:
    """Empty or whitespace-only line."""

    line_number: int
    kind = LineKind.BLANK


@dataclass(frozen=True, slots=True)
class CommentLine:
    """Line whose first non-blank character is '#'.

    Attributes:
        text: Everything after the '#' of the stripped line
    """

    line_number: int
    text: str
    kind = LineKind.COMMENT


@dataclass(frozen=True, slots=True)
class GroupHeader:
    """``[Group Name]`` line.

    Attributes:
        name: Text between the brackets, unmodified
    """

    line_number: int
    name: str
    kind = LineKind.GROUP_HEADER


@dataclass(frozen=True, slots=True)
class KeyValue:
    """``Key=value`` or ``Key[locale]=value`` line.

    Attributes:
        text: The raw line, for error reporting
        key: Validated key without locale suffix
        locale: Decomposed locale suffix, None when absent
        value: Everything after the first '=', verbatim
    """

    line_number: int
    text: str
    key: str
    locale: Locale | None
    value: str
    kind = LineKind.KEY_VALUE

    def to_entry(self) -> Entry:
        return Entry(key=self.key, locale=self.locale, value=self.value)


type LineEvent = BlankLine | CommentLine | GroupHeader | KeyValue


# ============================================================================
# CLASSIFICATION
# ============================================================================


def iter_lines(source: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` pairs, 1-indexed.

    Lines are split on LF; a trailing CR is removed (CRLF files). A final
    line terminator does not produce an extra empty line. Other Unicode
    line separators are content, not line breaks.
    """
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for index, line in enumerate(lines, start=1):
        yield index, line.removesuffix("\r")


def split_key_value(line: str, line_number: int) -> KeyValue:
    """Split a key=value line into key, optional locale and value.

    The line is split at the first '='. The key part may carry a locale
    suffix ``Key[locale]``; the key is trimmed of surrounding whitespace
    and must match ``[A-Za-z0-9-]+``. The value is kept verbatim.

    Raises:
        InvalidLineError: No '=' in the line, or '[' without a closing ']'
        InvalidKeyNameError: Key empty or containing other characters
    """
    key_part, separator, value = line.partition("=")
    if not separator:
        raise InvalidLineError(line_number, line)

    locale: Locale | None = None
    open_pos = key_part.find("[")
    if open_pos == -1:
        key = key_part.strip()
    else:
        close_pos = key_part.find("]", open_pos + 1)
        if close_pos == -1:
            raise InvalidLineError(line_number, line)
        key = key_part[:open_pos].strip()
        locale = Locale.parse(key_part[open_pos + 1 : close_pos])

    if KEY_PATTERN.fullmatch(key) is None:
        raise InvalidKeyNameError(line_number, key)

    return KeyValue(
        line_number=line_number,
        text=line,
        key=key,
        locale=locale,
        value=value,
    )


def classify_line(line: str, line_number: int) -> LineEvent:
    """Classify one physical line.

    Args:
        line: Line without its terminator
        line_number: 1-indexed position for diagnostics

    Returns:
        Structural event for the line

    Raises:
        InvalidGroupHeaderError: Line starts with '[' but does not end with ']'
        InvalidLineError: Not blank, comment, header or key=value
        InvalidKeyNameError: Key violates ``[A-Za-z0-9-]+``

    Example:
        >>> classify_line("Name[fr]=Bonjour", 3)
        KeyValue(line_number=3, text='Name[fr]=Bonjour', key='Name', ...)
    """
    stripped = line.strip()

    if not stripped:
        return BlankLine(line_number=line_number)

    if stripped.startswith(COMMENT_PREFIX):
        return CommentLine(line_number=line_number, text=stripped[len(COMMENT_PREFIX) :])

    if stripped.startswith("["):
        if not stripped.endswith("]"):
            raise InvalidGroupHeaderError(line_number, line)
        return GroupHeader(line_number=line_number, name=stripped[1:-1])

    return split_key_value(line, line_number)
