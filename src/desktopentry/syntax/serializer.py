"""Serialize DesktopEntry documents back to Desktop Entry Format text.

Output is deterministic: leading comments, then ``[Desktop Entry]`` with
the recognized keys in fixed schema order, then unrecognized keys and
additional groups in insertion order. The source ordering of
known keys, comments inside groups and duplicate untagged scalar lines
are not reproduced.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from desktopentry.constants import (
    BOOLEAN_FALSE,
    BOOLEAN_TRUE,
    COMMENT_PREFIX,
    DESKTOP_ENTRY_GROUP,
    LIST_SEPARATOR,
)
from desktopentry.enums import FieldKind
from desktopentry.model.fields import KNOWN_FIELDS, TYPE_KEY

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import TextIO

    from desktopentry.model.document import Comment, DesktopEntry, Entry, Group
    from desktopentry.model.locale import Locale
    from desktopentry.model.values import LocalizedValue

__all__ = ["DesktopEntrySerializer", "serialize"]


def _format_boolean(value: bool) -> str:
    return BOOLEAN_TRUE if value else BOOLEAN_FALSE


def _format_list(values: Iterable[str]) -> str:
    return LIST_SEPARATOR.join(values)


def _format_key(key: str, locale: Locale | None) -> str:
    return key if locale is None else f"{key}[{locale}]"


class DesktopEntrySerializer:
    """Converts a DesktopEntry back to source text.

    Thread-safe serializer with no mutable instance state.
    All serialization state is local to the serialize() call.

    Usage:
        >>> from desktopentry.syntax import parse
        >>> entry = parse("[Desktop Entry]\\nType=Link\\nName=Docs\\nURL=https://example.com\\n")
        >>> print(DesktopEntrySerializer().serialize(entry), end="")
        [Desktop Entry]
        Type=Link
        Name=Docs
        URL=https://example.com
    """

    __slots__ = ("_newline",)

    def __init__(self, *, newline: str = "\n") -> None:
        """Initialize serializer.

        Args:
            newline: Line terminator appended to every line
        """
        self._newline = newline

    def serialize(self, entry: DesktopEntry) -> str:
        """Serialize a document to a string.

        Pure function - builds output locally without mutating instance state.
        """
        return "".join(self._lines(entry))

    def write(self, entry: DesktopEntry, sink: TextIO) -> None:
        """Write the serialized document line by line to a text stream."""
        for line in self._lines(entry):
            sink.write(line)

    # ------------------------------------------------------------------

    def _line(self, text: str) -> str:
        return f"{text}{self._newline}"

    def _lines(self, entry: DesktopEntry) -> Iterable[str]:
        yield from self._comment_lines(entry.leading_comments)

        yield self._line(f"[{DESKTOP_ENTRY_GROUP}]")
        yield self._line(f"{TYPE_KEY}={entry.entry_type}")

        for spec in KNOWN_FIELDS:
            value = getattr(entry, spec.attr)
            if value is None:
                continue
            match spec.kind:
                case FieldKind.STRING:
                    yield self._line(f"{spec.key}={value}")
                case FieldKind.BOOLEAN:
                    yield self._line(f"{spec.key}={_format_boolean(value)}")
                case FieldKind.STRING_LIST:
                    yield self._line(f"{spec.key}={_format_list(value)}")
                case FieldKind.LOCALE_STRING:
                    yield from self._localized_lines(spec.key, value, str)
                case FieldKind.LOCALE_STRING_LIST:
                    yield from self._localized_lines(spec.key, value, _format_list)

        for entries in entry.unknown_keys.values():
            yield from self._entry_lines(entries)

        for group in entry.additional_groups.values():
            yield from self._group_lines(group)

    def _comment_lines(self, comments: Iterable[Comment]) -> Iterable[str]:
        for comment in comments:
            if comment.is_blank:
                yield self._line("")
            else:
                yield self._line(f"{COMMENT_PREFIX}{comment.text}")

    def _localized_lines[T](
        self,
        key: str,
        value: LocalizedValue[T],
        render: Callable[[T], str],
    ) -> Iterable[str]:
        yield self._line(f"{key}={render(value.default)}")
        for locale, variant in value.localized.items():
            yield self._line(f"{_format_key(key, locale)}={render(variant)}")

    def _entry_lines(self, entries: Iterable[Entry]) -> Iterable[str]:
        for item in entries:
            yield self._line(f"{_format_key(item.key, item.locale)}={item.value}")

    def _group_lines(self, group: Group) -> Iterable[str]:
        yield self._line("")
        yield self._line(f"[{group.name}]")
        yield from self._entry_lines(group.iter_entries())


def serialize(entry: DesktopEntry) -> str:
    """Serialize a document with the default serializer.

    Example:
        >>> from desktopentry import DesktopEntry, EntryType
        >>> text = serialize(DesktopEntry.new(EntryType.APPLICATION, "My App"))
        >>> "Type=Application" in text
        True
    """
    return DesktopEntrySerializer().serialize(entry)
