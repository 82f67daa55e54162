"""Desktop entry parser.

This module provides the DesktopEntryParser class that turns a complete
in-memory source into a :class:`~desktopentry.model.DesktopEntry`.

Architecture:
    1. :func:`~desktopentry.syntax.lines.iter_lines` splits the source
    2. :func:`~desktopentry.syntax.lines.classify_line` turns each line into
       an event (blank, comment, group header, key=value)
    3. The parser folds events into groups, tracking only the current group
    4. :func:`~desktopentry.syntax.builder.build_entry` lowers the groups into
       the typed document

Error policy:
    Grammar is strict and fail-fast: the first violation raises and no
    partial document is produced. Values of optional keys are permissive
    (see :mod:`desktopentry.syntax.builder`).

Comments and blank lines before the first group header are kept for round
trips; those inside groups are dropped.

Security:
    Includes configurable input size limit to prevent unbounded memory
    use on extremely large inputs.
"""

import logging

from desktopentry.constants import DESKTOP_ENTRY_GROUP, MAX_SOURCE_SIZE
from desktopentry.diagnostics import (
    DuplicateGroupError,
    InvalidLineError,
    MissingDesktopEntryGroupError,
)
from desktopentry.model.document import Comment, DesktopEntry, Group
from desktopentry.syntax.builder import build_entry
from desktopentry.syntax.lines import (
    BlankLine,
    CommentLine,
    GroupHeader,
    KeyValue,
    classify_line,
    iter_lines,
)

__all__ = ["DesktopEntryParser"]

logger = logging.getLogger(__name__)


class DesktopEntryParser:
    """Strict line-oriented parser for the Desktop Entry Format.

    Holds only immutable configuration; a single instance may be shared
    across threads and reused for any number of sources.

    Attributes:
        max_source_size: Maximum allowed source size in characters (default: 10 MiB)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable the limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse(self, source: str) -> DesktopEntry:
        """Parse a complete desktop entry source.

        Args:
            source: Decoded file content

        Returns:
            Typed document

        Raises:
            ValueError: If source exceeds max_source_size
            InvalidGroupHeaderError: Header not closed by ']'
            DuplicateGroupError: Group name used twice
            InvalidLineError: Malformed line, or key=value outside a group
            InvalidKeyNameError: Key violates ``[A-Za-z0-9-]+``
            MissingDesktopEntryGroupError: No [Desktop Entry] group
            MissingRequiredKeyError: Type or Name missing
            InvalidValueError: Unrecognized Type

        Example:
            >>> parser = DesktopEntryParser()
            >>> entry = parser.parse("[Desktop Entry]\\nType=Application\\nName=X\\n")
            >>> entry.name.default
            'X'
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in DesktopEntryParser constructor to increase limit."
            )
            raise ValueError(msg)

        groups: dict[str, Group] = {}
        leading_comments: list[Comment] = []
        current: Group | None = None

        for line_number, line in iter_lines(source):
            event = classify_line(line, line_number)

            match event:
                case BlankLine() if current is None:
                    leading_comments.append(Comment(line_number, "", is_blank=True))
                case CommentLine(text=text) if current is None:
                    leading_comments.append(Comment(line_number, text))
                case BlankLine() | CommentLine():
                    # Dropped: comments inside groups are not part of the model
                    continue
                case GroupHeader(name=name):
                    if name in groups:
                        raise DuplicateGroupError(name)
                    current = groups[name] = Group(name=name)
                    logger.debug("Line %d: group [%s]", line_number, name)
                case KeyValue():
                    if current is None:
                        raise InvalidLineError(line_number, event.text)
                    current.add(event.to_entry())

        main = groups.pop(DESKTOP_ENTRY_GROUP, None)
        if main is None:
            raise MissingDesktopEntryGroupError()

        entry = build_entry(main, groups, leading_comments)
        logger.debug(
            "Parsed %s entry: %d additional group(s), %d unknown key(s), %d leading comment line(s)",
            entry.entry_type,
            len(entry.additional_groups),
            len(entry.unknown_keys),
            len(entry.leading_comments),
        )
        return entry
