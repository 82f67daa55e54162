"""File input and output for desktop entries.

Thin wrappers around the parser and serializer that read UTF-8 files and
write serialized text to paths or streams. Operating system failures are
re-raised as IoError and undecodable bytes as InvalidUtf8Error; the
underlying exception is always chained.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from desktopentry.constants import DEFAULT_ENCODING
from desktopentry.diagnostics import InvalidUtf8Error, IoError
from desktopentry.syntax.parser import DesktopEntryParser
from desktopentry.syntax.serializer import DesktopEntrySerializer

if TYPE_CHECKING:
    from typing import TextIO

    from desktopentry.model.document import DesktopEntry

__all__ = ["parse_file", "read_source", "write_to"]

logger = logging.getLogger(__name__)

type PathLike = str | os.PathLike[str]


def _reason(error: OSError) -> str:
    return error.strerror or str(error)


def read_source(path: PathLike) -> str:
    """Read a desktop entry file as UTF-8 text.

    Raises:
        IoError: File missing, unreadable, or a directory
        InvalidUtf8Error: Content is not valid UTF-8
    """
    file_path = Path(path)
    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise IoError(str(file_path), _reason(e)) from e

    try:
        source = data.decode(DEFAULT_ENCODING)
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error(str(file_path)) from e

    logger.debug("Read %d bytes from %s", len(data), file_path)
    return source


def parse_file(
    path: PathLike,
    *,
    parser: DesktopEntryParser | None = None,
) -> DesktopEntry:
    """Read and parse a ``.desktop`` file.

    Args:
        path: File to read
        parser: Parser to use (default: a new DesktopEntryParser)

    Returns:
        Typed document

    Raises:
        IoError: File could not be read
        InvalidUtf8Error: Content is not valid UTF-8
        DesktopEntryError: Any grammar or required-key violation

    Example:
        >>> entry = parse_file("/usr/share/applications/org.gnome.Nautilus.desktop")
        >>> entry.entry_type
        <EntryType.APPLICATION: 'Application'>
    """
    source = read_source(path)
    return (parser or DesktopEntryParser()).parse(source)


def write_to(
    entry: DesktopEntry,
    sink: TextIO | PathLike,
    *,
    serializer: DesktopEntrySerializer | None = None,
) -> None:
    """Serialize ``entry`` into a text stream or a file path.

    Paths are created or truncated and written as UTF-8. Streams are
    written to but not closed.

    Args:
        entry: Document to write
        sink: Open text stream, or path of the file to write
        serializer: Serializer to use (default: a new DesktopEntrySerializer)

    Raises:
        IoError: The sink rejected the write
    """
    serializer = serializer or DesktopEntrySerializer()

    if isinstance(sink, (str, os.PathLike)):
        file_path = Path(sink)
        text = serializer.serialize(entry)
        try:
            # newline="" keeps the serializer's line terminator untouched
            with file_path.open("w", encoding=DEFAULT_ENCODING, newline="") as stream:
                stream.write(text)
        except OSError as e:
            raise IoError(str(file_path), _reason(e)) from e
        logger.debug("Wrote %d characters to %s", len(text), file_path)
        return

    try:
        serializer.write(entry, sink)
    except OSError as e:
        name = getattr(sink, "name", None)
        raise IoError(str(name) if name is not None else "<stream>", _reason(e)) from e
    logger.debug("Wrote %s entry to stream", entry.entry_type)
