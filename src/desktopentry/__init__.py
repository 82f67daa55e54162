"""desktopentry - Desktop Entry Format parser, validator and serializer.

Reads and writes the ``.desktop`` files used by application launchers and
menus: an INI-like format with ``[Group]`` headers and ``Key[locale]=value``
entries. Parsing is strict about grammar and permissive about the values
of optional keys; unknown keys and groups are kept for lossless round trips.

Public API:
    parse - Parse desktop entry source to a DesktopEntry
    parse_file - Read and parse a UTF-8 .desktop file
    serialize - Serialize a DesktopEntry to text in canonical key order
    write_to - Serialize into a text stream or file path
    validate - Check type-specific requirements (URL, Exec)
    resolve - Pick the best variant of a localized value for a locale

Exceptions:
    DesktopEntryError - Base exception class
    DesktopEntrySyntaxError - Grammar violations
    DesktopEntryValueError - Missing or invalid required keys
    ValidationError - Failed semantic validation
    IoError, InvalidUtf8Error - File access and decoding failures

Submodules:
    desktopentry.model - Locale, LocalizedValue, Entry, Group, DesktopEntry
    desktopentry.syntax - Line classification, parser and serializer
    desktopentry.diagnostics - Error types, codes and formatting
    desktopentry.locale_utils - Environment locale detection and Babel interop
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    DesktopEntryError,
    DesktopEntrySyntaxError,
    DesktopEntryValueError,
    DuplicateGroupError,
    InvalidGroupHeaderError,
    InvalidKeyNameError,
    InvalidLineError,
    InvalidUtf8Error,
    InvalidValueError,
    IoError,
    MissingDesktopEntryGroupError,
    MissingRequiredKeyError,
    ValidationError,
)
from .enums import EntryType
from .loading import parse_file, write_to
from .model import (
    Comment,
    DesktopEntry,
    Entry,
    Group,
    Locale,
    LocalizedString,
    LocalizedStringList,
    LocalizedValue,
)
from .runtime import resolve
from .syntax import DesktopEntryParser, DesktopEntrySerializer, parse, serialize
from .validation import validate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("desktopentry")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Desktop Entry Specification conformance
__desktop_entry_spec_version__ = "1.5"
__spec_url__ = "https://specifications.freedesktop.org/desktop-entry-spec/latest/"

__all__ = [
    "Comment",
    "DesktopEntry",
    "DesktopEntryError",
    "DesktopEntryParser",
    "DesktopEntrySerializer",
    "DesktopEntrySyntaxError",
    "DesktopEntryValueError",
    "DuplicateGroupError",
    "Entry",
    "EntryType",
    "Group",
    "InvalidGroupHeaderError",
    "InvalidKeyNameError",
    "InvalidLineError",
    "InvalidUtf8Error",
    "InvalidValueError",
    "IoError",
    "Locale",
    "LocalizedString",
    "LocalizedStringList",
    "LocalizedValue",
    "MissingDesktopEntryGroupError",
    "MissingRequiredKeyError",
    "ValidationError",
    "__desktop_entry_spec_version__",
    "__spec_url__",
    "__version__",
    "parse",
    "parse_file",
    "resolve",
    "serialize",
    "validate",
    "write_to",
]
