"""Desktop entry exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Every exception carries enough positional context (line number,
offending text or key name) for callers to localize the fault.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "DesktopEntryError",
    "DesktopEntrySyntaxError",
    "DesktopEntryValueError",
    "DuplicateGroupError",
    "InvalidGroupHeaderError",
    "InvalidKeyNameError",
    "InvalidLineError",
    "InvalidUtf8Error",
    "InvalidValueError",
    "IoError",
    "MissingDesktopEntryGroupError",
    "MissingRequiredKeyError",
    "ValidationError",
]


class DesktopEntryError(Exception):
    """Base exception for all desktop entry errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DesktopEntryError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


# ============================================================================
# I/O
# ============================================================================


class IoError(DesktopEntryError):
    """Reading the source or writing the sink failed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(ErrorTemplate.io_failed(path, reason))
        self.path = path
        self.reason = reason


class InvalidUtf8Error(DesktopEntryError):
    """File bytes are not valid UTF-8."""

    def __init__(self, path: str) -> None:
        super().__init__(ErrorTemplate.invalid_utf8(path))
        self.path = path


# ============================================================================
# SYNTAX (fail-fast, first violation aborts the parse)
# ============================================================================


class DesktopEntrySyntaxError(DesktopEntryError):
    """Structural grammar violation.

    Parsing stops at the first violation; no partial document is returned.
    """


class MissingDesktopEntryGroupError(DesktopEntrySyntaxError):
    """No [Desktop Entry] group in the file."""

    def __init__(self) -> None:
        super().__init__(ErrorTemplate.missing_desktop_entry_group())


class DuplicateGroupError(DesktopEntrySyntaxError):
    """Group header name already used earlier in the file.

    Attributes:
        name: Repeated group name (without brackets)
    """

    def __init__(self, name: str) -> None:
        super().__init__(ErrorTemplate.duplicate_group(name))
        self.name = name


class InvalidLineError(DesktopEntrySyntaxError):
    """Line is not a comment, blank, group header or key=value in a group.

    Attributes:
        line: 1-indexed line number
        text: Offending line
    """

    def __init__(self, line: int, text: str) -> None:
        super().__init__(ErrorTemplate.invalid_line(line, text))
        self.line = line
        self.text = text


class InvalidGroupHeaderError(DesktopEntrySyntaxError):
    """Line starts with '[' but does not end with ']'.

    Attributes:
        line: 1-indexed line number
        text: Offending line
    """

    def __init__(self, line: int, text: str) -> None:
        super().__init__(ErrorTemplate.invalid_group_header(line, text))
        self.line = line
        self.text = text


class InvalidKeyNameError(DesktopEntrySyntaxError):
    """Key contains characters outside [A-Za-z0-9-] or is empty.

    Attributes:
        line: 1-indexed line number
        name: Key as written, locale suffix removed
    """

    def __init__(self, line: int, name: str) -> None:
        super().__init__(ErrorTemplate.invalid_key_name(line, name))
        self.line = line
        self.name = name


# ============================================================================
# REQUIRED VALUES
# ============================================================================


class DesktopEntryValueError(DesktopEntryError):
    """Required key of [Desktop Entry] missing or malformed.

    Optional keys never raise: a malformed optional value leaves the
    field unset.
    """


class MissingRequiredKeyError(DesktopEntryValueError):
    """Required key absent from [Desktop Entry].

    Attributes:
        key: Name of the missing key (Type or Name)
    """

    def __init__(self, key: str) -> None:
        super().__init__(ErrorTemplate.missing_required_key(key))
        self.key = key


class InvalidValueError(DesktopEntryValueError):
    """Required key holds a value outside its domain.

    Attributes:
        key: Key whose value was rejected
        raw: Raw value as written in the file
    """

    def __init__(self, key: str, raw: str) -> None:
        super().__init__(ErrorTemplate.invalid_value(key, raw))
        self.key = key
        self.raw = raw


# ============================================================================
# SEMANTIC VALIDATION
# ============================================================================


class ValidationError(DesktopEntryError):
    """Type-dependent required-field rule failed.

    Only raised by explicit validation, never during parsing.

    Attributes:
        reason: Rule description, e.g. "URL is required for Link type entries"
    """

    def __init__(self, reason: str) -> None:
        super().__init__(ErrorTemplate.validation_failed(reason))
        self.reason = reason
