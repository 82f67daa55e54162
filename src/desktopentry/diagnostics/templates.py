"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics raised by the library are created here so exception
    constructors never format strings themselves.
    """

    @staticmethod
    def io_failed(path: str, reason: str) -> Diagnostic:
        """Reading or writing a file failed at the OS level.

        Args:
            path: Path or sink description
            reason: OS error description

        Returns:
            Diagnostic for IO_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.IO_FAILED,
            message=f"IO error: {path}: {reason}",
            hint="Check that the path exists and is accessible",
        )

    @staticmethod
    def invalid_utf8(path: str) -> Diagnostic:
        """File content could not be decoded as UTF-8."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_UTF8,
            message=f"File is not valid UTF-8: {path}",
            hint="Desktop entry files must be encoded in UTF-8",
        )

    @staticmethod
    def missing_desktop_entry_group() -> Diagnostic:
        """The mandatory [Desktop Entry] group was never declared."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_DESKTOP_ENTRY_GROUP,
            message="Missing required [Desktop Entry] group",
            hint="Add a '[Desktop Entry]' header before the first key",
        )

    @staticmethod
    def duplicate_group(name: str) -> Diagnostic:
        """A group header repeats an earlier group name.

        Args:
            name: Group name without brackets

        Returns:
            Diagnostic for DUPLICATE_GROUP
        """
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_GROUP,
            message=f"Duplicate group: [{name}]",
            hint="Merge the keys of both groups under a single header",
        )

    @staticmethod
    def invalid_line(line: int, text: str) -> Diagnostic:
        """A line is neither blank, comment, header nor key=value.

        Args:
            line: 1-indexed line number
            text: Offending line as it appears in the source

        Returns:
            Diagnostic for INVALID_LINE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_LINE,
            message=f"Invalid line {line} format: {text}",
            line=line,
            hint="Entries must have the form Key=value or Key[locale]=value inside a group",
        )

    @staticmethod
    def invalid_group_header(line: int, text: str) -> Diagnostic:
        """A group header is not closed by ']'."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_GROUP_HEADER,
            message=f"Invalid group header at line {line}: {text}",
            line=line,
            hint="Group headers must have the form [Group Name]",
        )

    @staticmethod
    def invalid_key_name(line: int, name: str) -> Diagnostic:
        """A key contains characters outside [A-Za-z0-9-]."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEY_NAME,
            message=f"Invalid key name at line {line}: {name!r}",
            line=line,
            hint="Keys may only contain A-Z, a-z, 0-9 and '-'",
        )

    @staticmethod
    def missing_required_key(key: str) -> Diagnostic:
        """A key required in [Desktop Entry] is absent."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_REQUIRED_KEY,
            message=f"Missing required key: {key}",
            hint=f"Add a '{key}=' line to the [Desktop Entry] group",
        )

    @staticmethod
    def invalid_value(key: str, raw: str) -> Diagnostic:
        """A required key holds a value outside its domain."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_VALUE,
            message=f"Invalid value for key '{key}': {raw}",
        )

    @staticmethod
    def validation_failed(reason: str) -> Diagnostic:
        """An opt-in semantic rule rejected the document."""
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_FAILED,
            message=f"Validation error: {reason}",
        )
