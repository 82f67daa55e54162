"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: I/O errors (reading and decoding files, writing sinks)
        3000-3999: Syntax errors (grammar violations, fail-fast)
        4000-4999: Value errors (required keys of the main group)
        5000-5999: Validation errors (opt-in semantic rules)
    """

    # I/O errors (1000-1999)
    IO_FAILED = 1001
    INVALID_UTF8 = 1002

    # Syntax errors (3000-3999)
    MISSING_DESKTOP_ENTRY_GROUP = 3001
    DUPLICATE_GROUP = 3002
    INVALID_LINE = 3003
    INVALID_GROUP_HEADER = 3004
    INVALID_KEY_NAME = 3005

    # Value errors (4000-4999)
    MISSING_REQUIRED_KEY = 4001
    INVALID_VALUE = 4002

    # Validation errors (5000-5999)
    VALIDATION_FAILED = 5001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        line: 1-indexed source line (None for errors without a position)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    line: int | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __post_init__(self) -> None:
        """Validate Diagnostic fields.

        Raises:
            ValueError: If line is less than 1 (lines are 1-indexed).
        """
        if self.line is not None and self.line < 1:
            msg = f"Diagnostic.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INVALID_KEY_NAME]: Invalid key name at line 3: 'My.Key'
              --> line 3
              = help: Keys may only contain A-Z, a-z, 0-9 and '-'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
