"""Diagnostic system for desktop entry errors.

Provides structured error diagnostics with codes, line numbers and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
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
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DesktopEntryError",
    "DesktopEntrySyntaxError",
    "DesktopEntryValueError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "DuplicateGroupError",
    "ErrorTemplate",
    "InvalidGroupHeaderError",
    "InvalidKeyNameError",
    "InvalidLineError",
    "InvalidUtf8Error",
    "InvalidValueError",
    "IoError",
    "MissingDesktopEntryGroupError",
    "MissingRequiredKeyError",
    "OutputFormat",
    "ValidationError",
]
