"""Semantic validation of typed desktop entries.

Parsing only enforces grammar and the presence of Type and Name. The rules
here depend on the entry type and are checked on demand:

- Link entries need a URL.
- Application entries need Exec, unless DBusActivatable is true.

Directory entries have no extra requirement. Validation never mutates the
document.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from desktopentry.diagnostics import ValidationError
from desktopentry.enums import EntryType

if TYPE_CHECKING:
    from desktopentry.model.document import DesktopEntry

__all__ = ["validate"]

logger = logging.getLogger(__name__)

_LINK_REQUIRES_URL = "URL is required for Link type entries"
_APPLICATION_REQUIRES_EXEC = (
    "Either Exec key or DBusActivatable=true is required for Application type"
)


def _check(entry: DesktopEntry) -> str | None:
    """Reason for the first violated rule, or None."""
    match entry.entry_type:
        case EntryType.LINK if entry.url is None:
            return _LINK_REQUIRES_URL
        case EntryType.APPLICATION if entry.exec is None and entry.dbus_activatable is not True:
            return _APPLICATION_REQUIRES_EXEC
        case _:
            return None


def validate(entry: DesktopEntry) -> None:
    """Check type-specific requirements of a parsed or constructed entry.

    Args:
        entry: Document to check

    Raises:
        ValidationError: First violated rule, with its reason

    Example:
        >>> from desktopentry import DesktopEntry, EntryType
        >>> validate(DesktopEntry.new(EntryType.DIRECTORY, "Games"))
    """
    reason = _check(entry)
    if reason is not None:
        logger.debug("Validation failed for %s entry: %s", entry.entry_type, reason)
        raise ValidationError(reason)
    logger.debug("Validation passed for %s entry", entry.entry_type)
