"""Typed document construction from grouped entries.

Lowers the raw [Desktop Entry] group into DesktopEntry fields using the
known-key table. Required keys (Type, Name) raise when missing or
malformed; every optional key is permissive: a value that cannot be
interpreted leaves the field unset and is only logged.

Value rules per kind:
    string        first untagged line wins, later untagged lines dropped
    boolean       first untagged line, literal "true" or "false" only
    string(s)     first untagged line split on ';', empty segments dropped;
                  an empty result leaves the field unset
    localestring  untagged line is the default, tagged lines fill the
                  localized map; later lines overwrite earlier ones
    localestring(s) as localestring, each line split like string(s)

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from desktopentry.constants import BOOLEAN_FALSE, BOOLEAN_TRUE, LIST_SEPARATOR
from desktopentry.diagnostics import InvalidValueError, MissingRequiredKeyError
from desktopentry.enums import EntryType, FieldKind
from desktopentry.model.document import Comment, DesktopEntry, Entry, Group
from desktopentry.model.fields import KNOWN_FIELDS, KNOWN_KEYS, TYPE_KEY, FieldSpec
from desktopentry.model.values import LocalizedValue

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

__all__ = [
    "build_entry",
    "parse_boolean",
    "split_list",
]

logger = logging.getLogger(__name__)

type FieldValue = str | bool | list[str] | LocalizedValue[str] | LocalizedValue[list[str]]


# ============================================================================
# VALUE CONVERSION
# ============================================================================


def parse_boolean(raw: str) -> bool | None:
    """Interpret a boolean literal; None for anything but exact true/false."""
    if raw == BOOLEAN_TRUE:
        return True
    if raw == BOOLEAN_FALSE:
        return False
    return None


def split_list(raw: str) -> list[str]:
    """Split a string(s) value on ';', dropping empty segments.

    Example:
        >>> split_list("Utility;TextEditor;")
        ['Utility', 'TextEditor']
        >>> split_list(";;")
        []
    """
    return [segment for segment in raw.split(LIST_SEPARATOR) if segment]


def _first_untagged(key: str, entries: Sequence[Entry]) -> Entry | None:
    untagged = [entry for entry in entries if entry.locale is None]
    if len(untagged) > 1:
        logger.debug("Key %s: keeping first of %d untagged lines", key, len(untagged))
    return untagged[0] if untagged else None


def _build_localized[T](
    entries: Sequence[Entry],
    convert: Callable[[str], T],
    empty: T,
) -> LocalizedValue[T]:
    value: LocalizedValue[T] = LocalizedValue(default=empty)
    for entry in entries:
        if entry.locale is None:
            value.default = convert(entry.value)
        else:
            value.add_localized(entry.locale, convert(entry.value))
    return value


def _convert_field(spec: FieldSpec, entries: Sequence[Entry]) -> FieldValue | None:
    """Typed value for one recognized key, or None when unset."""
    match spec.kind:
        case FieldKind.LOCALE_STRING:
            return _build_localized(entries, str, "")
        case FieldKind.LOCALE_STRING_LIST:
            return _build_localized(entries, split_list, [])
        case _:
            pass

    entry = _first_untagged(spec.key, entries)
    if entry is None:
        return None

    match spec.kind:
        case FieldKind.STRING:
            return entry.value
        case FieldKind.BOOLEAN:
            flag = parse_boolean(entry.value)
            if flag is None:
                logger.debug("Key %s: %r is not a boolean, leaving unset", spec.key, entry.value)
            return flag
        case FieldKind.STRING_LIST:
            items = split_list(entry.value)
            if not items:
                logger.debug("Key %s: empty list, leaving unset", spec.key)
                return None
            return items
        case _:
            msg = f"Unhandled field kind: {spec.kind}"
            raise AssertionError(msg)


# ============================================================================
# DOCUMENT CONSTRUCTION
# ============================================================================


def _entry_type(main: Group) -> EntryType:
    entry = _first_untagged(TYPE_KEY, main.entries.get(TYPE_KEY, ()))
    if entry is None:
        raise MissingRequiredKeyError(TYPE_KEY)
    entry_type = EntryType.from_value(entry.value)
    if entry_type is None:
        raise InvalidValueError(TYPE_KEY, entry.value)
    return entry_type


def build_entry(
    main: Group,
    additional_groups: Mapping[str, Group],
    leading_comments: Sequence[Comment] = (),
) -> DesktopEntry:
    """Build the typed document.

    Args:
        main: The [Desktop Entry] group
        additional_groups: All other groups, in file order
        leading_comments: Comments and blanks before the first header

    Returns:
        Fully populated DesktopEntry

    Raises:
        MissingRequiredKeyError: No untagged Type line, or no Name line
        InvalidValueError: Type is not Application, Link or Directory
    """
    entry_type = _entry_type(main)
    if "Name" not in main:
        raise MissingRequiredKeyError("Name")

    fields: dict[str, FieldValue | None] = {}
    for spec in KNOWN_FIELDS:
        entries = main.entries.get(spec.key)
        fields[spec.attr] = _convert_field(spec, entries) if entries else None

    unknown_keys: dict[str, list[Entry]] = {}
    for key, entries in main.entries.items():
        if key not in KNOWN_KEYS:
            logger.debug("Keeping unrecognized key %s (%d lines)", key, len(entries))
            unknown_keys[key] = list(entries)

    return DesktopEntry(
        entry_type=entry_type,
        additional_groups=dict(additional_groups),
        unknown_keys=unknown_keys,
        leading_comments=list(leading_comments),
        **fields,  # type: ignore[arg-type]
    )
