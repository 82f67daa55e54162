"""Desktop entry document model.

Entry and Group hold raw key=value lines; DesktopEntry is the typed view
of the [Desktop Entry] group plus everything needed to write the file back.

All mappings are plain dicts and therefore insertion ordered, which makes
serialization deterministic.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from desktopentry.constants import DESKTOP_ACTION_PREFIX
from desktopentry.enums import EntryType
from desktopentry.model.values import LocalizedString, LocalizedStringList, LocalizedValue

if TYPE_CHECKING:
    from collections.abc import Iterator

    from desktopentry.model.locale import Locale

__all__ = [
    "Comment",
    "DesktopEntry",
    "Entry",
    "Group",
]


@dataclass(frozen=True, slots=True)
class Entry:
    """One physical key=value line.

    Attributes:
        key: Key without locale suffix
        locale: Locale of a ``Key[locale]=`` line, None for the default
        value: Raw value, not unescaped or split
    """

    key: str
    locale: Locale | None
    value: str

    @property
    def raw_key(self) -> str:
        """Key as written in the file: ``Key`` or ``Key[locale]``."""
        if self.locale is None:
            return self.key
        return f"{self.key}[{self.locale}]"


@dataclass(frozen=True, slots=True)
class Comment:
    """Comment or blank line preceding the first group header.

    Attributes:
        line_number: 1-indexed line in the source
        text: Comment text after '#' (empty for blank lines)
        is_blank: True for blank lines
    """

    line_number: int
    text: str
    is_blank: bool = False


@dataclass(slots=True)
class Group:
    """Named section preserving every key=value line, duplicates included.

    Attributes:
        name: Group name without brackets
        entries: Lines grouped by key, keys in first-appearance order
    """

    name: str
    entries: dict[str, list[Entry]] = field(default_factory=dict)

    def add(self, entry: Entry) -> None:
        """Append a line, keeping file order."""
        self.entries.setdefault(entry.key, []).append(entry)

    def get(self, key: str, locale: Locale | None = None) -> str | None:
        """Value of the first line for ``key`` with exactly ``locale``."""
        for entry in self.entries.get(key, ()):
            if entry.locale == locale:
                return entry.value
        return None

    def iter_entries(self) -> Iterator[Entry]:
        """All lines, grouped by key in first-appearance order."""
        for entries in self.entries.values():
            yield from entries

    def __contains__(self, key: object) -> bool:
        return key in self.entries


@dataclass(slots=True)
class DesktopEntry:
    """Typed [Desktop Entry] group plus round-trip data.

    Required keys are ``entry_type`` and ``name``; every other recognized
    key is None when absent or when its value could not be interpreted.
    Documents are built once by the parser; callers may reassign fields.

    Attributes:
        entry_type: Type key (Application, Link or Directory)
        name: Name key (localestring)
        additional_groups: Every group other than [Desktop Entry], in file order
        unknown_keys: Unrecognized keys of [Desktop Entry], verbatim
        leading_comments: Comments and blank lines before the first group
    """

    entry_type: EntryType
    name: LocalizedString

    # Keys common to all types
    version: str | None = None
    generic_name: LocalizedString | None = None
    no_display: bool | None = None
    comment: LocalizedString | None = None
    icon: LocalizedString | None = None
    hidden: bool | None = None
    only_show_in: list[str] | None = None
    not_show_in: list[str] | None = None

    # Application keys
    dbus_activatable: bool | None = None
    try_exec: str | None = None
    exec: str | None = None
    path: str | None = None
    terminal: bool | None = None
    actions: list[str] | None = None
    mime_type: list[str] | None = None
    categories: list[str] | None = None
    implements: list[str] | None = None
    keywords: LocalizedStringList | None = None
    startup_notify: bool | None = None
    startup_wm_class: str | None = None
    prefers_non_default_gpu: bool | None = None
    single_main_window: bool | None = None

    # Link keys
    url: str | None = None

    # Round-trip data
    additional_groups: dict[str, Group] = field(default_factory=dict)
    unknown_keys: dict[str, list[Entry]] = field(default_factory=dict)
    leading_comments: list[Comment] = field(default_factory=list)

    @classmethod
    def new(cls, entry_type: EntryType, name: str | LocalizedString) -> DesktopEntry:
        """Minimal document with only the required keys set.

        Example:
            >>> entry = DesktopEntry.new(EntryType.APPLICATION, "My App")
            >>> entry.exec = "my-app"
        """
        if isinstance(name, str):
            name = LocalizedValue.of(name)
        return cls(entry_type=entry_type, name=name)

    def localized_name(self, locale: Locale | None = None) -> str:
        """Name for ``locale`` (environment locale when None)."""
        return self.name.get(locale)

    def localized_generic_name(self, locale: Locale | None = None) -> str | None:
        return None if self.generic_name is None else self.generic_name.get(locale)

    def localized_comment(self, locale: Locale | None = None) -> str | None:
        return None if self.comment is None else self.comment.get(locale)

    def localized_icon(self, locale: Locale | None = None) -> str | None:
        return None if self.icon is None else self.icon.get(locale)

    def localized_keywords(self, locale: Locale | None = None) -> list[str] | None:
        return None if self.keywords is None else self.keywords.get(locale)

    def action_group(self, action_id: str) -> Group | None:
        """The ``[Desktop Action <action_id>]`` group, if present."""
        return self.additional_groups.get(f"{DESKTOP_ACTION_PREFIX}{action_id}")
