"""Recognized keys of the [Desktop Entry] group.

The table order is the serialization order of the typed fields; ``Type``
is handled separately because it is required and always written first.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from desktopentry.enums import FieldKind

__all__ = [
    "KNOWN_FIELDS",
    "KNOWN_KEYS",
    "TYPE_KEY",
    "FieldSpec",
]

TYPE_KEY = "Type"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Mapping of a file key to a typed DesktopEntry attribute.

    Attributes:
        key: Key as written in the file (e.g., "StartupWMClass")
        attr: DesktopEntry attribute name (e.g., "startup_wm_class")
        kind: Value type
    """

    key: str
    attr: str
    kind: FieldKind


KNOWN_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("Version", "version", FieldKind.STRING),
    FieldSpec("Name", "name", FieldKind.LOCALE_STRING),
    FieldSpec("GenericName", "generic_name", FieldKind.LOCALE_STRING),
    FieldSpec("NoDisplay", "no_display", FieldKind.BOOLEAN),
    FieldSpec("Comment", "comment", FieldKind.LOCALE_STRING),
    FieldSpec("Icon", "icon", FieldKind.LOCALE_STRING),
    FieldSpec("Hidden", "hidden", FieldKind.BOOLEAN),
    FieldSpec("OnlyShowIn", "only_show_in", FieldKind.STRING_LIST),
    FieldSpec("NotShowIn", "not_show_in", FieldKind.STRING_LIST),
    FieldSpec("DBusActivatable", "dbus_activatable", FieldKind.BOOLEAN),
    FieldSpec("TryExec", "try_exec", FieldKind.STRING),
    FieldSpec("Exec", "exec", FieldKind.STRING),
    FieldSpec("Path", "path", FieldKind.STRING),
    FieldSpec("Terminal", "terminal", FieldKind.BOOLEAN),
    FieldSpec("Actions", "actions", FieldKind.STRING_LIST),
    FieldSpec("MimeType", "mime_type", FieldKind.STRING_LIST),
    FieldSpec("Categories", "categories", FieldKind.STRING_LIST),
    FieldSpec("Implements", "implements", FieldKind.STRING_LIST),
    FieldSpec("Keywords", "keywords", FieldKind.LOCALE_STRING_LIST),
    FieldSpec("StartupNotify", "startup_notify", FieldKind.BOOLEAN),
    FieldSpec("StartupWMClass", "startup_wm_class", FieldKind.STRING),
    FieldSpec("URL", "url", FieldKind.STRING),
    FieldSpec("PrefersNonDefaultGPU", "prefers_non_default_gpu", FieldKind.BOOLEAN),
    FieldSpec("SingleMainWindow", "single_main_window", FieldKind.BOOLEAN),
)

KNOWN_KEYS: frozenset[str] = frozenset({TYPE_KEY} | {spec.key for spec in KNOWN_FIELDS})
