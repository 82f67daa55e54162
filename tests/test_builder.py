"""Tests for typed field extraction from the [Desktop Entry] group.

Optional values are permissive: anything that cannot be interpreted
leaves the field unset instead of raising.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from desktopentry import Entry, Group, Locale, parse
from desktopentry.enums import EntryType
from desktopentry.syntax import build_entry, parse_boolean, split_list
from tests.strategies import list_values

HEADER = "[Desktop Entry]\nType=Application\nName=X\n"


def _main(*lines: tuple[str, str | None, str]) -> Group:
    group = Group(name="Desktop Entry")
    for key, locale, value in lines:
        group.add(Entry(key=key, locale=None if locale is None else Locale.parse(locale), value=value))
    return group


# ============================================================================
# VALUE CONVERSION
# ============================================================================


class TestSplitList:
    """Test string(s) splitting."""

    def test_trailing_separator(self) -> None:
        """Categories=Utility;TextEditor; gives two items."""
        assert split_list("Utility;TextEditor;") == ["Utility", "TextEditor"]

    def test_only_separators(self) -> None:
        """All-empty segments give an empty list."""
        assert split_list(";;") == []

    def test_empty_segments_dropped(self) -> None:
        """Empty segments in the middle are dropped too."""
        assert split_list("a;;b") == ["a", "b"]

    def test_whitespace_kept(self) -> None:
        """Segments are not trimmed."""
        assert split_list(" a ; b") == [" a ", " b"]

    @given(items=list_values, trailing=st.booleans())
    def test_join_then_split(self, items: list[str], trailing: bool) -> None:
        """PROPERTY: non-empty items survive joining with ';'."""
        raw = ";".join(items) + (";" if trailing else "")
        assert split_list(raw) == items


class TestParseBoolean:
    """Test boolean literals."""

    def test_true(self) -> None:
        """Literal true."""
        assert parse_boolean("true") is True

    def test_false(self) -> None:
        """Literal false."""
        assert parse_boolean("false") is False

    @pytest.mark.parametrize("raw", ["True", "FALSE", "1", "0", "yes", "", " true"])
    def test_everything_else(self, raw: str) -> None:
        """Only exact lowercase literals are booleans."""
        assert parse_boolean(raw) is None


# ============================================================================
# FIELD POPULATION
# ============================================================================


class TestScalarFields:
    """Test string, boolean and list fields."""

    def test_categories(self) -> None:
        """string(s) value is split."""
        assert parse(HEADER + "Categories=Utility;TextEditor;\n").categories == [
            "Utility",
            "TextEditor",
        ]

    def test_empty_categories_unset(self) -> None:
        """Categories=;; leaves the field unset, not an empty list."""
        assert parse(HEADER + "Categories=;;\n").categories is None

    def test_invalid_boolean_unset(self) -> None:
        """Unrecognized boolean leaves the field unset without raising."""
        assert parse(HEADER + "Terminal=yes\n").terminal is None

    def test_first_untagged_wins(self) -> None:
        """Duplicate untagged scalar lines keep the first."""
        assert parse(HEADER + "Exec=first\nExec=second\n").exec == "first"

    def test_tagged_scalar_ignored(self) -> None:
        """Locale-tagged lines of non-localizable keys are not used."""
        assert parse(HEADER + "Exec[fr]=french\n").exec is None

    def test_tagged_before_untagged(self) -> None:
        """An earlier tagged line does not shadow the untagged one."""
        assert parse(HEADER + "Exec[fr]=french\nExec=app\n").exec == "app"

    def test_empty_string_is_set(self) -> None:
        """An empty string value is still a value."""
        assert parse(HEADER + "Path=\n").path == ""

    def test_all_booleans(self) -> None:
        """Every boolean key is converted."""
        entry = parse(
            HEADER
            + "NoDisplay=true\nHidden=false\nDBusActivatable=true\nTerminal=false\n"
            + "StartupNotify=true\nPrefersNonDefaultGPU=false\nSingleMainWindow=true\n"
        )

        assert entry.no_display is True
        assert entry.hidden is False
        assert entry.dbus_activatable is True
        assert entry.terminal is False
        assert entry.startup_notify is True
        assert entry.prefers_non_default_gpu is False
        assert entry.single_main_window is True

    def test_all_lists(self) -> None:
        """Every string(s) key is split."""
        entry = parse(
            HEADER
            + "OnlyShowIn=GNOME;\nNotShowIn=KDE;LXQt;\nActions=a;b\n"
            + "MimeType=text/plain;\nImplements=org.example.Iface;\n"
        )

        assert entry.only_show_in == ["GNOME"]
        assert entry.not_show_in == ["KDE", "LXQt"]
        assert entry.actions == ["a", "b"]
        assert entry.mime_type == ["text/plain"]
        assert entry.implements == ["org.example.Iface"]

    def test_link_url(self) -> None:
        """URL is a plain string field."""
        entry = parse("[Desktop Entry]\nType=Link\nName=Docs\nURL=https://example.com/a=b\n")

        assert entry.entry_type is EntryType.LINK
        assert entry.url == "https://example.com/a=b"

    def test_absent_fields_unset(self) -> None:
        """Keys not present stay None."""
        entry = parse(HEADER)

        assert entry.version is None
        assert entry.generic_name is None
        assert entry.keywords is None
        assert entry.url is None


class TestLocalizedFields:
    """Test localestring and localestring(s) fields."""

    def test_variants_in_file_order(self) -> None:
        """Tagged lines fill the map in order."""
        entry = parse(HEADER + "Name[fr]=Bonjour\nName[de]=Hallo\n")

        assert entry.name.locales == (Locale("fr"), Locale("de"))

    def test_later_tagged_line_wins(self) -> None:
        """A repeated locale keeps the last value."""
        entry = parse(HEADER + "Name[fr]=un\nName[fr]=deux\n")

        assert entry.name.localized == {Locale("fr"): "deux"}

    def test_later_untagged_line_wins(self) -> None:
        """Localizable defaults take the last untagged line."""
        entry = parse(HEADER + "Name=Y\n")

        assert entry.name.default == "Y"

    def test_localized_without_default(self) -> None:
        """Only tagged Comment lines give an empty default."""
        entry = parse(HEADER + "Comment[fr]=Bonjour\n")

        assert entry.comment is not None
        assert entry.comment.default == ""

    def test_keywords_split_per_locale(self) -> None:
        """Each Keywords line is split independently."""
        entry = parse(HEADER + "Keywords=a;b;\nKeywords[de]=c;;d\n")

        assert entry.keywords is not None
        assert entry.keywords.default == ["a", "b"]
        assert entry.keywords.localized == {Locale("de"): ["c", "d"]}

    def test_encoding_kept_in_locale_key(self) -> None:
        """Encoding is part of the stored locale."""
        entry = parse(HEADER + "Name[de_DE.UTF-8]=Hallo\n")

        assert entry.name.locales == (Locale("de", "DE", "UTF-8"),)

    def test_accessors(self) -> None:
        """localized_* accessors resolve each localizable field."""
        entry = parse(
            HEADER
            + "GenericName=Editor\nGenericName[de]=Bearbeiter\n"
            + "Icon=edit\nIcon[de]=bearbeiten\nKeywords=a\nKeywords[de]=b\n"
        )
        de = Locale.parse("de_CH")

        assert entry.localized_generic_name(de) == "Bearbeiter"
        assert entry.localized_icon(de) == "bearbeiten"
        assert entry.localized_keywords(de) == ["b"]


# ============================================================================
# UNKNOWN KEYS
# ============================================================================


class TestUnknownKeys:
    """Test preservation of unrecognized keys."""

    def test_order_and_duplicates(self) -> None:
        """Unknown keys keep first-appearance order and all their lines."""
        entry = parse(HEADER + "X-B=1\nX-A=2\nX-B[fr]=3\nX-B=4\n")

        assert list(entry.unknown_keys) == ["X-B", "X-A"]
        assert [e.raw_key for e in entry.unknown_keys["X-B"]] == ["X-B", "X-B[fr]", "X-B"]

    def test_tagged_type_not_unknown(self) -> None:
        """Type is recognized even when tagged."""
        entry = parse(HEADER + "Type[fr]=Lien\n")

        assert entry.unknown_keys == {}

    def test_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Retained unknown keys are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="desktopentry.syntax.builder"):
            parse(HEADER + "X-Foo=bar\n")

        assert any("X-Foo" in r.getMessage() for r in caplog.records)


# ============================================================================
# DIRECT CONSTRUCTION
# ============================================================================


class TestBuildEntry:
    """Test build_entry on hand-made groups."""

    def test_builds_from_group(self) -> None:
        """Groups built in code produce the same document as parsed text."""
        main = _main(("Type", None, "Directory"), ("Name", None, "Games"), ("Name", "fr", "Jeux"))

        entry = build_entry(main, {})

        assert entry.entry_type is EntryType.DIRECTORY
        assert entry.name.get(Locale("fr")) == "Jeux"

    def test_additional_groups_copied(self) -> None:
        """The caller's mapping is not shared with the document."""
        groups = {"X-A": Group(name="X-A")}

        entry = build_entry(_main(("Type", None, "Link"), ("Name", None, "L")), groups)
        groups.clear()

        assert list(entry.additional_groups) == ["X-A"]
