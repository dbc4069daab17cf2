"""
Unit tests for the kind compatibility table.

These tests ensure that:
1. Every recognized property has exactly one well-formed entry
2. The three queries (valid, multivalued, default) answer per the format
3. Extension and sentinel kinds degrade to defined answers instead of raising
4. A broken table is rejected at construction
"""

from dataclasses import replace

import pytest

from calkinds.domain.errors import CompatibilityTableError
from calkinds.domain.kinds import (
    COMPATIBILITY_TABLE,
    DEFAULT_ENTRIES,
    CompatibilityEntry,
    KindCompatibilityTable,
    PropertyKind,
    ValueKind,
    default_value_kind,
    is_default,
    is_multivalued,
    is_valid,
    list_separator,
)

RECOGNIZED = [kind for kind in PropertyKind if not kind.is_sentinel]
REAL_VALUES = [kind for kind in ValueKind if not kind.is_sentinel]


def _replace_entry(prop: PropertyKind, **changes) -> list:
    return [replace(entry, **changes) if entry.property is prop else entry for entry in DEFAULT_ENTRIES]


class TestTableInvariants:
    """Structural invariants over every entry."""

    def test_every_recognized_property_has_one_entry(self):
        """Each non-sentinel property kind appears exactly once."""
        properties = [entry.property for entry in DEFAULT_ENTRIES]

        assert sorted(properties, key=lambda k: k.value) == sorted(RECOGNIZED, key=lambda k: k.value)
        assert len(COMPATIBILITY_TABLE) == len(RECOGNIZED)

    def test_sentinels_have_no_entry(self):
        assert PropertyKind.UNKNOWN not in COMPATIBILITY_TABLE
        assert PropertyKind.NO_KIND not in COMPATIBILITY_TABLE
        assert COMPATIBILITY_TABLE.entry(PropertyKind.UNKNOWN) is None

    @pytest.mark.parametrize("prop", RECOGNIZED, ids=lambda k: k.value)
    def test_default_is_valid_and_reported_as_default(self, prop):
        """default_value is a member of valid_values and is_default agrees."""
        entry = COMPATIBILITY_TABLE.entry(prop)

        assert entry.valid_values
        assert entry.default_value in entry.valid_values
        assert is_default(prop, entry.default_value) is True
        assert default_value_kind(prop) is entry.default_value

    def test_multivalue_element_is_a_valid_value(self):
        for entry in COMPATIBILITY_TABLE:
            if entry.multivalue_element is not None:
                assert entry.multivalue_element in entry.valid_values, entry.property
                assert entry.separator in (",", ";")
            else:
                assert entry.separator is None

    def test_unknown_value_kind_never_listed(self):
        for entry in COMPATIBILITY_TABLE:
            assert ValueKind.UNKNOWN not in entry.valid_values

    def test_entries_are_immutable(self):
        entry = COMPATIBILITY_TABLE.entry(PropertyKind.DTSTART)

        with pytest.raises(AttributeError):
            entry.default_value = ValueKind.DATE  # type: ignore
        with pytest.raises(AttributeError):
            entry.valid_values.add(ValueKind.TEXT)  # type: ignore

    def test_valid_values_normalized_to_frozenset(self):
        entry = CompatibilityEntry(
            property=PropertyKind.SUMMARY,
            valid_values={ValueKind.TEXT},  # type: ignore
            default_value=ValueKind.TEXT,
        )

        assert isinstance(entry.valid_values, frozenset)


class TestIsValid:
    """Pairing legality."""

    def test_start_time_accepts_date_time_and_date(self):
        # Arrange
        prop = PropertyKind.DTSTART

        # Act & Assert
        assert is_valid(prop, ValueKind.DATE_TIME) is True
        assert is_valid(prop, ValueKind.DATE) is True
        assert is_valid(prop, ValueKind.DURATION) is False
        assert is_default(prop, ValueKind.DATE) is False
        assert is_default(prop, ValueKind.DATE_TIME) is True

    def test_rrule_accepts_recur_only(self):
        assert is_valid(PropertyKind.RRULE, ValueKind.RECUR) is True
        assert is_valid(PropertyKind.RRULE, ValueKind.TEXT) is False
        assert COMPATIBILITY_TABLE.valid_value_kinds(PropertyKind.RRULE) == frozenset({ValueKind.RECUR})

    @pytest.mark.parametrize(
        "prop,value",
        [
            (PropertyKind.ATTACH, ValueKind.BINARY),
            (PropertyKind.ATTENDEE, ValueKind.CAL_ADDRESS),
            (PropertyKind.TRIGGER, ValueKind.DATE_TIME),
            (PropertyKind.RDATE, ValueKind.PERIOD),
            (PropertyKind.TZOFFSETFROM, ValueKind.UTC_OFFSET),
            (PropertyKind.RELATED_TO, ValueKind.UID),
            (PropertyKind.LINK, ValueKind.XML_REFERENCE),
            (PropertyKind.GEO, ValueKind.FLOAT),
        ],
    )
    def test_legal_pairings(self, prop, value):
        assert is_valid(prop, value) is True

    @pytest.mark.parametrize(
        "prop,value",
        [
            (PropertyKind.ATTENDEE, ValueKind.TEXT),
            (PropertyKind.DURATION, ValueKind.DATE_TIME),
            (PropertyKind.PRIORITY, ValueKind.FLOAT),
            (PropertyKind.URL, ValueKind.TEXT),
            (PropertyKind.FREEBUSY, ValueKind.DATE_TIME),
            (PropertyKind.DTSTAMP, ValueKind.DATE),
        ],
    )
    def test_illegal_pairings(self, prop, value):
        assert is_valid(prop, value) is False

    @pytest.mark.parametrize("prop", RECOGNIZED, ids=lambda k: k.value)
    def test_values_outside_the_valid_set_are_rejected(self, prop):
        valid = COMPATIBILITY_TABLE.valid_value_kinds(prop)

        for value in ValueKind:
            assert is_valid(prop, value) is (value in valid)

    @pytest.mark.parametrize("value", REAL_VALUES, ids=lambda k: k.value)
    def test_extension_property_accepts_every_value_kind(self, value):
        assert is_valid(PropertyKind.UNKNOWN, value) is True

    def test_extension_property_accepts_binary(self):
        assert is_valid(PropertyKind.UNKNOWN, ValueKind.BINARY) is True

    def test_unknown_value_kind_only_valid_against_sentinels(self):
        assert is_valid(PropertyKind.UNKNOWN, ValueKind.UNKNOWN) is True
        assert is_valid(PropertyKind.NO_KIND, ValueKind.UNKNOWN) is True
        for prop in RECOGNIZED:
            assert is_valid(prop, ValueKind.UNKNOWN) is False

    def test_no_kind_rejects_real_value_kinds(self):
        for value in REAL_VALUES:
            assert is_valid(PropertyKind.NO_KIND, value) is False

    def test_non_member_inputs_degrade_instead_of_raising(self):
        """Objects that are not enum members get the sentinel policy."""
        assert is_valid("DTSTART", ValueKind.DURATION) is True  # type: ignore
        assert is_valid(PropertyKind.DTSTART, "DATE-TIME") is False  # type: ignore
        assert is_multivalued(42) is None  # type: ignore
        assert default_value_kind(None) is ValueKind.TEXT  # type: ignore

    def test_membership_with_non_member_inputs(self):
        assert PropertyKind.DTSTART in COMPATIBILITY_TABLE
        assert PropertyKind.UNKNOWN not in COMPATIBILITY_TABLE
        assert "DTSTART" not in COMPATIBILITY_TABLE
        assert [] not in COMPATIBILITY_TABLE
        assert {} not in COMPATIBILITY_TABLE


class TestIsMultivalued:
    """List properties."""

    def test_categories_is_a_text_list(self):
        assert is_multivalued(PropertyKind.CATEGORIES) is ValueKind.TEXT
        assert list_separator(PropertyKind.CATEGORIES) == ","

    def test_start_time_is_single_valued(self):
        assert is_multivalued(PropertyKind.DTSTART) is None
        assert list_separator(PropertyKind.DTSTART) is None

    def test_geo_uses_semicolon(self):
        assert is_multivalued(PropertyKind.GEO) is ValueKind.FLOAT
        assert list_separator(PropertyKind.GEO) == ";"

    def test_list_properties(self):
        multivalued = {entry.property for entry in COMPATIBILITY_TABLE if entry.multivalue_element}

        assert multivalued == {
            PropertyKind.CATEGORIES,
            PropertyKind.RESOURCES,
            PropertyKind.GEO,
            PropertyKind.FREEBUSY,
            PropertyKind.EXDATE,
            PropertyKind.RDATE,
            PropertyKind.LOCATION_TYPE,
            PropertyKind.POLL_PROPERTIES,
        }

    def test_sentinels_are_single_valued(self):
        assert is_multivalued(PropertyKind.UNKNOWN) is None
        assert is_multivalued(PropertyKind.NO_KIND) is None


class TestDefaults:
    """Implicit value kinds."""

    @pytest.mark.parametrize(
        "prop,expected",
        [
            (PropertyKind.ATTACH, ValueKind.URI),
            (PropertyKind.TRIGGER, ValueKind.DURATION),
            (PropertyKind.RDATE, ValueKind.DATE_TIME),
            (PropertyKind.RELATED_TO, ValueKind.TEXT),
            (PropertyKind.LINK, ValueKind.URI),
            (PropertyKind.PERCENT_COMPLETE, ValueKind.INTEGER),
            (PropertyKind.REFRESH_INTERVAL, ValueKind.DURATION),
        ],
    )
    def test_default_value_kind(self, prop, expected):
        assert default_value_kind(prop) is expected

    def test_extension_property_defaults_to_text(self):
        assert default_value_kind(PropertyKind.UNKNOWN) is ValueKind.TEXT
        assert is_default(PropertyKind.UNKNOWN, ValueKind.TEXT) is True
        assert is_default(PropertyKind.UNKNOWN, ValueKind.BINARY) is False

    def test_no_kind_default(self):
        assert default_value_kind(PropertyKind.NO_KIND) is ValueKind.UNKNOWN
        assert is_default(PropertyKind.NO_KIND, ValueKind.TEXT) is False


class TestTableConstruction:
    """A defective table is a startup failure."""

    def test_default_entries_build(self):
        table = KindCompatibilityTable(DEFAULT_ENTRIES)

        assert len(table) == len(COMPATIBILITY_TABLE)

    def test_rejects_default_outside_valid_values(self):
        entries = _replace_entry(PropertyKind.DTSTART, default_value=ValueKind.DURATION)

        with pytest.raises(CompatibilityTableError) as exc_info:
            KindCompatibilityTable(entries)

        assert exc_info.value.property_name == "DTSTART"
        assert "default" in exc_info.value.message

    def test_rejects_empty_valid_values(self):
        entries = _replace_entry(PropertyKind.SUMMARY, valid_values=frozenset())

        with pytest.raises(CompatibilityTableError, match="empty valid value set"):
            KindCompatibilityTable(entries)

    def test_rejects_multivalue_element_outside_valid_values(self):
        entries = _replace_entry(PropertyKind.CATEGORIES, multivalue_element=ValueKind.INTEGER)

        with pytest.raises(CompatibilityTableError, match="list element"):
            KindCompatibilityTable(entries)

    def test_rejects_bad_separator(self):
        entries = _replace_entry(PropertyKind.CATEGORIES, separator="|")

        with pytest.raises(CompatibilityTableError, match="separator"):
            KindCompatibilityTable(entries)

    def test_rejects_separator_on_single_valued_property(self):
        entries = _replace_entry(PropertyKind.SUMMARY, separator=",")

        with pytest.raises(CompatibilityTableError, match="single-valued"):
            KindCompatibilityTable(entries)

    def test_rejects_missing_entry(self):
        entries = [entry for entry in DEFAULT_ENTRIES if entry.property is not PropertyKind.RRULE]

        with pytest.raises(CompatibilityTableError, match="missing entry"):
            KindCompatibilityTable(entries)

    def test_rejects_duplicate_entry(self):
        entries = list(DEFAULT_ENTRIES) + [DEFAULT_ENTRIES[0]]

        with pytest.raises(CompatibilityTableError, match="duplicate"):
            KindCompatibilityTable(entries)

    def test_rejects_sentinel_entry(self):
        sentinel = CompatibilityEntry(
            property=PropertyKind.UNKNOWN,
            valid_values=frozenset({ValueKind.TEXT}),
            default_value=ValueKind.TEXT,
        )

        with pytest.raises(CompatibilityTableError, match="sentinel"):
            KindCompatibilityTable(list(DEFAULT_ENTRIES) + [sentinel])

    def test_rejects_unknown_value_kind_in_entry(self):
        entries = _replace_entry(
            PropertyKind.SUMMARY,
            valid_values=frozenset({ValueKind.TEXT, ValueKind.UNKNOWN}),
        )

        with pytest.raises(CompatibilityTableError, match="UNKNOWN"):
            KindCompatibilityTable(entries)
