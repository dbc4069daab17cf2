"""
Kind compatibility table for iCalendar properties.

Holds, for every recognized property, the set of value types it may carry,
the value type assumed when no VALUE parameter is present, and whether the
property holds a separator-joined list of values. The table is built and
verified once at import time and is read-only afterwards.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterable, Iterator, Mapping, Optional

from calkinds.domain.errors import CompatibilityTableError
from calkinds.domain.kinds.property_kind import PropertyKind
from calkinds.domain.kinds.value_kind import ValueKind

logger = logging.getLogger(__name__)

LIST_SEPARATORS = frozenset({",", ";"})


@dataclass(frozen=True)
class CompatibilityEntry:
    """Value type rules for a single property."""

    property: PropertyKind
    valid_values: FrozenSet[ValueKind]
    default_value: ValueKind
    multivalue_element: Optional[ValueKind] = None
    separator: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "valid_values", frozenset(self.valid_values))


def _entry(
    prop: PropertyKind,
    *valid: ValueKind,
    multi: Optional[ValueKind] = None,
    separator: str = ",",
) -> CompatibilityEntry:
    # The first listed kind is the default.
    return CompatibilityEntry(
        property=prop,
        valid_values=frozenset(valid),
        default_value=valid[0],
        multivalue_element=multi,
        separator=separator if multi is not None else None,
    )


P = PropertyKind
V = ValueKind

DEFAULT_ENTRIES = (
    _entry(P.CALSCALE, V.TEXT),
    _entry(P.METHOD, V.TEXT),
    _entry(P.PRODID, V.TEXT),
    _entry(P.VERSION, V.TEXT),
    _entry(P.ATTACH, V.URI, V.BINARY),
    _entry(P.CATEGORIES, V.TEXT, multi=V.TEXT),
    _entry(P.CLASS, V.TEXT),
    _entry(P.COMMENT, V.TEXT),
    _entry(P.DESCRIPTION, V.TEXT),
    _entry(P.GEO, V.FLOAT, multi=V.FLOAT, separator=";"),
    _entry(P.LOCATION, V.TEXT),
    _entry(P.PERCENT_COMPLETE, V.INTEGER),
    _entry(P.PRIORITY, V.INTEGER),
    _entry(P.RESOURCES, V.TEXT, multi=V.TEXT),
    _entry(P.STATUS, V.TEXT),
    _entry(P.SUMMARY, V.TEXT),
    _entry(P.COMPLETED, V.DATE_TIME),
    _entry(P.DTEND, V.DATE_TIME, V.DATE),
    _entry(P.DUE, V.DATE_TIME, V.DATE),
    _entry(P.DTSTART, V.DATE_TIME, V.DATE),
    _entry(P.DURATION, V.DURATION),
    _entry(P.FREEBUSY, V.PERIOD, multi=V.PERIOD),
    _entry(P.TRANSP, V.TEXT),
    _entry(P.TZID, V.TEXT),
    _entry(P.TZNAME, V.TEXT),
    _entry(P.TZOFFSETFROM, V.UTC_OFFSET),
    _entry(P.TZOFFSETTO, V.UTC_OFFSET),
    _entry(P.TZURL, V.URI),
    _entry(P.ATTENDEE, V.CAL_ADDRESS),
    _entry(P.CONTACT, V.TEXT),
    _entry(P.ORGANIZER, V.CAL_ADDRESS),
    _entry(P.RECURRENCE_ID, V.DATE_TIME, V.DATE),
    _entry(P.RELATED_TO, V.TEXT, V.URI, V.UID),
    _entry(P.URL, V.URI),
    _entry(P.UID, V.TEXT),
    _entry(P.EXDATE, V.DATE_TIME, V.DATE, multi=V.DATE_TIME),
    _entry(P.EXRULE, V.RECUR),
    _entry(P.RDATE, V.DATE_TIME, V.DATE, V.PERIOD, multi=V.DATE_TIME),
    _entry(P.RRULE, V.RECUR),
    _entry(P.ACTION, V.TEXT),
    _entry(P.REPEAT, V.INTEGER),
    _entry(P.TRIGGER, V.DURATION, V.DATE_TIME),
    _entry(P.CREATED, V.DATE_TIME),
    _entry(P.DTSTAMP, V.DATE_TIME),
    _entry(P.LAST_MODIFIED, V.DATE_TIME),
    _entry(P.SEQUENCE, V.INTEGER),
    _entry(P.REQUEST_STATUS, V.TEXT),
    _entry(P.NAME, V.TEXT),
    _entry(P.REFRESH_INTERVAL, V.DURATION),
    _entry(P.SOURCE, V.URI),
    _entry(P.COLOR, V.TEXT),
    _entry(P.IMAGE, V.URI, V.BINARY),
    _entry(P.CONFERENCE, V.URI),
    _entry(P.BUSYTYPE, V.TEXT),
    _entry(P.TZID_ALIAS_OF, V.TEXT),
    _entry(P.TZUNTIL, V.DATE_TIME),
    _entry(P.LOCATION_TYPE, V.TEXT, multi=V.TEXT),
    _entry(P.PARTICIPANT_TYPE, V.TEXT),
    _entry(P.RESOURCE_TYPE, V.TEXT),
    _entry(P.CALENDAR_ADDRESS, V.CAL_ADDRESS),
    _entry(P.STYLED_DESCRIPTION, V.TEXT, V.URI),
    _entry(P.STRUCTURED_DATA, V.TEXT, V.BINARY, V.URI),
    _entry(P.ACKNOWLEDGED, V.DATE_TIME),
    _entry(P.PROXIMITY, V.TEXT),
    _entry(P.LINK, V.URI, V.UID, V.XML_REFERENCE),
    _entry(P.CONCEPT, V.URI),
    _entry(P.REFID, V.TEXT),
    _entry(P.ACCEPT_RESPONSE, V.TEXT),
    _entry(P.POLL_COMPLETION, V.TEXT),
    _entry(P.POLL_ITEM_ID, V.INTEGER),
    _entry(P.POLL_MODE, V.TEXT),
    _entry(P.POLL_PROPERTIES, V.TEXT, multi=V.TEXT),
    _entry(P.POLL_WINNER, V.INTEGER),
    _entry(P.RESPONSE, V.INTEGER),
    _entry(P.VOTER, V.CAL_ADDRESS),
    _entry(P.ESTIMATED_DURATION, V.DURATION),
    _entry(P.TASK_MODE, V.TEXT),
)

del P, V


def _as_property(kind: object) -> PropertyKind:
    return kind if isinstance(kind, PropertyKind) else PropertyKind.UNKNOWN


def _as_value(kind: object) -> ValueKind:
    return kind if isinstance(kind, ValueKind) else ValueKind.UNKNOWN


class KindCompatibilityTable:
    """
    Read-only property kind -> value rules mapping.

    Every query is total: sentinel property kinds and objects that are not
    enumeration members get the extension policy (any value kind is legal)
    instead of an error. Construction verifies the table and raises
    CompatibilityTableError on the first broken invariant.
    """

    def __init__(self, entries: Iterable[CompatibilityEntry] = DEFAULT_ENTRIES):
        by_property = {}
        for entry in entries:
            if entry.property in by_property:
                raise CompatibilityTableError(str(entry.property), "duplicate entry")
            by_property[entry.property] = entry

        self._entries: Mapping[PropertyKind, CompatibilityEntry] = MappingProxyType(by_property)
        self.verify()
        logger.debug("Kind compatibility table ready with %d entries", len(by_property))

    def verify(self) -> None:
        """
        Check every table invariant.

        Raises:
            CompatibilityTableError: On the first violated invariant
        """
        for kind in PropertyKind:
            entry = self._entries.get(kind)
            if kind.is_sentinel:
                if entry is not None:
                    raise CompatibilityTableError(str(kind), "sentinel kinds take no entry")
                continue
            if entry is None:
                raise CompatibilityTableError(str(kind), "missing entry")
            _verify_entry(entry)

    def is_valid(self, property_kind: PropertyKind, value_kind: ValueKind) -> bool:
        """Return True if value_kind may be used for property_kind."""
        property_kind = _as_property(property_kind)
        value_kind = _as_value(value_kind)

        if property_kind is PropertyKind.UNKNOWN:
            return True
        if property_kind is PropertyKind.NO_KIND:
            return value_kind is ValueKind.UNKNOWN
        return value_kind in self._entries[property_kind].valid_values

    def is_multivalued(self, property_kind: PropertyKind) -> Optional[ValueKind]:
        """Return the list element kind, or None for single-valued properties."""
        entry = self._entries.get(_as_property(property_kind))
        return entry.multivalue_element if entry else None

    def is_default(self, property_kind: PropertyKind, value_kind: ValueKind) -> bool:
        """Return True if value_kind is assumed when no VALUE parameter is given."""
        return _as_value(value_kind) is self.default_value_kind(property_kind)

    def default_value_kind(self, property_kind: PropertyKind) -> ValueKind:
        """
        Return the value kind assumed for property_kind without a VALUE parameter.

        Extension properties default to TEXT; NO_KIND has no value kind.
        """
        property_kind = _as_property(property_kind)
        if property_kind is PropertyKind.UNKNOWN:
            return ValueKind.TEXT
        if property_kind is PropertyKind.NO_KIND:
            return ValueKind.UNKNOWN
        return self._entries[property_kind].default_value

    def list_separator(self, property_kind: PropertyKind) -> Optional[str]:
        entry = self._entries.get(_as_property(property_kind))
        return entry.separator if entry else None

    def valid_value_kinds(self, property_kind: PropertyKind) -> FrozenSet[ValueKind]:
        """Return the legal value kinds; every kind for extension properties."""
        property_kind = _as_property(property_kind)
        if property_kind is PropertyKind.UNKNOWN:
            return frozenset(ValueKind)
        if property_kind is PropertyKind.NO_KIND:
            return frozenset({ValueKind.UNKNOWN})
        return self._entries[property_kind].valid_values

    def entry(self, property_kind: PropertyKind) -> Optional[CompatibilityEntry]:
        return self._entries.get(_as_property(property_kind))

    def __contains__(self, property_kind: object) -> bool:
        return _as_property(property_kind) in self._entries

    def __iter__(self) -> Iterator[CompatibilityEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def _verify_entry(entry: CompatibilityEntry) -> None:
    name = str(entry.property)
    if not entry.valid_values:
        raise CompatibilityTableError(name, "empty valid value set")
    if ValueKind.UNKNOWN in entry.valid_values:
        raise CompatibilityTableError(name, "UNKNOWN is not a legal value kind")
    if entry.default_value not in entry.valid_values:
        raise CompatibilityTableError(name, f"default {entry.default_value} not in valid values")
    if entry.multivalue_element is None:
        if entry.separator is not None:
            raise CompatibilityTableError(name, "separator set on a single-valued property")
        return
    if entry.multivalue_element not in entry.valid_values:
        raise CompatibilityTableError(
            name, f"list element {entry.multivalue_element} not in valid values"
        )
    if entry.separator not in LIST_SEPARATORS:
        raise CompatibilityTableError(name, f"unsupported list separator {entry.separator!r}")


COMPATIBILITY_TABLE = KindCompatibilityTable()


def is_valid(property_kind: PropertyKind, value_kind: ValueKind) -> bool:
    return COMPATIBILITY_TABLE.is_valid(property_kind, value_kind)


def is_multivalued(property_kind: PropertyKind) -> Optional[ValueKind]:
    return COMPATIBILITY_TABLE.is_multivalued(property_kind)


def is_default(property_kind: PropertyKind, value_kind: ValueKind) -> bool:
    return COMPATIBILITY_TABLE.is_default(property_kind, value_kind)


def default_value_kind(property_kind: PropertyKind) -> ValueKind:
    return COMPATIBILITY_TABLE.default_value_kind(property_kind)


def list_separator(property_kind: PropertyKind) -> Optional[str]:
    return COMPATIBILITY_TABLE.list_separator(property_kind)
