"""
iCalendar kind compatibility rules.

Property and value kind enumerations plus the table answering whether a
property/value kind pairing is legal, whether a property holds a list, and
which value kind a property assumes without a VALUE parameter.
"""

from .property_kind import PropertyKind
from .value_kind import ValueKind
from .compatibility import (
    COMPATIBILITY_TABLE,
    DEFAULT_ENTRIES,
    CompatibilityEntry,
    KindCompatibilityTable,
    default_value_kind,
    is_default,
    is_multivalued,
    is_valid,
    list_separator,
)

__all__ = [
    # Enums
    "PropertyKind",
    "ValueKind",

    # Table
    "CompatibilityEntry",
    "KindCompatibilityTable",
    "COMPATIBILITY_TABLE",
    "DEFAULT_ENTRIES",

    # Queries
    "is_valid",
    "is_multivalued",
    "is_default",
    "default_value_kind",
    "list_separator",
]
