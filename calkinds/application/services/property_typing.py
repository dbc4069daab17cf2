"""
Application service deciding value types for iCalendar properties.

This is the seam the parser, the property constructor and the serializer
call into. The domain table answers legality questions; this service turns
those answers into parsing and serialization decisions and applies the
configured handling of illegal VALUE parameters.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from calkinds.application.config import ValueTypeMode
from calkinds.domain.errors import IncompatibleValueKindError
from calkinds.domain.kinds import (
    COMPATIBILITY_TABLE,
    KindCompatibilityTable,
    PropertyKind,
    ValueKind,
)
from calkinds.shared.logging import get_logger

logger = get_logger("application.property_typing")

PropertyRef = Union[PropertyKind, str]
ValueRef = Union[ValueKind, str]

ESCAPE = "\\"

# Structured lists with a fixed number of elements (GEO is latitude;longitude)
FIXED_LENGTH_LISTS = {PropertyKind.GEO: 2}


@dataclass(frozen=True)
class TypingCheck:
    """Result of checking a property/value kind pairing."""

    property: PropertyKind
    value: ValueKind
    is_valid: bool
    is_default: bool
    multivalue_element: Optional[ValueKind] = None
    message: str = ""


class PropertyTypingService:
    """Value type decisions for parsing, construction and serialization."""

    def __init__(
        self,
        table: KindCompatibilityTable = COMPATIBILITY_TABLE,
        mode: ValueTypeMode = ValueTypeMode.LENIENT,
    ):
        """
        Initialize the service.

        Args:
            table: Compatibility table to consult
            mode: Handling of illegal VALUE parameters while parsing
        """
        self.table = table
        self.mode = mode

    def resolve_value_kind(self, property_name: PropertyRef, value_param: Optional[str] = None) -> ValueKind:
        """
        Decide the value kind of a parsed property.

        Args:
            property_name: Property name or kind
            value_param: Text of the VALUE parameter, None when absent

        Returns:
            The explicit kind when it is legal, otherwise the property default

        Raises:
            IncompatibleValueKindError: In strict mode, for an illegal or
                unrecognized VALUE parameter
        """
        property_kind = _property(property_name)
        default = self.table.default_value_kind(property_kind)

        if value_param is None or not value_param.strip():
            return default

        value_kind = ValueKind.from_name(value_param)
        if self.table.is_valid(property_kind, value_kind) and value_kind is not ValueKind.UNKNOWN:
            return value_kind

        if self.mode == ValueTypeMode.STRICT:
            logger.info(
                "value_param_rejected",
                property=str(property_kind),
                value_param=value_param,
            )
            raise IncompatibleValueKindError(_display_name(property_name), value_param.strip().upper())

        logger.warning(
            "value_param_ignored",
            property=str(property_kind),
            value_param=value_param,
            fallback=str(default),
        )
        return default

    def check(self, property_name: PropertyRef, value: ValueRef) -> TypingCheck:
        """Check a pairing without raising."""
        property_kind = _property(property_name)
        value_kind = _value(value)
        valid = self.table.is_valid(property_kind, value_kind)

        return TypingCheck(
            property=property_kind,
            value=value_kind,
            is_valid=valid,
            is_default=self.table.is_default(property_kind, value_kind),
            multivalue_element=self.table.is_multivalued(property_kind),
            message="" if valid else (
                f"Value type {value_kind} is not allowed for property {_display_name(property_name)}"
            ),
        )

    def require_valid(self, property_kind: PropertyRef, value_kind: ValueRef) -> None:
        """
        Accept or reject a pairing when building a property.

        Raises:
            IncompatibleValueKindError: If the pairing is illegal
        """
        result = self.check(property_kind, value_kind)
        if not result.is_valid:
            raise IncompatibleValueKindError(_display_name(property_kind), str(result.value))

    def should_emit_value_parameter(self, property_kind: PropertyRef, value_kind: ValueRef) -> bool:
        """Return True unless value_kind is the default for property_kind."""
        return not self.table.is_default(_property(property_kind), _value(value_kind))

    def split_values(self, property_kind: PropertyRef, raw: str) -> list[str]:
        """
        Split a raw property value into its list elements.

        Escaped separators (backslash-comma, backslash-semicolon) do not
        split; escapes are left in place for the value decoder.

        Args:
            property_kind: Property name or kind
            raw: Raw value text after the colon of the content line

        Returns:
            The elements for a list property, [raw] otherwise
        """
        separator = self.table.list_separator(_property(property_kind))
        if separator is None:
            return [raw]

        parts = []
        current = []
        chars = iter(raw)
        for char in chars:
            if char == ESCAPE:
                current.append(char)
                current.append(next(chars, ""))
            elif char == separator:
                parts.append("".join(current))
                current = []
            else:
                current.append(char)
        parts.append("".join(current))
        return parts

    def join_values(self, property_kind: PropertyRef, values: Sequence[str]) -> str:
        """
        Join already-encoded values for serialization.

        Raises:
            IncompatibleValueKindError: If several values are given for a
                single-valued property, or the wrong number of values for a
                fixed-length list such as GEO
        """
        kind = _property(property_kind)
        separator = self.table.list_separator(kind)
        if separator is None:
            if len(values) != 1:
                raise IncompatibleValueKindError(
                    _display_name(property_kind), f"list of {len(values)} values"
                )
            return values[0]
        expected = FIXED_LENGTH_LISTS.get(kind)
        if expected is not None and len(values) != expected:
            raise IncompatibleValueKindError(
                _display_name(property_kind), f"list of {len(values)} values, expected {expected}"
            )
        return separator.join(values)


def _property(ref: PropertyRef) -> PropertyKind:
    return ref if isinstance(ref, PropertyKind) else PropertyKind.from_name(ref)


def _value(ref: ValueRef) -> ValueKind:
    return ref if isinstance(ref, ValueKind) else ValueKind.from_name(ref)


def _display_name(ref: PropertyRef) -> str:
    # Keep extension names readable in messages instead of "UNKNOWN"
    if isinstance(ref, PropertyKind):
        return ref.value
    return (ref or "").strip().upper() or PropertyKind.NO_KIND.value
