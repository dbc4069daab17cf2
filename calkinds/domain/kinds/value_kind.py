"""Value data types recognized by the iCalendar format."""

from enum import Enum
from typing import Optional


class ValueKind(Enum):
    """Value data type of a property value.

    The member value is the token used in the VALUE parameter.
    """

    # RFC 5545 section 3.3
    BINARY = "BINARY"
    BOOLEAN = "BOOLEAN"
    CAL_ADDRESS = "CAL-ADDRESS"
    DATE = "DATE"
    DATE_TIME = "DATE-TIME"
    DURATION = "DURATION"
    FLOAT = "FLOAT"
    INTEGER = "INTEGER"
    PERIOD = "PERIOD"
    RECUR = "RECUR"
    TEXT = "TEXT"
    TIME = "TIME"
    URI = "URI"
    UTC_OFFSET = "UTC-OFFSET"

    # RFC 9253
    UID = "UID"
    XML_REFERENCE = "XML-REFERENCE"

    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "ValueKind":
        """Look up a value kind by its VALUE parameter token.

        Unrecognized and empty tokens map to UNKNOWN.
        """
        if not name:
            return cls.UNKNOWN
        return _BY_NAME.get(name.strip().upper(), cls.UNKNOWN)

    @property
    def is_sentinel(self) -> bool:
        return self is ValueKind.UNKNOWN

    def __str__(self) -> str:
        return self.value


_BY_NAME = {kind.value: kind for kind in ValueKind if not kind.is_sentinel}
