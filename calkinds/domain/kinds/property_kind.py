"""Property names recognized by the iCalendar format."""

from enum import Enum
from typing import Optional


class PropertyKind(Enum):
    """Identity of a named iCalendar property.

    The member value is the canonical property name as it appears on a
    content line. UNKNOWN stands for extension (X-) and unregistered IANA
    properties; NO_KIND stands for the absence of a property.
    """

    # Calendar properties (RFC 5545 section 3.7)
    CALSCALE = "CALSCALE"
    METHOD = "METHOD"
    PRODID = "PRODID"
    VERSION = "VERSION"

    # Descriptive component properties (RFC 5545 section 3.8.1)
    ATTACH = "ATTACH"
    CATEGORIES = "CATEGORIES"
    CLASS = "CLASS"
    COMMENT = "COMMENT"
    DESCRIPTION = "DESCRIPTION"
    GEO = "GEO"
    LOCATION = "LOCATION"
    PERCENT_COMPLETE = "PERCENT-COMPLETE"
    PRIORITY = "PRIORITY"
    RESOURCES = "RESOURCES"
    STATUS = "STATUS"
    SUMMARY = "SUMMARY"

    # Date and time component properties (RFC 5545 section 3.8.2)
    COMPLETED = "COMPLETED"
    DTEND = "DTEND"
    DUE = "DUE"
    DTSTART = "DTSTART"
    DURATION = "DURATION"
    FREEBUSY = "FREEBUSY"
    TRANSP = "TRANSP"

    # Time zone component properties (RFC 5545 section 3.8.3)
    TZID = "TZID"
    TZNAME = "TZNAME"
    TZOFFSETFROM = "TZOFFSETFROM"
    TZOFFSETTO = "TZOFFSETTO"
    TZURL = "TZURL"

    # Relationship component properties (RFC 5545 section 3.8.4)
    ATTENDEE = "ATTENDEE"
    CONTACT = "CONTACT"
    ORGANIZER = "ORGANIZER"
    RECURRENCE_ID = "RECURRENCE-ID"
    RELATED_TO = "RELATED-TO"
    URL = "URL"
    UID = "UID"

    # Recurrence component properties (RFC 5545 section 3.8.5)
    EXDATE = "EXDATE"
    EXRULE = "EXRULE"
    RDATE = "RDATE"
    RRULE = "RRULE"

    # Alarm component properties (RFC 5545 section 3.8.6)
    ACTION = "ACTION"
    REPEAT = "REPEAT"
    TRIGGER = "TRIGGER"

    # Change management component properties (RFC 5545 section 3.8.7)
    CREATED = "CREATED"
    DTSTAMP = "DTSTAMP"
    LAST_MODIFIED = "LAST-MODIFIED"
    SEQUENCE = "SEQUENCE"

    # Miscellaneous component properties (RFC 5545 section 3.8.8)
    REQUEST_STATUS = "REQUEST-STATUS"

    # RFC 7986
    NAME = "NAME"
    REFRESH_INTERVAL = "REFRESH-INTERVAL"
    SOURCE = "SOURCE"
    COLOR = "COLOR"
    IMAGE = "IMAGE"
    CONFERENCE = "CONFERENCE"

    # RFC 7953
    BUSYTYPE = "BUSYTYPE"

    # RFC 7808
    TZID_ALIAS_OF = "TZID-ALIAS-OF"
    TZUNTIL = "TZUNTIL"

    # RFC 9073
    LOCATION_TYPE = "LOCATION-TYPE"
    PARTICIPANT_TYPE = "PARTICIPANT-TYPE"
    RESOURCE_TYPE = "RESOURCE-TYPE"
    CALENDAR_ADDRESS = "CALENDAR-ADDRESS"
    STYLED_DESCRIPTION = "STYLED-DESCRIPTION"
    STRUCTURED_DATA = "STRUCTURED-DATA"

    # RFC 9074
    ACKNOWLEDGED = "ACKNOWLEDGED"
    PROXIMITY = "PROXIMITY"

    # RFC 9253
    LINK = "LINK"
    CONCEPT = "CONCEPT"
    REFID = "REFID"

    # VPOLL
    ACCEPT_RESPONSE = "ACCEPT-RESPONSE"
    POLL_COMPLETION = "POLL-COMPLETION"
    POLL_ITEM_ID = "POLL-ITEM-ID"
    POLL_MODE = "POLL-MODE"
    POLL_PROPERTIES = "POLL-PROPERTIES"
    POLL_WINNER = "POLL-WINNER"
    RESPONSE = "RESPONSE"
    VOTER = "VOTER"

    # Task extensions
    ESTIMATED_DURATION = "ESTIMATED-DURATION"
    TASK_MODE = "TASK-MODE"

    UNKNOWN = "UNKNOWN"
    NO_KIND = "NO-KIND"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "PropertyKind":
        """
        Look up a property kind by its content-line name.

        Args:
            name: Property name in any case, e.g. "dtstart" or "X-WR-CALNAME"

        Returns:
            The matching kind; NO_KIND for an empty name and UNKNOWN for
            anything outside the recognized set, extension names included.
        """
        if name is None:
            return cls.NO_KIND
        token = name.strip().upper()
        if not token:
            return cls.NO_KIND
        return _BY_NAME.get(token, cls.UNKNOWN)

    @property
    def is_sentinel(self) -> bool:
        """True for UNKNOWN and NO_KIND."""
        return self in (PropertyKind.UNKNOWN, PropertyKind.NO_KIND)

    def __str__(self) -> str:
        return self.value


_BY_NAME = {kind.value: kind for kind in PropertyKind if not kind.is_sentinel}
