"""
Log sanitizers for raw calendar data.

Raw property values may carry attendee addresses or inline BINARY
attachments; neither belongs in logs verbatim.
"""

import re
from typing import Any

from structlog.types import EventDict, WrappedLogger

MAX_RAW_VALUE_LENGTH = 64

# Fields that may hold raw content-line text
RAW_VALUE_FIELDS = {"raw", "raw_value", "value_param"}

_MAILTO = re.compile(r"mailto:([^@\s,;]+)@([^\s,;]+)", re.IGNORECASE)


class RawValueProcessor:
    """
    Structlog processor that masks calendar addresses and truncates
    raw property values.
    """

    def __call__(
        self,
        logger: WrappedLogger,
        name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return sanitize_for_log(event_dict)


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Sanitize a log event dictionary.

    Args:
        data: Event dictionary

    Returns:
        Copy with calendar addresses masked and raw values truncated
    """
    sanitized = {}

    for key, value in data.items():
        if isinstance(value, str):
            value = mask_calendar_addresses(value)
            if key in RAW_VALUE_FIELDS:
                value = truncate(value)
        elif isinstance(value, dict):
            value = sanitize_for_log(value)
        sanitized[key] = value

    return sanitized


def mask_calendar_addresses(value: str) -> str:
    """Mask the local part of every mailto: address, keeping the domain."""
    return _MAILTO.sub(_mask_mailto, value)


def truncate(value: str, limit: int = MAX_RAW_VALUE_LENGTH) -> str:
    if len(value) <= limit:
        return value
    return f"{value[:limit]}...({len(value)} chars)"


def _mask_mailto(match: re.Match) -> str:
    local, domain = match.group(1), match.group(2)
    if len(local) > 2:
        return f"mailto:{local[0]}***@{domain}"
    return f"mailto:***@{domain}"
