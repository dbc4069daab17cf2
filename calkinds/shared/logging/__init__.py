"""
Structured logging for calkinds.

structlog configuration plus a sanitizer that keeps attendee addresses and
inline attachments out of log output.
"""

from .factory import configure_logging, get_logger
from .sanitizers import mask_calendar_addresses, sanitize_for_log

__all__ = [
    "configure_logging",
    "get_logger",
    "mask_calendar_addresses",
    "sanitize_for_log",
]
