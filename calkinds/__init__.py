"""calkinds - iCalendar property/value kind compatibility rules."""

__version__ = "1.0.0"
