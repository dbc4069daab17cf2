"""Application services."""

from .property_typing import PropertyTypingService, TypingCheck

__all__ = [
    "PropertyTypingService",
    "TypingCheck",
]
