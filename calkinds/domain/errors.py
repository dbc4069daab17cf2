"""Domain errors for calkinds."""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize domain error.

        Args:
            message: Error message (must not echo raw property values)
        """
        super().__init__(message)
        self.message = message


class CompatibilityTableError(DomainError):
    """Raised when the compatibility table breaks one of its invariants."""

    def __init__(self, property_name: str, reason: str) -> None:
        """
        Initialize compatibility table error.

        Args:
            property_name: Property whose entry is defective
            reason: Which invariant was violated
        """
        message = f"Invalid compatibility entry for {property_name}: {reason}"
        super().__init__(message)
        self.property_name = property_name
        self.reason = reason


class IncompatibleValueKindError(DomainError):
    """Raised when a value kind is not legal for a property."""

    def __init__(self, property_name: str, value_name: str) -> None:
        """
        Initialize incompatible value kind error.

        Args:
            property_name: Property name (e.g. "DTSTART")
            value_name: Value kind name (e.g. "DURATION")
        """
        message = f"Value type {value_name} is not allowed for property {property_name}"
        super().__init__(message)
        self.property_name = property_name
        self.value_name = value_name
