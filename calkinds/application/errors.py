"""Application layer errors for calkinds."""


class ApplicationError(Exception):
    """Base exception for all application layer errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize application error.

        Args:
            message: Error message
        """
        super().__init__(message)
        self.message = message


class ConfigurationError(ApplicationError):
    """Raised when a setting is missing or holds an invalid value."""

    def __init__(self, key: str, message: str) -> None:
        """
        Initialize configuration error.

        Args:
            key: Setting name
            message: What is wrong with it
        """
        super().__init__(f"{key}: {message}")
        self.key = key
        self.validation_message = message
