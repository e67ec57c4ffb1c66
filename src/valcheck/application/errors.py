"""Application layer errors for valcheck."""


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
    """Raised when a setting holds an unusable value."""

    def __init__(self, setting: str, message: str) -> None:
        """
        Initialize configuration error.

        Args:
            setting: Name of the offending setting
            message: What is wrong with it
        """
        super().__init__(f"{setting}: {message}")
        self.setting = setting
        self.validation_message = message
