"""Custom exception classes for the showcase store."""


class ShowcaseError(Exception):
    """Base exception for showcase."""

    def __init__(self, code: str, message: str, details=None):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(ShowcaseError):
    """Required configuration is missing or unusable."""

    def __init__(self, message: str, details=None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class DatabaseConnectionError(ShowcaseError):
    """The shared store connection could not be established."""

    def __init__(self, message: str, details=None):
        super().__init__("DATABASE_CONNECTION_ERROR", message, details)
