"""Exceptions for sweb."""


class SwebError(Exception):
    """Base class for all sweb errors."""


class ConfigError(SwebError):
    """Raised when the server configuration is invalid."""


class StartupError(SwebError):
    """Raised when the server cannot be prepared to listen."""


class UploadError(SwebError):
    """Raised when an uploaded file cannot be accepted or stored."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Initialize UploadError.

        Args:
            message: Human readable reason, sent back to the client.
            status_code: HTTP status for the response (400 or 500).
        """
        self.message = message
        self.status_code = status_code
        super().__init__(message)
