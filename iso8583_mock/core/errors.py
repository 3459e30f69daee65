"""
Domain-specific exceptions for the mock issuer.

Business outcomes (declines, unknown STANs, wrong MTIs) are never raised:
they are answered with ISO 8583 response codes. These exceptions cover the
failures that do leave the service as HTTP errors.
"""

from typing import Any


class MockIssuerError(Exception):
    """Base exception for all mock issuer errors."""

    def __init__(self, message: str, details: dict[str, Any] | list[Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MessageValidationError(MockIssuerError):
    """
    Raised when an inbound message cannot be deserialized.

    Examples:
    - Required data element missing
    - Data element sent as a number instead of a string
    - Unknown field in the payload

    HTTP Status: 422 Unprocessable Entity
    """

    pass


class ConfigurationError(MockIssuerError):
    """
    Raised when the service is wired with an unusable configuration.

    HTTP Status: 500 Internal Server Error
    """

    pass


ERROR_STATUS_MAP = {
    MessageValidationError: 422,
    ConfigurationError: 500,
}


def get_status_code(error: Exception) -> int:
    """
    Get the HTTP status code for a given exception.

    Args:
        error: The exception instance

    Returns:
        HTTP status code (defaults to 500 for unknown errors)
    """
    return ERROR_STATUS_MAP.get(type(error), 500)
