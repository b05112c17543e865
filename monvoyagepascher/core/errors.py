"""Error taxonomy shared by the API client and the commands."""

from __future__ import annotations


class GeoAPIError(Exception):
    """Base class for every failure reported to the user."""

    title = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationRequired(GeoAPIError):
    """No API key is configured."""

    title = "Authentication Required"

    def __init__(self, message: str = "API key not configured."):
        super().__init__(message)


class ValidationError(GeoAPIError):
    """Input rejected locally, before any request is made."""

    title = "Validation Error"


class ApiError(GeoAPIError):
    """The remote service reported a failure."""

    title = "API Error"

    def __init__(self, message: str = "API error", status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class RequestFailed(GeoAPIError):
    """No response was received (DNS, connection, timeout...)."""

    title = "Request Failed"


class ConfigError(GeoAPIError):
    """The stored configuration file cannot be read or written."""

    title = "Configuration Error"
