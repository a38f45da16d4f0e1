"""
Custom exceptions for the flight_paths package.

Provides a hierarchy of exceptions for registration and query validation.
A missing route is never an exception: searches return None for that.
"""

from typing import Optional


class FlightPathsError(Exception):
    """Base exception for all flight_paths errors."""

    pass


class ConfigurationError(FlightPathsError):
    """Raised when an environment setting cannot be parsed."""

    def __init__(self, setting_name: str, value: str, expected: str) -> None:
        self.setting_name = setting_name
        self.value = value
        message = f"Invalid value for {setting_name}: {value!r} (expected {expected})"
        super().__init__(message)


class ValidationError(FlightPathsError):
    """Base exception for input validation errors."""

    pass


class InvalidInputError(ValidationError):
    """Raised when route registration data is malformed."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


class InvalidQueryError(ValidationError):
    """Raised when a route query cannot be answered as asked."""

    def __init__(self, source: str, destination: str, message: Optional[str] = None) -> None:
        self.source = source
        self.destination = destination
        if message is None:
            message = "Source and destination cannot be the same."
        super().__init__(message)


class SearchLimitExceededError(FlightPathsError):
    """Raised when a search frontier grows past its configured cap."""

    def __init__(self, limit: int, source: str, destination: str) -> None:
        self.limit = limit
        self.source = source
        self.destination = destination
        message = (
            f"Search frontier exceeded {limit} partial paths "
            f"for {source} -> {destination}"
        )
        super().__init__(message)
