# src/spotprice/domain/errors.py
"""
Domain Errors - Price Pipeline Exceptions

This module defines the exceptions raised while acquiring and validating
spot price data. Fetch errors come from the transport layer, validation
errors from parsing the payload.
"""
from typing import Optional


class PriceDataError(Exception):
    """Base exception for price pipeline errors."""
    pass


class FetchError(PriceDataError):
    """Raised when the price payload could not be retrieved."""
    pass


class FetchTimeoutError(FetchError):
    """Raised when connecting to or reading from the API took too long."""
    pass


class TransportFailureError(FetchError):
    """Raised when no HTTP response was received (DNS, connection, TLS)."""
    pass


class HttpStatusError(FetchError):
    """Raised when the API answered with a non-success status code."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"HTTP Error: {status_code}")


class PriceValidationError(PriceDataError):
    """Raised when a payload cannot be turned into a price series."""
    pass


class MalformedPayloadError(PriceValidationError):
    """Raised when the payload is not a JSON array."""
    pass


class MalformedElementError(PriceValidationError):
    """Raised when one array element lacks a field or has the wrong type."""

    def __init__(self, index: int, field: Optional[str], message: str):
        self.index = index
        self.field = field
        super().__init__(f"Element {index}: {message}")


class InvalidPriceError(PriceValidationError):
    """Raised when a price value is NaN or infinite."""
    pass


class ResultCellError(Exception):
    """Raised on an illegal write to a request's result cell."""
    pass
