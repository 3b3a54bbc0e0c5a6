# src/spotprice/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains the price models and the error taxonomy.
No dependencies on infrastructure or external systems.
"""

from spotprice.domain.models import (
    CENTS_PER_KWH_TO_EUR_PER_MWH,
    FetchResult,
    FetchStatus,
    PricePoint,
    PriceSeries,
    parse_offset_datetime,
)
from spotprice.domain.errors import (
    FetchError,
    FetchTimeoutError,
    HttpStatusError,
    InvalidPriceError,
    MalformedElementError,
    MalformedPayloadError,
    PriceDataError,
    PriceValidationError,
    ResultCellError,
    TransportFailureError,
)

__all__ = [
    "CENTS_PER_KWH_TO_EUR_PER_MWH",
    "PricePoint",
    "PriceSeries",
    "FetchStatus",
    "FetchResult",
    "parse_offset_datetime",
    "PriceDataError",
    "FetchError",
    "FetchTimeoutError",
    "TransportFailureError",
    "HttpStatusError",
    "PriceValidationError",
    "MalformedPayloadError",
    "MalformedElementError",
    "InvalidPriceError",
    "ResultCellError",
]
