# src/spotprice/application/__init__.py
"""
Application Layer - Use Cases and Services

This package turns provider payloads into price series and manages the
lifecycle of the dashboard's logical requests.
"""

from spotprice.application.series_builder import build_series, parse_element
from spotprice.application.price_request import PriceRequest, RequestPhase, ResultCell
from spotprice.application.dashboard import Dashboard, PAGE_COUNT

__all__ = [
    "build_series",
    "parse_element",
    "PriceRequest",
    "RequestPhase",
    "ResultCell",
    "Dashboard",
    "PAGE_COUNT",
]
