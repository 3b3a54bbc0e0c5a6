# src/spotprice/adapters/providers/__init__.py
"""
Provider Adapters - Price Payload Sources

This package contains the spot-hinta.fi API client and an offline demo
source. All providers implement the PriceProvider interface.
"""

from spotprice.adapters.providers.base import PriceProvider
from spotprice.adapters.providers.demo import DemoPriceProvider
from spotprice.adapters.providers.spot_hinta import SpotHintaProvider

__all__ = [
    "PriceProvider",
    "DemoPriceProvider",
    "SpotHintaProvider",
]
