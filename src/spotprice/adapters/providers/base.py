# src/spotprice/adapters/providers/base.py
"""
Base Provider Interface for Spot Price Sources

This module defines the abstract base class for all price payload sources.
A provider returns the raw JSON text; turning it into a price series is
the builder's job.

Files that USE this module:
- spotprice.adapters.providers.spot_hinta (SpotHintaProvider implements PriceProvider)
- spotprice.adapters.providers.demo (DemoPriceProvider implements PriceProvider)
- spotprice.application.price_request (PriceRequest calls fetch_raw)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod


class PriceProvider(ABC):
    @abstractmethod
    def fetch_raw(self) -> str:
        """Return the raw price payload (a JSON array) as text."""
        raise NotImplementedError
