# src/spotprice/adapters/providers/spot_hinta.py
"""
spot-hinta.fi API Provider for Finnish Spot Prices

This module implements the HTTP client for the spot-hinta.fi API. It
performs a single GET per call and returns the body text, translating
transport problems into the fetch errors of the domain layer. There is
no caching and no retry: each call is an independent attempt.

Files that USE this module:
- spotprice.application.dashboard (default provider for both cards)
- tests.test_providers (unit tests)

Files that this module USES:
- spotprice.adapters.providers.base (PriceProvider interface)
- spotprice.config (settings for endpoint and timeouts)
- spotprice.domain.errors (fetch error taxonomy)
"""
import logging
from http import HTTPStatus
from typing import Optional

import requests

from spotprice.adapters.providers.base import PriceProvider
from spotprice.config import settings
from spotprice.domain.errors import FetchTimeoutError, HttpStatusError, TransportFailureError

log = logging.getLogger(__name__)


class SpotHintaProvider(PriceProvider):
    """
    Fetches today's and tomorrow's hourly prices from spot-hinta.fi.

    The API answers with a JSON array of {"DateTime", "PriceWithTax"}
    objects, prices in cents/kWh including VAT.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        connect_timeout: Optional[float] = None,
        read_timeout: Optional[float] = None,
    ):
        """
        Initialize spot-hinta.fi provider.

        Args:
            url: Optional endpoint URL (defaults to settings.spot_price_url)
            connect_timeout: Optional connect timeout in seconds
            read_timeout: Optional read timeout in seconds

        Raises:
            ValueError: If a timeout is not positive
        """
        self.url = url or settings.spot_price_url
        if connect_timeout is None:
            connect_timeout = settings.http_connect_timeout_seconds
        if read_timeout is None:
            read_timeout = settings.http_read_timeout_seconds
        if connect_timeout <= 0 or read_timeout <= 0:
            raise ValueError("Timeouts must be positive")
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout

    @property
    def timeout(self) -> tuple:
        return (self.connect_timeout, self.read_timeout)

    def fetch_raw(self) -> str:
        """
        Get the raw JSON text from the API.

        Returns:
            Response body as text

        Raises:
            FetchTimeoutError: If connecting or reading exceeded the timeout
            TransportFailureError: If no HTTP response was received
            HttpStatusError: If the API answered with a status other than 200
        """
        log.info("Fetching spot prices from %s", self.url)
        try:
            resp = requests.get(self.url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            log.warning(
                "spot-hinta.fi timeout (connect=%ss, read=%ss): %s",
                self.connect_timeout, self.read_timeout, e,
            )
            raise FetchTimeoutError(
                f"spot-hinta.fi API timeout after {self.connect_timeout}s/{self.read_timeout}s"
            ) from e
        except requests.exceptions.RequestException as e:
            log.warning("spot-hinta.fi request failed (network/connection error): %s", e)
            raise TransportFailureError(f"spot-hinta.fi API request failed: {e}") from e

        try:
            if resp.status_code != HTTPStatus.OK:
                log.error("spot-hinta.fi returned HTTP %d", resp.status_code)
                raise HttpStatusError(resp.status_code)
            body = resp.text
        finally:
            resp.close()

        log.info("spot-hinta.fi response received (%d chars)", len(body))
        return body
