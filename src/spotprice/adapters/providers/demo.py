# src/spotprice/adapters/providers/demo.py
"""
Demo Provider - Synthetic Spot Price Payloads

Generates payloads shaped like the spot-hinta.fi response so the
dashboard can run without network access. Prices follow a daily curve
with random noise, the entries are shuffled (the live feed is not
guaranteed to be chronological either) and the call sleeps for a
configurable delay to mimic network latency.

Files that USE this module:
- tests.test_providers, tests.test_dashboard (offline data source)

Files that this module USES:
- spotprice.adapters.providers.base (PriceProvider interface)
- spotprice.config (settings for demo delay and time zone)
"""
from __future__ import annotations

import json
import logging
import math
import random
import time
from datetime import datetime, timedelta
from typing import Optional

from spotprice.adapters.providers.base import PriceProvider
from spotprice.config import settings

log = logging.getLogger(__name__)

# cents/kWh
BASE_PRICE = 8.0
DAILY_SWING = 5.0
NOISE = 1.5


class DemoPriceProvider(PriceProvider):
    """Offline provider returning generated hourly prices."""

    def __init__(
        self,
        hours: int = 48,
        start: Optional[datetime] = None,
        delay_seconds: Optional[float] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize demo provider.

        Args:
            hours: Number of hourly entries to generate
            start: First hour (offset-aware); defaults to today 00:00 in settings.local_timezone
            delay_seconds: Artificial latency (defaults to settings.demo_delay_seconds)
            seed: Random seed for reproducible payloads
        """
        if hours < 0:
            raise ValueError("hours must be non-negative")
        if start is not None and start.tzinfo is None:
            raise ValueError("start must be offset-aware")
        self.hours = hours
        self.start = start
        self.delay_seconds = settings.demo_delay_seconds if delay_seconds is None else delay_seconds
        self._rng = random.Random(seed)

    def _start_of_day(self) -> datetime:
        now = datetime.now(settings.tzinfo)
        return now.replace(hour=0, minute=0, second=0, microsecond=0)

    def generate_entries(self) -> list[dict]:
        """
        Build the list of {"DateTime", "PriceWithTax"} entries.

        Returns:
            Entries in shuffled order, prices in cents/kWh
        """
        start = self.start or self._start_of_day()
        entries = []
        for i in range(self.hours):
            ts = start + timedelta(hours=i)
            # Peak in the early evening, trough before dawn
            curve = math.sin((ts.hour - 10) / 24 * 2 * math.pi)
            price = BASE_PRICE + DAILY_SWING * curve + self._rng.uniform(-NOISE, NOISE)
            entries.append({
                "DateTime": ts.isoformat(timespec="seconds"),
                "PriceWithTax": round(price, 3),
            })
        self._rng.shuffle(entries)
        return entries

    def fetch_raw(self) -> str:
        if self.delay_seconds > 0:
            log.debug("Demo provider sleeping %.2fs", self.delay_seconds)
            time.sleep(self.delay_seconds)
        entries = self.generate_entries()
        log.info("Demo provider generated %d entries", len(entries))
        return json.dumps(entries)
