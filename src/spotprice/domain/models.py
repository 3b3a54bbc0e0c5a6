# src/spotprice/domain/models.py
"""
Domain Models - Price Points, Series and Fetch Results

This module contains the domain models of the price pipeline:
- PricePoint: one hourly spot price in €/MWh
- PriceSeries: an immutable collection of points with derived statistics
- FetchResult: the pending / ready / failed outcome of a logical request

Files that USE this module:
- spotprice.application.* (builder, requests and dashboard produce these models)
- spotprice.adapters.formatting.formatter (renders series statistics as text)
- tests.* (tests build models directly)

Files that this module USES:
- spotprice.domain.errors (InvalidPriceError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import math  # Finite-value checks for prices
from dataclasses import dataclass, field  # Immutable value objects
from datetime import datetime  # Offset-aware timestamps
from enum import Enum  # Tags for the fetch result union
from typing import Iterator, Optional, Tuple

from spotprice.domain.errors import InvalidPriceError

# spot-hinta.fi quotes cents/kWh; the dashboard works in €/MWh.
CENTS_PER_KWH_TO_EUR_PER_MWH = 10.0

UNKNOWN_HOUR = 0
UNKNOWN_DAY_OF_YEAR = -1

DISPLAY_TIME_FORMAT = "%A, %H:%M"


def parse_offset_datetime(text: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 date-time that carries an explicit UTC offset.

    Args:
        text: Timestamp such as "2023-10-27T00:00:00+03:00" (a trailing "Z" is UTC)

    Returns:
        Offset-aware datetime, or None if the text is unparseable or has no offset
    """
    if not isinstance(text, str) or not text:
        return None
    try:
        parsed = datetime.fromisoformat(text.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        return None
    return parsed


@dataclass(frozen=True)
class PricePoint:
    """
    One hourly price observation.

    Attributes:
        datetime_text: Timestamp exactly as received from the source
        price_per_unit: Price in €/MWh
        timestamp: Parsed offset-aware timestamp, None when unparseable
    """
    datetime_text: str
    price_per_unit: float
    timestamp: Optional[datetime] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not math.isfinite(self.price_per_unit):
            raise InvalidPriceError(f"Price must be finite, got {self.price_per_unit!r}")
        if self.timestamp is None:
            object.__setattr__(self, "timestamp", parse_offset_datetime(self.datetime_text))

    @classmethod
    def from_cents_per_kwh(cls, datetime_text: str, cents_per_kwh: float) -> PricePoint:
        """Create a point from a source price quoted in cents/kWh."""
        return cls(
            datetime_text=datetime_text,
            price_per_unit=float(cents_per_kwh) * CENTS_PER_KWH_TO_EUR_PER_MWH,
        )

    @property
    def has_known_time(self) -> bool:
        return self.timestamp is not None

    @property
    def hour(self) -> int:
        """Hour of day (0-23) in the timestamp's own offset, 0 when unknown."""
        if self.timestamp is None:
            return UNKNOWN_HOUR
        return self.timestamp.hour

    @property
    def day_of_year(self) -> int:
        """Day of year (1-366), -1 when unknown."""
        if self.timestamp is None:
            return UNKNOWN_DAY_OF_YEAR
        return self.timestamp.timetuple().tm_yday

    @property
    def display_time(self) -> str:
        """Weekday and time, e.g. "Friday, 14:00"; empty when unknown."""
        if self.timestamp is None:
            return ""
        return self.timestamp.strftime(DISPLAY_TIME_FORMAT)


def _chronological_key(point: PricePoint):
    # Unknown timestamps go last
    if point.timestamp is None:
        return (1, 0.0)
    return (0, point.timestamp.timestamp())


@dataclass(frozen=True)
class PriceSeries:
    """
    Ordered collection of price points.

    Points are kept in the order they were received, which is not
    guaranteed to be chronological. Use chronological() before any
    operation that depends on time order. Statistics are recomputed on
    every access.
    """
    points: Tuple[PricePoint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def prices(self) -> Tuple[float, ...]:
        return tuple(p.price_per_unit for p in self.points)

    def chronological(self) -> PriceSeries:
        """
        Return a new series sorted ascending by timestamp.

        Points with an unknown timestamp are placed after all known ones,
        keeping their original relative order.
        """
        return PriceSeries(tuple(sorted(self.points, key=_chronological_key)))

    @property
    def min_price(self) -> Optional[float]:
        if not self.points:
            return None
        return min(self.prices)

    @property
    def max_price(self) -> Optional[float]:
        if not self.points:
            return None
        return max(self.prices)

    @property
    def price_range(self) -> Optional[Tuple[float, float]]:
        """(min, max) price tuple, or None for an empty series."""
        if not self.points:
            return None
        prices = self.prices
        return min(prices), max(prices)

    def current_point(self, now: Optional[datetime] = None) -> Optional[PricePoint]:
        """
        Find the point for the current hour.

        A point matches when its hour and day of year equal those of `now`.
        The scan does not depend on the series order.

        Args:
            now: Reference time (defaults to the current local time)

        Returns:
            First matching PricePoint, or None if no point matches
        """
        if now is None:
            now = datetime.now().astimezone()
        hour = now.hour
        day_of_year = now.timetuple().tm_yday
        for point in self.points:
            if point.hour == hour and point.day_of_year == day_of_year:
                return point
        return None


class FetchStatus(Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult:
    """
    Outcome of one logical request: pending, ready with a series, or failed.

    Attributes:
        status: Which of the three states holds
        series: The price series (READY only)
        error: Human-readable failure message (FAILED only)
    """
    status: FetchStatus
    series: Optional[PriceSeries] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.status is FetchStatus.READY:
            if self.series is None or self.error is not None:
                raise ValueError("READY result requires a series and no error")
        elif self.status is FetchStatus.FAILED:
            if self.error is None or self.series is not None:
                raise ValueError("FAILED result requires an error message and no series")
        elif self.series is not None or self.error is not None:
            raise ValueError("PENDING result carries no payload")

    @classmethod
    def pending(cls) -> FetchResult:
        return cls(FetchStatus.PENDING)

    @classmethod
    def ready(cls, series: PriceSeries) -> FetchResult:
        return cls(FetchStatus.READY, series=series)

    @classmethod
    def failed(cls, message: str) -> FetchResult:
        return cls(FetchStatus.FAILED, error=message)

    @property
    def is_pending(self) -> bool:
        return self.status is FetchStatus.PENDING

    @property
    def is_ready(self) -> bool:
        return self.status is FetchStatus.READY

    @property
    def is_failed(self) -> bool:
        return self.status is FetchStatus.FAILED

    @property
    def is_terminal(self) -> bool:
        return self.status is not FetchStatus.PENDING
