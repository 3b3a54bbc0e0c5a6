# src/spotprice/adapters/formatting/formatter.py
"""
Card Formatter - Text for the Price Dashboard Cards

This module produces the text shown on each dashboard card: the title,
current price and time, the price range and the footer. Drawing the
cards and the graph is left to the presentation layer; this module only
decides what the text says for each fetch state.

Files that USE this module:
- spotprice.application.dashboard (Dashboard.cards)
- tests.test_formatter (unit tests)

Files that this module USES:
- spotprice.domain.models (FetchResult, PricePoint, PriceSeries)
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from spotprice.domain.models import FetchResult, FetchStatus, PricePoint, PriceSeries

LOADING_TEXT = "Fetching price data..."
ERROR_TITLE = "Data Error"

PAGE_TITLES = {
    0: "Today & Tomorrow (€/MWh)",
    1: "Price History",
    2: "Forecast View",
}


@dataclass(frozen=True)
class DashboardCard:
    """
    Text content of one dashboard card.

    Attributes:
        page: Page index in the pager
        status: Fetch state the card reflects
        title: Heading (None while loading)
        lines: Body lines in display order
        footer: Small print under the graph (None unless ready)
        series: Chronologically sorted series for the graph (None unless ready)
    """
    page: int
    status: FetchStatus
    title: Optional[str]
    lines: tuple
    footer: Optional[str] = None
    series: Optional[PriceSeries] = None


def format_price(value: float, decimals: int = 2) -> str:
    """Format a €/MWh value, e.g. 12.3 -> "€12.30"."""
    return f"€{value:.{decimals}f}"


def card_title(page: int) -> str:
    return PAGE_TITLES.get(page, "Data View")


def current_line(point: PricePoint) -> str:
    return f"Current: {format_price(point.price_per_unit)}/MWh"


def range_line(series: PriceSeries) -> Optional[str]:
    """
    Format the min-max range of a series.

    Returns:
        "Range: €min - €max", or None for an empty series
    """
    bounds = series.price_range
    if bounds is None:
        return None
    low, high = bounds
    return f"Range: {format_price(low)} - {format_price(high)}"


def card_footer(page: int, series: PriceSeries) -> str:
    if page == 0:
        return f"Showing {len(series)} hourly prices from spot-hinta.fi API"
    if page == 1:
        return "Historical price data"
    return "Forecast data"


def _stats_lines(page: int, series: PriceSeries, now: Optional[datetime]) -> list:
    lines = []
    # History card shows only the range
    if page != 1:
        point = series.current_point(now)
        if point is not None:
            lines.append(current_line(point))
            lines.append(point.display_time)
    rng = range_line(series)
    if rng is not None:
        lines.append(rng)
    return lines


def format_card(page: int, result: FetchResult, now: Optional[datetime] = None) -> DashboardCard:
    """
    Build the card text for one page.

    Args:
        page: Page index (0 today, 1 history, 2 forecast)
        result: Fetch result backing the page
        now: Reference time for the current-hour lookup

    Returns:
        DashboardCard for the loading, error or data state
    """
    if result.is_pending:
        return DashboardCard(page=page, status=result.status, title=None, lines=(LOADING_TEXT,))

    if result.is_failed:
        return DashboardCard(page=page, status=result.status, title=ERROR_TITLE, lines=(result.error,))

    series = result.series
    return DashboardCard(
        page=page,
        status=result.status,
        title=card_title(page),
        lines=tuple(_stats_lines(page, series, now)),
        footer=card_footer(page, series),
        series=series.chronological(),
    )
