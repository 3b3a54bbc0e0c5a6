# src/spotprice/adapters/formatting/__init__.py
"""
Formatting Adapters - Dashboard Card Text

This package turns fetch results into the text shown on the cards.
"""

from spotprice.adapters.formatting.formatter import (
    DashboardCard,
    card_footer,
    card_title,
    current_line,
    format_card,
    format_price,
    range_line,
)

__all__ = [
    "DashboardCard",
    "card_footer",
    "card_title",
    "current_line",
    "format_card",
    "format_price",
    "range_line",
]
