# src/spotprice/__init__.py
"""
SpotPrice - Finnish Electricity Spot Price Pipeline

Fetches hourly spot prices from the spot-hinta.fi API, validates and
normalizes them to €/MWh, and derives the statistics shown on the
price dashboard (current hour, min/max, chronological series).
"""

__version__ = "1.0.0"
