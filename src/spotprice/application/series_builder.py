# src/spotprice/application/series_builder.py
"""
Series Builder - Payload Parsing and Normalization

This module turns the raw spot-hinta.fi payload into a PriceSeries.
The whole build is aborted on the first malformed element; a timestamp
that cannot be parsed is not an error and leaves the point with the
"unknown time" sentinel values.

Files that USE this module:
- spotprice.application.price_request (PriceRequest parses fetched payloads)
- tests.test_series_builder (unit tests)

Files that this module USES:
- spotprice.domain.models (PricePoint, PriceSeries, unit conversion)
- spotprice.domain.errors (validation error taxonomy)
"""
from __future__ import annotations

import json
import logging
import math
from typing import Any, Union

from spotprice.domain.errors import (
    InvalidPriceError,
    MalformedElementError,
    MalformedPayloadError,
)
from spotprice.domain.models import PricePoint, PriceSeries

log = logging.getLogger(__name__)

DATETIME_FIELD = "DateTime"
PRICE_FIELD = "PriceWithTax"


def _to_price(value: Any) -> float:
    """
    Convert a source price to float.

    Accepts JSON numbers and strings holding a number. Booleans and null
    are rejected.

    Raises:
        ValueError: If the value is not numeric, not finite or too large for a float
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(f"expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        try:
            price = float(value)
        except OverflowError as e:
            raise ValueError(f"price is out of range: {e}") from e
    elif isinstance(value, str):
        price = float(value.strip())
    else:
        raise ValueError(f"expected a number, got {type(value).__name__}")
    if not math.isfinite(price):
        raise ValueError(f"price is not finite: {value!r}")
    return price


def parse_element(index: int, item: Any) -> PricePoint:
    """
    Parse one array element into a PricePoint.

    Args:
        index: Position of the element in the payload (for error reporting)
        item: Decoded JSON element

    Returns:
        PricePoint with the price converted to €/MWh

    Raises:
        MalformedElementError: If the element is not an object, or a field is missing or mistyped
    """
    if not isinstance(item, dict):
        raise MalformedElementError(index, None, f"expected an object, got {type(item).__name__}")

    if DATETIME_FIELD not in item:
        raise MalformedElementError(index, DATETIME_FIELD, f"missing '{DATETIME_FIELD}'")
    datetime_text = item[DATETIME_FIELD]
    if not isinstance(datetime_text, str):
        raise MalformedElementError(
            index, DATETIME_FIELD, f"'{DATETIME_FIELD}' must be a string"
        )

    if PRICE_FIELD not in item:
        raise MalformedElementError(index, PRICE_FIELD, f"missing '{PRICE_FIELD}'")
    try:
        cents_per_kwh = _to_price(item[PRICE_FIELD])
    except ValueError as e:
        raise MalformedElementError(index, PRICE_FIELD, f"invalid '{PRICE_FIELD}': {e}") from e

    try:
        point = PricePoint.from_cents_per_kwh(datetime_text, cents_per_kwh)
    except InvalidPriceError as e:
        raise MalformedElementError(index, PRICE_FIELD, str(e)) from e
    if not point.has_known_time:
        log.warning("Element %d has unparseable %s %r, keeping it with unknown time",
                    index, DATETIME_FIELD, datetime_text)
    return point


def build_series(raw: Union[str, bytes]) -> PriceSeries:
    """
    Parse a raw payload into a PriceSeries.

    Points keep the payload order; call PriceSeries.chronological()
    before anything that needs time order.

    Args:
        raw: JSON text (or bytes) expected to hold an array of price objects

    Returns:
        PriceSeries with one point per element (empty for an empty array)

    Raises:
        MalformedPayloadError: If the payload is not valid JSON or not an array
        MalformedElementError: On the first element that cannot be parsed
    """
    try:
        data = json.loads(raw)
    except (ValueError, TypeError) as e:
        log.error("Price payload is not valid JSON: %s", e)
        raise MalformedPayloadError(f"Payload is not valid JSON: {e}") from e
    except RecursionError as e:
        log.error("Price payload is nested too deeply to decode")
        raise MalformedPayloadError("Payload is nested too deeply to decode") from e

    if not isinstance(data, list):
        log.error("Price payload has unexpected top-level type: %r", type(data))
        raise MalformedPayloadError(
            f"Expected a JSON array, got {type(data).__name__}"
        )

    points = [parse_element(i, item) for i, item in enumerate(data)]
    log.debug("Built price series with %d points", len(points))
    return PriceSeries(tuple(points))
