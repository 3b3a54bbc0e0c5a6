# tests/test_models.py
"""
Domain Model Tests - Unit Tests for Price Points, Series and Results

This module contains unit tests for the domain models: timestamp parsing
and sentinel values of PricePoint, ordering and statistics of
PriceSeries, and the tag/payload rules of FetchResult.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- spotprice.domain.models (models under test)
- spotprice.domain.errors (InvalidPriceError)
- pytest (testing framework)
"""
import math

import pytest  # Testing framework for writing and running tests

from datetime import datetime, timedelta, timezone  # Reference times for current-hour lookups

from spotprice.domain.errors import InvalidPriceError
from spotprice.domain.models import (
    FetchResult,
    FetchStatus,
    PricePoint,
    PriceSeries,
    parse_offset_datetime,
)

HELSINKI_WINTER = timezone(timedelta(hours=2))


def _point(text: str, price: float) -> PricePoint:
    return PricePoint(datetime_text=text, price_per_unit=price)


class TestParseOffsetDatetime:
    def test_parses_explicit_offset(self):
        parsed = parse_offset_datetime("2023-10-27T00:00:00+03:00")
        assert parsed is not None
        assert parsed.utcoffset() == timedelta(hours=3)

    def test_trailing_z_is_utc(self):
        parsed = parse_offset_datetime("2024-01-01T12:00:00Z")
        assert parsed == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    def test_missing_offset_is_rejected(self):
        assert parse_offset_datetime("2024-01-01T12:00:00") is None

    def test_garbage_is_rejected(self):
        assert parse_offset_datetime("not a date") is None
        assert parse_offset_datetime("") is None


class TestPricePoint:
    def test_hour_and_day_of_year(self):
        point = _point("2023-10-27T00:00:00+03:00", 100.0)
        assert point.hour == 0
        assert point.day_of_year == 300  # 2023 is not a leap year

    def test_leap_year_day_of_year(self):
        point = _point("2024-12-31T23:00:00+02:00", 1.0)
        assert point.day_of_year == 366
        assert point.hour == 23

    def test_hour_uses_timestamp_offset(self):
        point = _point("2024-01-01T12:00:00+02:00", 1.0)
        assert point.hour == 12

    def test_unparseable_timestamp_uses_sentinels(self):
        point = _point("yesterday-ish", 42.0)
        assert not point.has_known_time
        assert point.timestamp is None
        assert point.hour == 0
        assert point.day_of_year == -1
        assert point.display_time == ""
        assert point.price_per_unit == 42.0

    def test_display_time(self):
        point = _point("2024-01-05T14:00:00+02:00", 1.0)
        assert point.display_time == "Friday, 14:00"

    def test_from_cents_per_kwh_converts_to_eur_per_mwh(self):
        point = PricePoint.from_cents_per_kwh("2024-01-01T12:00:00+02:00", 5.0)
        assert point.price_per_unit == 50.0

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_price_rejected(self, value):
        with pytest.raises(InvalidPriceError):
            _point("2024-01-01T12:00:00+02:00", value)

    def test_points_are_immutable(self):
        point = _point("2024-01-01T12:00:00+02:00", 1.0)
        with pytest.raises(AttributeError):
            point.price_per_unit = 2.0


class TestPriceSeries:
    def test_empty_series_statistics_are_absent(self):
        series = PriceSeries()
        assert series.is_empty
        assert len(series) == 0
        assert series.min_price is None
        assert series.max_price is None
        assert series.price_range is None
        assert series.current_point(datetime.now(timezone.utc)) is None

    def test_min_and_max_bound_every_price(self):
        series = PriceSeries((
            _point("2024-01-01T02:00:00+02:00", 35.5),
            _point("2024-01-01T00:00:00+02:00", -2.0),
            _point("2024-01-01T01:00:00+02:00", 120.25),
        ))
        assert series.min_price == -2.0
        assert series.max_price == 120.25
        assert series.price_range == (-2.0, 120.25)
        for price in series.prices:
            assert series.min_price <= price <= series.max_price

    def test_keeps_fetch_order(self):
        texts = ["2024-01-01T02:00:00+02:00", "2024-01-01T00:00:00+02:00"]
        series = PriceSeries(tuple(_point(t, 1.0) for t in texts))
        assert [p.datetime_text for p in series] == texts

    def test_chronological_sorts_by_instant(self):
        series = PriceSeries((
            _point("2024-01-01T03:00:00+02:00", 3.0),
            _point("2024-01-01T00:00:00+00:00", 2.0),  # 02:00 at +02:00
            _point("2024-01-01T01:00:00+02:00", 1.0),
        ))
        ordered = series.chronological()
        assert ordered.prices == (1.0, 2.0, 3.0)
        # original series is untouched
        assert series.prices == (3.0, 2.0, 1.0)

    def test_chronological_is_idempotent(self):
        series = PriceSeries((
            _point("2024-01-02T00:00:00+02:00", 4.0),
            _point("broken", 9.0),
            _point("2024-01-01T00:00:00+02:00", 1.0),
            _point("also broken", 8.0),
        ))
        once = series.chronological()
        twice = once.chronological()
        assert once == twice

    def test_unknown_timestamps_sort_last_in_original_order(self):
        series = PriceSeries((
            _point("broken", 9.0),
            _point("2024-01-02T00:00:00+02:00", 4.0),
            _point("also broken", 8.0),
            _point("2024-01-01T00:00:00+02:00", 1.0),
        ))
        assert series.chronological().prices == (1.0, 4.0, 9.0, 8.0)

    def test_current_point_matches_hour_and_day(self):
        series = PriceSeries((
            _point("2024-01-02T12:00:00+02:00", 70.0),
            _point("2024-01-01T12:00:00+02:00", 50.0),
            _point("2024-01-01T13:00:00+02:00", 60.0),
        ))
        now = datetime(2024, 1, 1, 12, 34, tzinfo=HELSINKI_WINTER)
        current = series.current_point(now)
        assert current is not None
        assert current.price_per_unit == 50.0

    def test_current_point_absent_when_no_match(self):
        series = PriceSeries((_point("2024-01-01T12:00:00+02:00", 50.0),))
        now = datetime(2024, 1, 1, 15, 0, tzinfo=HELSINKI_WINTER)
        assert series.current_point(now) is None

    def test_unknown_time_never_matches_current(self):
        series = PriceSeries((_point("broken", 50.0),))
        now = datetime(2024, 1, 1, 0, 0, tzinfo=HELSINKI_WINTER)
        assert series.current_point(now) is None

    def test_points_are_copied_into_a_tuple(self):
        points = [_point("2024-01-01T12:00:00+02:00", 50.0)]
        series = PriceSeries(points)
        points.append(_point("2024-01-01T13:00:00+02:00", 60.0))
        assert len(series) == 1
        assert isinstance(series.points, tuple)


class TestFetchResult:
    def test_pending(self):
        result = FetchResult.pending()
        assert result.status is FetchStatus.PENDING
        assert result.is_pending
        assert not result.is_terminal

    def test_ready_carries_series(self):
        series = PriceSeries()
        result = FetchResult.ready(series)
        assert result.is_ready
        assert result.is_terminal
        assert result.series is series
        assert result.error is None

    def test_failed_carries_message(self):
        result = FetchResult.failed("Failed to load data: HTTP Error: 503")
        assert result.is_failed
        assert result.is_terminal
        assert result.series is None
        assert "503" in result.error

    def test_payload_must_match_tag(self):
        with pytest.raises(ValueError):
            FetchResult(FetchStatus.READY)
        with pytest.raises(ValueError):
            FetchResult(FetchStatus.FAILED, series=PriceSeries(), error="x")
        with pytest.raises(ValueError):
            FetchResult(FetchStatus.PENDING, error="x")
