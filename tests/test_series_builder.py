# tests/test_series_builder.py
"""
Series Builder Tests - Unit Tests for Payload Parsing

This module tests how raw spot-hinta.fi payloads become price series:
unit conversion, validation of the top-level shape and of each element,
the abort-on-first-error policy and the timestamp sentinel path.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- spotprice.application.series_builder (build_series, parse_element)
- spotprice.domain.errors (validation errors)
- pytest (testing framework)
"""
import json

import pytest  # Testing framework for writing and running tests

from spotprice.application.series_builder import build_series, parse_element
from spotprice.domain.errors import (
    MalformedElementError,
    MalformedPayloadError,
    PriceValidationError,
)


def _payload(*entries) -> str:
    return json.dumps(list(entries))


class TestBuildSeries:
    def test_single_entry_scenario(self):
        series = build_series('[{"DateTime":"2024-01-01T12:00:00+02:00","PriceWithTax":5.0}]')
        assert len(series) == 1
        point = series.points[0]
        assert point.price_per_unit == 50.0
        assert point.hour == 12
        assert point.day_of_year == 1

    def test_every_price_is_multiplied_by_ten(self):
        source = [1.5, 0.0, -0.25, 12.345, 3]
        raw = _payload(*[
            {"DateTime": f"2024-03-01T{h:02d}:00:00+02:00", "PriceWithTax": p}
            for h, p in enumerate(source)
        ])
        series = build_series(raw)
        assert len(series) == len(source)
        for point, cents in zip(series, source):
            assert point.price_per_unit == pytest.approx(cents * 10)

    def test_empty_array_gives_empty_series(self):
        series = build_series("[]")
        assert series.is_empty
        assert series.min_price is None
        assert series.max_price is None
        assert series.current_point() is None

    def test_accepts_bytes(self):
        series = build_series(b'[{"DateTime":"2024-01-01T00:00:00+02:00","PriceWithTax":2}]')
        assert series.prices == (20.0,)

    def test_keeps_payload_order(self):
        raw = _payload(
            {"DateTime": "2024-01-01T05:00:00+02:00", "PriceWithTax": 1.0},
            {"DateTime": "2024-01-01T01:00:00+02:00", "PriceWithTax": 2.0},
            {"DateTime": "2024-01-01T03:00:00+02:00", "PriceWithTax": 3.0},
        )
        series = build_series(raw)
        assert [p.hour for p in series] == [5, 1, 3]
        assert [p.hour for p in series.chronological()] == [1, 3, 5]

    def test_extra_fields_are_ignored(self):
        raw = _payload({"Rank": 1, "DateTime": "2024-01-01T00:00:00+02:00",
                        "PriceNoTax": 4.0, "PriceWithTax": 5.0})
        assert build_series(raw).prices == (50.0,)

    @pytest.mark.parametrize("raw", ['{"DateTime": "x"}', "42", '"text"', "null", "true"])
    def test_non_array_top_level_is_malformed_payload(self, raw):
        with pytest.raises(MalformedPayloadError, match="Expected a JSON array"):
            build_series(raw)

    @pytest.mark.parametrize("raw", ["", "[{", "<html>503</html>"])
    def test_invalid_json_is_malformed_payload(self, raw):
        with pytest.raises(MalformedPayloadError, match="not valid JSON"):
            build_series(raw)

    def test_first_bad_element_aborts_build(self):
        raw = _payload(
            {"DateTime": "2024-01-01T00:00:00+02:00", "PriceWithTax": 1.0},
            {"DateTime": "2024-01-01T01:00:00+02:00"},
            {"DateTime": "2024-01-01T02:00:00+02:00", "PriceWithTax": "oops"},
        )
        with pytest.raises(MalformedElementError) as exc_info:
            build_series(raw)
        assert exc_info.value.index == 1
        assert exc_info.value.field == "PriceWithTax"

    def test_unparseable_timestamp_keeps_point(self):
        raw = _payload(
            {"DateTime": "tomorrow noon", "PriceWithTax": 7.0},
            {"DateTime": "2024-01-01T01:00:00+02:00", "PriceWithTax": 1.0},
        )
        series = build_series(raw)
        assert len(series) == 2
        unknown = series.points[0]
        assert unknown.price_per_unit == 70.0
        assert unknown.hour == 0
        assert unknown.day_of_year == -1

    def test_deeply_nested_payload_is_malformed_payload(self):
        raw = "[" * 100000 + "]" * 100000
        with pytest.raises(MalformedPayloadError, match="nested too deeply"):
            build_series(raw)

    def test_validation_errors_share_base_class(self):
        with pytest.raises(PriceValidationError):
            build_series("{}")
        with pytest.raises(PriceValidationError):
            build_series("[1]")


class TestParseElement:
    def test_non_object_element(self):
        with pytest.raises(MalformedElementError, match="expected an object") as exc_info:
            parse_element(3, ["2024-01-01T00:00:00+02:00", 1.0])
        assert exc_info.value.index == 3
        assert exc_info.value.field is None

    def test_missing_datetime(self):
        with pytest.raises(MalformedElementError, match="missing 'DateTime'") as exc_info:
            parse_element(0, {"PriceWithTax": 1.0})
        assert exc_info.value.field == "DateTime"

    def test_datetime_must_be_string(self):
        with pytest.raises(MalformedElementError, match="must be a string"):
            parse_element(0, {"DateTime": 1704103200, "PriceWithTax": 1.0})

    def test_missing_price(self):
        with pytest.raises(MalformedElementError, match="missing 'PriceWithTax'"):
            parse_element(0, {"DateTime": "2024-01-01T00:00:00+02:00"})

    @pytest.mark.parametrize("price", [None, True, "abc", [1.0], {"v": 1}])
    def test_wrong_price_type(self, price):
        with pytest.raises(MalformedElementError, match="invalid 'PriceWithTax'"):
            parse_element(0, {"DateTime": "2024-01-01T00:00:00+02:00", "PriceWithTax": price})

    def test_numeric_string_price_is_accepted(self):
        point = parse_element(0, {"DateTime": "2024-01-01T00:00:00+02:00", "PriceWithTax": " 5.5 "})
        assert point.price_per_unit == 55.0

    def test_non_finite_price_is_rejected(self):
        # json.loads turns the NaN literal into float('nan')
        raw = '[{"DateTime": "2024-01-01T00:00:00+02:00", "PriceWithTax": NaN}]'
        with pytest.raises(MalformedElementError, match="not finite"):
            build_series(raw)

    def test_overflowing_conversion_is_rejected(self):
        with pytest.raises(MalformedElementError):
            parse_element(0, {"DateTime": "2024-01-01T00:00:00+02:00", "PriceWithTax": 1e308})

    def test_integer_too_large_for_float_is_rejected(self):
        raw = '[{"DateTime": "2024-01-01T00:00:00+02:00", "PriceWithTax": ' + "9" * 400 + '}]'
        with pytest.raises(MalformedElementError, match="out of range") as exc_info:
            build_series(raw)
        assert exc_info.value.field == "PriceWithTax"
