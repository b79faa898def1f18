"""Input recognition tests for numeric and textual durations."""

import pytest

from timeduration._parser import (
    CLOCK_MATCHER,
    DAY_MATCHER,
    UNIT_MATCHERS,
    is_numeric,
    parse_total_seconds,
)


class TestIsNumeric:
    @pytest.mark.parametrize("value", [0, 3600, 3661.5, "3600", "3661.5", " 42 ", ".5", "1e3"])
    def test_numeric(self, value):
        assert is_numeric(value)

    @pytest.mark.parametrize("value", ["", "1h", "abc", "1.2.3", True, None, [1]])
    def test_not_numeric(self, value):
        assert not is_numeric(value)


class TestNumericInput:
    def test_int_is_seconds(self):
        assert parse_total_seconds(3600) == 3600.0

    def test_float_is_seconds(self):
        assert parse_total_seconds(3661.8) == 3661.8

    def test_numeric_string(self):
        assert parse_total_seconds("90.5") == 90.5

    def test_zero(self):
        assert parse_total_seconds(0) == 0.0

    @pytest.mark.parametrize("value", [-3600, "-3600", -0.1, -3661.5])
    def test_negative_rejected(self, value):
        assert parse_total_seconds(value) is None

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_rejected(self, value):
        assert parse_total_seconds(value) is None

    def test_int_too_large_for_float_rejected(self):
        assert parse_total_seconds(10**400) is None

    def test_large_float_accepted(self):
        assert parse_total_seconds(1e20) == 1e20

    def test_bool_rejected(self):
        assert parse_total_seconds(True) is None


class TestFragmentMatchers:
    def test_day_fragment(self):
        assert DAY_MATCHER.contribution("1.5d") == 1.5 * 86400

    def test_day_fragment_absent(self):
        assert DAY_MATCHER.contribution("10:29") is None

    def test_clock_without_seconds(self):
        assert CLOCK_MATCHER.contribution("01:30") == 5400.0

    def test_clock_with_seconds(self):
        assert CLOCK_MATCHER.contribution("1:5:30") == 3930.0

    def test_clock_needs_both_parts(self):
        assert CLOCK_MATCHER.contribution("30:") is None

    def test_unit_matchers_are_ordered(self):
        assert [m.name for m in UNIT_MATCHERS] == ["hour", "minute", "second"]

    def test_leading_numeric_prefix(self):
        assert DAY_MATCHER.contribution("1.2.3d") == pytest.approx(1.2 * 86400)


class TestTextInput:
    def test_units(self):
        assert parse_total_seconds("1h 30m 45s") == 5445.0

    def test_minutes_only(self):
        assert parse_total_seconds("30m") == 1800.0

    def test_without_spaces(self):
        assert parse_total_seconds("1h30m45s") == 5445.0

    def test_space_before_unit(self):
        assert parse_total_seconds("2 h") == 7200.0

    def test_case_insensitive(self):
        assert parse_total_seconds("1H 30M 45S") == 5445.0

    def test_decimal_hours(self):
        assert parse_total_seconds("1.5h") == 5400.0

    def test_decimal_seconds(self):
        assert parse_total_seconds("45.5s") == 45.5

    def test_clock_excludes_units(self):
        # "2h" is ignored once a clock fragment is present
        assert parse_total_seconds("2h 00:10") == 600.0

    def test_days_add_to_clock(self):
        assert parse_total_seconds("12:1:1 2d") == 2 * 86400 + 12 * 3600 + 61

    def test_days_add_to_units(self):
        assert parse_total_seconds("1d 2h") == 86400 + 7200

    def test_zero_fragment_is_valid(self):
        assert parse_total_seconds("0s") == 0.0

    def test_first_occurrence_wins(self):
        assert parse_total_seconds("1h 2h") == 3600.0

    @pytest.mark.parametrize(
        "value",
        ["", "   ", "invalid", "xyz123", "30:", "aa:bb", "30x", "h", "hms", "null", "true"],
    )
    def test_unrecognized(self, value):
        assert parse_total_seconds(value) is None

    @pytest.mark.parametrize(
        "value",
        ["١٢:٣٠", "٢h", "٣٠m", "٤d", "١٢"],
    )
    def test_non_ascii_digits_unrecognized(self, value):
        assert parse_total_seconds(value) is None

    def test_negative_sign_in_text_is_ignored(self):
        assert parse_total_seconds("-5h") == 18000.0


class TestUnsupportedTypes:
    @pytest.mark.parametrize("value", [None, [], {}, object()])
    def test_returns_none(self, value):
        assert parse_total_seconds(value) is None
