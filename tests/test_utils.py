"""Numeric helper tests."""

import pytest

from timeduration._utils import (
    compact_number,
    decimal_places,
    number_to_string,
    round_half_up,
    zero_pad,
)


class TestDecimalPlaces:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (3661.8, 1),
            (90.25, 2),
            (60.0, 1),
            (60, 1),
            (1e20, 0),
            (0.125, 3),
            (1.000000000000001, 15),
        ],
    )
    def test_places(self, value, expected):
        assert decimal_places(value) == expected


class TestRoundHalfUp:
    def test_float_noise(self):
        assert round_half_up(1.7999999999999545, 1) == 1.8

    def test_ties_away_from_zero(self):
        assert round_half_up(2.5) == 3.0
        assert round_half_up(0.125, 2) == 0.13

    def test_already_short_enough(self):
        assert round_half_up(1.5, 3) == 1.5

    def test_large_values_untouched(self):
        assert round_half_up(1e20, 2) == 1e20

    def test_negative_places(self):
        assert round_half_up(1250.0, -2) == 1300.0


class TestCompactNumber:
    def test_whole_float_becomes_int(self):
        assert compact_number(6150.0) == 6150
        assert isinstance(compact_number(6150.0), int)

    def test_fraction_kept(self):
        assert compact_number(4.5) == 4.5

    def test_int_unchanged(self):
        assert compact_number(3) == 3


class TestNumberToString:
    def test_whole(self):
        assert number_to_string(30.0) == "30"

    def test_fraction(self):
        assert number_to_string(30.5) == "30.5"


class TestZeroPad:
    def test_pads_integer_part(self):
        assert zero_pad("4.5", 2) == "04.5"

    def test_pads_integer(self):
        assert zero_pad("7", 2) == "07"

    def test_leaves_wide_values(self):
        assert zero_pad("120", 2) == "120"
