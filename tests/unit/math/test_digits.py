"""Tests for digit-level helpers over unbounded integers."""

import pytest

from bigdec.math.digits import (
    align_scales,
    digit_count,
    digits_to_int,
    int_to_digits,
    is_power_of_ten,
    long_division,
    trim_trailing_zeros,
    truncate_scale,
)


class TestConversion:
    """Tests for digits_to_int and int_to_digits."""

    def test_empty_string_is_zero(self):
        """The empty digit string parses to 0."""
        assert digits_to_int("") == 0

    def test_leading_zeros(self):
        """Leading zeros are ignored."""
        assert digits_to_int("0042") == 42

    def test_parse_beyond_int_str_limit(self):
        """Digit strings longer than CPython's conversion limit still parse."""
        assert digits_to_int("1" + "0" * 4999) == 10**4999

    def test_render_zero(self):
        assert int_to_digits(0) == "0"

    def test_render_beyond_int_str_limit(self):
        """Huge values render without hitting the conversion limit."""
        assert int_to_digits(10**5000) == "1" + "0" * 5000

    def test_render_chunk_padding(self):
        """Inner chunks keep their leading zeros."""
        value = 7 * 10**2000 + 3
        assert int_to_digits(value) == "7" + "0" * 1999 + "3"

    def test_render_negative_raises(self):
        with pytest.raises(ValueError):
            int_to_digits(-1)


class TestDigitCount:
    """Tests for digit_count and is_power_of_ten."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, 0), (7, 1), (9, 1), (10, 2), (99, 2), (100, 3), (1234, 4)],
    )
    def test_small_values(self, value, expected):
        assert digit_count(value) == expected

    def test_power_boundaries(self):
        """Counts are exact on both sides of a power of ten."""
        assert digit_count(10**50) == 51
        assert digit_count(10**50 - 1) == 50
        assert digit_count(10**5000) == 5001

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            digit_count(-5)

    @pytest.mark.parametrize("value", [1, 10, 1000, 10**40])
    def test_powers_of_ten(self, value):
        assert is_power_of_ten(value)

    @pytest.mark.parametrize("value", [0, 2, 20, 101, 999, -10])
    def test_not_powers_of_ten(self, value):
        assert not is_power_of_ten(value)


class TestScaleManipulation:
    """Tests for align_scales, trim_trailing_zeros and truncate_scale."""

    def test_align_scales_up_smaller_operand(self):
        """12.5 and 0.125 align to scale 3."""
        assert align_scales(125, 1, 125, 3) == (12500, 125, 3)
        assert align_scales(125, 3, 125, 1) == (125, 12500, 3)

    def test_align_equal_scales(self):
        assert align_scales(5, 2, 7, 2) == (5, 7, 2)

    def test_trim_trailing_zeros(self):
        """12.340 -> 12.34"""
        assert trim_trailing_zeros(12340, 3) == (1234, 2)

    def test_trim_stops_at_scale_zero(self):
        """Integer zeros are significant."""
        assert trim_trailing_zeros(1000, 2) == (10, 0)
        assert trim_trailing_zeros(100, 0) == (100, 0)

    def test_trim_zero(self):
        assert trim_trailing_zeros(0, 5) == (0, 0)

    def test_truncate_drops_low_digits(self):
        """1.23456 -> 1.234 (never rounded)"""
        assert truncate_scale(123456, 5, 3) == (1234, 3)
        assert truncate_scale(199999, 5, 1) == (19, 1)

    def test_truncate_within_ceiling_is_noop(self):
        assert truncate_scale(123, 2, 20) == (123, 2)


class TestLongDivision:
    """Tests for digit-by-digit long division."""

    def test_terminating(self):
        """10 / 4 = 2.5 stops after two digits."""
        assert long_division(10, 4, 20) == (25, 2)

    def test_non_terminating_hits_budget(self):
        """10 / 3 = 3.333... produces exactly max_digits digits."""
        assert long_division(10, 3, 5) == (33333, 5)

    def test_repeating_remainder(self):
        """100 / 15 = 6.666..."""
        assert long_division(100, 15, 3) == (666, 3)

    def test_exact_single_digit(self):
        assert long_division(10, 5, 20) == (2, 1)

    def test_zero_divisor_raises(self):
        with pytest.raises(ZeroDivisionError):
            long_division(10, 0, 5)
