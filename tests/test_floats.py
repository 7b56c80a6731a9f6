"""
Unit tests for the S-BASIC packed float decoder.
"""

import pytest

from mztape.basic.floats import FLOAT_SIZE, decode_float, format_float


class TestDecodeFloat:
    """Decoding 5-byte packed floats."""

    def test_zero_exponent_is_zero(self):
        result = decode_float(bytes([0x00, 0x12, 0x34, 0x56, 0x78]))
        assert result.text == "0"
        assert result.value == 0.0
        assert result.size == FLOAT_SIZE

    def test_one(self):
        assert decode_float(bytes([0x81, 0x00, 0x00, 0x00, 0x00])).text == "1"

    @pytest.mark.parametrize("data,text", [
        ([0x80, 0x00, 0x00, 0x00, 0x00], "0.5"),
        ([0x7F, 0x00, 0x00, 0x00, 0x00], "0.25"),
        ([0x82, 0x40, 0x00, 0x00, 0x00], "3"),
        ([0x84, 0x20, 0x00, 0x00, 0x00], "10"),
        ([0x87, 0x48, 0x00, 0x00, 0x00], "100"),
    ])
    def test_values(self, data, text):
        assert decode_float(bytes(data)).text == text

    def test_negative_mantissa_negates_exponent(self):
        result = decode_float(bytes([0x82, 0x80, 0x00, 0x00, 0x00]))
        assert result.value == 0.125
        assert result.text == "0.125"

    def test_offset(self):
        data = bytes([0xAA, 0x81, 0x00, 0x00, 0x00, 0x00])
        assert decode_float(data, 1).text == "1"

    def test_largest_exponent(self):
        assert decode_float(bytes([0xFF, 0x00, 0x00, 0x00, 0x00])).text == "8.5070592e+37"

    def test_beyond_display_digits(self):
        assert decode_float(bytes([0xA0, 0x00, 0x00, 0x00, 0x00])).text == "2.1474836e+09"

    def test_truncated(self):
        result = decode_float(bytes([0x81, 0x00]))
        assert result.text == "?"
        assert result.value is None
        assert result.size == 2

    def test_truncated_at_end(self):
        result = decode_float(bytes([0x81]), 1)
        assert result.text == "?"
        assert result.size == 0


class TestFormatFloat:
    """Listing text for decoded values."""

    def test_integral(self):
        assert format_float(3.0) == "3"
        assert format_float(65536.0) == "65536"

    def test_fraction(self):
        assert format_float(0.1) == "0.1"

    def test_significant_digits(self):
        assert format_float(1 / 3) == "0.33333333"

    def test_eight_digit_integral(self):
        assert format_float(12345678.0) == "12345678"

    def test_large_values_use_exponent_form(self):
        assert format_float(2**127 * 0.5) == "8.5070592e+37"
        assert format_float(1e10) == "1e+10"
