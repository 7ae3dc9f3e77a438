"""Tests for number bases, bitwise operations, hashing and complexity growth."""

import math

import pytest

from calcdeck.computing import (
    BitwiseOperation,
    Complexity,
    NumberSystem,
    bitwise,
    complexity_growth,
    convert_base,
    number_systems,
    string_hash,
)
from calcdeck.errors import InvalidInput, OutOfRange


class TestNumberSystems:
    def test_all_representations(self):
        out = number_systems("255")
        assert out == {"binary": "11111111", "octal": "377", "decimal": "255", "hexadecimal": "FF"}

    def test_from_hex(self):
        assert number_systems("ff", NumberSystem.HEXADECIMAL)["decimal"] == "255"

    def test_negative_and_zero(self):
        assert convert_base("-10", 10, 2) == "-1010"
        assert convert_base("0", 16, 2) == "0"

    def test_invalid_digit(self):
        with pytest.raises(InvalidInput, match="base 2"):
            number_systems("102", NumberSystem.BINARY)

    def test_base_out_of_range(self):
        with pytest.raises(InvalidInput, match="between 2 and 36"):
            convert_base("1", 10, 40)


class TestBitwise:
    """32-bit two's-complement semantics."""

    def test_and_or_xor(self):
        assert bitwise(BitwiseOperation.AND, 12, 10).decimal == 8
        assert bitwise(BitwiseOperation.OR, 12, 10).decimal == 14
        assert bitwise(BitwiseOperation.XOR, 12, 10).decimal == 6

    def test_not(self):
        out = bitwise(BitwiseOperation.NOT, 5)
        assert out.decimal == -6
        assert out.hexadecimal == "FFFFFFFA"
        assert out.binary == "1" * 29 + "010"

    def test_shift_left_wraps_to_sign_bit(self):
        out = bitwise(BitwiseOperation.SHIFT_LEFT, 1, shift=31)
        assert out.decimal == -(2**31)
        assert out.hexadecimal == "80000000"

    def test_logical_shift_right(self):
        out = bitwise(BitwiseOperation.SHIFT_RIGHT, -1, shift=28)
        assert out.decimal == 15
        assert out.binary == "0" * 28 + "1111"

    def test_binary_operation_needs_b(self):
        with pytest.raises(InvalidInput):
            bitwise(BitwiseOperation.AND, 1)


def test_string_hash():
    assert string_hash("a") == "61"
    assert string_hash("hello") == format(99162322, "x")
    # Overflowing hashes wrap to negative 32-bit values.
    assert string_hash("polygenelubricants") == "-" + format(2**31, "x")
    with pytest.raises(InvalidInput):
        string_hash("")


class TestComplexity:
    def test_growth_at_n_16(self):
        out = complexity_growth(16)
        assert out[Complexity.CONSTANT] == 1
        assert out[Complexity.LOGARITHMIC] == 4
        assert out[Complexity.LINEARITHMIC] == 64
        assert out[Complexity.QUADRATIC] == 256
        assert out[Complexity.EXPONENTIAL] == 65536

    def test_upper_bound_stays_finite(self):
        out = complexity_growth(1000, [Complexity.EXPONENTIAL])
        assert math.isfinite(out[Complexity.EXPONENTIAL])

    def test_limits(self):
        with pytest.raises(OutOfRange):
            complexity_growth(1001)
        with pytest.raises(InvalidInput):
            complexity_growth(0)
        with pytest.raises(InvalidInput, match="at least one"):
            complexity_growth(10, [])
