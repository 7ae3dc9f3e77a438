"""Tests for 3-D vectors and complex numbers."""

import math

import pytest

from calcdeck.complex_numbers import ComplexNumber, complex_summary
from calcdeck.errors import DimensionMismatch, DomainError, InvalidInput, OutOfRange
from calcdeck.linalg import Vector3, VectorOperation, apply_vector_operation


class TestVector3:
    def test_from_text(self):
        v = Vector3.from_sequence("1, 2, 3", "a")
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)

    def test_wrong_length(self):
        with pytest.raises(DimensionMismatch, match="exactly 3 components"):
            Vector3.from_sequence([1, 2], "a")

    def test_cross_product_is_orthogonal(self):
        a, b = Vector3(1, 2, 3), Vector3(4, 5, 6)
        c = a.cross(b)
        assert (c.x, c.y, c.z) == (-3.0, 6.0, -3.0)
        assert c.dot(a) == 0
        assert c.dot(b) == 0

    def test_operations(self):
        a, b = Vector3(1, 0, 0), Vector3(0, 1, 0)
        assert apply_vector_operation(VectorOperation.DOT, a, b) == 0
        assert apply_vector_operation(VectorOperation.ADD, a, b) == Vector3(1, 1, 0)
        assert apply_vector_operation(VectorOperation.SUBTRACT, a, b) == Vector3(1, -1, 0)
        assert apply_vector_operation(VectorOperation.CROSS, a, b) == Vector3(0, 0, 1)
        assert apply_vector_operation(VectorOperation.SCALE, a, scalar="2.5") == Vector3(2.5, 0, 0)

    def test_magnitude_and_text(self):
        v = Vector3(3, 4, 0)
        assert v.magnitude == 5.0
        assert str(v) == "(3, 4, 0)"

    def test_missing_operands(self):
        with pytest.raises(InvalidInput, match="Second vector"):
            apply_vector_operation(VectorOperation.DOT, Vector3(1, 1, 1))
        with pytest.raises(InvalidInput, match="scalar"):
            apply_vector_operation(VectorOperation.SCALE, Vector3(1, 1, 1), scalar="")

    def test_overflow(self):
        big = Vector3(1e200, 1e200, 0)
        with pytest.raises(OutOfRange, match="Dot product"):
            big.dot(big)
        with pytest.raises(OutOfRange):
            big.cross(Vector3(0, 1e200, 1e200))
        with pytest.raises(OutOfRange):
            big.scale(1e200)
        with pytest.raises(OutOfRange, match="Magnitude"):
            Vector3(1.5e308, 1.5e308, 0).magnitude


class TestComplexNumber:
    def test_summary(self):
        a, b = ComplexNumber(3, 4), ComplexNumber(1, -2)
        out = complex_summary(a, b)
        assert out["sum"] == ComplexNumber(4, 2)
        assert out["difference"] == ComplexNumber(2, 6)
        assert out["product"] == ComplexNumber(11, -2)
        quotient = out["quotient"]
        assert math.isclose(quotient.real, -1.0)
        assert math.isclose(quotient.imag, 2.0)
        assert out["magnitude"] == 5.0
        assert math.isclose(out["phase"], math.atan2(4, 3))

    def test_division_by_zero(self):
        with pytest.raises(DomainError, match="Division by zero"):
            ComplexNumber(1, 1) / ComplexNumber(0, 0)

    def test_format(self):
        assert ComplexNumber(1.5, -2).format(2) == "1.50-2.00i"
        assert str(ComplexNumber(0, 1)) == "0.0000+1.0000i"

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidInput):
            ComplexNumber(float("nan"), 0)

    def test_overflow(self):
        big = ComplexNumber(1e200, 1e200)
        with pytest.raises(OutOfRange):
            big * big
        with pytest.raises(OutOfRange):
            ComplexNumber(1e308, 0) + ComplexNumber(1e308, 0)
        with pytest.raises(OutOfRange, match="Magnitude"):
            ComplexNumber(1.5e308, 1.5e308).magnitude
