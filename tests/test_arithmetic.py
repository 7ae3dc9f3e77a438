"""Tests for arithmetic and scientific primitives."""

import math

import pytest

from calcdeck.arithmetic import (
    AngleUnit,
    ArithmeticOperation,
    apply_operation,
    clamp,
    combinations,
    cube_root,
    double_factorial,
    exponential,
    factorial,
    interpolate,
    log_base,
    logarithms,
    nth_root,
    percentage,
    percentage_of,
    permutations,
    power,
    round_to_places,
    square_root,
    trigonometry,
)
from calcdeck.errors import DomainError, InvalidInput, OutOfRange


def test_basic_operations():
    assert apply_operation(ArithmeticOperation.ADD, 2, 3) == 5
    assert apply_operation(ArithmeticOperation.SUBTRACT, 2, 3) == -1
    assert apply_operation(ArithmeticOperation.MULTIPLY, 2, 3) == 6
    assert apply_operation(ArithmeticOperation.DIVIDE, 3, 2) == 1.5


def test_division_by_zero_is_domain_error():
    with pytest.raises(DomainError, match="Division by zero"):
        apply_operation(ArithmeticOperation.DIVIDE, 1, 0)


def test_domain_error_is_also_invalid_input():
    with pytest.raises(InvalidInput):
        apply_operation(ArithmeticOperation.DIVIDE, 1, 0)


def test_overflow_is_out_of_range():
    with pytest.raises(OutOfRange):
        apply_operation(ArithmeticOperation.MULTIPLY, 1e308, 10)
    with pytest.raises(OutOfRange):
        power(10, 400)


def test_round_half_away_from_zero():
    assert round_to_places(2.5, 0) == 3
    assert round_to_places(-2.5, 0) == -3
    assert round_to_places(1.005, 1) == 1.0


def test_round_keeps_values_without_fractional_digits():
    assert round_to_places(1e300, 10) == 1e300
    assert round_to_places(123.456, -400) == 123.456


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-3, 0, 10) == 0
    assert clamp(42, 0, 10) == 10
    assert clamp(7, 7, 7) == 7


def test_clamp_rejects_inverted_bounds():
    with pytest.raises(InvalidInput, match="exceeds upper bound"):
        clamp(1, 10, 0)


def test_interpolate():
    assert interpolate(10, 20, 0) == 10
    assert interpolate(10, 20, 1) == 20
    assert math.isclose(interpolate(10, 20, 0.25), 12.5)
    assert math.isclose(interpolate(0, -4, 0.5), -2.0)


def test_interpolate_overflow():
    with pytest.raises(OutOfRange):
        interpolate(-1e308, 1e308, 1.0)


def test_percentages():
    assert percentage_of(200, 15) == 30
    assert percentage(25, 200) == 12.5
    with pytest.raises(DomainError):
        percentage(1, 0)


class TestRoots:
    """Square, cube and nth roots."""

    def test_square_root(self):
        assert square_root(16) == 4
        with pytest.raises(DomainError, match="negative"):
            square_root(-4)

    def test_cube_root_of_negative_is_real(self):
        assert math.isclose(cube_root(-27), -3.0)

    def test_odd_nth_root_of_negative(self):
        assert math.isclose(nth_root(-8, 3), -2.0)

    def test_even_nth_root_of_negative(self):
        with pytest.raises(DomainError, match="even root"):
            nth_root(-16, 4)

    def test_zero_degree(self):
        with pytest.raises(DomainError):
            nth_root(9, 0)

    def test_negative_base_fractional_power(self):
        with pytest.raises(DomainError, match="not a real number"):
            power(-8, 0.5)


def test_exponential_pairs_power_and_root():
    out = exponential(8, 3)
    assert math.isclose(out["power"], 512)
    assert math.isclose(out["root"], 2.0)


def test_logarithms():
    out = logarithms(100)
    assert math.isclose(out["log10"], 2.0)
    assert math.isclose(out["natural_log"], math.log(100))
    assert math.isclose(log_base(8, 2), 3.0)
    with pytest.raises(DomainError):
        logarithms(0)
    with pytest.raises(DomainError):
        log_base(8, 1)


def test_trigonometry_tangent_undefined_at_90_degrees():
    out = trigonometry(90, AngleUnit.DEGREES)
    assert math.isclose(out["sin"], 1.0)
    assert out["tan"] is None
    rad = trigonometry(math.pi / 4, AngleUnit.RADIANS)
    assert math.isclose(rad["tan"], 1.0)


class TestFactorials:
    def test_small_values(self):
        assert factorial(0) == 1
        assert factorial(5) == 120
        assert double_factorial(7) == 105
        assert double_factorial(8) == 384

    def test_exact_integer_at_limit(self):
        assert factorial(170) == math.factorial(170)

    def test_limits(self):
        with pytest.raises(OutOfRange, match="170"):
            factorial(171)
        with pytest.raises(DomainError):
            factorial(-1)
        with pytest.raises(DomainError):
            factorial(2.5)


class TestCombinatorics:
    def test_values(self):
        assert combinations(5, 2) == 10
        assert permutations(5, 2) == 20

    def test_r_greater_than_n_is_zero(self):
        assert combinations(3, 5) == 0
        assert permutations(3, 5) == 0

    def test_symmetry(self):
        for n in range(0, 12):
            for r in range(0, n + 1):
                assert combinations(n, r) == combinations(n, n - r)
                assert permutations(n, r) == combinations(n, r) * factorial(r)

    def test_negative(self):
        with pytest.raises(DomainError):
            combinations(-1, 2)
