"""Arithmetic, algebra and elementary scientific primitives.

Every function validates its domain and raises a
:class:`~calcdeck.errors.CalculationError` subclass instead of returning
NaN or infinity.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Dict

import numpy as np

from .config import DOUBLE_FACTORIAL_LIMIT, FACTORIAL_LIMIT
from .errors import DomainError, InvalidInput, OutOfRange
from .parsing import require_finite_result


class ArithmeticOperation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class AngleUnit(Enum):
    DEGREES = "degrees"
    RADIANS = "radians"


def apply_operation(operation: ArithmeticOperation, a: float, b: float) -> float:
    """Apply one of the four basic operations.

    Raises:
        DomainError: On division by zero.
        OutOfRange: If the result overflows.
    """
    if operation is ArithmeticOperation.ADD:
        result = a + b
    elif operation is ArithmeticOperation.SUBTRACT:
        result = a - b
    elif operation is ArithmeticOperation.MULTIPLY:
        result = a * b
    else:
        if b == 0:
            raise DomainError("Division by zero")
        result = a / b
    return require_finite_result(result)


def round_to_places(value: float, places: int) -> float:
    """Round half away from zero to ``places`` decimal places.

    Python's built-in :func:`round` uses banker's rounding; calculator
    displays expect ``2.5 -> 3``.
    """
    factor = power(10.0, places)
    scaled = abs(value) * factor
    if factor == 0 or not scaled < 2.0**52:
        # No fractional digits left at this scale.
        return value
    return math.copysign(math.floor(scaled + 0.5) / factor, value)


def clamp(value: float, lower: float, upper: float) -> float:
    if lower > upper:
        raise InvalidInput(f"lower bound {lower} exceeds upper bound {upper}")
    return min(max(value, lower), upper)


def percentage_of(value: float, percent: float) -> float:
    """Return ``percent`` % of ``value``."""
    return require_finite_result(value * percent / 100.0)


def percentage(part: float, total: float) -> float:
    """Return ``part`` as a percentage of ``total``."""
    if total == 0:
        raise DomainError("Total cannot be zero when computing a percentage")
    return require_finite_result(part / total * 100.0)


def interpolate(start: float, end: float, fraction: float) -> float:
    """Linear interpolation; ``fraction`` 0 gives ``start`` and 1 gives ``end``."""
    return require_finite_result(start + (end - start) * fraction)


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def radians_to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def power(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent``.

    Raises:
        DomainError: If the result is not real (negative base with a
            fractional exponent) or is a division by zero.
        OutOfRange: If the result overflows.
    """
    try:
        result = math.pow(base, exponent)
    except OverflowError:
        raise OutOfRange(f"{base} ^ {exponent} is too large to represent")
    except ValueError:
        raise DomainError(f"{base} ^ {exponent} is not a real number")
    return require_finite_result(result)


def nth_root(value: float, degree: float) -> float:
    """Return the real ``degree``-th root of ``value``.

    Odd integer roots of negative numbers are real and returned with their
    sign; even roots of negative numbers are undefined.

    Raises:
        DomainError: For a zero degree, an even root of a negative number,
            or a fractional root of a negative number.
    """
    if degree == 0:
        raise DomainError("Root degree cannot be zero")
    if value < 0:
        if not float(degree).is_integer():
            raise DomainError("Cannot take a fractional root of a negative number")
        if int(degree) % 2 == 0:
            raise DomainError("Cannot calculate even root of a negative number")
        return -power(-value, 1.0 / degree)
    if value == 0 and degree < 0:
        raise DomainError("Division by zero")
    return power(value, 1.0 / degree)


def square(value: float) -> float:
    return require_finite_result(value * value)


def square_root(value: float) -> float:
    if value < 0:
        raise DomainError(f"Cannot calculate square root of a negative number, got {value}")
    return math.sqrt(value)


def cube(value: float) -> float:
    return require_finite_result(value * value * value)


def cube_root(value: float) -> float:
    return float(np.cbrt(value))


def exponential(base: float, exponent: float) -> Dict[str, float]:
    """Return ``base ** exponent`` alongside ``base ** (1 / exponent)``."""
    if exponent == 0:
        raise DomainError("Exponent cannot be zero when computing the matching root")
    return {"power": power(base, exponent), "root": power(base, 1.0 / exponent)}


def logarithms(value: float) -> Dict[str, float]:
    """Return natural and base-10 logarithms of a positive number."""
    if value <= 0:
        raise DomainError(f"Logarithm is only defined for positive numbers, got {value}")
    return {"natural_log": math.log(value), "log10": math.log10(value)}


def log_base(value: float, base: float) -> float:
    if value <= 0:
        raise DomainError(f"Logarithm is only defined for positive numbers, got {value}")
    if base <= 0 or base == 1:
        raise DomainError(f"Logarithm base must be positive and not 1, got {base}")
    return math.log(value) / math.log(base)


def trigonometry(angle: float, unit: AngleUnit = AngleUnit.DEGREES) -> Dict[str, float]:
    """Return sine, cosine and tangent of an angle.

    Tangent is reported as ``None`` where cosine vanishes (within 1e-12), i.e.
    at odd multiples of 90 degrees.
    """
    radians = degrees_to_radians(angle) if unit is AngleUnit.DEGREES else angle
    sin, cos = math.sin(radians), math.cos(radians)
    return {"sin": sin, "cos": cos, "tan": None if abs(cos) < 1e-12 else sin / cos}


def factorial(n: int) -> int:
    """Return ``n!`` computed iteratively.

    Raises:
        DomainError: If ``n`` is negative or not a whole number.
        OutOfRange: If ``n`` exceeds 170, whose factorial no longer fits in
            a double.
    """
    if isinstance(n, float):
        if not n.is_integer():
            raise DomainError(f"Factorial requires a whole number, got {n}")
        n = int(n)
    if n < 0:
        raise DomainError("Cannot calculate factorial of negative numbers")
    if n > FACTORIAL_LIMIT:
        raise OutOfRange(f"Number too large, maximum supported value is {FACTORIAL_LIMIT}")
    result = 1
    for i in range(2, n + 1):
        result *= i
    return result


def double_factorial(n: int) -> int:
    """Return ``n!!``, the product of every other integer down from ``n``."""
    if n < 0:
        raise DomainError("Cannot calculate double factorial of negative numbers")
    if n > DOUBLE_FACTORIAL_LIMIT:
        raise OutOfRange(
            f"Number too large, maximum supported value is {DOUBLE_FACTORIAL_LIMIT}"
        )
    result = 1
    for i in range(n, 1, -2):
        result *= i
    return result


def _check_selection(n: int, r: int) -> None:
    if n < 0 or r < 0:
        raise DomainError("Values must be non-negative")
    if n > FACTORIAL_LIMIT:
        raise OutOfRange(f"n is too large, maximum supported value is {FACTORIAL_LIMIT}")


def combinations(n: int, r: int) -> int:
    """Return nCr; zero when ``r > n``."""
    _check_selection(n, r)
    if r > n:
        return 0
    return factorial(n) // (factorial(r) * factorial(n - r))


def permutations(n: int, r: int) -> int:
    """Return nPr; zero when ``r > n``."""
    _check_selection(n, r)
    if r > n:
        return 0
    return factorial(n) // factorial(n - r)
