"""Complex-number arithmetic on (real, imaginary) pairs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from .errors import DomainError, InvalidInput, OutOfRange
from .parsing import require_finite_result


@dataclass(frozen=True)
class ComplexNumber:
    real: float
    imag: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.real) and math.isfinite(self.imag)):
            raise InvalidInput("Please enter valid numbers for all fields")

    @classmethod
    def _result(cls, real: float, imag: float) -> "ComplexNumber":
        if not (math.isfinite(real) and math.isfinite(imag)):
            raise OutOfRange("Complex result is too large to represent")
        return cls(real, imag)

    def __add__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber._result(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber._result(self.real - other.real, self.imag - other.imag)

    def __mul__(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber._result(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def __truediv__(self, other: "ComplexNumber") -> "ComplexNumber":
        denominator = other.real * other.real + other.imag * other.imag
        if denominator == 0:
            raise DomainError("Division by zero")
        return ComplexNumber._result(
            (self.real * other.real + self.imag * other.imag) / denominator,
            (self.imag * other.real - self.real * other.imag) / denominator,
        )

    @property
    def magnitude(self) -> float:
        try:
            modulus = math.hypot(self.real, self.imag)
        except OverflowError:
            modulus = math.inf
        return require_finite_result(modulus, "Magnitude")

    @property
    def phase(self) -> float:
        """Argument in radians, in ``(-pi, pi]``."""
        return math.atan2(self.imag, self.real)

    def format(self, digits: int = 4) -> str:
        sign = "+" if self.imag >= 0 else "-"
        return f"{self.real:.{digits}f}{sign}{abs(self.imag):.{digits}f}i"

    def __str__(self) -> str:
        return self.format()


def complex_summary(a: ComplexNumber, b: ComplexNumber) -> Dict[str, object]:
    """Sum, difference, product and quotient of two numbers plus |a| and arg(a).

    Raises:
        DomainError: If ``b`` is zero.
        OutOfRange: If a result component overflows.
    """
    return {
        "sum": a + b,
        "difference": a - b,
        "product": a * b,
        "quotient": a / b,
        "magnitude": a.magnitude,
        "phase": a.phase,
    }
