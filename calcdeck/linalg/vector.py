"""Three-dimensional vector algebra."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union

import numpy as np

from ..errors import DimensionMismatch, InvalidInput, OutOfRange
from ..parsing import parse_number, parse_series, require_finite_result


class VectorOperation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    DOT = "dot"
    CROSS = "cross"
    SCALE = "scale"


@dataclass(frozen=True)
class Vector3:
    x: float
    y: float
    z: float

    @classmethod
    def from_sequence(cls, values: Union[str, Sequence[Any]], name: str = "vector") -> "Vector3":
        """Build a vector from three numbers, given as text or a sequence."""
        arr = parse_series(values, field=name)
        if arr.size != 3:
            raise DimensionMismatch(f"{name} must have exactly 3 components, got {arr.size}")
        return cls(*(float(v) for v in arr))

    @classmethod
    def _result(cls, x: float, y: float, z: float) -> "Vector3":
        if not all(math.isfinite(c) for c in (x, y, z)):
            raise OutOfRange("Vector result is too large to represent")
        return cls(x, y, z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3._result(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3._result(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: "Vector3") -> float:
        return require_finite_result(
            self.x * other.x + self.y * other.y + self.z * other.z, "Dot product"
        )

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3._result(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def scale(self, factor: float) -> "Vector3":
        return Vector3._result(self.x * factor, self.y * factor, self.z * factor)

    @property
    def magnitude(self) -> float:
        try:
            length = math.hypot(self.x, math.hypot(self.y, self.z))
        except OverflowError:
            length = math.inf
        return require_finite_result(length, "Magnitude")

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"


def apply_vector_operation(
    operation: VectorOperation,
    a: Vector3,
    b: Optional[Vector3] = None,
    scalar: Any = None,
) -> Union[Vector3, float]:
    """Dispatch a vector operation.

    Raises:
        InvalidInput: If the second vector or the scalar required by the
            operation is missing or not a number.
    """
    if operation is VectorOperation.SCALE:
        return a.scale(parse_number(scalar, "scalar"))
    if b is None:
        raise InvalidInput(f"Second vector is required for {operation.value}", field="b")
    if operation is VectorOperation.ADD:
        return a + b
    if operation is VectorOperation.SUBTRACT:
        return a - b
    if operation is VectorOperation.DOT:
        return a.dot(b)
    return a.cross(b)
