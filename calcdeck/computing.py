"""Number bases, 32-bit bitwise arithmetic, string hashing and complexity growth.

Bitwise results follow 32-bit two's-complement integer semantics: operands
and results are wrapped to a signed 32-bit range, and the binary and
hexadecimal renderings show the 32-bit pattern.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional

from .config import COMPLEXITY_MAX_INPUT
from .errors import InvalidInput, OutOfRange

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_MASK32 = 0xFFFFFFFF


class NumberSystem(Enum):
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16


class BitwiseOperation(Enum):
    AND = "and"
    OR = "or"
    XOR = "xor"
    NOT = "not"
    SHIFT_LEFT = "shift_left"
    SHIFT_RIGHT = "shift_right"


class Complexity(Enum):
    CONSTANT = "O(1)"
    LOGARITHMIC = "O(log n)"
    LINEAR = "O(n)"
    LINEARITHMIC = "O(n log n)"
    QUADRATIC = "O(n²)"
    CUBIC = "O(n³)"
    EXPONENTIAL = "O(2ⁿ)"


@dataclass(frozen=True)
class BitwiseResult:
    decimal: int
    binary: str
    hexadecimal: str


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise InvalidInput(f"Base must be between 2 and 36, got {base}", field="base")


def format_in_base(value: int, base: int) -> str:
    """Render an integer in ``base`` with uppercase digits and a leading ``-`` if negative."""
    _check_base(base)
    if value == 0:
        return "0"
    digits = []
    n = abs(value)
    while n:
        n, rem = divmod(n, base)
        digits.append(_DIGITS[rem])
    return ("-" if value < 0 else "") + "".join(reversed(digits))


def parse_in_base(text: str, base: int) -> int:
    """Parse ``text`` as an integer in ``base``.

    Raises:
        InvalidInput: If the text is blank or has a digit invalid for the base.
    """
    _check_base(base)
    cleaned = (text or "").strip()
    if not cleaned:
        raise InvalidInput("Please enter a value", field="number")
    try:
        return int(cleaned, base)
    except ValueError:
        raise InvalidInput(f"Invalid number for base {base}: {text!r}", field="number")


def convert_base(text: str, from_base: int, to_base: int) -> str:
    return format_in_base(parse_in_base(text, from_base), to_base)


def number_systems(text: str, system: NumberSystem = NumberSystem.DECIMAL) -> Dict[str, str]:
    """Show a number in binary, octal, decimal and hexadecimal."""
    value = parse_in_base(text, system.value)
    return {s.name.lower(): format_in_base(value, s.value) for s in NumberSystem}


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def bitwise(
    operation: BitwiseOperation, a: int, b: Optional[int] = None, shift: int = 1
) -> BitwiseResult:
    """Apply a bitwise operation with 32-bit integer semantics.

    Shift amounts are taken modulo 32. ``SHIFT_RIGHT`` is a logical
    (zero-filling) shift of the 32-bit pattern.

    Raises:
        InvalidInput: If a binary operation is missing its second operand or
            the shift amount is negative.
    """
    x = _to_int32(a)
    if operation is BitwiseOperation.NOT:
        result = ~x
    elif operation in (BitwiseOperation.SHIFT_LEFT, BitwiseOperation.SHIFT_RIGHT):
        if shift < 0:
            raise InvalidInput("Shift amount cannot be negative", field="shift")
        s = shift % 32
        if operation is BitwiseOperation.SHIFT_LEFT:
            result = x << s
        else:
            result = (x & _MASK32) >> s
    else:
        if b is None:
            raise InvalidInput("Please enter valid numbers", field="b")
        y = _to_int32(b)
        if operation is BitwiseOperation.AND:
            result = x & y
        elif operation is BitwiseOperation.OR:
            result = x | y
        else:
            result = x ^ y

    signed = _to_int32(result)
    # Logical right shift yields an unsigned value.
    decimal = result & _MASK32 if operation is BitwiseOperation.SHIFT_RIGHT else signed
    pattern = signed & _MASK32
    return BitwiseResult(
        decimal=decimal,
        binary=format(pattern, "032b"),
        hexadecimal=format(pattern, "X"),
    )


def string_hash(text: str) -> str:
    """32-bit rolling hash ``h = h * 31 + c`` over UTF-16 code units, in hex.

    Negative hashes are rendered with a leading ``-``, e.g. ``"-5a8f1c"``.
    """
    if not text:
        raise InvalidInput("Text is required", field="text")
    data = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _to_int32((h << 5) - h + unit)
    return format(h, "x")


def complexity_operations(n: int, complexity: Complexity) -> float:
    if complexity is Complexity.CONSTANT:
        return 1.0
    if complexity is Complexity.LOGARITHMIC:
        return math.log2(n)
    if complexity is Complexity.LINEAR:
        return float(n)
    if complexity is Complexity.LINEARITHMIC:
        return n * math.log2(n)
    if complexity is Complexity.QUADRATIC:
        return float(n * n)
    if complexity is Complexity.CUBIC:
        return float(n * n * n)
    return math.ldexp(1.0, n)


def complexity_growth(
    n: int, complexities: Optional[Iterable[Complexity]] = None
) -> Dict[Complexity, float]:
    """Operation counts for each complexity class at input size ``n``.

    Raises:
        InvalidInput: If ``n`` is below 1 or no class is selected.
        OutOfRange: If ``n`` exceeds 1000, near where 2^n leaves double range.
    """
    if n < 1:
        raise InvalidInput("Input size must be at least 1", field="n")
    if n > COMPLEXITY_MAX_INPUT:
        raise OutOfRange(
            f"Input size should be less than or equal to {COMPLEXITY_MAX_INPUT} to avoid overflow"
        )
    selected = list(Complexity) if complexities is None else list(complexities)
    if not selected:
        raise InvalidInput("Please select at least one complexity type")
    return {c: complexity_operations(n, c) for c in selected}
