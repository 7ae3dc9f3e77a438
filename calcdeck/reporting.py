"""Format calculation results for display and tabular export.

Numbers are shown with a fixed number of decimal places
(:data:`calcdeck.config.DISPLAY_PRECISION` by default) with trailing zeros
trimmed. Very large or very small magnitudes switch to scientific notation.
Original numeric values are never modified; formatting is for display only.
"""

from __future__ import annotations

import dataclasses
import math
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

import numpy as np
import pandas as pd

from .complex_numbers import ComplexNumber
from .config import DISPLAY_PRECISION
from .linalg import Vector3
from .schema import SUMMARY
from .stats import DescriptiveStats

# Read-only properties worth showing alongside dataclass fields.
_DERIVED_PROPERTIES = ("equation", "breakdown", "magnitude")


def format_number(value: Any, precision: Optional[int] = None) -> str:
    """Format a scalar for display.

    Args:
        value: Integer, float or numpy scalar.
        precision (int | None): Decimal places; defaults to
            ``DISPLAY_PRECISION``.

    Returns:
        str: ``"12"`` for integers, ``"3.1416"`` for floats, ``"1.2346e+12"``
        outside ``[10**-precision, 1e12)``, and ``"undefined"`` for NaN.
    """
    p = DISPLAY_PRECISION if precision is None else precision
    if isinstance(value, (bool, np.bool_)):
        return str(bool(value))
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    v = float(value)
    if math.isnan(v):
        return "undefined"
    if math.isinf(v):
        return "infinity" if v > 0 else "-infinity"
    if v != 0 and (abs(v) >= 1e12 or abs(v) < 10.0**-p):
        return f"{v:.{p}e}"
    text = f"{v:.{p}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_probability(p: float, precision: int = 6) -> str:
    """Probability with its percentage, e.g. ``"0.246094 (24.61%)"``."""
    return f"{p:.{precision}f} ({p * 100:.2f}%)"


def format_complex(z: ComplexNumber, precision: Optional[int] = None) -> str:
    return z.format(DISPLAY_PRECISION if precision is None else precision)


def format_vector(v: Vector3, precision: Optional[int] = None) -> str:
    parts = (format_number(c, precision) for c in (v.x, v.y, v.z))
    return "(" + ", ".join(parts) + ")"


def _label(name: str) -> str:
    return name.replace("_", " ").capitalize()


def format_value(value: Any, precision: Optional[int] = None) -> str:
    """Render any calculator value on a single line."""
    if value is None:
        return "undefined"
    if isinstance(value, ComplexNumber):
        return format_complex(value, precision)
    if isinstance(value, Vector3):
        return format_vector(value, precision)
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (pd.Timestamp, datetime)):
        return value.isoformat()
    if isinstance(value, str):
        return value
    if isinstance(value, np.ndarray):
        return np.array2string(
            value, formatter={"float_kind": lambda x: format_number(x, precision)}
        )
    if isinstance(value, (list, tuple)):
        return ", ".join(format_value(v, precision) for v in value)
    if isinstance(value, dict):
        return "; ".join(f"{k}: {format_value(v, precision)}" for k, v in value.items())
    if dataclasses.is_dataclass(value):
        return "; ".join(
            f"{f.name}: {format_value(getattr(value, f.name), precision)}"
            for f in dataclasses.fields(value)
        )
    return format_number(value, precision)


def result_lines(value: Any, precision: Optional[int] = None) -> List[str]:
    """Render a calculator value as ``"Label: value"`` lines.

    Dataclasses contribute one line per field plus selected derived
    properties; dicts one line per key; matrices one line per row.
    """
    if isinstance(value, np.ndarray) and value.ndim == 2:
        return [
            "  ".join(format_number(x, precision).rjust(10) for x in row) for row in value
        ]
    if isinstance(value, dict):
        return [f"{_label(str(k))}: {format_value(v, precision)}" for k, v in value.items()]
    if dataclasses.is_dataclass(value) and not isinstance(value, (ComplexNumber, Vector3)):
        lines = [
            f"{_label(f.name)}: {format_value(getattr(value, f.name), precision)}"
            for f in dataclasses.fields(value)
        ]
        for name in _DERIVED_PROPERTIES:
            attr = getattr(type(value), name, None)
            if isinstance(attr, property):
                lines.append(f"{_label(name)}: {format_value(getattr(value, name), precision)}")
        return lines
    return [format_value(value, precision)]


def describe_frame(stats: DescriptiveStats) -> pd.DataFrame:
    """Two-column statistic/value table for a descriptive summary."""
    rows = [
        ("Count", stats.count),
        ("Sum", stats.total),
        ("Mean", stats.mean),
        ("Median", stats.median),
        ("Mode", ", ".join(format_number(m) for m in stats.mode)),
        ("Minimum", stats.minimum),
        ("Maximum", stats.maximum),
        ("Range", stats.value_range),
        ("Variance", stats.variance),
        ("Standard Deviation", stats.std_dev),
        ("Q1", stats.quartiles.q1),
        ("Q2", stats.quartiles.q2),
        ("Q3", stats.quartiles.q3),
    ]
    return pd.DataFrame(rows, columns=[SUMMARY.statistic, SUMMARY.value])
