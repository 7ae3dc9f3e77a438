"""Centralized unit conversion utilities.

Linear quantities convert through the SI base unit of their category using a
single factor per unit (``value_in_base = value * factor``). Temperature is
affine and converts through kelvin.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from .config import ABSOLUTE_ZERO_C
from .errors import DomainError, InvalidInput

KELVIN_OFFSET: float = -ABSOLUTE_ZERO_C


class UnitCategory(Enum):
    LENGTH = "length"
    MASS = "mass"
    PRESSURE = "pressure"
    FORCE = "force"


class TemperatureUnit(Enum):
    CELSIUS = "C"
    FAHRENHEIT = "F"
    KELVIN = "K"


# Factor to the SI base unit of each category (m, kg, Pa, N).
UNIT_FACTORS: Dict[UnitCategory, Dict[str, float]] = {
    UnitCategory.LENGTH: {
        "m": 1.0,
        "km": 1000.0,
        "cm": 0.01,
        "mm": 0.001,
        "in": 0.0254,
        "ft": 0.3048,
        "yd": 0.9144,
        "mi": 1609.344,
    },
    UnitCategory.MASS: {
        "kg": 1.0,
        "g": 0.001,
        "mg": 1e-6,
        "lb": 0.45359237,
        "oz": 0.028349523125,
        "st": 6.35029,
        "t": 1000.0,
    },
    UnitCategory.PRESSURE: {
        "Pa": 1.0,
        "kPa": 1000.0,
        "MPa": 1e6,
        "bar": 1e5,
        "psi": 6894.76,
        "atm": 101325.0,
    },
    UnitCategory.FORCE: {
        "N": 1.0,
        "kN": 1000.0,
        "lbf": 4.448222,
        "kgf": 9.80665,
    },
}


def units_for(category: UnitCategory) -> List[str]:
    return list(UNIT_FACTORS[category])


def _factor(category: UnitCategory, unit: str) -> float:
    try:
        return UNIT_FACTORS[category][unit]
    except KeyError:
        raise InvalidInput(
            f"Unknown {category.value} unit {unit!r}; expected one of {units_for(category)}",
            field="unit",
        )


def convert(value: float, from_unit: str, to_unit: str, category: UnitCategory) -> float:
    """Convert a linear quantity between two units of the same category.

    Args:
        value (float): Quantity expressed in ``from_unit``.
        from_unit (str): Source unit symbol, e.g. ``"ft"``.
        to_unit (str): Target unit symbol, e.g. ``"m"``.
        category (UnitCategory): Physical quantity both units measure.

    Returns:
        float: Quantity expressed in ``to_unit``.

    Raises:
        InvalidInput: If either unit is not defined for ``category``.
    """
    return value * _factor(category, from_unit) / _factor(category, to_unit)


def to_kelvin(value: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.CELSIUS:
        return value + KELVIN_OFFSET
    if unit is TemperatureUnit.FAHRENHEIT:
        return (value - 32.0) * 5.0 / 9.0 + KELVIN_OFFSET
    return value


def from_kelvin(kelvin: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.CELSIUS:
        return kelvin - KELVIN_OFFSET
    if unit is TemperatureUnit.FAHRENHEIT:
        return (kelvin - KELVIN_OFFSET) * 9.0 / 5.0 + 32.0
    return kelvin


def convert_temperature(
    value: float, from_unit: TemperatureUnit, to_unit: TemperatureUnit
) -> float:
    """Convert a temperature through kelvin.

    Raises:
        DomainError: If the temperature is below absolute zero.
    """
    kelvin = to_kelvin(value, from_unit)
    # Tolerate representation error at exactly absolute zero, e.g. -459.67 F.
    if kelvin < -1e-9:
        raise DomainError(
            f"Temperature {value} {from_unit.value} is below absolute zero", field="value"
        )
    return from_kelvin(max(kelvin, 0.0), to_unit)
