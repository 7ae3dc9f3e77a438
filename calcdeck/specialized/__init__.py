"""
Specialized everyday calculators.

Modules:
    health:
        BMI with WHO category and healthy weight range (metric or imperial),
        Mifflin-St Jeor BMR and calorie targets by activity level.

    chemistry:
        Molar mass from a simple chemical formula.

    construction:
        Area, volume, concrete and brick quantities, and cost estimates.
"""

from .chemistry import ATOMIC_MASSES, molar_mass, parse_formula
from .construction import area, cost, materials, volume
from .health import (
    ActivityLevel,
    BMIResult,
    CalorieResult,
    Sex,
    UnitSystem,
    bmi,
    bmi_category,
    bmi_imperial,
    bmr,
    daily_calories,
)

__all__ = [
    "ATOMIC_MASSES",
    "molar_mass",
    "parse_formula",
    "area",
    "cost",
    "materials",
    "volume",
    "ActivityLevel",
    "BMIResult",
    "CalorieResult",
    "Sex",
    "UnitSystem",
    "bmi",
    "bmi_category",
    "bmi_imperial",
    "bmr",
    "daily_calories",
]
