"""Body-mass index, basal metabolic rate and daily calorie targets.

Background:
    BMI = weight / height^2 with weight in kg and height in m. Categories
    follow the WHO adult cut-offs (18.5, 25, 30, 35, 40). The healthy weight
    range for a height is the weight that gives a BMI between 18.5 and 24.9.

    Basal metabolic rate uses the Mifflin-St Jeor equation:
        BMR = 10 W + 6.25 H - 5 A + s
    with W in kg, H in cm, A in years, and s = +5 for men, -161 for women.
    Maintenance calories are BMR times an activity multiplier.

References:
    Mifflin MD, St Jeor ST, et al. Am J Clin Nutr 1990;51:241-247.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from ..arithmetic import power
from ..config import MAX_AGE_YEARS
from ..errors import InvalidInput
from ..parsing import require_finite_result

INCH_TO_M = 0.0254
LB_TO_KG = 0.453592

HEALTHY_BMI_RANGE = (18.5, 24.9)

_BMI_CATEGORIES: Tuple[Tuple[float, str], ...] = (
    (18.5, "Underweight"),
    (25.0, "Normal weight"),
    (30.0, "Overweight"),
    (35.0, "Obesity Class I"),
    (40.0, "Obesity Class II"),
)

_IMPERIAL_HEIGHT = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*'\s*(\d+(?:\.\d+)?)?\s*\"?\s*$")


class UnitSystem(Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class Sex(Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very-active"


ACTIVITY_MULTIPLIERS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# Daily surplus or deficit, in kcal.
CALORIE_ADJUSTMENTS: Dict[str, int] = {
    "mild_loss": -250,
    "moderate_loss": -500,
    "extreme_loss": -1000,
    "mild_gain": 250,
    "moderate_gain": 500,
}


@dataclass(frozen=True)
class BMIResult:
    bmi: float
    category: str
    ideal_weight_min: int
    ideal_weight_max: int
    unit_system: UnitSystem = UnitSystem.METRIC


@dataclass(frozen=True)
class CalorieResult:
    bmr: int
    maintenance: int
    targets: Dict[str, int]


def bmi_category(bmi: float) -> str:
    for upper, label in _BMI_CATEGORIES:
        if bmi < upper:
            return label
    return "Obesity Class III"


def parse_imperial_height(text: str) -> float:
    """Parse a height such as ``5'11"`` into metres.

    Raises:
        InvalidInput: If the text is not in feet'inches" form.
    """
    match = _IMPERIAL_HEIGHT.match(text or "")
    if match is None:
        raise InvalidInput(f"Height must look like 5'11\", got {text!r}", field="height")
    feet = float(match.group(1))
    inches = float(match.group(2) or 0.0)
    return (feet * 12.0 + inches) * INCH_TO_M


def ideal_weight_range(height_m: float) -> Tuple[int, int]:
    """Weight range in kg giving a healthy BMI, rounded to whole kilograms."""
    low, high = HEALTHY_BMI_RANGE
    area = power(height_m, 2)
    upper = require_finite_result(high * area, "Ideal weight")
    return round(low * area), round(upper)


def bmi(weight_kg: float, height_m: float) -> BMIResult:
    """Metric BMI with category and ideal weight range.

    Args:
        weight_kg (float): Body mass in kg.
        height_m (float): Height in metres.

    Raises:
        InvalidInput: If height or weight is not greater than 0.
        OutOfRange: If the height is too large for an ideal weight range.
    """
    if height_m <= 0 or weight_kg <= 0:
        raise InvalidInput("Height and weight must be greater than 0")
    value = require_finite_result(weight_kg / (height_m * height_m), "BMI")
    low, high = ideal_weight_range(height_m)
    return BMIResult(
        bmi=value, category=bmi_category(value), ideal_weight_min=low, ideal_weight_max=high
    )


def bmi_imperial(weight_lb: float, height: str) -> BMIResult:
    """BMI from pounds and a feet'inches" height; ideal range in pounds."""
    metric = bmi(weight_lb * LB_TO_KG, parse_imperial_height(height))
    upper_lb = require_finite_result(metric.ideal_weight_max / LB_TO_KG, "Ideal weight")
    return BMIResult(
        bmi=metric.bmi,
        category=metric.category,
        ideal_weight_min=round(metric.ideal_weight_min / LB_TO_KG),
        ideal_weight_max=round(upper_lb),
        unit_system=UnitSystem.IMPERIAL,
    )


def bmr(age: float, sex: Sex, height_cm: float, weight_kg: float) -> float:
    """Basal metabolic rate in kcal/day by Mifflin-St Jeor.

    Raises:
        InvalidInput: If a value is not positive or ``age`` exceeds 120.
    """
    if age <= 0 or height_cm <= 0 or weight_kg <= 0:
        raise InvalidInput("Values must be greater than 0")
    if age > MAX_AGE_YEARS:
        raise InvalidInput("Please enter a valid age", field="age")
    base = require_finite_result(10.0 * weight_kg + 6.25 * height_cm - 5.0 * age, "BMR")
    return base + 5.0 if sex is Sex.MALE else base - 161.0


def daily_calories(
    age: float,
    sex: Sex,
    height_cm: float,
    weight_kg: float,
    activity: ActivityLevel = ActivityLevel.SEDENTARY,
) -> CalorieResult:
    """BMR, maintenance calories and rounded weight-change targets."""
    basal = bmr(age, sex, height_cm, weight_kg)
    maintenance = require_finite_result(basal * ACTIVITY_MULTIPLIERS[activity], "Calories")
    return CalorieResult(
        bmr=round(basal),
        maintenance=round(maintenance),
        targets={name: round(maintenance + delta) for name, delta in CALORIE_ADJUSTMENTS.items()},
    )
