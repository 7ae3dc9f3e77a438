"""Tests for health, chemistry and construction formulas."""

import math

import pytest

from calcdeck.errors import InvalidInput, OutOfRange
from calcdeck.specialized import (
    ActivityLevel,
    Sex,
    UnitSystem,
    bmi,
    bmi_category,
    bmi_imperial,
    bmr,
    daily_calories,
    molar_mass,
    parse_formula,
)
from calcdeck.specialized import construction
from calcdeck.specialized.health import parse_imperial_height


class TestBMI:
    def test_metric(self):
        out = bmi(70, 1.75)
        assert math.isclose(out.bmi, 70 / 1.75**2)
        assert out.category == "Normal weight"
        assert (out.ideal_weight_min, out.ideal_weight_max) == (57, 76)
        assert out.unit_system is UnitSystem.METRIC

    def test_category_boundaries(self):
        assert bmi_category(18.4) == "Underweight"
        assert bmi_category(18.5) == "Normal weight"
        assert bmi_category(25.0) == "Overweight"
        assert bmi_category(34.9) == "Obesity Class I"
        assert bmi_category(39.9) == "Obesity Class II"
        assert bmi_category(40.0) == "Obesity Class III"

    def test_imperial_height_parsing(self):
        assert math.isclose(parse_imperial_height("5'11\""), 71 * 0.0254)
        assert math.isclose(parse_imperial_height("6'"), 72 * 0.0254)
        with pytest.raises(InvalidInput, match="Height must look like"):
            parse_imperial_height("180cm")

    def test_imperial_matches_metric(self):
        imperial = bmi_imperial(154, "5'9\"")
        metric = bmi(154 * 0.453592, 69 * 0.0254)
        assert math.isclose(imperial.bmi, metric.bmi)
        assert imperial.unit_system is UnitSystem.IMPERIAL
        assert imperial.ideal_weight_min < imperial.ideal_weight_max

    def test_invalid(self):
        with pytest.raises(InvalidInput, match="greater than 0"):
            bmi(70, 0)

    def test_overflowing_ideal_weight(self):
        with pytest.raises(OutOfRange):
            bmi(70, 1e198)


class TestCalories:
    def test_mifflin_st_jeor(self):
        assert math.isclose(bmr(30, Sex.MALE, 175, 70), 1648.75)
        assert math.isclose(bmr(30, Sex.FEMALE, 175, 70), 1482.75)

    def test_targets(self):
        out = daily_calories(30, Sex.MALE, 175, 70, ActivityLevel.MODERATE)
        maintenance = 1648.75 * 1.55
        assert out.maintenance == round(maintenance)
        assert out.targets["moderate_loss"] == round(maintenance - 500)
        assert out.targets["mild_gain"] == round(maintenance + 250)
        assert set(out.targets) == {
            "mild_loss",
            "moderate_loss",
            "extreme_loss",
            "mild_gain",
            "moderate_gain",
        }

    def test_age_limit(self):
        with pytest.raises(InvalidInput, match="valid age"):
            bmr(121, Sex.FEMALE, 160, 60)


class TestMolarMass:
    def test_common_compounds(self):
        assert math.isclose(molar_mass("H2O"), 18.015, abs_tol=1e-3)
        assert math.isclose(molar_mass("NaCl"), 58.443, abs_tol=1e-3)
        assert math.isclose(molar_mass("C6H12O6"), 180.156, abs_tol=1e-3)

    def test_parse_formula(self):
        assert parse_formula("CaCO3") == [("Ca", 1), ("C", 1), ("O", 3)]

    def test_unknown_element(self):
        with pytest.raises(InvalidInput, match="Unknown element: Xe"):
            molar_mass("XeF4")

    def test_malformed(self):
        for bad in ("", "h2o", "H2O)", "2H"):
            with pytest.raises(InvalidInput):
                molar_mass(bad)


class TestConstruction:
    def test_area_and_volume(self):
        a = construction.area(10, 5)
        assert (a.area, a.perimeter) == (50, 30)
        v = construction.volume(2, 3, 4)
        assert v.volume == 24
        assert v.surface_area == 52

    def test_materials_and_cost(self):
        m = construction.materials(10, 5, 0.1)
        assert math.isclose(m.cement_kg, 1750)
        assert math.isclose(m.sand_m3, 2)
        assert math.isclose(m.aggregate_m3, 4)
        assert math.isclose(m.bricks, 180)
        c = construction.cost(10, 5, 0.1)
        assert math.isclose(c.material_cost, 39050)
        assert math.isclose(c.labor_cost, 11715)
        assert math.isclose(c.total_cost, 50765)

    def test_non_positive_dimension(self):
        with pytest.raises(InvalidInput, match="Dimensions"):
            construction.volume(1, 0, 1)
