"""Rectangular area, volume, material and cost estimates for small builds.

Material quantities assume a concrete slab of the given volume plus brick
walls on all four vertical sides (wall area = 2 (l + w) h). Unit costs are
indicative and in an unspecified currency.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidInput

CEMENT_PER_M3 = 350.0  # kg per m^3 of concrete
SAND_PER_M3 = 0.4  # m^3
AGGREGATE_PER_M3 = 0.8  # m^3
BRICKS_PER_M2 = 60.0

CEMENT_COST = 15.0  # per kg
SAND_COST = 1500.0  # per m^3
AGGREGATE_COST = 2000.0  # per m^3
BRICK_COST = 10.0  # per brick
LABOR_COST_FACTOR = 0.3


@dataclass(frozen=True)
class AreaResult:
    area: float
    perimeter: float


@dataclass(frozen=True)
class VolumeResult:
    volume: float
    surface_area: float


@dataclass(frozen=True)
class MaterialsResult:
    cement_kg: float
    sand_m3: float
    aggregate_m3: float
    bricks: float


@dataclass(frozen=True)
class CostResult:
    material_cost: float
    labor_cost: float
    total_cost: float


def _check_dimensions(*dims: float) -> None:
    if any(d <= 0 for d in dims):
        raise InvalidInput("Dimensions must be greater than 0")


def area(length: float, width: float) -> AreaResult:
    _check_dimensions(length, width)
    return AreaResult(area=length * width, perimeter=2 * (length + width))


def volume(length: float, width: float, height: float) -> VolumeResult:
    _check_dimensions(length, width, height)
    return VolumeResult(
        volume=length * width * height,
        surface_area=2 * (length * width + length * height + width * height),
    )


def materials(length: float, width: float, height: float) -> MaterialsResult:
    concrete = volume(length, width, height).volume
    wall_area = 2 * (length + width) * height
    return MaterialsResult(
        cement_kg=concrete * CEMENT_PER_M3,
        sand_m3=concrete * SAND_PER_M3,
        aggregate_m3=concrete * AGGREGATE_PER_M3,
        bricks=wall_area * BRICKS_PER_M2,
    )


def cost(length: float, width: float, height: float) -> CostResult:
    """Material cost plus labour at 30 % of materials."""
    m = materials(length, width, height)
    material_cost = (
        m.cement_kg * CEMENT_COST
        + m.sand_m3 * SAND_COST
        + m.aggregate_m3 * AGGREGATE_COST
        + m.bricks * BRICK_COST
    )
    labor = material_cost * LABOR_COST_FACTOR
    return CostResult(
        material_cost=material_cost, labor_cost=labor, total_cost=material_cost + labor
    )
