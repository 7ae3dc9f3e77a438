"""Gravitational quantities for a small table of solar-system bodies."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from ..config import GRAVITATIONAL_CONSTANT
from ..errors import InvalidInput
from ..parsing import require_finite_result


@dataclass(frozen=True)
class CelestialBody:
    name: str
    mass: float  # kg
    radius: float  # m
    surface_gravity: float  # m/s^2


CELESTIAL_BODIES: Dict[str, CelestialBody] = {
    "sun": CelestialBody("Sun", 1.989e30, 696340000.0, 274.0),
    "earth": CelestialBody("Earth", 5.972e24, 6371000.0, 9.81),
    "moon": CelestialBody("Moon", 7.34767309e22, 1737100.0, 1.62),
    "mars": CelestialBody("Mars", 6.39e23, 3389500.0, 3.72),
    "jupiter": CelestialBody("Jupiter", 1.898e27, 69911000.0, 24.79),
}


@dataclass(frozen=True)
class AstronomyResult:
    body: CelestialBody
    escape_velocity: float
    orbital_velocity: float
    gravitational_force: float


def get_body(name: str) -> CelestialBody:
    try:
        return CELESTIAL_BODIES[name.strip().lower()]
    except KeyError:
        raise InvalidInput(
            f"Unknown body {name!r}; expected one of {sorted(CELESTIAL_BODIES)}", field="body"
        )


def escape_velocity(body: CelestialBody) -> float:
    """sqrt(2 G M / R) in m/s."""
    return math.sqrt(2 * GRAVITATIONAL_CONSTANT * body.mass / body.radius)


def orbital_velocity(body: CelestialBody, altitude: float) -> float:
    """Circular orbital speed sqrt(G M / (R + h)) at ``altitude`` metres above the surface."""
    return math.sqrt(GRAVITATIONAL_CONSTANT * body.mass / (body.radius + altitude))


def gravitational_force(body: CelestialBody, mass: float, distance: float) -> float:
    """Newtonian attraction G M m / d^2 between the body and an object of ``mass`` kg."""
    return require_finite_result(
        GRAVITATIONAL_CONSTANT * body.mass * mass / distance / distance, "Gravitational force"
    )


def astronomy(body_name: str, mass: float, distance: float) -> AstronomyResult:
    """Escape velocity, orbital velocity and force for one body.

    Raises:
        InvalidInput: If ``mass`` or ``distance`` is not greater than 0, or
            the body is unknown.
    """
    if mass <= 0 or distance <= 0:
        raise InvalidInput("Values must be greater than 0")
    body = get_body(body_name)
    return AstronomyResult(
        body=body,
        escape_velocity=escape_velocity(body),
        orbital_velocity=orbital_velocity(body, distance),
        gravitational_force=gravitational_force(body, mass, distance),
    )
