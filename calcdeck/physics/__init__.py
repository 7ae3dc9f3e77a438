"""
Physics formulas for the engineering calculators.

Modules:
    electrical:
        Ohm's law solved for the missing quantity, with dissipated power.

    mechanics:
        Constant-acceleration kinematics, work/power, kinetic energy and
        momentum.

    thermodynamics:
        Heat energy with an entropy estimate, final temperature, ideal-gas
        pressure and pressure-volume work.

    astronomy:
        Escape velocity, orbital velocity and gravitational force for the
        Sun, Earth, Moon, Mars and Jupiter.
"""

from .astronomy import CELESTIAL_BODIES, AstronomyResult, CelestialBody, astronomy
from .electrical import OhmsLawResult, ohms_law
from .mechanics import (
    KinematicsMode,
    KinematicsResult,
    WorkPowerResult,
    kinematics,
    kinetic_energy,
    momentum,
    work_power,
)
from .thermodynamics import (
    HeatResult,
    final_temperature,
    heat_energy,
    ideal_gas_pressure,
    pv_work,
)

__all__ = [
    "CELESTIAL_BODIES",
    "AstronomyResult",
    "CelestialBody",
    "astronomy",
    "OhmsLawResult",
    "ohms_law",
    "KinematicsMode",
    "KinematicsResult",
    "WorkPowerResult",
    "kinematics",
    "kinetic_energy",
    "momentum",
    "work_power",
    "HeatResult",
    "final_temperature",
    "heat_energy",
    "ideal_gas_pressure",
    "pv_work",
]
