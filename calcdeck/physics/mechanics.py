"""Constant-acceleration kinematics and elementary mechanics.

Equations (SUVAT):
    v = u + a t
    s = u t + a t^2 / 2
    v^2 = u^2 + 2 a s
    t = (v - u) / a

Symbols:
    u: initial velocity (m/s)
    v: final velocity (m/s)
    a: acceleration (m/s^2)
    t: time (s)
    s: displacement (m)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import DomainError, InvalidInput
from ..parsing import require_finite_result, require_non_negative, require_positive


class KinematicsMode(Enum):
    """Which unknown to solve for."""

    DISPLACEMENT = "displacement"
    VELOCITY = "velocity"
    ACCELERATION = "acceleration"
    TIME = "time"


@dataclass(frozen=True)
class KinematicsResult:
    initial_velocity: float
    final_velocity: float
    acceleration: float
    time: float
    displacement: float


@dataclass(frozen=True)
class WorkPowerResult:
    force: float
    distance: float
    work: float
    time: Optional[float] = None
    power: Optional[float] = None


def _require(value: Optional[float], message: str) -> float:
    if value is None:
        raise InvalidInput(message)
    return value


def _finite(result: KinematicsResult) -> KinematicsResult:
    for name in ("final_velocity", "acceleration", "time", "displacement"):
        require_finite_result(getattr(result, name), name.replace("_", " ").capitalize())
    return result


def kinematics(
    mode: KinematicsMode,
    initial_velocity: Optional[float] = None,
    final_velocity: Optional[float] = None,
    acceleration: Optional[float] = None,
    time: Optional[float] = None,
    displacement: Optional[float] = None,
) -> KinematicsResult:
    """Solve a constant-acceleration motion problem.

    Args:
        mode (KinematicsMode): Quantity to solve for. ``DISPLACEMENT`` and
            ``VELOCITY`` need u, a and t; ``ACCELERATION`` needs u, v and s;
            ``TIME`` needs u, v and a.
        initial_velocity (float | None): u in m/s.
        final_velocity (float | None): v in m/s.
        acceleration (float | None): a in m/s^2.
        time (float | None): t in s.
        displacement (float | None): s in m.

    Returns:
        KinematicsResult: All five quantities, the solved ones filled in.

    Raises:
        InvalidInput: If an input required by ``mode`` is missing.
        DomainError: If the solution requires dividing by a zero
            displacement or acceleration, or implies a negative time.
        OutOfRange: If a solved quantity overflows.
    """
    u = initial_velocity
    if mode in (KinematicsMode.DISPLACEMENT, KinematicsMode.VELOCITY):
        message = "Please enter initial velocity, acceleration, and time"
        u = _require(u, message)
        a = _require(acceleration, message)
        t = _require(time, message)
        return _finite(KinematicsResult(u, u + a * t, a, t, u * t + 0.5 * a * t * t))

    if mode is KinematicsMode.ACCELERATION:
        message = "Please enter initial velocity, final velocity, and displacement"
        u = _require(u, message)
        v = _require(final_velocity, message)
        s = _require(displacement, message)
        if s == 0:
            raise DomainError("Displacement cannot be zero", field="displacement")
        a = (v * v - u * u) / (2 * s)
        if a == 0:
            if v == 0:
                raise DomainError("Time is undefined for a body at rest", field="time")
            if v != u:
                raise DomainError(
                    "Velocity cannot reverse without acceleration", field="final_velocity"
                )
            # Uniform motion: s = v t
            t = s / v
        else:
            t = (v - u) / a
        if t < 0:
            raise DomainError(
                "Displacement is inconsistent with the velocities (negative time)",
                field="displacement",
            )
        return _finite(KinematicsResult(u, v, a, t, s))

    message = "Please enter initial velocity, final velocity, and acceleration"
    u = _require(u, message)
    v = _require(final_velocity, message)
    a = _require(acceleration, message)
    if a == 0:
        raise DomainError("Acceleration cannot be zero", field="acceleration")
    t = (v - u) / a
    return _finite(KinematicsResult(u, v, a, t, u * t + 0.5 * a * t * t))


def work_power(force: float, distance: float, time: Optional[float] = None) -> WorkPowerResult:
    """Work W = F d and, when a duration is given, power P = W / t.

    Raises:
        InvalidInput: If ``time`` is given and is not positive.
    """
    work = require_finite_result(force * distance, "Work")
    if time is None:
        return WorkPowerResult(force=force, distance=distance, work=work)
    require_positive(time, "time")
    power = require_finite_result(work / time, "Power")
    return WorkPowerResult(force=force, distance=distance, work=work, time=time, power=power)


def kinetic_energy(mass: float, velocity: float) -> float:
    require_non_negative(mass, "mass")
    return require_finite_result(0.5 * mass * velocity * velocity, "Kinetic energy")


def momentum(mass: float, velocity: float) -> float:
    require_non_negative(mass, "mass")
    return require_finite_result(mass * velocity, "Momentum")
