"""Ohm's law solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import DomainError, InvalidInput


@dataclass(frozen=True)
class OhmsLawResult:
    voltage: float
    current: float
    resistance: float
    power: float


def ohms_law(
    voltage: Optional[float] = None,
    current: Optional[float] = None,
    resistance: Optional[float] = None,
) -> OhmsLawResult:
    """Solve V = I R for whichever quantity is missing and report P = V I.

    Exactly two of ``voltage``, ``current`` and ``resistance`` must be given.

    Raises:
        InvalidInput: If fewer or more than two quantities are given.
        DomainError: If the divisor needed for the missing quantity is zero.
    """
    given = [q is not None for q in (voltage, current, resistance)]
    if sum(given) != 2:
        raise InvalidInput("Enter exactly two of voltage, current and resistance")

    if voltage is None:
        voltage = current * resistance
        return OhmsLawResult(voltage, current, resistance, current * current * resistance)
    if current is None:
        if resistance == 0:
            raise DomainError("Resistance cannot be zero", field="resistance")
        current = voltage / resistance
        return OhmsLawResult(voltage, current, resistance, voltage * voltage / resistance)
    if current == 0:
        raise DomainError("Current cannot be zero", field="current")
    return OhmsLawResult(voltage, current, voltage / current, voltage * current)
