"""Heat transfer and ideal-gas formulas.

Temperatures are absolute (kelvin) wherever they divide a quantity, i.e. in
the entropy estimate and the ideal-gas law.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import GAS_CONSTANT
from ..errors import DomainError
from ..parsing import require_positive


@dataclass(frozen=True)
class HeatResult:
    heat: float
    initial_temperature: float
    final_temperature: float
    entropy: float


def heat_energy(
    mass: float, specific_heat: float, initial_temperature: float, final_temperature: float
) -> HeatResult:
    """Heat Q = m c ΔT and the reversible entropy estimate ΔS = Q / T2.

    Args:
        mass (float): Mass in kg.
        specific_heat (float): Specific heat capacity in J kg^-1 K^-1.
        initial_temperature (float): T1 in K.
        final_temperature (float): T2 in K.

    Raises:
        InvalidInput: If ``mass`` or ``specific_heat`` is not positive.
        DomainError: If ``final_temperature`` is zero.
    """
    require_positive(mass, "mass")
    require_positive(specific_heat, "specific heat")
    if final_temperature == 0:
        raise DomainError("Final temperature cannot be zero kelvin", field="final_temperature")
    heat = mass * specific_heat * (final_temperature - initial_temperature)
    return HeatResult(
        heat=heat,
        initial_temperature=initial_temperature,
        final_temperature=final_temperature,
        entropy=heat / final_temperature,
    )


def final_temperature(
    mass: float, specific_heat: float, initial_temperature: float, heat: float
) -> float:
    """T2 = T1 + Q / (m c)."""
    require_positive(mass, "mass")
    require_positive(specific_heat, "specific heat")
    return initial_temperature + heat / (mass * specific_heat)


def ideal_gas_pressure(volume: float, temperature: float, moles: float = 1.0) -> float:
    """Pressure in Pa from PV = nRT.

    Note:
        One mole is assumed unless ``moles`` is given.
    """
    require_positive(volume, "volume")
    require_positive(temperature, "temperature")
    require_positive(moles, "moles")
    return moles * GAS_CONSTANT * temperature / volume


def pv_work(pressure: float, volume_change: float) -> float:
    """Work W = P ΔV done by a gas at constant pressure."""
    return pressure * volume_change
