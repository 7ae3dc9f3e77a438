"""Molar mass of simple chemical formulas.

Formulas are sequences of element symbols, each optionally followed by a
count (``H2O``, ``NaCl``, ``C6H12O6``). Parenthesised groups and hydrates
are not supported.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

from ..errors import InvalidInput

# Standard atomic weights, g/mol.
ATOMIC_MASSES: Dict[str, float] = {
    "H": 1.008,
    "C": 12.011,
    "N": 14.007,
    "O": 15.999,
    "Na": 22.990,
    "Mg": 24.305,
    "P": 30.974,
    "S": 32.065,
    "Cl": 35.453,
    "K": 39.098,
    "Ca": 40.078,
    "Fe": 55.845,
}

_TOKEN = re.compile(r"([A-Z][a-z]?)(\d*)")
_FORMULA = re.compile(r"(?:[A-Z][a-z]?\d*)+")


def parse_formula(formula: str) -> List[Tuple[str, int]]:
    """Split a formula into ``(symbol, count)`` pairs in order of appearance.

    Raises:
        InvalidInput: If the text is not a sequence of symbols and counts or
            names an element outside :data:`ATOMIC_MASSES`.
    """
    text = (formula or "").strip()
    if not _FORMULA.fullmatch(text):
        raise InvalidInput(f"Invalid chemical formula: {formula!r}", field="formula")
    parts = []
    for symbol, count in _TOKEN.findall(text):
        if symbol not in ATOMIC_MASSES:
            raise InvalidInput(f"Unknown element: {symbol}", field="formula")
        parts.append((symbol, int(count) if count else 1))
    return parts


def molar_mass(formula: str) -> float:
    """Molar mass in g/mol, e.g. ``molar_mass("H2O")`` is about 18.015."""
    return sum(ATOMIC_MASSES[symbol] * count for symbol, count in parse_formula(formula))
