"""Centralized limits, physical constants and runtime settings.

Network and output settings can be overridden with environment variables
prefixed with ``CALCDECK_``.
"""

from __future__ import annotations

import os

VERSION = "1.0.0"

# Numeric guards
FACTORIAL_LIMIT: int = 170  # 171! overflows an IEEE double
DOUBLE_FACTORIAL_LIMIT: int = 300
MAX_DETERMINANT_SIZE: int = 5  # cofactor expansion is O(n!)
COMPLEXITY_MAX_INPUT: int = 1000
MAX_AGE_YEARS: float = 120.0
MAX_SCHEDULE_MONTHS: int = 1200  # 100-year amortization table

# Physical constants
GRAVITATIONAL_CONSTANT: float = 6.67430e-11  # m^3 kg^-1 s^-2
GAS_CONSTANT: float = 8.314  # J mol^-1 K^-1
ABSOLUTE_ZERO_C: float = -273.15

# Exchange-rate collaborator
EXCHANGE_RATE_URL = os.getenv(
    "CALCDECK_EXCHANGE_RATE_URL", "https://api.exchangerate-api.com/v4/latest/USD"
)
EXCHANGE_RATE_TIMEOUT = float(os.getenv("CALCDECK_EXCHANGE_RATE_TIMEOUT", "10"))

# Display and output
DISPLAY_PRECISION = int(os.getenv("CALCDECK_DISPLAY_PRECISION", "4"))
DEFAULT_OUTPUT_DIR = os.getenv("CALCDECK_OUTPUT_DIR", "output")
