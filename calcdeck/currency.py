"""Currency conversion with live exchange rates and a static fallback.

Rates are quoted per US dollar. Conversion goes through USD:
``amount / rates[from] * rates[to]``.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Mapping, Optional

import requests

from . import config
from .errors import InvalidInput

logger = logging.getLogger(__name__)

CURRENCIES: Dict[str, str] = {
    "USD": "US Dollar",
    "EUR": "Euro",
    "GBP": "British Pound",
    "JPY": "Japanese Yen",
    "AUD": "Australian Dollar",
    "CAD": "Canadian Dollar",
    "CHF": "Swiss Franc",
    "CNY": "Chinese Yuan",
    "INR": "Indian Rupee",
    "NZD": "New Zealand Dollar",
    "SGD": "Singapore Dollar",
    "HKD": "Hong Kong Dollar",
    "KRW": "South Korean Won",
    "MXN": "Mexican Peso",
    "BRL": "Brazilian Real",
}

FALLBACK_RATES: Dict[str, float] = {
    "USD": 1.0,
    "EUR": 0.85,
    "GBP": 0.73,
    "JPY": 110.0,
    "AUD": 1.35,
    "CAD": 1.25,
    "CHF": 0.92,
    "CNY": 6.45,
    "INR": 74.5,
    "NZD": 1.42,
    "SGD": 1.35,
    "HKD": 7.78,
    "KRW": 1150.0,
    "MXN": 20.0,
    "BRL": 5.25,
}


class ExchangeRateClient:
    """Fetch USD-based exchange rates from a JSON endpoint.

    The endpoint must answer a GET with ``{"rates": {code: rate, ...}}``.
    Any transport error, non-success status or malformed payload is logged
    and answered with a copy of :data:`FALLBACK_RATES`; there is no retry.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = url or config.EXCHANGE_RATE_URL
        self.timeout = config.EXCHANGE_RATE_TIMEOUT if timeout is None else timeout
        self.session = session or requests.Session()

    def fetch_rates(self) -> Dict[str, float]:
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.warning(
                "Exchange-rate request to %s failed: %s; using fallback rates", self.url, e
            )
            return dict(FALLBACK_RATES)
        except ValueError as e:
            logger.warning("Exchange-rate response was not JSON: %s; using fallback rates", e)
            return dict(FALLBACK_RATES)

        rates = payload.get("rates") if isinstance(payload, dict) else None
        if not isinstance(rates, dict) or not rates:
            logger.warning("Exchange-rate response has no 'rates' table; using fallback rates")
            return dict(FALLBACK_RATES)

        clean = {}
        for code, rate in rates.items():
            if (
                isinstance(rate, (int, float))
                and not isinstance(rate, bool)
                and math.isfinite(rate)
                and rate > 0
            ):
                clean[str(code).upper()] = float(rate)
        if "USD" not in clean:
            clean["USD"] = 1.0
        logger.info("Fetched %d exchange rates from %s", len(clean), self.url)
        return clean


def _rate(rates: Mapping[str, float], code: str, field: str) -> float:
    key = (code or "").strip().upper()
    rate = rates.get(key)
    if rate is None:
        raise InvalidInput(f"Unsupported currency: {code!r}", field=field)
    if rate <= 0:
        raise InvalidInput(f"Invalid exchange rate for {key}: {rate}", field=field)
    return rate


def exchange_rate(
    from_code: str, to_code: str, rates: Optional[Mapping[str, float]] = None
) -> float:
    """Units of ``to_code`` per one unit of ``from_code``."""
    table = FALLBACK_RATES if rates is None else rates
    return _rate(table, to_code, "to") / _rate(table, from_code, "from")


def convert_currency(
    amount: float, from_code: str, to_code: str, rates: Optional[Mapping[str, float]] = None
) -> float:
    """Convert ``amount`` through USD using ``rates`` (fallback table by default).

    Raises:
        InvalidInput: If a currency code is not in the rate table.
    """
    return amount * exchange_rate(from_code, to_code, rates)
