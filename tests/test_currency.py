"""Tests for currency conversion and the exchange-rate client."""

import logging
import math
from unittest import mock

import pytest
import requests

from calcdeck.currency import (
    CURRENCIES,
    FALLBACK_RATES,
    ExchangeRateClient,
    convert_currency,
    exchange_rate,
)
from calcdeck.errors import InvalidInput


def _session_returning(payload=None, exc=None, status_exc=None):
    session = mock.Mock(spec=requests.Session)
    response = mock.Mock()
    if status_exc is not None:
        response.raise_for_status.side_effect = status_exc
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    if exc is not None:
        session.get.side_effect = exc
    else:
        session.get.return_value = response
    return session


def test_fallback_table_covers_every_currency():
    assert set(FALLBACK_RATES) == set(CURRENCIES)


def test_convert_through_usd():
    assert math.isclose(convert_currency(100, "USD", "EUR"), 85.0)
    assert math.isclose(convert_currency(85, "eur", "usd"), 100.0)
    assert math.isclose(exchange_rate("GBP", "INR"), 74.5 / 0.73)


def test_identity_conversion():
    assert math.isclose(convert_currency(42, "JPY", "JPY"), 42)


def test_unsupported_code():
    with pytest.raises(InvalidInput, match="Unsupported currency") as info:
        convert_currency(1, "USD", "XYZ")
    assert info.value.field == "to"


def test_custom_rate_table():
    rates = {"USD": 1.0, "EUR": 0.5}
    assert convert_currency(10, "USD", "EUR", rates) == 5.0


class TestExchangeRateClient:
    def test_successful_fetch(self, caplog):
        session = _session_returning({"rates": {"EUR": 0.9, "gbp": 0.8, "BAD": "x", "NEG": -1}})
        client = ExchangeRateClient(url="http://rates.test", timeout=3, session=session)
        with caplog.at_level(logging.INFO):
            rates = client.fetch_rates()
        session.get.assert_called_once_with("http://rates.test", timeout=3)
        assert rates == {"EUR": 0.9, "GBP": 0.8, "USD": 1.0}
        assert "Fetched 3 exchange rates" in caplog.text

    def test_network_failure_falls_back(self, caplog):
        session = _session_returning(exc=requests.ConnectionError("down"))
        with caplog.at_level(logging.WARNING):
            rates = ExchangeRateClient(session=session).fetch_rates()
        assert rates == FALLBACK_RATES
        assert "using fallback rates" in caplog.text

    def test_http_error_falls_back(self):
        session = _session_returning(
            payload={"rates": {"EUR": 0.9}}, status_exc=requests.HTTPError("503")
        )
        assert ExchangeRateClient(session=session).fetch_rates() == FALLBACK_RATES

    def test_bad_json_falls_back(self):
        session = _session_returning(payload=ValueError("no json"))
        assert ExchangeRateClient(session=session).fetch_rates() == FALLBACK_RATES

    def test_missing_rates_table_falls_back(self):
        session = _session_returning(payload={"result": "error"})
        assert ExchangeRateClient(session=session).fetch_rates() == FALLBACK_RATES

    def test_fallback_is_a_copy(self):
        session = _session_returning(exc=requests.Timeout("slow"))
        rates = ExchangeRateClient(session=session).fetch_rates()
        rates["USD"] = 99.0
        assert FALLBACK_RATES["USD"] == 1.0
