"""Tests for interest, loan, investment and pricing formulas."""

import math

import numpy as np
import pytest

from calcdeck.errors import DomainError, InvalidInput, OutOfRange
from calcdeck.finance import (
    amortization_schedule,
    compound_interest,
    cumulative_interest,
    emi,
    investment_future_value,
    loan_summary,
    profit_loss,
    simple_interest,
    tax,
)
from calcdeck.schema import AMORTIZATION


class TestInterest:
    def test_compound_monthly(self):
        out = compound_interest(10000, 5, 10)
        expected = 10000 * (1 + 0.05 / 12) ** 120
        assert math.isclose(out.amount, expected)
        assert math.isclose(out.interest, expected - 10000)

    def test_compound_annual(self):
        out = compound_interest(1000, 10, 2, frequency=1)
        assert math.isclose(out.amount, 1210.0)

    def test_compound_frequency_must_be_positive(self):
        with pytest.raises(InvalidInput, match="frequency"):
            compound_interest(1000, 5, 1, frequency=0)

    def test_compound_overflow(self):
        with pytest.raises(OutOfRange):
            compound_interest(1e300, 1000, 1000)

    def test_simple(self):
        out = simple_interest(5000, 4, 3)
        assert math.isclose(out.interest, 600.0)
        assert math.isclose(out.amount, 5600.0)


class TestLoan:
    """EMI and amortization schedule."""

    def test_emi_reference_value(self):
        assert abs(emi(100000, 10, 1) - 8791.59) < 0.01

    def test_zero_rate(self):
        assert math.isclose(emi(12000, 0, 1), 1000.0)

    def test_summary_totals(self):
        summary = loan_summary(100000, 10, 1)
        assert summary.months == 12
        assert math.isclose(summary.total_payment, summary.emi * 12)
        assert math.isclose(summary.total_interest, summary.total_payment - 100000)

    def test_invalid_loan(self):
        with pytest.raises(InvalidInput, match="principal"):
            emi(0, 10, 1)
        with pytest.raises(InvalidInput, match="years"):
            emi(1000, 10, 0)
        with pytest.raises(InvalidInput, match="rate"):
            emi(1000, -1, 1)

    def test_emi_stays_finite_for_long_high_rate_loans(self):
        # (1 + i)^-N underflows to zero, leaving interest-only payments.
        payment = emi(1000, 1000, 100)
        assert math.isfinite(payment)
        assert math.isclose(payment, 1000 * 10 / 12, rel_tol=1e-9)

    def test_schedule_length_is_capped(self):
        with pytest.raises(OutOfRange, match="1200 months") as err:
            amortization_schedule(1000, 5, 101)
        assert err.value.field == "years"

    def test_schedule_shape_and_payoff(self):
        schedule = amortization_schedule(100000, 10, 1)
        assert list(schedule.columns) == list(AMORTIZATION.columns)
        assert len(schedule) == 12
        assert schedule[AMORTIZATION.month].tolist() == list(range(1, 13))
        assert math.isclose(schedule[AMORTIZATION.principal].sum(), 100000, rel_tol=1e-9)
        assert schedule[AMORTIZATION.balance].iloc[-1] == pytest.approx(0.0, abs=1e-6)
        assert (schedule[AMORTIZATION.balance] >= 0).all()

    def test_interest_declines_each_month(self):
        schedule = amortization_schedule(250000, 7.5, 5)
        interest = schedule[AMORTIZATION.interest].to_numpy()
        assert np.all(np.diff(interest) < 0)

    def test_cumulative_interest_matches_summary(self):
        schedule = amortization_schedule(100000, 10, 1)
        summary = loan_summary(100000, 10, 1)
        running = cumulative_interest(schedule)
        assert math.isclose(running[-1], summary.total_interest, rel_tol=1e-9)


class TestInvestment:
    def test_zero_rate_is_sum_of_contributions(self):
        out = investment_future_value(1000, 100, 0, 2)
        assert math.isclose(out.future_value, 3400.0)
        assert math.isclose(out.total_investment, 3400.0)
        assert out.total_return == 0

    def test_positive_rate(self):
        out = investment_future_value(10000, 500, 12, 1)
        growth = 1.01**12
        expected = 10000 * growth + 500 * (growth - 1) / 0.01
        assert math.isclose(out.future_value, expected)
        assert out.total_return > 0

    def test_return_below_minus_hundred(self):
        with pytest.raises(InvalidInput, match="-100%"):
            investment_future_value(1000, 0, -150, 1)

    def test_nothing_invested(self):
        with pytest.raises(InvalidInput, match="Total investment"):
            investment_future_value(0, 0, 5, 1)

    def test_future_value_overflow(self):
        with pytest.raises(OutOfRange):
            investment_future_value(1000, 100, 1000, 100)


class TestPricing:
    def test_profit(self):
        out = profit_loss(100, 150)
        assert out.is_profit
        assert math.isclose(out.percentage, 50.0)

    def test_loss_after_discount(self):
        out = profit_loss(100, 110, 20)
        assert math.isclose(out.discount_amount, 22.0)
        assert math.isclose(out.final_price, 88.0)
        assert not out.is_profit
        assert math.isclose(out.percentage, 12.0)

    def test_zero_cost(self):
        with pytest.raises(DomainError, match="Cost price"):
            profit_loss(0, 10)

    def test_tax_exclusive_and_inclusive(self):
        excl = tax(1000, 18)
        assert math.isclose(excl.tax_amount, 180.0)
        assert math.isclose(excl.total_amount, 1180.0)
        incl = tax(1180, 18, included=True)
        assert math.isclose(incl.net_amount, 1000.0)
        assert math.isclose(incl.tax_amount, 180.0)

    def test_tax_rate_range(self):
        with pytest.raises(InvalidInput, match="between 0"):
            tax(100, 120)
