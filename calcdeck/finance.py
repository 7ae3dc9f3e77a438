"""Interest, loan, investment and pricing formulas.

Rates are entered as annual percentages. Loan terms are in years and are
converted to whole months for annuity calculations.

Equations:
    Compound interest     A = P (1 + r/n)^(n t)
    Simple interest       I = P r t
    EMI (annuity)         EMI = P i (1 + i)^N / ((1 + i)^N - 1),  i = r / 12
    Investment FV         FV = P (1 + i)^N + M ((1 + i)^N - 1) / i

References:
    Standard level-payment annuity formula for fully amortizing loans.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .arithmetic import power
from .config import MAX_SCHEDULE_MONTHS
from .errors import DomainError, InvalidInput, OutOfRange
from .parsing import (
    require_finite_result,
    require_in_range,
    require_non_negative,
    require_positive,
)
from .schema import AMORTIZATION


@dataclass(frozen=True)
class InterestResult:
    amount: float
    interest: float


@dataclass(frozen=True)
class LoanSummary:
    emi: float
    months: int
    total_payment: float
    total_interest: float


@dataclass(frozen=True)
class InvestmentResult:
    future_value: float
    total_investment: float
    total_return: float
    return_percentage: float


@dataclass(frozen=True)
class ProfitLossResult:
    profit_or_loss: float
    percentage: float
    final_price: float
    discount_amount: float

    @property
    def is_profit(self) -> bool:
        return self.profit_or_loss >= 0


@dataclass(frozen=True)
class TaxResult:
    net_amount: float
    tax_amount: float
    total_amount: float


def compound_interest(
    principal: float, rate_pct: float, years: float, frequency: float = 12
) -> InterestResult:
    """Future value and interest earned under periodic compounding.

    Args:
        principal (float): Initial deposit.
        rate_pct (float): Annual interest rate in percent.
        years (float): Investment horizon in years.
        frequency (float): Compounding periods per year.

    Returns:
        InterestResult: Future value ``amount`` and ``interest`` earned.

    Raises:
        InvalidInput: If ``frequency`` is not positive or ``principal`` or
            ``years`` is negative.
        OutOfRange: If the future value overflows.
    """
    if frequency <= 0:
        raise InvalidInput(
            f"Compounding frequency must be positive, got {frequency}", field="frequency"
        )
    require_non_negative(principal, "principal")
    require_non_negative(years, "years")
    r = rate_pct / 100.0
    try:
        amount = principal * math.pow(1 + r / frequency, frequency * years)
    except (OverflowError, ValueError):
        amount = math.inf
    require_finite_result(amount, "Future value")
    return InterestResult(amount=amount, interest=amount - principal)


def simple_interest(principal: float, rate_pct: float, years: float) -> InterestResult:
    require_non_negative(principal, "principal")
    require_non_negative(years, "years")
    interest = principal * rate_pct / 100.0 * years
    return InterestResult(amount=principal + interest, interest=interest)


def _loan_months(years: float) -> int:
    require_positive(years, "years")
    months = int(round(require_finite_result(years * 12, "Loan term")))
    if months < 1:
        raise InvalidInput("Loan term must be at least one month", field="years")
    return months


def emi(principal: float, rate_pct: float, years: float) -> float:
    """Equated monthly instalment for a fully amortizing loan.

    A zero interest rate degenerates to ``principal / months``.

    Raises:
        InvalidInput: If ``principal`` or ``years`` is not positive, or the
            rate is negative.
        OutOfRange: If the instalment overflows.
    """
    require_positive(principal, "principal")
    require_non_negative(rate_pct, "rate")
    months = _loan_months(years)
    i = rate_pct / 100.0 / 12.0
    if i == 0:
        return principal / months
    # P i / (1 - (1 + i)^-N)
    denominator = -math.expm1(-months * math.log1p(i))
    return require_finite_result(principal * i / denominator, "EMI")


def loan_summary(principal: float, rate_pct: float, years: float) -> LoanSummary:
    payment = emi(principal, rate_pct, years)
    months = _loan_months(years)
    total = require_finite_result(payment * months, "Total payment")
    return LoanSummary(
        emi=payment, months=months, total_payment=total, total_interest=total - principal
    )


def amortization_schedule(principal: float, rate_pct: float, years: float) -> pd.DataFrame:
    """Month-by-month split of each instalment into principal and interest.

    Returns:
        pandas.DataFrame: One row per month with the columns defined in
        :data:`calcdeck.schema.AMORTIZATION`. The balance is clipped at zero
        so floating-point drift never reports a negative final balance.

    Raises:
        OutOfRange: If the term exceeds 1200 months.
    """
    summary = loan_summary(principal, rate_pct, years)
    if summary.months > MAX_SCHEDULE_MONTHS:
        raise OutOfRange(
            f"Amortization schedules are limited to {MAX_SCHEDULE_MONTHS} months, "
            f"got {summary.months}",
            field="years",
        )
    i = rate_pct / 100.0 / 12.0

    rows = []
    balance = principal
    for month in range(1, summary.months + 1):
        interest = balance * i
        principal_part = summary.emi - interest
        balance -= principal_part
        rows.append(
            {
                AMORTIZATION.month: month,
                AMORTIZATION.emi: summary.emi,
                AMORTIZATION.principal: principal_part,
                AMORTIZATION.interest: interest,
                AMORTIZATION.balance: max(balance, 0.0),
            }
        )
    return pd.DataFrame(rows, columns=list(AMORTIZATION.columns))


def investment_future_value(
    principal: float, monthly: float, annual_return_pct: float, years: float
) -> InvestmentResult:
    """Future value of a lump sum plus fixed monthly contributions.

    Raises:
        InvalidInput: If the return is below -100 %, an amount is negative,
            or nothing is invested.
        OutOfRange: If the future value overflows.
    """
    require_non_negative(principal, "principal")
    require_non_negative(monthly, "monthly investment")
    require_non_negative(years, "years")
    if annual_return_pct < -100:
        raise InvalidInput("Return rate cannot be less than -100%", field="annual_return")

    i = annual_return_pct / 100.0 / 12.0
    months = require_finite_result(years * 12.0, "Investment term")
    growth = power(1 + i, months)
    # Contribution series degenerates to M * N at a zero rate.
    contributions = monthly * months if i == 0 else monthly * (growth - 1) / i
    future_value = require_finite_result(principal * growth + contributions, "Future value")

    invested = principal + monthly * months
    if invested <= 0:
        raise InvalidInput("Total investment must be positive", field="principal")
    total_return = future_value - invested
    return InvestmentResult(
        future_value=future_value,
        total_investment=invested,
        total_return=total_return,
        return_percentage=total_return / invested * 100.0,
    )


def profit_loss(
    cost_price: float, selling_price: float, discount_pct: Optional[float] = None
) -> ProfitLossResult:
    """Profit or loss on a sale, after an optional percentage discount.

    Raises:
        DomainError: If ``cost_price`` is zero.
        InvalidInput: If the discount is outside 0-100 %.
    """
    if cost_price == 0:
        raise DomainError("Cost price cannot be zero", field="cost_price")
    discount_amount = 0.0
    final_price = selling_price
    if discount_pct is not None and discount_pct > 0:
        require_in_range(discount_pct, 0.0, 100.0, "discount")
        discount_amount = selling_price * discount_pct / 100.0
        final_price = selling_price - discount_amount
    difference = final_price - cost_price
    return ProfitLossResult(
        profit_or_loss=difference,
        percentage=abs(difference) / abs(cost_price) * 100.0,
        final_price=final_price,
        discount_amount=discount_amount,
    )


def tax(amount: float, rate_pct: float, included: bool = False) -> TaxResult:
    """Split an amount into net and tax parts (GST style).

    When ``included`` is true, ``amount`` already contains the tax and the
    net amount is recovered by dividing out ``1 + rate``.
    """
    require_in_range(rate_pct, 0.0, 100.0, "Tax rate")
    rate = rate_pct / 100.0
    if included:
        net = amount / (1 + rate)
        return TaxResult(net_amount=net, tax_amount=amount - net, total_amount=amount)
    tax_amount = amount * rate
    return TaxResult(net_amount=amount, tax_amount=tax_amount, total_amount=amount + tax_amount)


def cumulative_interest(schedule: pd.DataFrame) -> np.ndarray:
    """Running total of the interest column of an amortization schedule."""
    return np.cumsum(schedule[AMORTIZATION.interest].to_numpy(dtype=float))
