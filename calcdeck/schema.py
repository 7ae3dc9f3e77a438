"""Define standardized column names for result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AmortizationColumns:
    """Column labels for loan amortization schedules.

    Attributes:
        month: 1-based installment number.
        emi: Equated monthly installment; constant across the schedule.
        principal: Portion of the installment that repays principal.
        interest: Portion of the installment charged as interest on the
            balance outstanding at the start of the month.
        balance: Principal outstanding after the installment, floored at
            zero so rounding drift never shows a negative balance.
    """

    month: str = "Month"
    emi: str = "EMI"
    principal: str = "Principal"
    interest: str = "Interest"
    balance: str = "Balance"

    @property
    def columns(self) -> tuple[str, ...]:
        return (self.month, self.emi, self.principal, self.interest, self.balance)


@dataclass(frozen=True)
class SummaryColumns:
    """Column labels for two-column statistic/value summary tables."""

    statistic: str = "Statistic"
    value: str = "Value"


AMORTIZATION = AmortizationColumns()
SUMMARY = SummaryColumns()
