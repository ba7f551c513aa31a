"""Projection engine for LumpSum

Compares two uses of a lump sum over the remaining term of a mortgage:

- Invest Lump Sum: keep the existing payment schedule and let the lump sum
  compound in the market.
- Pay Down Mortgage: prepay principal, re-amortize over the same term and
  invest the monthly payment savings as an annuity.

Design goals
------------
- Pure and total: `project()` never raises for finite numbers. Degenerate
  intermediates (zero term, overflow, negative interest) are reported as 0.
- Value objects: every result is a frozen dataclass built fresh per call.
- Shared formulas: both scenarios and the time series go through
  `level_payment`, `fv_annuity` and `compound_growth`, so the last point of
  the series matches the scenario summaries.

Typical usage
-------------
>>> inputs = MortgageInputs(
...     mortgage_rate=3.5,
...     market_return=7.0,
...     remaining_years=25,
...     remaining_balance=300_000,
...     lump_sum=50_000,
... )
>>> results = project(inputs)
>>> round(results.invest_lump_sum.monthly_payment, 2)
1501.87
>>> len(results.time_series)
300
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Tuple

from .constants import MONTHS_PER_YEAR
from .utils import (
    annual_percent_to_monthly,
    clamp_non_negative,
    compound_growth,
    finite_or_zero,
    fv_annuity,
    level_payment,
)

__all__ = [
    "MortgageInputs",
    "ScenarioResult",
    "TimeSeriesPoint",
    "CalculationResults",
    "project",
    "invest_lump_sum",
    "pay_down_mortgage",
    "growth_series",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Inputs and results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MortgageInputs:
    """Calculator inputs. Rates are annual percentages (3.5 means 3.5%)."""
    mortgage_rate: float
    market_return: float
    remaining_years: float
    remaining_balance: float
    lump_sum: float

    @property
    def months(self) -> float:
        """Number of monthly periods, remaining_years * 12 (may be fractional)."""
        return self.remaining_years * MONTHS_PER_YEAR


@dataclass(frozen=True)
class ScenarioResult:
    final_portfolio_value: float
    total_interest_paid: float
    monthly_payment: float


@dataclass(frozen=True)
class TimeSeriesPoint:
    month: int
    year: float
    lump_sum_value: float
    monthly_savings_value: float


@dataclass(frozen=True)
class CalculationResults:
    invest_lump_sum: ScenarioResult
    pay_down_mortgage: ScenarioResult
    inputs: MortgageInputs
    monthly_investment: float = 0.0
    time_series: Tuple[TimeSeriesPoint, ...] = field(default_factory=tuple)

    @property
    def months(self) -> int:
        """Number of points in the growth trajectory."""
        return len(self.time_series)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------

def invest_lump_sum(
    balance: float,
    lump_sum: float,
    r_mortgage: float,
    r_market: float,
    n: float,
) -> ScenarioResult:
    """Scenario A: the mortgage runs unchanged, the lump sum compounds for n months."""
    payment = level_payment(balance, r_mortgage, n)
    return ScenarioResult(
        final_portfolio_value=clamp_non_negative(compound_growth(lump_sum, r_market, n)),
        total_interest_paid=clamp_non_negative(payment * n - balance),
        monthly_payment=payment,
    )


def pay_down_mortgage(
    balance: float,
    lump_sum: float,
    r_mortgage: float,
    r_market: float,
    n: float,
) -> Tuple[ScenarioResult, float]:
    """Scenario B: prepay principal, re-amortize, invest the freed payment.

    Returns the scenario summary and the monthly amount invested. The
    monthly investment is the whole original payment when the lump sum
    retires the loan, and may be <= 0 for pathological rates, in which case
    nothing is invested.
    """
    original_payment = level_payment(balance, r_mortgage, n)
    new_balance = balance - lump_sum

    if new_balance <= 0:
        new_payment = 0.0
        total_interest = 0.0
        monthly_investment = original_payment
    else:
        new_payment = level_payment(new_balance, r_mortgage, n)
        total_interest = clamp_non_negative(new_payment * n - new_balance)
        monthly_investment = finite_or_zero(original_payment - new_payment)

    final_value = 0.0
    if monthly_investment > 0 and n > 0:
        final_value = fv_annuity(monthly_investment, r_market, n)

    result = ScenarioResult(
        final_portfolio_value=clamp_non_negative(final_value),
        total_interest_paid=total_interest,
        monthly_payment=new_payment,
    )
    return result, monthly_investment


# ---------------------------------------------------------------------------
# Growth trajectory
# ---------------------------------------------------------------------------

def growth_series(
    lump_sum: float,
    monthly_investment: float,
    r_market: float,
    n: float,
) -> Tuple[TimeSeriesPoint, ...]:
    """Month-by-month value of both invested assets for months 1..floor(n)."""
    last_month = int(math.floor(n)) if n > 0 else 0
    points = []
    for month in range(1, last_month + 1):
        if monthly_investment <= 0:
            savings_value = 0.0
        else:
            savings_value = fv_annuity(monthly_investment, r_market, month)
        points.append(
            TimeSeriesPoint(
                month=month,
                year=month / MONTHS_PER_YEAR,
                lump_sum_value=compound_growth(lump_sum, r_market, month),
                monthly_savings_value=savings_value,
            )
        )
    return tuple(points)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def project(inputs: MortgageInputs, *, include_series: bool = True) -> CalculationResults:
    """Project both strategies over the remaining term.

    Parameters
    ----------
    inputs : MortgageInputs
        Rates in annual percent, term in years, balance and lump sum in
        currency units. No validation is performed here.
    include_series : bool, default True
        Build the month-by-month growth trajectory. When False the
        `time_series` of the result is empty.

    Returns
    -------
    CalculationResults
        Both scenario summaries, the Scenario B monthly investment, the
        trajectory and an echo of `inputs`.
    """
    n = finite_or_zero(inputs.months)
    r_mortgage = finite_or_zero(annual_percent_to_monthly(inputs.mortgage_rate))
    r_market = finite_or_zero(annual_percent_to_monthly(inputs.market_return))
    balance = finite_or_zero(inputs.remaining_balance)
    lump_sum = finite_or_zero(inputs.lump_sum)

    scenario_a = invest_lump_sum(balance, lump_sum, r_mortgage, r_market, n)
    scenario_b, monthly_investment = pay_down_mortgage(
        balance, lump_sum, r_mortgage, r_market, n
    )
    series = growth_series(lump_sum, monthly_investment, r_market, n) if include_series else ()

    logger.debug(
        "Projected %s months: invest=%.2f pay_down=%.2f monthly_investment=%.2f",
        n,
        scenario_a.final_portfolio_value,
        scenario_b.final_portfolio_value,
        monthly_investment,
    )

    return CalculationResults(
        invest_lump_sum=scenario_a,
        pay_down_mortgage=scenario_b,
        inputs=inputs,
        monthly_investment=monthly_investment,
        time_series=series,
    )
