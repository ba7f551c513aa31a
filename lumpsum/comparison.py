"""
Strategy comparison for LumpSum.

Purpose
-------
Reads a `CalculationResults` the way a results page does: which strategy
ends with the larger portfolio, by how much, and what the growth trajectory
looks like at yearly resolution. Also exposes pandas views for reports and
CSV export.

Key components
--------------
- Comparison: difference, winner and margin between the two strategies.
- compare / verdict: build the comparison and its one-sentence summary.
- yearly_points: every 12th month plus the final month.
- series_frame / summary_frame: pandas DataFrames for tables and exports.

Example
-------
>>> results = project(MortgageInputs(3.5, 7.0, 25, 300_000, 50_000))
>>> compare(results).winner
'Invest Lump Sum'
>>> series_frame(results, yearly=True).shape
(25, 3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import pandas as pd

from .constants import INVEST_LABEL, MONTHS_PER_YEAR, PAY_DOWN_LABEL
from .engine import CalculationResults, TimeSeriesPoint
from .utils import format_currency, format_years

__all__ = [
    "Comparison",
    "compare",
    "verdict",
    "yearly_points",
    "series_frame",
    "summary_frame",
]


@dataclass(frozen=True)
class Comparison:
    """
    Outcome of the two strategies side by side.

    Attributes
    ----------
    difference : float
        Invest final value minus pay-down final value.
    winner : str
        INVEST_LABEL when difference > 0, otherwise PAY_DOWN_LABEL.
    margin : float
        abs(difference).
    horizon_years : float
        Remaining term the projection covers.
    """
    difference: float
    winner: str
    margin: float
    horizon_years: float

    @property
    def invest_wins(self) -> bool:
        return self.winner == INVEST_LABEL


def compare(results: CalculationResults) -> Comparison:
    """Pick the strategy with the larger final portfolio; ties go to paying down."""
    difference = (
        results.invest_lump_sum.final_portfolio_value
        - results.pay_down_mortgage.final_portfolio_value
    )
    return Comparison(
        difference=difference,
        winner=INVEST_LABEL if difference > 0 else PAY_DOWN_LABEL,
        margin=abs(difference),
        horizon_years=results.inputs.remaining_years,
    )


def verdict(results: CalculationResults, *, symbol: str = "$", decimals: int = 0) -> str:
    """One-sentence summary of the comparison."""
    comparison = compare(results)
    years = comparison.horizon_years
    years_text = format_years(years)
    margin = format_currency(comparison.margin, decimals=decimals, symbol=symbol)
    return (
        f"After {years_text} years, the superior strategy is to {comparison.winner}, "
        f"leaving you with an estimated {margin} more in your portfolio."
    )


def yearly_points(series: Sequence[TimeSeriesPoint]) -> List[TimeSeriesPoint]:
    """Sample the trajectory at each full year, keeping the final month."""
    if not series:
        return []
    sampled = [p for p in series if p.month % MONTHS_PER_YEAR == 0]
    last = series[-1]
    if not sampled or sampled[-1].month != last.month:
        sampled.append(last)
    return sampled


def series_frame(results: CalculationResults, *, yearly: bool = False) -> pd.DataFrame:
    """
    Growth trajectory as a DataFrame indexed by month.

    Parameters
    ----------
    results : CalculationResults
        Projection output.
    yearly : bool, default False
        Keep only yearly samples (see `yearly_points`).

    Returns
    -------
    pd.DataFrame
        Columns: year, lump_sum_value, monthly_savings_value. Empty (with
        those columns) when the projection has no time series.
    """
    points = yearly_points(results.time_series) if yearly else list(results.time_series)
    columns = ["year", "lump_sum_value", "monthly_savings_value"]
    if not points:
        df = pd.DataFrame(columns=columns, dtype=float)
        df.index.name = "month"
        return df
    df = pd.DataFrame(
        {
            "month": [p.month for p in points],
            "year": [p.year for p in points],
            "lump_sum_value": [p.lump_sum_value for p in points],
            "monthly_savings_value": [p.monthly_savings_value for p in points],
        }
    )
    return df.set_index("month")


def summary_frame(results: CalculationResults) -> pd.DataFrame:
    """One row per strategy with its final value, interest and payment."""
    rows = []
    for label, scenario in (
        (INVEST_LABEL, results.invest_lump_sum),
        (PAY_DOWN_LABEL, results.pay_down_mortgage),
    ):
        rows.append(
            {
                "strategy": label,
                "final_portfolio_value": scenario.final_portfolio_value,
                "total_interest_paid": scenario.total_interest_paid,
                "monthly_payment": scenario.monthly_payment,
            }
        )
    return pd.DataFrame(rows).set_index("strategy")
