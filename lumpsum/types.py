"""
Type definitions for LumpSum.

Purpose
-------
TypedDict definitions for the JSON wire format produced and consumed by
`lumpsum.serialization`. Keys follow the camelCase names of the calculator's
data contract so documents can be exchanged with web front-ends unchanged.

Type Definitions
----------------
MortgageInputsDict
    The five numeric inputs: {"mortgageRate", "marketReturn", ...}

ScenarioResultDict
    Per-strategy summary: {"finalPortfolioValue", "totalInterestPaid", "monthlyPayment"}

TimeSeriesPointDict
    One month of the growth trajectory.

ComparisonDict
    Winner/difference block attached to saved results.

CalculationResultsDict
    Full results document.
"""

from typing import List
from typing_extensions import TypedDict, NotRequired

__all__ = [
    "MortgageInputsDict",
    "ScenarioResultDict",
    "TimeSeriesPointDict",
    "ComparisonDict",
    "CalculationResultsDict",
]


class MortgageInputsDict(TypedDict):
    """
    Calculator inputs as exchanged in JSON.

    Examples
    --------
    >>> inputs: MortgageInputsDict = {
    ...     "mortgageRate": 3.5,
    ...     "marketReturn": 7.0,
    ...     "remainingYears": 25,
    ...     "remainingBalance": 300_000,
    ...     "lumpSum": 50_000,
    ... }
    """

    mortgageRate: float
    marketReturn: float
    remainingYears: float
    remainingBalance: float
    lumpSum: float


class ScenarioResultDict(TypedDict):
    """Summary of one strategy at the end of the term."""

    finalPortfolioValue: float
    totalInterestPaid: float
    monthlyPayment: float


class TimeSeriesPointDict(TypedDict):
    """
    One month of the growth trajectory.

    Attributes
    ----------
    month : int
        1-based month index.
    year : float
        month / 12.
    lumpSumValue : float
        Value of the invested lump sum at this month.
    monthlySavingsValue : float
        Value of the invested monthly savings at this month.
    """

    month: int
    year: float
    lumpSumValue: float
    monthlySavingsValue: float


class ComparisonDict(TypedDict):
    """Derived verdict stored next to the results for report rendering."""

    difference: float
    winner: str
    margin: float


class CalculationResultsDict(TypedDict, total=False):
    """
    Results document written by `save_results`.

    `comparison` and `schema_version` are optional on load; `timeSeriesData`
    may be an empty list when the series was not requested.
    """

    schema_version: NotRequired[str]
    investLumpSum: ScenarioResultDict
    payDownMortgage: ScenarioResultDict
    monthlyInvestment: float
    timeSeriesData: List[TimeSeriesPointDict]
    inputs: MortgageInputsDict
    comparison: NotRequired[ComparisonDict]
