"""
LumpSum — Mortgage Lump-Sum Strategy Comparator

Should a lump sum go into the market or into the mortgage? Projects both
strategies over the remaining term and compares the resulting portfolios.

Modules
-------
- engine        : Projection engine (value objects + project())
- inputs        : Form entry filtering and coercion
- comparison    : Winner/difference, yearly sampling, pandas views
- plotting      : matplotlib growth and comparison charts
- config        : Pydantic input model, display and app settings
- serialization : JSON persistence of inputs and results
- utils         : Finance formulas and formatters

"""

from .engine import (
    MortgageInputs,
    ScenarioResult,
    TimeSeriesPoint,
    CalculationResults,
    project,
)
from .comparison import Comparison, compare
from . import utils
