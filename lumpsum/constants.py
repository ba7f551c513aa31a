"""
Global constants for LumpSum.

Purpose
-------
Centralizes default values and labels used throughout the LumpSum codebase
so the CLI, plots and reports agree on naming and defaults.

Usage
-----
>>> from lumpsum.constants import DEFAULT_INPUTS, INVEST_LABEL
>>>
>>> DEFAULT_INPUTS["mortgage_rate"]
3.5

Categories
----------
- Time: months per year
- Inputs: default form values and bounds
- Strategies: display labels for the two scenarios
- Plotting: figure sizes, colors
"""

from typing import Dict, Tuple

__all__ = [
    # Time
    "MONTHS_PER_YEAR",
    # Inputs
    "DEFAULT_INPUTS",
    "MAX_RATE_PERCENT",
    "MAX_REMAINING_YEARS",
    # Strategies
    "INVEST_LABEL",
    "PAY_DOWN_LABEL",
    "STRATEGY_LABELS",
    # Plotting
    "DEFAULT_FIGSIZE",
    "DEFAULT_FIGSIZE_WIDE",
    "INVEST_COLOR",
    "PAY_DOWN_COLOR",
    "DEFAULT_LINEWIDTH_THICK",
    "DEFAULT_DPI",
]


# =============================================================================
# Time
# =============================================================================

MONTHS_PER_YEAR: int = 12
"""Number of months in a year (periods per year for monthly compounding)."""


# =============================================================================
# Inputs
# =============================================================================

DEFAULT_INPUTS: Dict[str, float] = {
    "mortgage_rate": 3.5,
    "market_return": 7.0,
    "remaining_years": 25.0,
    "remaining_balance": 300_000.0,
    "lump_sum": 50_000.0,
}
"""Starting values shown by the calculator form and used by the CLI."""

MAX_RATE_PERCENT: float = 100.0
"""Upper bound accepted by the config layer for annual rates (percent)."""

MAX_REMAINING_YEARS: float = 100.0
"""Upper bound on the remaining term; bounds the length of the time series."""


# =============================================================================
# Strategies
# =============================================================================

INVEST_LABEL: str = "Invest Lump Sum"
"""Scenario A: keep the mortgage, invest the lump sum."""

PAY_DOWN_LABEL: str = "Pay Down Mortgage"
"""Scenario B: prepay principal, invest the monthly savings."""

STRATEGY_LABELS: Tuple[str, str] = (INVEST_LABEL, PAY_DOWN_LABEL)


# =============================================================================
# Plotting Defaults
# =============================================================================

DEFAULT_FIGSIZE: Tuple[int, int] = (10, 6)
"""Default figure size (width, height) in inches for single-panel plots."""

DEFAULT_FIGSIZE_WIDE: Tuple[int, int] = (14, 6)
"""Figure size for the two-panel comparison."""

INVEST_COLOR: str = "#10b981"
"""Line/bar color for the invest strategy (green)."""

PAY_DOWN_COLOR: str = "#3b82f6"
"""Line/bar color for the pay-down strategy (blue)."""

DEFAULT_LINEWIDTH_THICK: float = 2.5
"""Line width for growth trajectories."""

DEFAULT_DPI: int = 150
"""Resolution used when saving figures."""
