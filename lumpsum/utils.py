"""General utilities for LumpSum

Contents
--------
- Rate conversions (annual percent → monthly)
- Numeric hygiene (finite_or_zero, clamp_non_negative, growth_factor)
- Finance helpers (level_payment, fv_annuity, compound_growth)
- Formatters (format_currency, format_years, thousands_formatter)
"""

from __future__ import annotations

import math

from .constants import MONTHS_PER_YEAR

__all__ = [
    # Rates
    "annual_percent_to_monthly",
    # Numeric hygiene
    "finite_or_zero",
    "clamp_non_negative",
    "growth_factor",
    # Finance
    "level_payment",
    "fv_annuity",
    "compound_growth",
    # Formatters
    "format_currency",
    "format_years",
    "thousands_formatter",
]

# ---------------------------------------------------------------------------
# Rate conversions
# ---------------------------------------------------------------------------

def annual_percent_to_monthly(rate_percent: float) -> float:
    """Convert a nominal annual rate in percent to the monthly periodic rate.

    Uses: rate / 100 / 12 (nominal, not compounded). 3.5 → 0.0029166...
    """
    return float(rate_percent) / 100.0 / MONTHS_PER_YEAR


# ---------------------------------------------------------------------------
# Numeric hygiene
# ---------------------------------------------------------------------------

def finite_or_zero(value: float) -> float:
    """Return *value* as float, or 0.0 when it is NaN, infinite or too large for a float."""
    try:
        value = float(value)
    except OverflowError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def clamp_non_negative(value: float) -> float:
    """Return *value* if finite and positive, else 0.0."""
    value = finite_or_zero(value)
    return value if value > 0 else 0.0


def growth_factor(rate: float, periods: float) -> float:
    """Compute (1 + rate) ** periods without raising.

    Overflow and 0 ** negative map to +inf; a negative base raised to a
    fractional power (complex in Python) maps to NaN.
    """
    try:
        factor = (1.0 + rate) ** periods
    except (OverflowError, ZeroDivisionError):
        return math.inf
    if isinstance(factor, complex):
        return math.nan
    return float(factor)


# ---------------------------------------------------------------------------
# Finance helpers
# ---------------------------------------------------------------------------

def level_payment(principal: float, rate: float, n: float) -> float:
    """Level payment that amortizes *principal* over *n* periods at *rate*.

    payment = P * r(1+r)^n / ((1+r)^n - 1)

    - principal <= 0 or n <= 0 → 0 (no loan or no term, no payment)
    - rate == 0 → straight-line P / n
    - (1+r)^n rounding to exactly 1 → straight-line P / n
    - (1+r)^n overflowing → limit P * r for r > 0, else 0
    - anything non-finite or negative → 0
    """
    if principal <= 0 or n <= 0:
        return 0.0
    if rate == 0:
        return finite_or_zero(principal / n)
    factor = growth_factor(rate, n)
    if math.isinf(factor):
        # below -2 the base is negative and the limit does not exist
        return finite_or_zero(principal * rate) if rate > 0 else 0.0
    denominator = factor - 1.0
    if denominator == 0:
        return finite_or_zero(principal / n)
    return clamp_non_negative(principal * (rate * factor) / denominator)


def fv_annuity(payment: float, rate: float, n: float) -> float:
    """Future value of an ordinary annuity of *payment* over *n* periods.

    FV = PMT * ((1+r)^n - 1) / r, or PMT * n when r == 0. Non-finite → 0.
    """
    if rate == 0:
        return finite_or_zero(payment * n)
    factor = growth_factor(rate, n)
    return finite_or_zero(payment * ((factor - 1.0) / rate))


def compound_growth(amount: float, rate: float, periods: float) -> float:
    """Value of *amount* compounded at *rate* for *periods*. Non-finite → 0."""
    return finite_or_zero(amount * growth_factor(rate, periods))


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

def format_currency(value: float, decimals: int = 0, symbol: str = "$") -> str:
    """
    Format a monetary amount with thousands separators.

    Parameters
    ----------
    value : float
        Monetary value in currency units.
    decimals : int, default 0
        Number of decimal places to display.
    symbol : str, default '$'
        Currency symbol prefix.

    Returns
    -------
    str
        Formatted string; negative amounts carry a leading minus sign.

    Examples
    --------
    >>> format_currency(286270.8)
    '$286,271'
    >>> format_currency(1501.871, decimals=2)
    '$1,501.87'
    >>> format_currency(-2500)
    '-$2,500'
    """
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{decimals}f}"


def format_years(years: float) -> str:
    """
    Format a term in years without exponent notation.

    Examples
    --------
    >>> format_years(25.0)
    '25'
    >>> format_years(2.5)
    '2.5'
    >>> format_years(1e6)
    '1,000,000'
    """
    if isinstance(years, int):
        return f"{years:,}"
    years = float(years)
    if years.is_integer():
        return f"{int(years):,}"
    return f"{years:,}"


def thousands_formatter(x, pos):
    """
    Format axis values in thousands for matplotlib FuncFormatter.

    - 250_000 → "$250k"
    - 12_500 → "$12.5k"
    - 0 → "0"

    Examples
    --------
    >>> from matplotlib.ticker import FuncFormatter
    >>> ax.yaxis.set_major_formatter(FuncFormatter(thousands_formatter))
    """
    if x == 0:
        return '0'
    val = x / 1e3
    return f'${val:.0f}k' if val == int(val) else f'${val:.1f}k'
