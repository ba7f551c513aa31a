"""
Pytest configuration and fixtures for LumpSum test suite.

This module provides reusable fixtures for testing all LumpSum components.
Fixtures follow the principle of "arrange-act-assert" with clear separation.
"""

from typing import Dict

import pytest

from lumpsum.engine import CalculationResults, MortgageInputs, project


# ---------------------------------------------------------------------------
# Input Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def default_inputs() -> MortgageInputs:
    """
    Calculator defaults.

    Mortgage: 300,000 at 3.5% over 25 years
    Lump sum: 50,000
    Market: 7% annually
    """
    return MortgageInputs(
        mortgage_rate=3.5,
        market_return=7.0,
        remaining_years=25,
        remaining_balance=300_000,
        lump_sum=50_000,
    )


@pytest.fixture
def high_rate_inputs() -> MortgageInputs:
    """Expensive mortgage, weak market: paying down should win."""
    return MortgageInputs(
        mortgage_rate=10.0,
        market_return=2.0,
        remaining_years=25,
        remaining_balance=300_000,
        lump_sum=50_000,
    )


@pytest.fixture
def payoff_inputs() -> MortgageInputs:
    """Lump sum larger than the balance: the loan is retired."""
    return MortgageInputs(
        mortgage_rate=4.0,
        market_return=6.0,
        remaining_years=10,
        remaining_balance=40_000,
        lump_sum=50_000,
    )


@pytest.fixture
def form_fields() -> Dict[str, str]:
    """Form entries as typed by a user (camelCase names, strings)."""
    return {
        "mortgageRate": "3.5",
        "marketReturn": "7",
        "remainingYears": "25",
        "remainingBalance": "300000",
        "lumpSum": "50000",
    }


# ---------------------------------------------------------------------------
# Result Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def default_results(default_inputs) -> CalculationResults:
    """Projection of the calculator defaults, with time series."""
    return project(default_inputs)


@pytest.fixture
def results_without_series(default_inputs) -> CalculationResults:
    """Projection of the calculator defaults, no time series."""
    return project(default_inputs, include_series=False)
