"""
Serialization module for LumpSum inputs and results.

Purpose
-------
Provides JSON serialization and deserialization for calculator inputs and
projection results, enabling saved scenarios, reports rendered later, and
exchange with web front-ends.

Supports serialization of:
- MortgageInputs (camelCase keys, validated on load)
- ScenarioResult
- CalculationResults (scenarios, time series, input echo, comparison)

Design Principles
-----------------
- Type-safe: Inputs are validated through MortgageInputsConfig
- Wire-compatible: camelCase keys mirror the calculator's data contract
- Human-readable: Indented JSON for easy editing
- Backward compatible: Validates schema versions

Example
-------
>>> from pathlib import Path
>>> from lumpsum.engine import MortgageInputs, project
>>> from lumpsum.serialization import save_results, load_results
>>>
>>> results = project(MortgageInputs(3.5, 7.0, 25, 300_000, 50_000))
>>> save_results(results, Path("results/comparison.json"))
>>> loaded = load_results(Path("results/comparison.json"))
>>> loaded == results
True
"""

from __future__ import annotations
from typing import Dict, Any, Mapping
from pathlib import Path
import json
import warnings

from .comparison import compare
from .config import MortgageInputsConfig
from .engine import CalculationResults, MortgageInputs, ScenarioResult, TimeSeriesPoint
from .exceptions import ConfigurationError
from .types import (
    CalculationResultsDict,
    MortgageInputsDict,
    ScenarioResultDict,
    TimeSeriesPointDict,
)

__all__ = [
    "SCHEMA_VERSION",
    "inputs_to_dict",
    "inputs_from_dict",
    "scenario_to_dict",
    "scenario_from_dict",
    "results_to_dict",
    "results_from_dict",
    "save_inputs",
    "load_inputs",
    "save_results",
    "load_results",
]


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "0.1.0"


def _check_schema_version(data: Mapping[str, Any]) -> None:
    schema_version = data.get("schema_version", "0.0.0")
    if schema_version != SCHEMA_VERSION:
        warnings.warn(
            f"Schema version {schema_version} differs from current "
            f"version {SCHEMA_VERSION}. May encounter compatibility issues.",
            UserWarning,
        )


def _require(data: Mapping[str, Any], key: str, what: str) -> Any:
    if key not in data:
        raise ConfigurationError(f"{what} is missing the '{key}' section.")
    return data[key]


def _read_json(path: Path, what: str) -> Dict[str, Any]:
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ConfigurationError(f"{what} must contain a JSON object, got {type(data).__name__}.")
    return data


def _write_json(data: Mapping[str, Any], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


# ---------------------------------------------------------------------------
# Inputs Serialization
# ---------------------------------------------------------------------------

def inputs_to_dict(inputs: MortgageInputs) -> MortgageInputsDict:
    """
    Convert MortgageInputs to its camelCase dictionary representation.

    Parameters
    ----------
    inputs : MortgageInputs
        Inputs to serialize

    Returns
    -------
    dict
        {"mortgageRate", "marketReturn", "remainingYears", "remainingBalance", "lumpSum"}
    """
    return {
        "mortgageRate": inputs.mortgage_rate,
        "marketReturn": inputs.market_return,
        "remainingYears": inputs.remaining_years,
        "remainingBalance": inputs.remaining_balance,
        "lumpSum": inputs.lump_sum,
    }


def inputs_from_dict(data: Mapping[str, Any]) -> MortgageInputs:
    """
    Create MortgageInputs from a dictionary (camelCase or snake_case keys).

    Missing fields take the calculator defaults.

    Raises
    ------
    pydantic.ValidationError
        If a value is out of range or an unknown key is present.
    """
    config = MortgageInputsConfig.model_validate(dict(data))
    return config.to_inputs()


# ---------------------------------------------------------------------------
# Scenario Serialization
# ---------------------------------------------------------------------------

def scenario_to_dict(scenario: ScenarioResult) -> ScenarioResultDict:
    """Convert a ScenarioResult to dictionary representation."""
    return {
        "finalPortfolioValue": scenario.final_portfolio_value,
        "totalInterestPaid": scenario.total_interest_paid,
        "monthlyPayment": scenario.monthly_payment,
    }


def scenario_from_dict(data: Mapping[str, Any]) -> ScenarioResult:
    """Create a ScenarioResult from dictionary representation."""
    try:
        return ScenarioResult(
            final_portfolio_value=float(data["finalPortfolioValue"]),
            total_interest_paid=float(data["totalInterestPaid"]),
            monthly_payment=float(data["monthlyPayment"]),
        )
    except KeyError as e:
        raise ConfigurationError(f"Scenario result is missing field {e}.") from e
    except TypeError as e:
        raise ConfigurationError(f"Scenario result is malformed: {e}") from e


def _point_to_dict(point: TimeSeriesPoint) -> TimeSeriesPointDict:
    return {
        "month": point.month,
        "year": point.year,
        "lumpSumValue": point.lump_sum_value,
        "monthlySavingsValue": point.monthly_savings_value,
    }


def _point_from_dict(data: Mapping[str, Any]) -> TimeSeriesPoint:
    return TimeSeriesPoint(
        month=int(data["month"]),
        year=float(data["year"]),
        lump_sum_value=float(data["lumpSumValue"]),
        monthly_savings_value=float(data["monthlySavingsValue"]),
    )


# ---------------------------------------------------------------------------
# CalculationResults Serialization
# ---------------------------------------------------------------------------

def results_to_dict(results: CalculationResults, include_series: bool = True) -> CalculationResultsDict:
    """
    Convert CalculationResults to dictionary representation.

    Parameters
    ----------
    results : CalculationResults
        Projection output
    include_series : bool
        Whether to include the month-by-month time series

    Returns
    -------
    dict
        Results document including a derived "comparison" block.
    """
    comparison = compare(results)
    return {
        "schema_version": SCHEMA_VERSION,
        "investLumpSum": scenario_to_dict(results.invest_lump_sum),
        "payDownMortgage": scenario_to_dict(results.pay_down_mortgage),
        "monthlyInvestment": results.monthly_investment,
        "timeSeriesData": (
            [_point_to_dict(p) for p in results.time_series] if include_series else []
        ),
        "inputs": inputs_to_dict(results.inputs),
        "comparison": {
            "difference": comparison.difference,
            "winner": comparison.winner,
            "margin": comparison.margin,
        },
    }


def results_from_dict(data: Mapping[str, Any]) -> CalculationResults:
    """
    Create CalculationResults from dictionary representation.

    The "comparison" block is derived data and is ignored on load. Inputs
    are restored as stored, without range validation, so a document always
    reproduces the record that produced it.
    """
    what = "Results document"
    inputs_data = _require(data, "inputs", what)
    try:
        inputs = MortgageInputs(
            mortgage_rate=float(inputs_data["mortgageRate"]),
            market_return=float(inputs_data["marketReturn"]),
            remaining_years=float(inputs_data["remainingYears"]),
            remaining_balance=float(inputs_data["remainingBalance"]),
            lump_sum=float(inputs_data["lumpSum"]),
        )
        series = tuple(_point_from_dict(p) for p in data.get("timeSeriesData", []))
    except KeyError as e:
        raise ConfigurationError(f"{what} is missing field {e}.") from e
    except TypeError as e:
        raise ConfigurationError(f"{what} has a malformed section: {e}") from e

    return CalculationResults(
        invest_lump_sum=scenario_from_dict(_require(data, "investLumpSum", what)),
        pay_down_mortgage=scenario_from_dict(_require(data, "payDownMortgage", what)),
        inputs=inputs,
        monthly_investment=float(data.get("monthlyInvestment", 0.0)),
        time_series=series,
    )


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def save_inputs(inputs: MortgageInputs, path: Path) -> None:
    """
    Save calculator inputs to a JSON file.

    Examples
    --------
    >>> save_inputs(MortgageInputs(3.5, 7.0, 25, 300_000, 50_000), Path("inputs.json"))
    """
    data = {"schema_version": SCHEMA_VERSION, "inputs": inputs_to_dict(inputs)}
    _write_json(data, path)


def load_inputs(path: Path) -> MortgageInputs:
    """
    Load calculator inputs from a JSON file.

    Accepts either {"schema_version": ..., "inputs": {...}} or a bare inputs
    object.

    Raises
    ------
    ConfigurationError
        If the file does not hold a JSON object.
    pydantic.ValidationError
        If a value is out of range.
    """
    data = _read_json(path, "Inputs file")
    if "inputs" in data:
        _check_schema_version(data)
        return inputs_from_dict(data["inputs"])
    return inputs_from_dict(data)


def save_results(
    results: CalculationResults,
    path: Path,
    include_series: bool = True,
) -> None:
    """
    Save CalculationResults to a JSON file.

    Parameters
    ----------
    results : CalculationResults
        Projection output to save
    path : Path
        Output file path
    include_series : bool
        Whether to include the month-by-month time series
    """
    _write_json(results_to_dict(results, include_series=include_series), path)


def load_results(path: Path) -> CalculationResults:
    """
    Load CalculationResults from a JSON file.

    Raises
    ------
    ConfigurationError
        If a required section is missing.
    """
    data = _read_json(path, "Results file")
    _check_schema_version(data)
    return results_from_dict(data)
