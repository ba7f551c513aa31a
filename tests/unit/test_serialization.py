"""
Unit tests for serialization.py module.

Tests JSON persistence of inputs and results, schema version checks and
error reporting for malformed documents.
"""

import json

import pytest

from lumpsum.engine import MortgageInputs
from lumpsum.exceptions import ConfigurationError
from lumpsum.serialization import (
    SCHEMA_VERSION,
    inputs_to_dict,
    inputs_from_dict,
    scenario_from_dict,
    results_to_dict,
    results_from_dict,
    save_inputs,
    load_inputs,
    save_results,
    load_results,
)


# ============================================================================
# INPUTS
# ============================================================================

class TestInputs:
    """Test input serialization."""

    def test_to_dict_uses_camel_case(self, default_inputs):
        assert inputs_to_dict(default_inputs) == {
            "mortgageRate": 3.5,
            "marketReturn": 7.0,
            "remainingYears": 25,
            "remainingBalance": 300_000,
            "lumpSum": 50_000,
        }

    def test_from_dict_fills_defaults(self, default_inputs):
        assert inputs_from_dict({"lumpSum": 50_000}) == default_inputs

    def test_save_and_load(self, tmp_path):
        inputs = MortgageInputs(6.5, 5.0, 15, 220_000, 30_000)
        path = tmp_path / "nested" / "inputs.json"
        save_inputs(inputs, path)

        data = json.loads(path.read_text())
        assert data["schema_version"] == SCHEMA_VERSION
        assert load_inputs(path) == inputs

    def test_load_bare_object(self, tmp_path):
        path = tmp_path / "inputs.json"
        path.write_text(json.dumps({"mortgage_rate": 4.0, "lumpSum": 1_000}))
        inputs = load_inputs(path)
        assert inputs.mortgage_rate == 4.0
        assert inputs.lump_sum == 1_000.0

    def test_load_non_object(self, tmp_path):
        path = tmp_path / "inputs.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_inputs(path)


# ============================================================================
# RESULTS
# ============================================================================

class TestResults:
    """Test results serialization."""

    def test_to_dict_layout(self, default_results):
        data = results_to_dict(default_results)
        assert data["schema_version"] == SCHEMA_VERSION
        assert set(data["investLumpSum"]) == {
            "finalPortfolioValue", "totalInterestPaid", "monthlyPayment"
        }
        assert len(data["timeSeriesData"]) == 300
        assert set(data["timeSeriesData"][0]) == {
            "month", "year", "lumpSumValue", "monthlySavingsValue"
        }
        assert data["comparison"]["winner"] == "Invest Lump Sum"

    def test_to_dict_without_series(self, default_results):
        data = results_to_dict(default_results, include_series=False)
        assert data["timeSeriesData"] == []

    def test_document_is_json(self, default_results):
        json.dumps(results_to_dict(default_results))

    def test_save_and_load(self, tmp_path, default_results):
        path = tmp_path / "results.json"
        save_results(default_results, path)
        assert load_results(path) == default_results

    def test_comparison_block_ignored_on_load(self, default_results):
        data = results_to_dict(default_results)
        data["comparison"] = {"winner": "nonsense"}
        assert results_from_dict(data) == default_results

    @pytest.mark.parametrize("section", ["inputs", "investLumpSum", "payDownMortgage"])
    def test_missing_section(self, default_results, section):
        data = results_to_dict(default_results)
        del data[section]
        with pytest.raises(ConfigurationError, match=section):
            results_from_dict(data)

    def test_missing_scenario_field(self):
        with pytest.raises(ConfigurationError, match="monthlyPayment"):
            scenario_from_dict({"finalPortfolioValue": 1.0, "totalInterestPaid": 2.0})

    def test_null_time_series(self, default_results):
        data = results_to_dict(default_results, include_series=False)
        data["timeSeriesData"] = None
        with pytest.raises(ConfigurationError, match="malformed"):
            results_from_dict(data)

    def test_inputs_not_an_object(self, default_results):
        data = results_to_dict(default_results, include_series=False)
        data["inputs"] = [3.5, 7.0]
        with pytest.raises(ConfigurationError, match="malformed"):
            results_from_dict(data)

    def test_null_scenario(self, default_results):
        data = results_to_dict(default_results, include_series=False)
        data["payDownMortgage"] = None
        with pytest.raises(ConfigurationError, match="malformed"):
            results_from_dict(data)

    def test_schema_version_mismatch_warns(self, tmp_path, default_results):
        data = results_to_dict(default_results, include_series=False)
        data["schema_version"] = "0.0.1"
        path = tmp_path / "old.json"
        path.write_text(json.dumps(data))

        with pytest.warns(UserWarning, match="Schema version 0.0.1"):
            loaded = load_results(path)
        assert loaded.invest_lump_sum == default_results.invest_lump_sum
