"""
Unit tests for inputs.py module.

Tests keystroke filtering, submission coercion and form validation.
"""

import pytest

from lumpsum.exceptions import ValidationError
from lumpsum.inputs import (
    FIELD_NAMES,
    FIELD_LABELS,
    accepts_entry,
    coerce_field,
    is_form_valid,
    inputs_from_form,
    parse_form,
)


class TestAcceptsEntry:
    """Test the in-progress entry filter."""

    @pytest.mark.parametrize("text", ["", "0", "12", "12.5", "12.", ".5", ".", "007"])
    def test_accepted(self, text):
        assert accepts_entry(text)

    @pytest.mark.parametrize("text", ["-1", "1.2.3", "abc", "1e5", " 1", "1,000", "+3", "١٢"])
    def test_rejected(self, text):
        assert not accepts_entry(text)


class TestCoerceField:
    """Test conversion of submitted entries."""

    def test_numbers(self):
        assert coerce_field("12.5") == 12.5
        assert coerce_field("300000") == 300_000.0
        assert coerce_field(".5") == 0.5
        assert coerce_field(" 7 ") == 7.0

    @pytest.mark.parametrize("text", ["", ".", "abc", "   ", None, "nan", "inf"])
    def test_unparsable_is_zero(self, text):
        assert coerce_field(text) == 0.0


class TestFormValidity:
    """Test the submit gate."""

    def test_valid_form(self, form_fields):
        assert is_form_valid(form_fields)

    def test_snake_case_keys(self):
        fields = {name: "1" for name in FIELD_NAMES}
        assert is_form_valid(fields)

    def test_blank_field_invalid(self, form_fields):
        form_fields["lumpSum"] = ""
        assert not is_form_valid(form_fields)

    def test_missing_field_invalid(self, form_fields):
        del form_fields["remainingYears"]
        assert not is_form_valid(form_fields)

    def test_negative_field_invalid(self, form_fields):
        form_fields["marketReturn"] = "-1"
        assert not is_form_valid(form_fields)

    def test_every_field_has_label(self):
        assert set(FIELD_LABELS) == set(FIELD_NAMES)


class TestInputsFromForm:
    """Test lenient form conversion."""

    def test_builds_inputs(self, form_fields, default_inputs):
        assert inputs_from_form(form_fields) == default_inputs

    def test_missing_and_unparsable_default_to_zero(self):
        inputs = inputs_from_form({"mortgageRate": "abc", "lumpSum": "."})
        assert inputs.mortgage_rate == 0.0
        assert inputs.lump_sum == 0.0
        assert inputs.remaining_balance == 0.0


class TestParseForm:
    """Test strict form conversion."""

    def test_valid(self, form_fields, default_inputs):
        assert parse_form(form_fields) == default_inputs

    def test_reports_every_problem(self, form_fields):
        form_fields["lumpSum"] = ""
        form_fields["mortgageRate"] = "abc"
        form_fields["marketReturn"] = "-2"
        with pytest.raises(ValidationError) as exc_info:
            parse_form(form_fields)
        message = str(exc_info.value)
        assert "lumpSum is required" in message
        assert "mortgageRate='abc' (not a number)" in message
        assert "marketReturn='-2' (must be non-negative)" in message
