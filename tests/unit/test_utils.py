"""
Unit tests for utils.py module.

Tests rate conversion, numeric hygiene, finance helpers and
formatting utilities.
"""

import math

import pytest

from lumpsum.utils import (
    annual_percent_to_monthly,
    finite_or_zero,
    clamp_non_negative,
    growth_factor,
    level_payment,
    fv_annuity,
    compound_growth,
    format_currency,
    format_years,
    thousands_formatter,
)


class TestRateConversion:
    """Test annual percent -> monthly rate conversion."""

    def test_zero(self):
        assert annual_percent_to_monthly(0) == 0.0

    def test_nominal_division(self):
        """3.5% annual is 0.035 / 12 per month (no compounding)."""
        assert annual_percent_to_monthly(3.5) == pytest.approx(0.035 / 12)
        assert annual_percent_to_monthly(12) == pytest.approx(0.01)

    def test_negative_rates_pass_through(self):
        assert annual_percent_to_monthly(-6) == pytest.approx(-0.005)


class TestNumericHygiene:
    """Test finite_or_zero, clamp_non_negative and growth_factor."""

    def test_finite_or_zero(self):
        assert finite_or_zero(1.5) == 1.5
        assert finite_or_zero(-2.0) == -2.0
        assert finite_or_zero(math.nan) == 0.0
        assert finite_or_zero(math.inf) == 0.0
        assert finite_or_zero(-math.inf) == 0.0

    def test_finite_or_zero_int_too_large_for_float(self):
        assert finite_or_zero(10**400) == 0.0
        assert clamp_non_negative(-10**400) == 0.0

    def test_clamp_non_negative(self):
        assert clamp_non_negative(2.0) == 2.0
        assert clamp_non_negative(-3.0) == 0.0
        assert clamp_non_negative(math.nan) == 0.0
        assert clamp_non_negative(math.inf) == 0.0

    def test_growth_factor_regular(self):
        assert growth_factor(0.01, 12) == pytest.approx(1.01 ** 12)
        assert growth_factor(0.0, 300) == 1.0

    def test_growth_factor_overflow_is_inf(self):
        """Overflowing powers map to +inf instead of raising."""
        assert growth_factor(1e10, 1e4) == math.inf

    def test_growth_factor_zero_base_negative_power_is_inf(self):
        assert growth_factor(-1.0, -1) == math.inf

    def test_growth_factor_complex_is_nan(self):
        """Negative base with a fractional exponent maps to NaN."""
        assert math.isnan(growth_factor(-3.0, 0.5))


class TestLevelPayment:
    """Test level payment amortization."""

    def test_standard_mortgage(self):
        """300k at 3.5% over 25 years is about 1,501.87 per month."""
        r = 0.035 / 12
        payment = level_payment(300_000, r, 300)
        expected = 300_000 * (r * (1 + r) ** 300) / ((1 + r) ** 300 - 1)
        assert payment == pytest.approx(expected)
        assert payment == pytest.approx(1501.87, abs=0.05)

    def test_zero_rate_is_straight_line(self):
        assert level_payment(120_000, 0.0, 120) == pytest.approx(1000.0)

    def test_no_principal(self):
        assert level_payment(0, 0.01, 120) == 0.0
        assert level_payment(-5, 0.01, 120) == 0.0

    def test_no_term(self):
        """Zero or negative term yields no payment."""
        assert level_payment(300_000, 0.0, 0) == 0.0
        assert level_payment(300_000, 0.01, 0) == 0.0
        assert level_payment(300_000, 0.01, -12) == 0.0

    def test_rate_below_float_resolution(self):
        """(1 + r) rounding to 1 falls back to straight-line."""
        assert level_payment(1200, 1e-18, 12) == pytest.approx(100.0)

    def test_overflow_uses_interest_only_limit(self):
        assert level_payment(1000, 1e10, 1e4) == pytest.approx(1000 * 1e10)

    def test_overflow_with_negative_base_is_zero(self):
        """Rates below -2 overflow through a negative base: no limit, no payment."""
        assert level_payment(1000, -5000 / 1200, 1200) == 0.0

    def test_negative_result_is_zero(self):
        # (1 - 3) ** 3 = -8 gives a negative quotient
        assert level_payment(1000, -3.0, 3) == 0.0

    def test_complex_intermediate_is_zero(self):
        assert level_payment(1000, -1.5, 12.5) == 0.0


class TestAnnuityAndGrowth:
    """Test fv_annuity and compound_growth."""

    def test_fv_annuity(self):
        expected = 100 * ((1.01 ** 12 - 1) / 0.01)
        assert fv_annuity(100, 0.01, 12) == pytest.approx(expected)
        assert fv_annuity(100, 0.01, 12) == pytest.approx(1268.25, abs=0.01)

    def test_fv_annuity_zero_rate(self):
        assert fv_annuity(250, 0.0, 300) == pytest.approx(75_000)

    def test_fv_annuity_overflow_is_zero(self):
        assert fv_annuity(100, 1e10, 1e4) == 0.0

    def test_compound_growth(self):
        r = 0.07 / 12
        assert compound_growth(50_000, r, 300) == pytest.approx(50_000 * (1 + r) ** 300)
        assert compound_growth(50_000, 0.0, 300) == 50_000

    def test_compound_growth_non_finite_is_zero(self):
        assert compound_growth(1.0, 1e10, 1e4) == 0.0
        assert compound_growth(1.0, -3.0, 0.5) == 0.0


class TestFormatting:
    """Test formatting functions."""

    def test_format_currency_default(self):
        assert format_currency(286_270.8) == "$286,271"
        assert format_currency(0) == "$0"

    def test_format_currency_decimals(self):
        assert format_currency(1501.871, decimals=2) == "$1,501.87"

    def test_format_currency_symbol(self):
        assert format_currency(1000, symbol="€") == "€1,000"

    def test_format_currency_negative(self):
        assert format_currency(-2500) == "-$2,500"

    def test_format_years(self):
        assert format_years(25) == "25"
        assert format_years(25.0) == "25"
        assert format_years(2.5) == "2.5"
        assert format_years(1e6) == "1,000,000"
        assert format_years(10**400).startswith("10,000")

    def test_thousands_formatter(self):
        assert thousands_formatter(0, None) == "0"
        assert thousands_formatter(250_000, None) == "$250k"
        assert thousands_formatter(12_500, None) == "$12.5k"
