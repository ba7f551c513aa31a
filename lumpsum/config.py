"""
Configuration management module for LumpSum.

Purpose
-------
Centralized configuration using Pydantic models for type-safe parameter
management, validation, and serialization. Covers the calculator inputs as
they arrive from files or APIs, display preferences, and process-wide
settings read from the environment.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Wire-compatible: Inputs accept both snake_case and camelCase keys
- Environment-aware: Supports .env files and LUMPSUM_* variables
- Defaults: Sensible defaults for all display parameters

Example
-------
>>> from lumpsum.config import MortgageInputsConfig
>>> config = MortgageInputsConfig.model_validate(
...     {"mortgageRate": 3.5, "marketReturn": 7, "remainingYears": 25,
...      "remainingBalance": 300_000, "lumpSum": 50_000}
... )
>>> config.to_inputs().remaining_balance
300000.0
>>>
>>> # Serialize back to the camelCase wire format
>>> config.model_dump(by_alias=True)["lumpSum"]
50000.0
"""

from __future__ import annotations
from typing import Literal

from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_INPUTS, MAX_RATE_PERCENT, MAX_REMAINING_YEARS
from .engine import MortgageInputs

__all__ = [
    "MortgageInputsConfig",
    "DisplayConfig",
    "AppSettings",
]


# ---------------------------------------------------------------------------
# Inputs Configuration
# ---------------------------------------------------------------------------

class MortgageInputsConfig(BaseModel):
    """
    Validated calculator inputs.

    The engine accepts any numbers; this model is the gate used when inputs
    come from files, the CLI or an API. It bounds the term so the monthly
    time series stays small.

    Attributes
    ----------
    mortgage_rate : float
        Annual mortgage interest rate in percent (0-100).
    market_return : float
        Expected annual market return in percent (0-100).
    remaining_years : float
        Remaining term in years (0-100).
    remaining_balance : float
        Outstanding principal.
    lump_sum : float
        Cash available to invest or prepay.

    Examples
    --------
    >>> MortgageInputsConfig(
    ...     mortgage_rate=3.5, market_return=7, remaining_years=25,
    ...     remaining_balance=300_000, lump_sum=50_000,
    ... )
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    mortgage_rate: float = Field(
        default=DEFAULT_INPUTS["mortgage_rate"],
        ge=0,
        le=MAX_RATE_PERCENT,
        description="Annual mortgage interest rate (percent)"
    )
    market_return: float = Field(
        default=DEFAULT_INPUTS["market_return"],
        ge=0,
        le=MAX_RATE_PERCENT,
        description="Expected annual market return (percent)"
    )
    remaining_years: float = Field(
        default=DEFAULT_INPUTS["remaining_years"],
        ge=0,
        le=MAX_REMAINING_YEARS,
        description="Remaining mortgage term (years)"
    )
    remaining_balance: float = Field(
        default=DEFAULT_INPUTS["remaining_balance"],
        ge=0,
        description="Outstanding principal"
    )
    lump_sum: float = Field(
        default=DEFAULT_INPUTS["lump_sum"],
        ge=0,
        description="Lump sum available"
    )

    def to_inputs(self) -> MortgageInputs:
        """Build the engine's input record."""
        return MortgageInputs(
            mortgage_rate=self.mortgage_rate,
            market_return=self.market_return,
            remaining_years=self.remaining_years,
            remaining_balance=self.remaining_balance,
            lump_sum=self.lump_sum,
        )

    @classmethod
    def from_inputs(cls, inputs: MortgageInputs) -> MortgageInputsConfig:
        """Validate an existing input record (raises on out-of-range values)."""
        return cls(
            mortgage_rate=inputs.mortgage_rate,
            market_return=inputs.market_return,
            remaining_years=inputs.remaining_years,
            remaining_balance=inputs.remaining_balance,
            lump_sum=inputs.lump_sum,
        )


# ---------------------------------------------------------------------------
# Display Configuration
# ---------------------------------------------------------------------------

class DisplayConfig(BaseModel):
    """
    Formatting preferences for tables, verdicts and reports.

    Attributes
    ----------
    currency_symbol : str
        Prefix for monetary amounts.
    decimals : int
        Decimal places for monetary amounts (0-4).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Currency symbol prefix"
    )
    decimals: int = Field(
        default=0,
        ge=0,
        le=4,
        description="Decimal places for monetary amounts"
    )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    are prefixed with LUMPSUM_ (e.g., LUMPSUM_DEBUG=true).

    Attributes
    ----------
    debug : bool
        Enable debug logging (overrides log_level).
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR".
    currency_symbol : str
        Currency symbol used by the CLI.
    decimals : int
        Decimal places used by the CLI.

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.debug
    False

    # With environment:
    # LUMPSUM_CURRENCY_SYMBOL=€
    >>> AppSettings().display().currency_symbol
    '€'
    """

    model_config = SettingsConfigDict(
        env_prefix="LUMPSUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    currency_symbol: str = Field(
        default="$",
        max_length=5,
        description="Currency symbol prefix"
    )
    decimals: int = Field(
        default=0,
        ge=0,
        le=4,
        description="Decimal places for monetary amounts"
    )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    def display(self) -> DisplayConfig:
        """Display preferences derived from these settings."""
        return DisplayConfig(currency_symbol=self.currency_symbol, decimals=self.decimals)
