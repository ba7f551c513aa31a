"""
Custom exceptions for LumpSum.

Purpose
-------
Provides a unified exception hierarchy for the layers around the projection
engine (input forms, configuration files, serialization, CLI). The engine
itself never raises: degenerate numbers are normalized to 0 instead.

Exception Hierarchy
-------------------
LumpSumError (base)
├── ConfigurationError - Invalid or incomplete configuration/result files
└── ValidationError - Rejected form entries

Usage
-----
>>> from lumpsum.exceptions import ValidationError
>>>
>>> raise ValidationError("remainingBalance must be a non-negative number, got '-5'")
>>>
>>> # Catch all LumpSum exceptions
>>> try:
...     inputs = load_inputs(path)
... except LumpSumError as e:
...     print(f"LumpSum error: {e}")
"""


class LumpSumError(Exception):
    """
    Base exception for all LumpSum errors.

    Examples
    --------
    >>> try:
    ...     results = load_results(path)
    ... except LumpSumError as e:
    ...     logger.error("Could not load results: %s", e)
    """
    pass


class ConfigurationError(LumpSumError):
    """
    Invalid configuration or result file.

    Raised when a persisted document cannot be turned back into objects:
    - Missing required sections (e.g., "inputs", "investLumpSum")
    - Wrong top-level type (not a JSON object)

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "Results file is missing the 'payDownMortgage' section."
    ... )
    """
    pass


class ValidationError(LumpSumError):
    """
    Form entry validation failures.

    Raised by the strict form parser when a field is blank, not numeric,
    or negative. The message lists every offending field.

    Examples
    --------
    >>> raise ValidationError(
    ...     "Invalid form entries: lumpSum='abc' (not a number)"
    ... )
    """
    pass
