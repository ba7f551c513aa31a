"""
Form input handling for LumpSum.

Purpose
-------
Turns the five text fields of the calculator form into `MortgageInputs`.
Two stages, as in the interactive form:

1. Keystroke filtering: `accepts_entry` only lets through non-negative
   decimal strings (digits with at most one decimal point).
2. Submission: `coerce_field` converts each entry to a float, defaulting
   anything unparsable to 0, and `inputs_from_form` builds the record.

`is_form_valid` reproduces the form's submit gate, and `parse_form` is a
strict variant that raises `ValidationError` instead of defaulting.

Example
-------
>>> fields = {"mortgageRate": "3.5", "marketReturn": "7", "remainingYears": "25",
...           "remainingBalance": "300000", "lumpSum": "50000"}
>>> is_form_valid(fields)
True
>>> inputs_from_form(fields).lump_sum
50000.0
"""

from __future__ import annotations

import math
import re
from typing import Dict, Mapping, Optional

from .engine import MortgageInputs
from .exceptions import ValidationError

__all__ = [
    "FIELD_NAMES",
    "FIELD_LABELS",
    "accepts_entry",
    "coerce_field",
    "is_form_valid",
    "inputs_from_form",
    "parse_form",
]


FIELD_NAMES = (
    "remaining_balance",
    "lump_sum",
    "remaining_years",
    "mortgage_rate",
    "market_return",
)
"""Form fields in display order (snake_case attribute names)."""

FIELD_LABELS: Dict[str, str] = {
    "remaining_balance": "Remaining Mortgage Balance",
    "lump_sum": "Lump Sum Payment",
    "remaining_years": "Remaining Mortgage Term (Years)",
    "mortgage_rate": "Mortgage Interest Rate",
    "market_return": "Expected Annual Market Return",
}

_CAMEL_NAMES: Dict[str, str] = {
    "remaining_balance": "remainingBalance",
    "lump_sum": "lumpSum",
    "remaining_years": "remainingYears",
    "mortgage_rate": "mortgageRate",
    "market_return": "marketReturn",
}

_ENTRY_PATTERN = re.compile(r"\d*\.?\d*", re.ASCII)


# ---------------------------------------------------------------------------
# Single field
# ---------------------------------------------------------------------------

def accepts_entry(text: str) -> bool:
    """Return True if *text* is an acceptable in-progress entry.

    Empty strings and a lone "." are accepted so the user can keep typing.
    """
    return _ENTRY_PATTERN.fullmatch(text) is not None


def _parse_number(text: str) -> Optional[float]:
    """Parse *text* as a finite float; None if not possible."""
    stripped = text.strip()
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def coerce_field(text: Optional[str]) -> float:
    """Convert a submitted entry to a number; blank or unparsable → 0.0."""
    if text is None:
        return 0.0
    value = _parse_number(str(text))
    return 0.0 if value is None else value


# ---------------------------------------------------------------------------
# Whole form
# ---------------------------------------------------------------------------

def _lookup(fields: Mapping[str, str], name: str) -> Optional[str]:
    """Fetch a field by snake_case or camelCase key."""
    if name in fields:
        return fields[name]
    return fields.get(_CAMEL_NAMES[name])


def is_form_valid(fields: Mapping[str, str]) -> bool:
    """Submit gate: every field present, non-blank, numeric and >= 0."""
    for name in FIELD_NAMES:
        raw = _lookup(fields, name)
        if raw is None:
            return False
        value = _parse_number(str(raw))
        if value is None or value < 0:
            return False
    return True


def inputs_from_form(fields: Mapping[str, str]) -> MortgageInputs:
    """Coerce form fields into `MortgageInputs`; missing/unparsable → 0."""
    values = {name: coerce_field(_lookup(fields, name)) for name in FIELD_NAMES}
    return MortgageInputs(**values)


def parse_form(fields: Mapping[str, str]) -> MortgageInputs:
    """Strict form parsing.

    Raises
    ------
    ValidationError
        Listing every field that is missing, blank, not a number or negative.
    """
    problems = []
    values: Dict[str, float] = {}
    for name in FIELD_NAMES:
        camel = _CAMEL_NAMES[name]
        raw = _lookup(fields, name)
        if raw is None or not str(raw).strip():
            problems.append(f"{camel} is required")
            continue
        value = _parse_number(str(raw))
        if value is None:
            problems.append(f"{camel}={raw!r} (not a number)")
        elif value < 0:
            problems.append(f"{camel}={raw!r} (must be non-negative)")
        else:
            values[name] = value
    if problems:
        raise ValidationError("Invalid form entries: " + "; ".join(problems))
    return MortgageInputs(**values)
