"""
Request Parsing Module

Lenient parsing of numbers and strict validation of enumerated fields
for JSON requests to the unit endpoints.
"""

import math

from constants import VALID_UNIT_SYSTEMS, MAX_LENGTHS


class RequestValidationError(Exception):
    """Raised when a request body cannot be interpreted."""
    pass


def safe_float(value, default=0.0, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    if value is None or value == '' or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (ValueError, TypeError):
        return default
    # NaN and infinity cannot be sent back as JSON
    if not math.isfinite(result):
        return default
    if min_val is not None:
        result = max(min_val, result)
    if max_val is not None:
        result = min(max_val, result)
    return result


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError, OverflowError):
        return default


def optional_float(value):
    """Parse an amount that may legitimately be missing (None stays None)."""
    if value is None or value == '':
        return None
    return safe_float(value, default=None)


def clean_unit(value):
    """Normalize a unit field: None/'' -> None, else stripped string."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise RequestValidationError("unit must be a string")
    value = value.strip()
    if len(value) > MAX_LENGTHS['unit']:
        raise RequestValidationError("unit is too long")
    return value or None


def clean_name(value):
    """Strip an ingredient name and truncate it to the allowed length."""
    if value is None:
        return ''
    text = str(value).strip()
    return text[:MAX_LENGTHS['ingredient_name']]


def parse_unit_system(value):
    """
    Validate a unit system selection.

    None or '' means "show original units" and returns None.
    Raises RequestValidationError for anything not whitelisted.
    """
    if value is None or value == '':
        return None
    if not isinstance(value, str) or value not in VALID_UNIT_SYSTEMS:
        raise RequestValidationError(f"Invalid unit system: {value}")
    return value
