"""
Constants Package

Static unit tables and validation whitelists.
"""

from .units import (
    WEIGHT,
    VOLUME,
    COUNT,
    UNKNOWN,
    CONVERTIBLE_CATEGORIES,
    METRIC,
    IMPERIAL,
    NO_SYSTEM,
    WEIGHT_TO_G,
    VOLUME_TO_ML,
    CONVERSION_FACTORS,
    UNIT_OPTIONS,
    UNITS_BY_VALUE,
    SYSTEM_TARGET_BANDS,
)

from .validation import (
    VALID_UNIT_SYSTEMS,
    MIN_SERVINGS,
    MAX_SERVINGS,
    MAX_INGREDIENTS,
    MAX_LENGTHS,
)
