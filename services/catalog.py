"""
Unit Catalog Service

Lookups against the static unit registry: category, conversion factor,
unit system and display label for a unit identifier.
"""

from constants import (
    COUNT, UNKNOWN, NO_SYSTEM, CONVERTIBLE_CATEGORIES,
    CONVERSION_FACTORS, UNIT_OPTIONS, UNITS_BY_VALUE,
)


class UnitCatalogError(Exception):
    """Raised when a conversion factor is requested for a non-convertible unit."""
    pass


def category_of(unit):
    """Get the category of a unit. Empty units are counted items."""
    if not unit:
        return COUNT
    option = UNITS_BY_VALUE.get(unit)
    if option is None:
        return UNKNOWN
    return option['category']


def factor_of(category, unit):
    """
    Get the base-unit factor for a weight or volume unit.

    Only defined for registered units of a convertible category; callers
    are expected to check category_of() first.
    """
    factors = CONVERSION_FACTORS.get(category)
    if factors is None or unit not in factors:
        raise UnitCatalogError(f"No conversion factor for {unit!r} in category {category!r}")
    return factors[unit]


def system_of(unit):
    """Get the unit system ('metric', 'imperial' or 'none') of a unit."""
    if not unit:
        return NO_SYSTEM
    option = UNITS_BY_VALUE.get(unit)
    if option is None:
        return NO_SYSTEM
    return option['system']


def unit_label(unit):
    """Human-readable label, falling back to the identifier itself."""
    if not unit:
        return ''
    option = UNITS_BY_VALUE.get(unit)
    return option['label'] if option else unit


def is_convertible(unit):
    """Check whether a unit belongs to a weight or volume category."""
    return category_of(unit) in CONVERTIBLE_CATEGORIES


def units_for(category=None, system=None):
    """List unit options, optionally filtered by category and/or system."""
    return [
        dict(option) for option in UNIT_OPTIONS
        if (category is None or option['category'] == category)
        and (system is None or option['system'] == system)
    ]
