"""
Unit Conversion Service

Converts ingredient amounts between units of the same category and
into a canonical unit of the metric or imperial system.

A conversion that cannot be represented (different categories, count
or unknown units, missing unit) is always reported as None.
"""

import logging

from constants import CONVERTIBLE_CATEGORIES, SYSTEM_TARGET_BANDS
from .catalog import category_of, factor_of

logger = logging.getLogger(__name__)


def convert_unit(amount, from_unit, to_unit):
    """
    Convert an amount from one unit to another within a category.

    Args:
        amount: The quantity to convert
        from_unit: Unit the amount is in ('g', 'cup', ...); None/'' for no unit
        to_unit: Unit to convert to

    Returns:
        The converted amount at full precision, or None if the
        conversion is not representable
    """
    # Same unit: skip the round trip through the base unit
    if (from_unit or '') == (to_unit or ''):
        return amount

    if not from_unit or not to_unit or amount is None:
        return None

    from_category = category_of(from_unit)
    to_category = category_of(to_unit)

    if from_category != to_category or from_category not in CONVERTIBLE_CATEGORIES:
        return None

    base_amount = amount * factor_of(from_category, from_unit)
    return base_amount / factor_of(to_category, to_unit)


def best_equivalent_unit(amount, unit, target_system):
    """
    Pick the display unit for an amount in the target system.

    The choice depends on the magnitude of the amount in base units
    (grams or milliliters), see SYSTEM_TARGET_BANDS.
    Returns None when the unit has no system equivalent.
    """
    category = category_of(unit)
    bands = SYSTEM_TARGET_BANDS.get((category, target_system))
    if bands is None or amount is None:
        return None

    magnitude = abs(amount * factor_of(category, unit))
    for upper_bound, target_unit in bands:
        if magnitude < upper_bound:
            return target_unit
    # NaN compares false against every bound
    return bands[-1][1]


def convert_to_system(amount, unit, target_system):
    """
    Convert an amount into the canonical unit of a unit system.

    Returns {'amount': converted_amount, 'unit': target_unit}, or None
    when the unit is a count/unknown unit or the system is not recognised.
    """
    target_unit = best_equivalent_unit(amount, unit, target_system)
    if target_unit is None:
        logger.debug("No %s equivalent for %r %r", target_system, amount, unit)
        return None

    converted = convert_unit(amount, unit, target_unit)
    if converted is None:
        return None

    return {'amount': converted, 'unit': target_unit}
