"""
Recipe Scaling Service

Serving-size scaling and the per-ingredient display pipeline used by
the recipe detail view: scale, then convert, then format.
"""

from .conversion import convert_to_system
from .formatting import format_amount


def scale_amount_by_servings(amount, original_servings, new_servings):
    """
    Scale an amount linearly from the recipe's servings to new servings.

    A missing or non-positive original serving count means no scaling.
    new_servings is not bounds-checked here; the caller enforces it.
    """
    if amount is None:
        return None
    if not original_servings or original_servings <= 0:
        return amount
    return amount * (new_servings / original_servings)


def display_ingredient(amount, unit, original_servings, servings, unit_system=None):
    """
    Build the display values for one ingredient.

    Scaling is applied before the system conversion so the target unit
    is picked from the scaled magnitude; formatting happens once at the end.
    If the unit has no equivalent in the selected system the scaled amount
    is shown in its original unit.

    Args:
        amount: Ingredient amount (may be None)
        unit: Ingredient unit (may be None or '')
        original_servings: Servings the recipe was written for
        servings: Servings requested by the user
        unit_system: 'metric', 'imperial' or None for original units

    Returns:
        {'amount': str, 'unit': str}
    """
    scaled = scale_amount_by_servings(amount, original_servings, servings)
    display_unit = unit or ''

    if unit_system and scaled is not None:
        converted = convert_to_system(scaled, unit, unit_system)
        if converted is not None:
            scaled = converted['amount']
            display_unit = converted['unit']

    return {'amount': format_amount(scaled), 'unit': display_unit}


def display_ingredients(ingredients, original_servings, servings, unit_system=None):
    """Display values for a list of {'name', 'amount', 'unit'} ingredient rows."""
    rows = []
    for ingredient in ingredients:
        row = display_ingredient(
            ingredient.get('amount'),
            ingredient.get('unit'),
            original_servings,
            servings,
            unit_system,
        )
        row['name'] = ingredient.get('name', '')
        rows.append(row)
    return rows
