"""
Services Package

Unit conversion and recipe scaling logic for the recipe detail view.
"""

from .catalog import (
    UnitCatalogError,
    category_of,
    factor_of,
    system_of,
    unit_label,
    is_convertible,
    units_for,
)

from .conversion import (
    convert_unit,
    best_equivalent_unit,
    convert_to_system,
)

from .scaling import (
    scale_amount_by_servings,
    display_ingredient,
    display_ingredients,
)

from .formatting import (
    format_amount,
)

__all__ = [
    # Catalog
    'UnitCatalogError',
    'category_of',
    'factor_of',
    'system_of',
    'unit_label',
    'is_convertible',
    'units_for',
    # Conversion
    'convert_unit',
    'best_equivalent_unit',
    'convert_to_system',
    # Scaling
    'scale_amount_by_servings',
    'display_ingredient',
    'display_ingredients',
    # Formatting
    'format_amount',
]
