"""
Unit Constants and Conversion Tables

Contains the unit registry, conversion factors, and the unit system
band table used when displaying recipe ingredients.
"""

# Unit categories
WEIGHT = 'weight'
VOLUME = 'volume'
COUNT = 'count'
UNKNOWN = 'unknown'

CONVERTIBLE_CATEGORIES = {WEIGHT, VOLUME}

# Unit systems ('none' is only used for count units)
METRIC = 'metric'
IMPERIAL = 'imperial'
NO_SYSTEM = 'none'

# Weight conversions to grams (base unit)
WEIGHT_TO_G = {
    'g': 1,
    'kg': 1000,
    'mg': 0.001,
    'oz': 28.35,
    'lb': 453.592,
}

# Volume conversions to milliliters (base unit)
VOLUME_TO_ML = {
    'ml': 1,
    'l': 1000,
    'tsp': 4.93,
    'tbsp': 14.79,
    'cup': 236.59,
    'pint': 473.18,
    'quart': 946.35,
    'gallon': 3785.41,
    'fl oz': 29.57,
}

CONVERSION_FACTORS = {
    WEIGHT: WEIGHT_TO_G,
    VOLUME: VOLUME_TO_ML,
}

# Units offered on ingredient forms, in display order
UNIT_OPTIONS = (
    # Weight units
    {'value': 'g', 'label': 'g (gram)', 'category': WEIGHT, 'system': METRIC},
    {'value': 'kg', 'label': 'kg (kilogram)', 'category': WEIGHT, 'system': METRIC},
    {'value': 'mg', 'label': 'mg (milligram)', 'category': WEIGHT, 'system': METRIC},
    {'value': 'oz', 'label': 'oz (ounce)', 'category': WEIGHT, 'system': IMPERIAL},
    {'value': 'lb', 'label': 'lb (pound)', 'category': WEIGHT, 'system': IMPERIAL},

    # Volume units
    {'value': 'ml', 'label': 'ml (milliliter)', 'category': VOLUME, 'system': METRIC},
    {'value': 'l', 'label': 'l (liter)', 'category': VOLUME, 'system': METRIC},
    {'value': 'tsp', 'label': 'tsp (teaspoon)', 'category': VOLUME, 'system': IMPERIAL},
    {'value': 'tbsp', 'label': 'tbsp (tablespoon)', 'category': VOLUME, 'system': IMPERIAL},
    {'value': 'cup', 'label': 'cup', 'category': VOLUME, 'system': IMPERIAL},
    {'value': 'pint', 'label': 'pint', 'category': VOLUME, 'system': IMPERIAL},
    {'value': 'quart', 'label': 'quart', 'category': VOLUME, 'system': IMPERIAL},
    {'value': 'gallon', 'label': 'gallon', 'category': VOLUME, 'system': IMPERIAL},
    {'value': 'fl oz', 'label': 'fl oz (fluid ounce)', 'category': VOLUME, 'system': IMPERIAL},

    # Count units (no conversion)
    {'value': 'piece', 'label': 'piece', 'category': COUNT, 'system': NO_SYSTEM},
    {'value': 'slice', 'label': 'slice', 'category': COUNT, 'system': NO_SYSTEM},
    {'value': 'pinch', 'label': 'pinch', 'category': COUNT, 'system': NO_SYSTEM},
    {'value': 'bunch', 'label': 'bunch', 'category': COUNT, 'system': NO_SYSTEM},
)

# Registry lookup (identifier -> option)
UNITS_BY_VALUE = {option['value']: option for option in UNIT_OPTIONS}

# Target unit bands per (category, system).
# Each entry is (upper bound in base units, exclusive; target unit),
# checked in order against the absolute base-unit amount.
QUARTER_CUP_ML = VOLUME_TO_ML['cup'] / 4

SYSTEM_TARGET_BANDS = {
    (WEIGHT, METRIC): (
        (WEIGHT_TO_G['kg'], 'g'),
        (float('inf'), 'kg'),
    ),
    (WEIGHT, IMPERIAL): (
        (WEIGHT_TO_G['lb'], 'oz'),
        (float('inf'), 'lb'),
    ),
    (VOLUME, METRIC): (
        (VOLUME_TO_ML['l'], 'ml'),
        (float('inf'), 'l'),
    ),
    (VOLUME, IMPERIAL): (
        (VOLUME_TO_ML['tbsp'], 'tsp'),
        (VOLUME_TO_ML['fl oz'], 'tbsp'),
        (QUARTER_CUP_ML, 'fl oz'),
        (float('inf'), 'cup'),
    ),
}
