"""
Validation Constants

Contains whitelist values and bounds for validating request input
on the recipe display endpoints.
"""

# Valid values for the unit_system field ('' / None means original units)
VALID_UNIT_SYSTEMS = {'metric', 'imperial'}

# Servings bounds (same limits the recipe form enforces)
MIN_SERVINGS = 1
MAX_SERVINGS = 100

# Maximum number of ingredients accepted in one display request
MAX_INGREDIENTS = 200

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_name': 200,
    'unit': 20,
}
