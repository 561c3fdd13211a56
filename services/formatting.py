"""
Amount Formatting Service

Display formatting for ingredient amounts. This is the only place
amounts are rounded for presentation.
"""


def format_amount(amount):
    """Format an amount for display: whole numbers without decimals, else max 2 places."""
    if amount is None:
        return ''
    # Check if it's a whole number
    if isinstance(amount, int) or float(amount).is_integer():
        return str(int(amount))
    formatted = f"{amount:.2f}".rstrip('0').rstrip('.')
    # Tiny negatives round to "-0"
    if formatted == '-0':
        return '0'
    return formatted
