# Request utilities for the unit endpoints
from .request_parsing import (
    RequestValidationError, safe_float, safe_int, optional_float,
    clean_unit, clean_name, parse_unit_system
)
