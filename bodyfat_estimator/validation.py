"""Input validation for raw measurement text.

Validation only classifies a candidate string. An empty string or a lone
minus sign means the user is still typing and is not an error.
"""

from typing import Optional

from bodyfat_estimator.config import FIELD_BOUNDS, UNIT_SYSTEMS
from bodyfat_estimator.models import ValidationError
from bodyfat_estimator.units import cm_to_in, kg_to_lbs, parse_number

INVALID_NUMBER = "invalid_number"
OUT_OF_RANGE = "out_of_range"


def validate_range(min_value: float, max_value: float, raw: str) -> Optional[ValidationError]:
    """Check raw text against inclusive bounds already in the active unit system."""
    if raw in ("", "-"):
        return None
    value = parse_number(raw)
    if value is None:
        return ValidationError(INVALID_NUMBER)
    if value < min_value or value > max_value:
        return ValidationError(OUT_OF_RANGE, min_value, max_value)
    return None


def field_bounds(field: str, unit_system: str = "metric") -> tuple:
    """Return (min, max) for a field, expressed in the given unit system."""
    if unit_system not in UNIT_SYSTEMS:
        raise ValueError(f"Unknown unit system: {unit_system}")
    bounds = FIELD_BOUNDS[field]
    low, high = bounds["min"], bounds["max"]
    if unit_system == "imperial":
        if bounds["kind"] == "mass":
            return kg_to_lbs(low), kg_to_lbs(high)
        if bounds["kind"] == "length":
            return cm_to_in(low), cm_to_in(high)
    return low, high


def validate_field(field: str, raw: str, unit_system: str = "metric") -> Optional[ValidationError]:
    """Validate raw text for a named field (age, weight, neck, ...)."""
    low, high = field_bounds(field, unit_system)
    return validate_range(low, high, raw)
