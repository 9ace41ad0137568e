"""Unit conversion utilities for imperial/metric conversion.

Measurements can be entered in imperial (lbs, feet/inches, inches) but the
estimation engine only ever sees metric (kg, cm).
"""

import math
from typing import Optional

from bodyfat_estimator.config import CM_PER_INCH, INCHES_PER_FOOT, LBS_PER_KG


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * LBS_PER_KG


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs / LBS_PER_KG


def cm_to_in(cm: float) -> float:
    """Convert centimeters to inches."""
    return cm / CM_PER_INCH


def in_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * CM_PER_INCH


def cm_to_ft_in(cm: float) -> tuple:
    """Convert centimeters to (feet, inches).

    Feet are whole; inches keep one decimal. The remainder can round up to
    12.0 right below a foot boundary (e.g. 182.8 cm -> (5, 12.0)).
    """
    total_inches = cm_to_in(cm)
    feet = int(total_inches // INCHES_PER_FOOT)
    inches = round(total_inches % INCHES_PER_FOOT, 1)
    return feet, inches


def ft_in_to_cm(feet: Optional[float], inches: Optional[float]) -> Optional[float]:
    """Convert feet and inches to centimeters, None if either part is missing."""
    if feet is None or inches is None:
        return None
    return in_to_cm(feet * INCHES_PER_FOOT + inches)


def format_for_input(num: Optional[float], decimals: int = 1) -> str:
    """Format a number for an input field.

    Rounds to ``decimals`` places and drops trailing zeros, so 80.0 becomes
    "80" and 176.43 becomes "176.4". Missing values give an empty string.
    """
    if num is None or math.isnan(num):
        return ""
    text = f"{num:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if float(text) == 0:
        return "0"
    return text


def parse_number(raw: str) -> Optional[float]:
    """Parse user text into a float, accepting a comma as decimal separator.

    Returns None for empty, non-numeric or non-finite input.
    """
    text = raw.strip().replace(",", ".")
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
