"""Application configuration and constants."""

import os

# Environment overrides
DEFAULT_LOCALE = os.environ.get("BODYFAT_LOCALE", "en")
LOADING_SECONDS = float(os.environ.get("BODYFAT_LOADING_SECONDS", "5.0"))
LOG_LEVEL = os.environ.get("BODYFAT_LOG_LEVEL", "WARNING")

# Unit conversion constants
LBS_PER_KG = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

SEXES = ("male", "female")
UNIT_SYSTEMS = ("metric", "imperial")

# Input bounds in canonical units (years, kg, cm, ft, in).
# The "kind" decides how the bounds are re-expressed in imperial mode.
FIELD_BOUNDS = {
    "age": {"min": 15, "max": 100, "kind": "fixed"},
    "weight": {"min": 30, "max": 300, "kind": "mass"},
    "height_cm": {"min": 100, "max": 250, "kind": "fixed"},
    "height_ft": {"min": 3, "max": 8, "kind": "fixed"},
    "height_in": {"min": 0, "max": 11.9, "kind": "fixed"},
    "neck": {"min": 20, "max": 70, "kind": "length"},
    "waist": {"min": 40, "max": 200, "kind": "length"},
    "hip": {"min": 50, "max": 200, "kind": "length"},
}

# Body fat categories, leanest first.
CATEGORIES = ("contest_prep", "athletic", "average", "overweight", "obese")
UNKNOWN_CATEGORY = "unknown"

# Anything strictly below this is contest prep
CONTEST_PREP_BELOW = {
    "male": 8,
    "female": 14,
}

# Inclusive upper bounds for the remaining bands; above the last is obese
CATEGORY_UPPER_BOUNDS = {
    "male": [("athletic", 15), ("average", 21), ("overweight", 26)],
    "female": [("athletic", 24), ("average", 33), ("overweight", 39)],
}

# Categories that get the coaching call-to-action on the results page
COACHING_CATEGORIES = ("average", "overweight", "obese")

# Estimation methods in display order
METHODS = ("bmi_based", "navy", "relative_fat_mass", "cun_bae", "ecore")

# Loading screen timings
LOADING_MESSAGE_SECONDS = 0.4
LOADING_TICK_SECONDS = 0.05

# Chart colours
CHART_COLORS = ["#58a6ff", "#79c0ff", "#3fb950", "#a371f7", "#f85149", "#db6d28", "#eac54f"]
CATEGORY_COLORS = {
    "contest_prep": "#58a6ff",
    "athletic": "#3fb950",
    "average": "#eac54f",
    "overweight": "#f85149",
    "obese": "#f85149",
    "unknown": "#8b949e",
}
CHART_MIN_Y = 25
