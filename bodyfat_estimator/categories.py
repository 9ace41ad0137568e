"""Body fat category bands."""

from typing import Optional

from bodyfat_estimator.config import (
    CATEGORY_UPPER_BOUNDS,
    COACHING_CATEGORIES,
    CONTEST_PREP_BELOW,
    UNKNOWN_CATEGORY,
)


def categorize(average_bf: Optional[float], sex: Optional[str]) -> str:
    """Map an average body fat percentage to a sex-specific category."""
    if average_bf is None or sex not in CONTEST_PREP_BELOW:
        return UNKNOWN_CATEGORY
    if average_bf < CONTEST_PREP_BELOW[sex]:
        return "contest_prep"
    for category, upper in CATEGORY_UPPER_BOUNDS[sex]:
        if average_bf <= upper:
            return category
    return "obese"


def needs_coaching(category: str) -> bool:
    """Whether the results page should offer coaching for this category."""
    return category in COACHING_CATEGORIES
