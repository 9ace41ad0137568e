"""Body fat estimation engine using published anthropometric formulas.

Uses:
- BMI-based body fat (Deurenberg)
- U.S. Navy circumference method
- Relative Fat Mass (RFM)
- CUN-BAE (Clinica Universidad de Navarra Body Adiposity Estimator)
- ECORE-BF

Every estimate is floored at 0. A formula whose inputs are missing or
mathematically out of domain gives None instead of raising.

References:
- Deurenberg P, Weststrate JA, Seidell JC (1991). "Body mass index as a
  measure of body fatness: age- and sex-specific prediction formulas."
  Br J Nutr.
- Hodgdon JA, Beckett MB (1984). "Prediction of percent body fat for U.S.
  Navy men and women from body circumferences and height." NHRC.
- Woolcott OO, Bergman RN (2018). "Relative fat mass (RFM) as a new
  estimator of whole-body fat percentage." Sci Rep.
- Gomez-Ambrosi J, et al. (2012). "Clinical usefulness of a new equation for
  estimating body fat." Diabetes Care.
- Molina-Luque R, et al. (2020). "Equation Córdoba: a simplified method for
  estimation of body fat (ECORE-BF)." Int J Environ Res Public Health.
"""

import logging
import math
from typing import Optional

from bodyfat_estimator.config import METHODS
from bodyfat_estimator.models import MeasurementRecord, ResultBundle

logger = logging.getLogger(__name__)


def _floor_at_zero(value: float) -> Optional[float]:
    if not math.isfinite(value):
        return None
    return max(0.0, value)


def _male_indicator(sex: str) -> int:
    # Deurenberg convention: male = 1
    return 1 if sex == "male" else 0


def _female_indicator(sex: str) -> int:
    # CUN-BAE and ECORE-BF convention: female = 1
    return 1 if sex == "female" else 0


def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
    """Body Mass Index: weight(kg) / height(m)²."""
    if weight_kg is None or height_cm is None or height_cm <= 0:
        return None
    height_m = height_cm / 100
    bmi = weight_kg / (height_m * height_m)
    return bmi if math.isfinite(bmi) else None


def bmi_based_body_fat(bmi: Optional[float], age: Optional[float], sex: str) -> Optional[float]:
    """Deurenberg: BF% = 1.20 × BMI + 0.23 × age − 10.8 × male − 5.4"""
    if bmi is None or age is None:
        return None
    return _floor_at_zero(1.20 * bmi + 0.23 * age - 10.8 * _male_indicator(sex) - 5.4)


def navy_body_fat(
    sex: str,
    height_cm: Optional[float],
    neck_cm: Optional[float],
    waist_cm: Optional[float],
    hip_cm: Optional[float] = None,
) -> Optional[float]:
    """U.S. Navy tape method, metric form.

    Male:   495 / (1.0324 − 0.19077 × log10(waist − neck) + 0.15456 × log10(height)) − 450
    Female: 495 / (1.29579 − 0.35004 × log10(waist + hip − neck) + 0.22100 × log10(height)) − 450
    """
    if height_cm is None or neck_cm is None or waist_cm is None:
        return None
    if height_cm <= 0:
        return None

    if sex == "male":
        circumference = waist_cm - neck_cm
        if circumference <= 0:
            return None
        density = 1.0324 - 0.19077 * math.log10(circumference) + 0.15456 * math.log10(height_cm)
    else:
        if hip_cm is None:
            return None
        circumference = waist_cm + hip_cm - neck_cm
        if circumference <= 0:
            return None
        density = 1.29579 - 0.35004 * math.log10(circumference) + 0.22100 * math.log10(height_cm)

    if density == 0:
        return None
    return _floor_at_zero(495 / density - 450)


def relative_fat_mass(sex: str, height_cm: Optional[float], waist_cm: Optional[float]) -> Optional[float]:
    """RFM: 64 (male) or 76 (female) − 20 × height / waist"""
    if height_cm is None or waist_cm is None:
        return None
    if height_cm <= 0 or waist_cm <= 0:
        return None
    intercept = 64 if sex == "male" else 76
    return _floor_at_zero(intercept - 20 * (height_cm / waist_cm))


def cun_bae_body_fat(bmi: Optional[float], age: Optional[float], sex: str) -> Optional[float]:
    """CUN-BAE, with F = 1 for women and 0 for men:

    −44.988 + 0.503 × age + 10.689 × F + 3.172 × BMI − 0.026 × BMI²
    + 0.181 × BMI × F − 0.02 × BMI × age − 0.005 × BMI² × F + 0.00021 × BMI² × age
    """
    if bmi is None or age is None:
        return None
    female = _female_indicator(sex)
    bmi_sq = bmi * bmi
    body_fat = (
        -44.988
        + 0.503 * age
        + 10.689 * female
        + 3.172 * bmi
        - 0.026 * bmi_sq
        + 0.181 * bmi * female
        - 0.02 * bmi * age
        - 0.005 * bmi_sq * female
        + 0.00021 * bmi_sq * age
    )
    return _floor_at_zero(body_fat)


def ecore_body_fat(bmi: Optional[float], age: Optional[float], sex: str) -> Optional[float]:
    """ECORE-BF: −97.102 + 0.123 × age + 11.900 × F + 35.959 × ln(BMI), F = 1 for women"""
    if bmi is None or age is None or bmi <= 0:
        return None
    return _floor_at_zero(
        -97.102 + 0.123 * age + 11.900 * _female_indicator(sex) + 35.959 * math.log(bmi)
    )


def average_body_fat(values) -> Optional[float]:
    """Mean of the estimates that are present, None if there are none."""
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present) / len(present)


def estimate(record: MeasurementRecord, strict: bool = True) -> Optional[ResultBundle]:
    """Run every formula against a measurement record.

    With ``strict`` (the default) an incomplete record gives None. Otherwise
    each formula runs on whatever inputs it needs and the rest stay None.
    """
    if strict and not record.is_complete():
        logger.debug("Record incomplete, missing %s", ", ".join(record.missing_fields()))
        return None
    if record.sex is None:
        return None

    sex = record.sex
    bmi = calculate_bmi(record.weight_kg, record.height_cm)
    estimates = {
        "bmi_based": bmi_based_body_fat(bmi, record.age, sex),
        "navy": navy_body_fat(sex, record.height_cm, record.neck_cm, record.waist_cm, record.hip_cm),
        "relative_fat_mass": relative_fat_mass(sex, record.height_cm, record.waist_cm),
        "cun_bae": cun_bae_body_fat(bmi, record.age, sex),
        "ecore": ecore_body_fat(bmi, record.age, sex),
    }
    average_bf = average_body_fat(estimates[method] for method in METHODS)
    return ResultBundle(sex=sex, bmi=bmi, average_bf=average_bf, **estimates)


def category_message(category: str, strings: dict) -> str:
    """Advice text for a category, empty for unknown."""
    return strings["category_messages"].get(category, "")


def format_results(bundle: ResultBundle, strings: dict) -> str:
    """Format a result bundle for display."""
    lines = []
    if bundle.bmi is not None:
        lines.append(f"{strings['bmi_label']:<28} {bundle.bmi:.1f}")
    for method in METHODS:
        value = getattr(bundle, method)
        shown = f"{value:.1f}%" if value is not None else "-"
        lines.append(f"{strings['methods'][method]['name']:<28} {shown}")
    if bundle.average_bf is not None:
        lines.append(f"{strings['average_label']:<28} {bundle.average_bf:.1f}%")
    category = bundle.category
    lines.append(f"{strings['category_label']:<28} {strings['categories'][category]}")
    message = category_message(category, strings)
    if message:
        lines.append("")
        lines.append(message)
    return "\n".join(lines)
