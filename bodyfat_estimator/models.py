"""Data models for the body fat estimator."""

from dataclasses import dataclass
from typing import Optional

from bodyfat_estimator.categories import categorize
from bodyfat_estimator.config import METHODS, SEXES
from bodyfat_estimator.locales import format_error, get_strings


@dataclass(frozen=True)
class MeasurementRecord:
    """Body measurements in canonical metric units."""
    sex: Optional[str] = None  # "male" or "female"
    age: Optional[float] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    neck_cm: Optional[float] = None
    waist_cm: Optional[float] = None
    hip_cm: Optional[float] = None  # Only used for women

    def __post_init__(self):
        if self.sex is not None and self.sex not in SEXES:
            raise ValueError(f"sex must be one of {SEXES}, got {self.sex!r}")

    @property
    def is_male(self) -> bool:
        return self.sex == "male"

    def required_fields(self) -> tuple:
        """Names of the fields that must be set for this record's sex."""
        fields = ("sex", "age", "weight_kg", "height_cm", "neck_cm", "waist_cm")
        if self.sex == "female":
            fields += ("hip_cm",)
        return fields

    def missing_fields(self) -> list:
        return [name for name in self.required_fields() if getattr(self, name) is None]

    def is_complete(self) -> bool:
        return not self.missing_fields()


@dataclass(frozen=True)
class ResultBundle:
    """Estimates computed from one MeasurementRecord.

    Every value is optional since each formula has its own preconditions.
    """
    sex: Optional[str]
    bmi: Optional[float] = None
    bmi_based: Optional[float] = None
    navy: Optional[float] = None
    relative_fat_mass: Optional[float] = None
    cun_bae: Optional[float] = None
    ecore: Optional[float] = None
    average_bf: Optional[float] = None

    @property
    def category(self) -> str:
        return categorize(self.average_bf, self.sex)

    def estimates(self) -> dict:
        """Present body fat estimates keyed by method, in display order."""
        values = {method: getattr(self, method) for method in METHODS}
        return {method: value for method, value in values.items() if value is not None}


@dataclass(frozen=True)
class ValidationError:
    """Why a raw input was rejected.

    kind is "invalid_number" or "out_of_range"; range errors carry the bounds
    in the unit system the input was checked against.
    """
    kind: str
    min_value: Optional[float] = None
    max_value: Optional[float] = None

    def __str__(self) -> str:
        return format_error(self, get_strings("en"))
