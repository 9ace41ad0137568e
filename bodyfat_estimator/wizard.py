"""Step-by-step questionnaire state.

WizardState is view-model state for a front end: the current step, the raw
text typed into each field and its live validation error. Parsed values are
committed into a fresh MeasurementRecord on every successful step, and the
estimation engine only ever sees that record.

Steps: welcome -> sex -> age -> weight -> height -> neck -> waist ->
[hip, women only] -> loading -> results.
"""

import logging
import time
from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from bodyfat_estimator.config import (
    INCHES_PER_FOOT,
    LOADING_MESSAGE_SECONDS,
    LOADING_SECONDS,
    SEXES,
    UNIT_SYSTEMS,
)
from bodyfat_estimator.estimator import estimate
from bodyfat_estimator.locales import format_error
from bodyfat_estimator.models import MeasurementRecord, ResultBundle
from bodyfat_estimator.units import (
    cm_to_ft_in,
    cm_to_in,
    format_for_input,
    ft_in_to_cm,
    in_to_cm,
    kg_to_lbs,
    lbs_to_kg,
    parse_number,
)
from bodyfat_estimator.validation import validate_field

logger = logging.getLogger(__name__)

WELCOME, SEX, AGE, WEIGHT, HEIGHT, NECK, WAIST, HIP, LOADING, RESULTS = range(10)

STEP_NAMES = [
    "welcome", "sex", "age", "weight", "height",
    "neck", "waist", "hip", "loading", "results",
]

INPUT_FIELDS = ("age", "weight", "height_cm", "height_ft", "height_in", "neck", "waist", "hip")

CIRCUMFERENCE_STEPS = {NECK: "neck", WAIST: "waist", HIP: "hip"}


def next_step(step: int, sex: Optional[str]) -> int:
    """Step after ``step``; men skip the hip step."""
    following = step + 1
    if following == HIP and sex == "male":
        following = LOADING
    return min(following, RESULTS)


def previous_step(step: int, sex: Optional[str]) -> int:
    """Step before ``step``; going back from loading/results lands on the last input."""
    preceding = min(step - 1, HIP)
    if preceding == HIP and sex == "male":
        preceding = WAIST
    return max(preceding, WELCOME)


def step_fields(step: int, unit_system: str) -> tuple:
    """Raw input fields shown on a step."""
    if step == AGE:
        return ("age",)
    if step == WEIGHT:
        return ("weight",)
    if step == HEIGHT:
        return ("height_cm",) if unit_system == "metric" else ("height_ft", "height_in")
    if step in CIRCUMFERENCE_STEPS:
        return (CIRCUMFERENCE_STEPS[step],)
    return ()


def _empty_inputs() -> dict:
    return dict.fromkeys(INPUT_FIELDS, "")


@dataclass
class WizardState:
    """Mutable questionnaire state for one session."""
    step: int = WELCOME
    unit_system: str = "metric"
    record: MeasurementRecord = field(default_factory=MeasurementRecord)
    inputs: dict = field(default_factory=_empty_inputs)
    errors: dict = field(default_factory=dict)  # field -> ValidationError
    missing: set = field(default_factory=set)  # required fields left empty

    @property
    def step_name(self) -> str:
        return STEP_NAMES[self.step]

    def start(self) -> None:
        if self.step == WELCOME:
            self._go(SEX)

    def select_sex(self, sex: str) -> None:
        if sex not in SEXES:
            raise ValueError(f"Unknown sex: {sex}")
        self.record = replace(self.record, sex=sex)
        self.missing.discard("sex")

    def set_input(self, name: str, raw: str) -> None:
        """Store raw text for a field and re-validate it."""
        if name not in INPUT_FIELDS:
            raise KeyError(name)
        self.inputs[name] = raw
        self.missing.discard(name)
        self._validate(name)

    def error_message(self, name: str, strings: dict) -> str:
        """Message to show under a field, empty if it is fine."""
        if name in self.errors:
            return format_error(self.errors[name], strings)
        if name in self.missing:
            return strings["required"][name]
        return ""

    def advance(self) -> bool:
        """Validate the current step, commit its values and move on.

        Returns False and records why when the step cannot be left yet.
        """
        if self.step == WELCOME:
            self.start()
            return True
        if self.step == RESULTS:
            return False
        if self.step == SEX:
            if self.record.sex is None:
                self.missing.add("sex")
                return False
        elif self.step != LOADING:
            names = step_fields(self.step, self.unit_system)
            self.missing = {name for name in names if self.inputs[name] in ("", "-")}
            for name in names:
                self._validate(name)
            if self.missing or any(name in self.errors for name in names):
                logger.debug("Step %s blocked: missing=%s errors=%s",
                             self.step_name, sorted(self.missing), sorted(self.errors))
                return False
            self.record = replace(self.record, **self._parsed_values(self.step))

        self._go(next_step(self.step, self.record.sex))
        return True

    def finish_loading(self) -> None:
        if self.step == LOADING:
            self._go(RESULTS)

    def back(self) -> None:
        if self.step == WELCOME:
            return
        self._go(previous_step(self.step, self.record.sex))

    def reset(self) -> None:
        """Back to the welcome step with every field cleared."""
        self.step = WELCOME
        self.unit_system = "metric"
        self.record = MeasurementRecord()
        self.inputs = _empty_inputs()
        self.errors = {}
        self.missing = set()
        logger.debug("Wizard reset")

    def toggle_units(self, unit_system: str) -> None:
        """Switch unit systems, re-expressing whatever has been typed so far."""
        if unit_system not in UNIT_SYSTEMS:
            raise ValueError(f"Unknown unit system: {unit_system}")
        if unit_system == self.unit_system:
            return

        current = {name: parse_number(raw) for name, raw in self.inputs.items()}
        converted = _empty_inputs()
        converted["age"] = self.inputs["age"]

        if unit_system == "imperial":
            mass, length = kg_to_lbs, cm_to_in
            if current["height_cm"] is not None:
                feet, inches = cm_to_ft_in(current["height_cm"])
                if inches >= INCHES_PER_FOOT:
                    feet, inches = feet + 1, 0
                converted["height_ft"] = format_for_input(feet, 0)
                converted["height_in"] = format_for_input(inches)
        else:
            mass, length = lbs_to_kg, in_to_cm
            height_cm = ft_in_to_cm(current["height_ft"], current["height_in"])
            if height_cm is not None:
                converted["height_cm"] = format_for_input(height_cm)

        if current["weight"] is not None:
            converted["weight"] = format_for_input(mass(current["weight"]))
        for name in CIRCUMFERENCE_STEPS.values():
            if current[name] is not None:
                converted[name] = format_for_input(length(current[name]))

        self.unit_system = unit_system
        self.inputs = converted
        self.errors = {}
        self.missing = set()
        # Converted text can fall outside the new unit's bounds through rounding
        for name, raw in converted.items():
            if raw:
                self._validate(name)

    def results(self) -> Optional[ResultBundle]:
        """Engine output for the committed record, None while incomplete."""
        return estimate(self.record)

    def _parsed_values(self, step: int) -> dict:
        metric = self.unit_system == "metric"
        if step == AGE:
            return {"age": parse_number(self.inputs["age"])}
        if step == WEIGHT:
            weight = parse_number(self.inputs["weight"])
            return {"weight_kg": weight if metric else lbs_to_kg(weight)}
        if step == HEIGHT:
            if metric:
                return {"height_cm": parse_number(self.inputs["height_cm"])}
            feet = parse_number(self.inputs["height_ft"])
            inches = parse_number(self.inputs["height_in"])
            return {"height_cm": ft_in_to_cm(feet, inches)}
        name = CIRCUMFERENCE_STEPS[step]
        value = parse_number(self.inputs[name])
        return {f"{name}_cm": value if metric else in_to_cm(value)}

    def _validate(self, name: str) -> None:
        error = validate_field(name, self.inputs[name], self.unit_system)
        if error:
            self.errors[name] = error
        else:
            self.errors.pop(name, None)

    def _go(self, step: int) -> None:
        logger.debug("Wizard %s -> %s", self.step_name, STEP_NAMES[step])
        self.step = step
        self.errors = {}
        self.missing = set()


@dataclass
class LoadingTimer:
    """Cosmetic delay before the results are revealed.

    Owned by the front end; cancelling it has no effect on the results.
    """
    duration: float = LOADING_SECONDS
    message_interval: float = LOADING_MESSAGE_SECONDS
    clock: Callable[[], float] = time.monotonic
    started_at: Optional[float] = None
    cancelled: bool = False

    def start(self) -> None:
        self.started_at = self.clock()
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def running(self) -> bool:
        return self.started_at is not None and not self.cancelled and not self.finished()

    def elapsed(self) -> float:
        if self.started_at is None:
            return 0.0
        return max(0.0, self.clock() - self.started_at)

    def progress(self) -> float:
        """Percent complete, capped at 100."""
        if self.duration <= 0:
            return 100.0 if self.started_at is not None else 0.0
        return min(100.0, self.elapsed() / self.duration * 100)

    def finished(self) -> bool:
        return self.started_at is not None and not self.cancelled and self.elapsed() >= self.duration

    def message(self, strings: dict) -> str:
        messages = strings["loading_messages"]
        index = int(self.elapsed() // self.message_interval) % len(messages)
        return messages[index]
