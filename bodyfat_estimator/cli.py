"""Command-line interface for the body fat estimator."""

import argparse
import logging
import sys

from bodyfat_estimator.config import DEFAULT_LOCALE, FIELD_BOUNDS, LOG_LEVEL, SEXES, UNIT_SYSTEMS
from bodyfat_estimator.estimator import estimate, format_results
from bodyfat_estimator.locales import available_locales, format_error, get_strings
from bodyfat_estimator.models import MeasurementRecord
from bodyfat_estimator.units import ft_in_to_cm, in_to_cm, lbs_to_kg, parse_number
from bodyfat_estimator.validation import validate_field

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _read_field(name: str, raw, unit_system: str, strings: dict) -> float:
    """Validate one raw argument the same way the wizard does, exit on failure."""
    value = parse_number(raw) if raw is not None else None
    error = validate_field(name, raw, unit_system) if raw is not None else None
    if error:
        print(f"{strings['field_labels'][name]}: {format_error(error, strings)}")
        sys.exit(1)
    if value is None:
        print(strings["required"][name])
        sys.exit(1)
    return value


# --- Command handlers ---

def cmd_estimate(args):
    strings = get_strings(args.locale)
    units = args.units
    metric = units == "metric"
    wrong_flags = (args.feet, args.inches) if metric else (args.height,)
    if any(flag is not None for flag in wrong_flags):
        print(strings["height_flags"][units])
        sys.exit(1)

    age = _read_field("age", args.age, units, strings)
    weight = _read_field("weight", args.weight, units, strings)
    if metric:
        height_cm = _read_field("height_cm", args.height, units, strings)
    else:
        feet = _read_field("height_ft", args.feet, units, strings)
        inches = _read_field("height_in", args.inches, units, strings)
        height_cm = ft_in_to_cm(feet, inches)
    neck = _read_field("neck", args.neck, units, strings)
    waist = _read_field("waist", args.waist, units, strings)
    hip = None
    if args.sex == "female":
        hip = _read_field("hip", args.hip, units, strings)

    record = MeasurementRecord(
        sex=args.sex,
        age=age,
        weight_kg=weight if metric else lbs_to_kg(weight),
        height_cm=height_cm,
        neck_cm=neck if metric else in_to_cm(neck),
        waist_cm=waist if metric else in_to_cm(waist),
        hip_cm=None if hip is None else (hip if metric else in_to_cm(hip)),
    )
    logger.debug("Estimating for %s", record)

    bundle = estimate(record)
    if bundle is None:
        print(strings["calculation_error"])
        sys.exit(1)
    print(format_results(bundle, strings))


def cmd_validate(args):
    strings = get_strings(args.locale)
    error = validate_field(args.field, args.value, args.units)
    if error:
        print(format_error(error, strings))
        sys.exit(1)
    print("OK")


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bodyfat_estimator",
        description="Body Fat Estimator - five formulas, one average",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--locale", default=DEFAULT_LOCALE, choices=available_locales(),
                        help="Language for output")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- estimate ---
    estimate_p = subparsers.add_parser("estimate", help="Estimate body fat percentage")
    estimate_p.add_argument("--sex", choices=list(SEXES), required=True)
    estimate_p.add_argument("--age", required=True, help="Age in years")
    estimate_p.add_argument("--weight", required=True, help="Weight in kg (lbs with --units imperial)")
    estimate_p.add_argument("--height", help="Height in cm (metric)")
    estimate_p.add_argument("--feet", help="Height feet (imperial)")
    estimate_p.add_argument("--inches", help="Height inches (imperial)")
    estimate_p.add_argument("--neck", required=True, help="Neck circumference in cm (in)")
    estimate_p.add_argument("--waist", required=True, help="Waist circumference in cm (in)")
    estimate_p.add_argument("--hip", help="Hip circumference in cm (in), women only")
    estimate_p.add_argument("--units", choices=list(UNIT_SYSTEMS), default="metric")
    estimate_p.set_defaults(func=cmd_estimate)

    # --- validate ---
    validate_p = subparsers.add_parser("validate", help="Check a single input value")
    validate_p.add_argument("field", choices=list(FIELD_BOUNDS.keys()))
    validate_p.add_argument("value", help="Raw value as typed (comma decimals allowed)")
    validate_p.add_argument("--units", choices=list(UNIT_SYSTEMS), default="metric")
    validate_p.set_defaults(func=cmd_validate)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return

    args.func(args)
