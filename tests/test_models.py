"""Tests for data models."""

import dataclasses
import unittest

from bodyfat_estimator.categories import categorize
from bodyfat_estimator.models import MeasurementRecord, ResultBundle, ValidationError


class TestMeasurementRecord(unittest.TestCase):
    def test_male_complete_without_hip(self):
        record = MeasurementRecord("male", 30, 80, 180, 38, 85)
        self.assertTrue(record.is_complete())
        self.assertTrue(record.is_male)

    def test_female_needs_hip(self):
        record = MeasurementRecord("female", 30, 60, 165, 32, 70)
        self.assertFalse(record.is_complete())
        self.assertEqual(record.missing_fields(), ["hip_cm"])

    def test_empty_record(self):
        record = MeasurementRecord()
        self.assertIn("sex", record.missing_fields())
        self.assertFalse(record.is_complete())

    def test_invalid_sex(self):
        with self.assertRaises(ValueError):
            MeasurementRecord(sex="other")

    def test_immutable(self):
        record = MeasurementRecord("male", 30)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            record.age = 31


class TestResultBundle(unittest.TestCase):
    def test_estimates_skip_missing_in_method_order(self):
        bundle = ResultBundle(sex="male", bmi=24, ecore=20, bmi_based=18, navy=None)
        self.assertEqual(list(bundle.estimates().items()), [("bmi_based", 18), ("ecore", 20)])

    def test_category_derived(self):
        self.assertEqual(ResultBundle(sex="female", average_bf=30).category, "average")
        self.assertEqual(ResultBundle(sex="female").category, "unknown")

    def test_category_matches_bands(self):
        for value in (5, 12, 20, 25, 35):
            bundle = ResultBundle(sex="male", average_bf=value)
            self.assertEqual(bundle.category, categorize(value, "male"), f"Failed for {value}")


class TestValidationError(unittest.TestCase):
    def test_str(self):
        self.assertEqual(str(ValidationError("out_of_range", 0, 11.9)), "Range: 0-11.9")
        self.assertEqual(str(ValidationError("invalid_number")), "Invalid number")


if __name__ == "__main__":
    unittest.main()
