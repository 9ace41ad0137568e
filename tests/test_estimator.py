"""Tests for the body fat estimation engine."""

import unittest

from bodyfat_estimator.estimator import (
    average_body_fat,
    bmi_based_body_fat,
    calculate_bmi,
    cun_bae_body_fat,
    ecore_body_fat,
    estimate,
    format_results,
    navy_body_fat,
    relative_fat_mass,
)
from bodyfat_estimator.locales import get_strings
from bodyfat_estimator.models import MeasurementRecord


def _male():
    return MeasurementRecord(
        sex="male", age=30, weight_kg=80, height_cm=180, neck_cm=38, waist_cm=85,
    )


def _female(**overrides):
    values = dict(
        sex="female", age=30, weight_kg=60, height_cm=165, neck_cm=32, waist_cm=70, hip_cm=95,
    )
    values.update(overrides)
    return MeasurementRecord(**values)


class TestBMI(unittest.TestCase):
    def test_bmi(self):
        # 80 / 1.8² = 24.69
        self.assertAlmostEqual(calculate_bmi(80, 180), 24.691, places=3)

    def test_zero_height(self):
        self.assertIsNone(calculate_bmi(80, 0))

    def test_missing_weight(self):
        self.assertIsNone(calculate_bmi(None, 180))


class TestReferenceMale(unittest.TestCase):
    def setUp(self):
        self.bundle = estimate(_male())

    def test_bmi_based(self):
        # 1.2*24.691 + 0.23*30 - 10.8 - 5.4 = 20.33
        self.assertAlmostEqual(self.bundle.bmi_based, 20.330, places=2)

    def test_navy(self):
        # 495 / (1.0324 - 0.19077*log10(47) + 0.15456*log10(180)) - 450
        self.assertAlmostEqual(self.bundle.navy, 16.11, delta=0.05)

    def test_rfm(self):
        # 64 - 20 * 180/85
        self.assertAlmostEqual(self.bundle.relative_fat_mass, 21.647, places=2)

    def test_cun_bae_uses_female_zero(self):
        self.assertAlmostEqual(self.bundle.cun_bae, 21.60, delta=0.05)

    def test_ecore_uses_female_zero(self):
        self.assertAlmostEqual(self.bundle.ecore, 21.89, delta=0.05)

    def test_average_is_mean_of_all_five(self):
        values = list(self.bundle.estimates().values())
        self.assertEqual(len(values), 5)
        self.assertAlmostEqual(self.bundle.average_bf, sum(values) / 5)
        self.assertAlmostEqual(self.bundle.average_bf, 20.31, delta=0.05)

    def test_category(self):
        self.assertEqual(self.bundle.category, "average")


class TestReferenceFemale(unittest.TestCase):
    def setUp(self):
        self.bundle = estimate(_female())

    def test_bmi_based_uses_male_zero(self):
        # 1.2*22.039 + 0.23*30 - 5.4 = 27.95
        self.assertAlmostEqual(self.bundle.bmi_based, 27.95, delta=0.01)

    def test_navy(self):
        self.assertAlmostEqual(self.bundle.navy, 24.86, delta=0.05)

    def test_rfm(self):
        # 76 - 20 * 165/70
        self.assertAlmostEqual(self.bundle.relative_fat_mass, 28.857, places=2)

    def test_cun_bae_uses_female_one(self):
        self.assertAlmostEqual(self.bundle.cun_bae, 29.47, delta=0.05)

    def test_ecore_uses_female_one(self):
        self.assertAlmostEqual(self.bundle.ecore, 29.70, delta=0.05)

    def test_category(self):
        self.assertEqual(self.bundle.category, "average")


class TestSexIndicatorPolarity(unittest.TestCase):
    """Deurenberg flags men; CUN-BAE and ECORE-BF flag women."""

    def test_deurenberg_male_is_lower_by_10_8(self):
        male = bmi_based_body_fat(25, 40, "male")
        female = bmi_based_body_fat(25, 40, "female")
        self.assertAlmostEqual(female - male, 10.8)

    def test_ecore_female_is_higher_by_11_9(self):
        male = ecore_body_fat(25, 40, "male")
        female = ecore_body_fat(25, 40, "female")
        self.assertAlmostEqual(female - male, 11.9)

    def test_cun_bae_female_terms(self):
        bmi = 25
        male = cun_bae_body_fat(bmi, 40, "male")
        female = cun_bae_body_fat(bmi, 40, "female")
        # 10.689 + 0.181*BMI - 0.005*BMI²
        self.assertAlmostEqual(female - male, 10.689 + 0.181 * bmi - 0.005 * bmi * bmi)


class TestPreconditions(unittest.TestCase):
    def test_navy_male_waist_not_above_neck(self):
        self.assertIsNone(navy_body_fat("male", 180, 40, 40))
        self.assertIsNone(navy_body_fat("male", 180, 45, 40))

    def test_navy_female_requires_hip(self):
        self.assertIsNone(navy_body_fat("female", 165, 32, 70, None))

    def test_navy_female_non_positive_sum(self):
        self.assertIsNone(navy_body_fat("female", 165, 200, 50, 50))

    def test_navy_zero_height(self):
        self.assertIsNone(navy_body_fat("male", 0, 38, 85))

    def test_rfm_zero_waist(self):
        self.assertIsNone(relative_fat_mass("male", 180, 0))

    def test_ecore_non_positive_bmi(self):
        self.assertIsNone(ecore_body_fat(0, 30, "male"))

    def test_missing_age(self):
        self.assertIsNone(bmi_based_body_fat(24, None, "male"))
        self.assertIsNone(cun_bae_body_fat(24, None, "male"))
        self.assertIsNone(ecore_body_fat(24, None, "male"))


class TestClamping(unittest.TestCase):
    def test_very_lean_inputs_floor_at_zero(self):
        record = MeasurementRecord(
            sex="male", age=15, weight_kg=30, height_cm=250, neck_cm=38, waist_cm=40,
        )
        bundle = estimate(record)
        for method, value in bundle.estimates().items():
            self.assertEqual(value, 0.0, f"Failed for method={method}")
        self.assertEqual(bundle.average_bf, 0.0)
        self.assertEqual(bundle.category, "contest_prep")

    def test_results_never_negative(self):
        for weight in (30, 60, 120, 300):
            for height in (100, 170, 250):
                for sex in ("male", "female"):
                    record = MeasurementRecord(
                        sex=sex, age=15, weight_kg=weight, height_cm=height,
                        neck_cm=70, waist_cm=71, hip_cm=50,
                    )
                    for value in estimate(record).estimates().values():
                        self.assertGreaterEqual(value, 0)


class TestEstimate(unittest.TestCase):
    def test_incomplete_record_gives_none(self):
        self.assertIsNone(estimate(MeasurementRecord(sex="male", age=30)))

    def test_female_without_hip_is_incomplete(self):
        self.assertIsNone(estimate(_female(hip_cm=None)))

    def test_female_without_hip_partial(self):
        bundle = estimate(_female(hip_cm=None), strict=False)
        self.assertIsNone(bundle.navy)
        self.assertIsNotNone(bundle.bmi_based)
        self.assertIsNotNone(bundle.relative_fat_mass)
        self.assertIsNotNone(bundle.cun_bae)
        self.assertIsNotNone(bundle.ecore)
        values = list(bundle.estimates().values())
        self.assertAlmostEqual(bundle.average_bf, sum(values) / 4)

    def test_male_ignores_hip(self):
        with_hip = estimate(MeasurementRecord(
            sex="male", age=30, weight_kg=80, height_cm=180, neck_cm=38, waist_cm=85, hip_cm=100,
        ))
        self.assertEqual(with_hip.navy, estimate(_male()).navy)

    def test_idempotent(self):
        self.assertEqual(estimate(_male()), estimate(_male()))

    def test_no_sex_gives_none_even_when_partial(self):
        self.assertIsNone(estimate(MeasurementRecord(age=30), strict=False))


class TestAverage(unittest.TestCase):
    def test_skips_missing(self):
        self.assertEqual(average_body_fat([10, None, 20]), 15)

    def test_none_when_empty(self):
        self.assertIsNone(average_body_fat([None, None]))


class TestFormatResults(unittest.TestCase):
    def test_report_lines(self):
        text = format_results(estimate(_male()), get_strings("en"))
        self.assertIn("BMI", text)
        self.assertIn("24.7", text)
        self.assertIn("US Navy BF% (Tape)", text)
        self.assertIn("Average BF%", text)
        self.assertIn("You're in the average range.", text)

    def test_missing_method_shows_dash(self):
        bundle = estimate(_female(hip_cm=None), strict=False)
        text = format_results(bundle, get_strings("en"))
        navy_line = [line for line in text.splitlines() if line.startswith("US Navy")][0]
        self.assertTrue(navy_line.endswith("-"))


if __name__ == "__main__":
    unittest.main()
