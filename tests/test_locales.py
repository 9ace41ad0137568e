"""Tests for localized string tables."""

import unittest

from bodyfat_estimator.config import CATEGORIES, METHODS, UNKNOWN_CATEGORY
from bodyfat_estimator.locales import STRINGS, available_locales, format_error, get_strings
from bodyfat_estimator.models import ValidationError
from bodyfat_estimator.wizard import INPUT_FIELDS


def _shape(value):
    """Nested key structure of a string table, ignoring the text itself."""
    if isinstance(value, dict):
        return {key: _shape(item) for key, item in value.items()}
    if isinstance(value, list):
        return len(value)
    return type(value).__name__


class TestStringTables(unittest.TestCase):
    def test_locales_share_keys(self):
        english = _shape(STRINGS["en"])
        for locale in available_locales():
            self.assertEqual(_shape(STRINGS[locale]), english, f"Failed for locale={locale}")

    def test_every_category_has_label(self):
        for category in CATEGORIES + (UNKNOWN_CATEGORY,):
            self.assertIn(category, STRINGS["en"]["categories"])

    def test_every_method_described(self):
        for method in METHODS:
            self.assertIn("name", STRINGS["en"]["methods"][method])

    def test_every_input_has_required_message(self):
        for name in INPUT_FIELDS + ("sex",):
            self.assertIn(name, STRINGS["en"]["required"])

    def test_unknown_locale_falls_back(self):
        self.assertIs(get_strings("xx"), STRINGS["en"])


class TestFormatError(unittest.TestCase):
    def test_turkish_range(self):
        error = ValidationError("out_of_range", 15, 100)
        self.assertEqual(format_error(error, get_strings("tr")), "Aralık: 15-100")

    def test_turkish_invalid(self):
        self.assertEqual(format_error(ValidationError("invalid_number"), get_strings("tr")), "Geçersiz sayı")


if __name__ == "__main__":
    unittest.main()
