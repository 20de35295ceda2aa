from __future__ import annotations

import unittest

from seokeywords.errors import ValidationError
from seokeywords.utils import collapse_whitespace, preview, validate_url


class ValidateUrlTests(unittest.TestCase):
    def test_accepts_absolute_https(self) -> None:
        self.assertEqual(validate_url("https://example.com/path?x=1"), "https://example.com/path?x=1")

    def test_strips_surrounding_whitespace_and_adds_root_path(self) -> None:
        self.assertEqual(validate_url("  http://example.com  "), "http://example.com/")

    def test_lowercases_scheme(self) -> None:
        self.assertEqual(validate_url("HTTPS://example.com/a"), "https://example.com/a")

    def test_handles_localhost_with_port(self) -> None:
        self.assertEqual(validate_url("http://localhost:8000/foo"), "http://localhost:8000/foo")

    def test_rejects_missing_scheme(self) -> None:
        with self.assertRaises(ValidationError):
            validate_url("example.com")

    def test_rejects_relative_paths(self) -> None:
        with self.assertRaises(ValidationError):
            validate_url("/just/a/path")

    def test_rejects_other_schemes(self) -> None:
        with self.assertRaises(ValidationError):
            validate_url("ftp://example.com/file")

    def test_rejects_blank_and_missing_values(self) -> None:
        for value in ("   ", "", None, 42):
            with self.assertRaises(ValidationError):
                validate_url(value)

    def test_rejects_embedded_whitespace(self) -> None:
        with self.assertRaises(ValidationError):
            validate_url("https://exa mple.com/")

    def test_rejects_bad_port(self) -> None:
        with self.assertRaises(ValidationError):
            validate_url("http://example.com:notaport/")

    def test_validation_error_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            validate_url("nope")


class TextHelperTests(unittest.TestCase):
    def test_collapse_whitespace(self) -> None:
        self.assertEqual(collapse_whitespace("  a \n\t b   c "), "a b c")

    def test_preview_always_appends_marker(self) -> None:
        self.assertEqual(preview("short", 200), "short...")
        self.assertEqual(preview("x" * 300, 200), "x" * 200 + "...")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
