"""
Unit tests for the string coercion helpers
"""

import os
import unittest
from pathlib import PurePosixPath

from uploads_im.utils.helpers import (
    extract_file_name,
    parse_bool_number_string,
    parse_status_code_string,
    parse_u64_string,
)


class TestParseU64String(unittest.TestCase):
    def test_valid_numbers(self):
        self.assertEqual(parse_u64_string("0"), 0)
        self.assertEqual(parse_u64_string("600"), 600)
        self.assertEqual(parse_u64_string("18446744073709551615"), 2**64 - 1)

    def test_non_numeric_string(self):
        with self.assertRaises(ValueError) as ctx:
            parse_u64_string("abc")
        message = str(ctx.exception)
        self.assertIn('"abc"', message)
        self.assertIn("invalid digit found in string", message)

    def test_negative_number(self):
        with self.assertRaises(ValueError) as ctx:
            parse_u64_string("-1")
        self.assertIn('"-1"', str(ctx.exception))

    def test_empty_string(self):
        with self.assertRaises(ValueError) as ctx:
            parse_u64_string("")
        self.assertIn("empty string", str(ctx.exception))

    def test_overflow(self):
        with self.assertRaises(ValueError) as ctx:
            parse_u64_string("18446744073709551616")
        self.assertIn("too large", str(ctx.exception))

    def test_native_number_rejected(self):
        with self.assertRaises(ValueError) as ctx:
            parse_u64_string(600)
        self.assertIn("expected a string", str(ctx.exception))


class TestParseBoolNumberString(unittest.TestCase):
    def test_zero_and_one(self):
        self.assertIs(parse_bool_number_string("0"), False)
        self.assertIs(parse_bool_number_string("1"), True)

    def test_other_integer(self):
        with self.assertRaises(ValueError) as ctx:
            parse_bool_number_string("2")
        message = str(ctx.exception)
        self.assertIn("`2`", message)
        self.assertIn("boolean integral value", message)

    def test_invalid_inputs(self):
        for value in ("-1", "yes", "true", "", 1, None):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_bool_number_string(value)


class TestParseStatusCodeString(unittest.TestCase):
    def test_string_and_number(self):
        self.assertEqual(parse_status_code_string("503"), 503)
        self.assertEqual(parse_status_code_string(400), 400)
        self.assertEqual(parse_status_code_string("100"), 100)
        self.assertEqual(parse_status_code_string("599"), 599)

    def test_out_of_range(self):
        for value in ("99", "600", "0", "65535", 1000, -1):
            with self.subTest(value=value):
                with self.assertRaises(ValueError) as ctx:
                    parse_status_code_string(value)
                self.assertIn("valid HTTP status code", str(ctx.exception))
                self.assertIn(str(value), str(ctx.exception))

    def test_non_numeric(self):
        with self.assertRaises(ValueError) as ctx:
            parse_status_code_string("oops")
        self.assertIn('"oops"', str(ctx.exception))
        self.assertIn("valid HTTP status code", str(ctx.exception))

    def test_beyond_u16(self):
        with self.assertRaises(ValueError):
            parse_status_code_string("70000")

    def test_wrong_type(self):
        for value in (True, None, 503.0, ["503"]):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_status_code_string(value)


class TestExtractFileName(unittest.TestCase):
    def test_plain_paths(self):
        self.assertEqual(extract_file_name("image.jpg"), "image.jpg")
        self.assertEqual(extract_file_name("/tmp/photos/image.png"), "image.png")
        self.assertEqual(extract_file_name(PurePosixPath("a/b.gif")), "b.gif")

    def test_paths_without_file_name(self):
        for path in ("", "/", "photos/", ".", "..", "photos/.."):
            with self.subTest(path=path):
                self.assertIsNone(extract_file_name(path))

    def test_trailing_platform_separator(self):
        self.assertIsNone(extract_file_name("photos" + os.sep))

    @unittest.skipUnless(os.sep == "/", "backslash is a separator on this platform")
    def test_trailing_backslash_is_part_of_name_on_posix(self):
        self.assertEqual(extract_file_name("photos/image\\"), "image\\")


if __name__ == "__main__":
    unittest.main()
