"""
Argument descriptor behavioral tests.

Scope
- Validate construction, normalization of empty strings, and read-only fields.
- Validate metadata type checks (name/short/descr/default/values).
- Validate the summary spelling exposed by Argument.switch.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from flagpole import Argument


class TestArgument(TestCase):
    """Behavioral tests for Argument."""

    def testDefaults(self):
        a = Argument("verbose")
        self.assertEqual(a.name, "verbose")
        self.assertIsNone(a.short)
        self.assertIsNone(a.descr)
        self.assertIsNone(a.default)
        self.assertEqual(a.values, ())
        self.assertFalse(a.expects)

    def testFullMetadata(self):
        a = Argument("mode", "m", descr="  how to write", default="append", values=["append", "truncate"], expects=True)
        self.assertEqual(a.short, "m")
        self.assertEqual(a.descr, "  how to write")
        self.assertEqual(a.default, "append")
        self.assertEqual(a.values, ("append", "truncate"))
        self.assertTrue(a.expects)

    def testEmptyStringsMeanNotProvided(self):
        a = Argument("x", "", descr="", default="")
        self.assertIsNone(a.short)
        self.assertIsNone(a.descr)
        self.assertIsNone(a.default)

    def testFieldsAreReadOnly(self):
        a = Argument("x")
        with self.assertRaises(AttributeError):
            a.name = "y"  # type: ignore[misc]

    def testNameRequired(self):
        with self.assertRaises(TypeError):
            Argument()

    def testNameCannotBeEmpty(self):
        with self.assertRaises(ValueError):
            Argument("")

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            Argument(1)  # type: ignore[arg-type]

    def testNameKeptVerbatim(self):
        for name in ("-x", "dry run", "a=b", "naïve"):
            self.assertEqual(Argument(name).name, name)

    def testShortKeptVerbatim(self):
        self.assertEqual(Argument("why", "-y").short, "-y")

    def testDescrKeptVerbatim(self):
        self.assertEqual(Argument("x", descr="  indented").descr, "  indented")
        self.assertEqual(Argument("x", descr="   ").descr, "   ")

    def testDefaultMustBeString(self):
        with self.assertRaises(TypeError):
            Argument("count", default=5, expects=True)  # type: ignore[arg-type]

    def testValuesRejectPlainString(self):
        with self.assertRaises(TypeError):
            Argument("mode", values="ab")

    def testValuesRejectDuplicates(self):
        with self.assertRaises(ValueError):
            Argument("mode", values=("fast", "safe", "fast"))

    def testDefaultWithoutExpectsIsAcceptedAtConstruction(self):
        a = Argument("x", default="5")
        self.assertEqual(a.default, "5")
        self.assertFalse(a.expects)

    def testSwitchPrefersShorthand(self):
        self.assertEqual(Argument("a").switch, "--a")
        self.assertEqual(Argument("b", "c").switch, "-c")
        self.assertEqual(Argument("b", "c", expects=True).switch, "-c=")
        self.assertEqual(Argument("b", expects=True).switch, "--b=")

    def testRepr(self):
        self.assertEqual(
            repr(Argument("x", "y")),
            "argument(name='x', short='y', descr=None, default=None, values=(), expects=False)"
        )


if __name__ == "__main__":
    unittest.main()
