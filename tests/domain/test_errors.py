"""
Unit tests for the engine and boundary error types.

These tests validate that:
- every error derives from the builtin category callers catch
- the offending values are kept as attributes
- messages report the valid range / expected and actual values
"""

import unittest

from bartnd import (
    BartDimsCountMismatchError,
    BartError,
    DimensionMismatchError,
    DuplicateBartDimsError,
    InvalidMemoryNameError,
    InvalidPermutatorError,
    NDArrayIndexError,
    ShapeMismatchError,
    UnsupportedFormatError,
    UnsupportedOperationError,
)


class TestErrorHierarchy(unittest.TestCase):
    def test_builtin_bases(self):
        self.assertTrue(issubclass(NDArrayIndexError, IndexError))
        for cls in (
            DimensionMismatchError,
            ShapeMismatchError,
            InvalidPermutatorError,
            BartDimsCountMismatchError,
            DuplicateBartDimsError,
            UnsupportedFormatError,
            InvalidMemoryNameError,
        ):
            self.assertTrue(issubclass(cls, ValueError), cls)
        self.assertTrue(issubclass(UnsupportedOperationError, RuntimeError))
        self.assertTrue(issubclass(BartError, RuntimeError))


class TestErrorPayloads(unittest.TestCase):
    def test_index_error_reports_range(self):
        e = NDArrayIndexError(60, 60, (4, 5, 3))
        self.assertEqual(e.index, 60)
        self.assertEqual(e.length, 60)
        self.assertIsNone(e.axis)
        self.assertIn("[-60, 59]", str(e))
        self.assertIn("(4, 5, 3)", str(e))

    def test_index_error_on_axis(self):
        e = NDArrayIndexError(-6, 5, (4, 5, 3), axis=1)
        self.assertEqual(e.axis, 1)
        self.assertIn("axis 1", str(e))

    def test_shape_mismatch(self):
        e = ShapeMismatchError((2, 3), (3, 2), "add")
        self.assertEqual(e.expected, (2, 3))
        self.assertEqual(e.actual, (3, 2))
        self.assertEqual(e.op, "add")
        self.assertIn("add", str(e))

    def test_dimension_mismatch(self):
        e = DimensionMismatchError(3, 2)
        self.assertEqual((e.expected, e.actual), (3, 2))

    def test_bart_error_keeps_diagnostics(self):
        e = BartError("BART failed", diagnostics="ERROR: bad input\n", returncode=1)
        self.assertEqual(e.diagnostics, "ERROR: bad input\n")
        self.assertEqual(e.returncode, 1)
        self.assertIn("ERROR: bad input", str(e))

    def test_memory_name(self):
        e = InvalidMemoryNameError("x.ra")
        self.assertEqual(e.name, "x.ra")
        self.assertIn(".mem", str(e))


if __name__ == "__main__":
    unittest.main()
