"""
Unit tests for reshape views.

These tests validate that:
- reshape preserves linear order and aliases the parent
- -1 extents are inferred
- same-shape reshapes and reshape-of-reshape round trips collapse
- element-count mismatches raise ShapeMismatchError
- reshape views carry no labels and stay contiguous over dense arrays
"""

import unittest

import numpy as np

from bartnd import BartDims, ComplexFloatNDArray, ReshapeView, ShapeMismatchError


def _arange(*shape: int) -> ComplexFloatNDArray:
    a = ComplexFloatNDArray(*shape)
    a.fill_using_linear_indices(lambda i: i)
    return a


class TestReshapeView(unittest.TestCase):
    def setUp(self):
        self.a = _arange(4, 5, 3)

    def test_linear_order_preserved(self):
        view = self.a.reshape(6, 10)
        self.assertIsInstance(view, ReshapeView)
        self.assertEqual(view.shape, (6, 10))
        self.assertEqual(list(view), list(self.a))
        self.assertEqual(view.get(2, 3), 23)

    def test_write_through(self):
        view = self.a.reshape(60)
        view.set(-1, 17)
        self.assertEqual(self.a.get(17), -1)
        self.a.set(5j, 0, 0, 0)
        self.assertEqual(view.get(0), 5j)

    def test_inferred_extent(self):
        self.assertEqual(self.a.reshape(-1).shape, (60,))
        self.assertEqual(self.a.reshape(3, -1, 2).shape, (3, 10, 2))
        with self.assertRaises(ShapeMismatchError):
            self.a.reshape(7, -1)
        with self.assertRaises(ValueError):
            self.a.reshape(-1, -1)

    def test_identity_collapse(self):
        self.assertIs(self.a.reshape(4, 5, 3), self.a)
        self.assertIs(self.a.reshape(6, 10).reshape(4, 5, 3), self.a)
        twice = self.a.reshape(6, 10).reshape(12, 5)
        self.assertIsInstance(twice, ReshapeView)
        self.assertIs(twice.parent, self.a)

    def test_mismatch(self):
        with self.assertRaises(ShapeMismatchError) as ctx:
            self.a.reshape(7, 8)
        self.assertEqual(ctx.exception.op, "reshape")

    def test_contiguity(self):
        self.assertTrue(self.a.reshape(6, 10).is_contiguous)
        self.assertFalse(self.a.permute_dims(1, 0, 2).reshape(60).is_contiguous)

    def test_reshape_of_permute(self):
        ref = np.arange(60).reshape(4, 5, 3).transpose(2, 0, 1).reshape(3, 20)
        view = self.a.permute_dims(2, 0, 1).reshape(3, 20)
        np.testing.assert_array_equal(view.to_numpy(), ref.astype(np.complex64))
        self.assertEqual(view.get(1, 7), ref[1, 7])
        view.set(-2, 1, 7)
        self.assertEqual(self.a.get(int(ref[1, 7])), -2)

    def test_no_labels(self):
        self.a.set_bart_dims(BartDims.READ, BartDims.PHS1, BartDims.COIL)
        view = self.a.reshape(60)
        self.assertFalse(view.are_bart_dims_specified())


if __name__ == "__main__":
    unittest.main()
