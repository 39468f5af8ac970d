"""
Unit tests for permute views.

These tests validate that:
- permuted views match numpy.transpose
- identity permutations and inverse compositions collapse to existing objects
- invalid permutators raise InvalidPermutatorError
- labels are permuted with the axes
"""

import unittest

import numpy as np

from bartnd import BartDims, ComplexFloatNDArray, InvalidPermutatorError, PermuteView


def _arange(*shape: int) -> ComplexFloatNDArray:
    a = ComplexFloatNDArray(*shape)
    a.fill_using_linear_indices(lambda i: i)
    return a


def _inverse(perm):
    inv = [0] * len(perm)
    for i, p in enumerate(perm):
        inv[p] = i
    return tuple(inv)


class TestPermuteView(unittest.TestCase):
    def setUp(self):
        self.a = _arange(4, 5, 3)
        self.ref = np.arange(60).reshape(4, 5, 3).astype(np.complex64)

    def test_matches_transpose(self):
        for perm in [(1, 0, 2), (2, 0, 1), (2, 1, 0), (0, 2, 1)]:
            with self.subTest(perm=perm):
                view = self.a.permute_dims(*perm)
                self.assertIsInstance(view, PermuteView)
                self.assertEqual(view.shape, self.ref.transpose(perm).shape)
                np.testing.assert_array_equal(view.to_numpy(), self.ref.transpose(perm))

    def test_element_access(self):
        view = self.a.permute_dims(2, 0, 1)
        self.assertEqual(view.get(1, 3, 4), self.a.get(3, 4, 1))
        self.assertEqual(view.get(-1), self.a.get(3, 4, 2))
        view.set(-5, 0, 1, 2)
        self.assertEqual(self.a.get(1, 2, 0), -5)

    def test_identity_collapse(self):
        self.assertIs(self.a.permute_dims(0, 1, 2), self.a)
        for perm in [(1, 0, 2), (2, 0, 1), (1, 2, 0)]:
            with self.subTest(perm=perm):
                view = self.a.permute_dims(*perm)
                self.assertIs(view.permute_dims(*_inverse(perm)), self.a)

    def test_composition_targets_grandparent(self):
        twice = self.a.permute_dims(1, 0, 2).permute_dims(0, 2, 1)
        self.assertIsInstance(twice, PermuteView)
        self.assertIs(twice.parent, self.a)
        np.testing.assert_array_equal(twice.to_numpy(), self.ref.transpose(1, 0, 2).transpose(0, 2, 1))

    def test_invalid_permutators(self):
        for perm in [(0, 1), (0, 1, 1), (0, 1, 3), (0, 1, 2, 3), (-1, 0, 1)]:
            with self.subTest(perm=perm):
                with self.assertRaises(InvalidPermutatorError):
                    self.a.permute_dims(*perm)

    def test_labels_are_permuted(self):
        self.a.set_bart_dims(BartDims.READ, BartDims.COIL, BartDims.TIME)
        view = self.a.permute_dims(2, 0, 1)
        self.assertEqual(view.bart_dims, (BartDims.TIME, BartDims.READ, BartDims.COIL))

    def test_permute_of_slice(self):
        view = self.a.slice("1:3", ":", 0).permute_dims(1, 0)
        np.testing.assert_array_equal(view.to_numpy(), self.ref[1:3, :, 0].T)
        view.fill(1)
        self.assertEqual(self.a.get(2, 4, 0), 1)
        self.assertEqual(self.a.get(2, 4, 1), 2 * 15 + 4 * 3 + 1)


if __name__ == "__main__":
    unittest.main()
