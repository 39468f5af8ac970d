"""
Unit tests for reductions and elementwise maps.
"""

import math
import unittest

import numpy as np

from bartnd import ComplexFloatNDArray


class TestSum(unittest.TestCase):
    def setUp(self):
        self.a = ComplexFloatNDArray(2, 3, 4)
        self.a.fill_using_linear_indices(lambda i: i + 1j)
        self.ref = self.a.to_numpy()

    def test_total(self):
        self.assertEqual(self.a.sum(), complex(sum(range(24)), 24))

    def test_along_axes(self):
        s = self.a.sum(1)
        self.assertEqual(s.shape, (2, 4))
        np.testing.assert_allclose(s.to_numpy(), self.ref.sum(axis=1))
        s = self.a.sum(0, -1)
        self.assertEqual(s.shape, (3,))
        np.testing.assert_allclose(s.to_numpy(), self.ref.sum(axis=(0, 2)))

    def test_all_axes_returns_scalar(self):
        self.assertEqual(self.a.sum(0, 1, 2), self.a.sum())

    def test_invalid_axes(self):
        with self.assertRaises(ValueError):
            self.a.sum(3)
        with self.assertRaises(ValueError):
            self.a.sum(1, 1)

    def test_sum_of_view(self):
        view = self.a.slice(1, ":", "::2")
        self.assertEqual(view.sum(), complex(self.ref[1, :, ::2].sum()))


class TestNorm(unittest.TestCase):
    def setUp(self):
        self.a = ComplexFloatNDArray.of([3 + 4j, 0, -1, 0])

    def test_default_is_euclidean(self):
        self.assertAlmostEqual(self.a.norm(), math.sqrt(26), places=5)

    def test_orders(self):
        self.assertEqual(self.a.norm(0), 2)
        self.assertAlmostEqual(self.a.norm(1), 6, places=5)
        self.assertAlmostEqual(self.a.norm(math.inf), 5, places=5)
        self.assertAlmostEqual(self.a.norm(3), (125 + 1) ** (1 / 3), places=4)

    def test_negative_order(self):
        with self.assertRaises(ValueError):
            self.a.norm(-1)


class TestElementwiseMaps(unittest.TestCase):
    def test_real_imag_abs(self):
        a = ComplexFloatNDArray.of([[3 + 4j, -1j]])
        np.testing.assert_array_equal(a.real(), np.array([[3, 0]], dtype=np.float32))
        np.testing.assert_array_equal(a.imag(), np.array([[4, -1]], dtype=np.float32))
        np.testing.assert_allclose(a.abs(), np.array([[5, 1]], dtype=np.float32))
        self.assertEqual(a.real().dtype, np.float32)

    def test_conj_returns_new_array(self):
        a = ComplexFloatNDArray.of([1 + 2j, -3j])
        c = a.conj()
        self.assertEqual(list(c), [1 - 2j, 3j])
        self.assertEqual(list(a), [1 + 2j, -3j])


if __name__ == "__main__":
    unittest.main()
