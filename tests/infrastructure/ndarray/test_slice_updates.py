"""
Unit tests for per-slice updates (apply_on_slices / map_on_slices).

These tests validate that:
- func is called once per index of the iteration axes, in row-major order
- a func that mutates its slice in place updates the receiver
- a returned array or scalar is written into the slice
- writes through view receivers land in the parent array
- returned arrays of the wrong shape raise ShapeMismatchError
- map_on_slices leaves the receiver untouched
"""

import unittest

import numpy as np

from bartnd import ComplexFloatNDArray, ShapeMismatchError


def _arange(*shape: int) -> ComplexFloatNDArray:
    a = ComplexFloatNDArray(*shape)
    a.fill_using_linear_indices(lambda i: i)
    return a


class TestApplyOnSlices(unittest.TestCase):
    def test_in_place_func(self):
        a = _arange(4, 5, 3)
        seen = []

        def zero_out(s, idx):
            seen.append((idx, s.shape))
            s.fill(idx[0])

        out = a.apply_on_slices(zero_out, 2)
        self.assertIs(out, a)
        self.assertEqual(seen, [((0,), (4, 5)), ((1,), (4, 5)), ((2,), (4, 5))])
        expected = np.broadcast_to(np.arange(3), (4, 5, 3))
        np.testing.assert_array_equal(a.to_numpy(), expected)

    def test_returned_array_is_written(self):
        a = _arange(4, 5, 3)
        original = a.to_numpy()
        a.apply_on_slices(lambda s, idx: s.multiply(idx[0] + 1), 0)
        factors = np.arange(1, 5).reshape(4, 1, 1)
        np.testing.assert_array_equal(a.to_numpy(), original * factors)

    def test_returned_numpy_array_and_scalar(self):
        a = _arange(2, 3)
        a.apply_on_slices(lambda s, idx: np.full(3, 7j), 0)
        np.testing.assert_array_equal(a.to_numpy(), np.full((2, 3), 7j))
        a.apply_on_slices(lambda s, idx: 1.5, 1)
        np.testing.assert_array_equal(a.to_numpy(), np.full((2, 3), 1.5))

    def test_iteration_order_over_several_axes(self):
        a = _arange(2, 3, 4)
        seen = []
        a.apply_on_slices(lambda s, idx: seen.append((idx, s.to_numpy())), 2, 0)
        self.assertEqual([idx for idx, _ in seen], [(k, i) for k in range(4) for i in range(2)])
        for (k, i), values in seen:
            np.testing.assert_array_equal(values, a.to_numpy()[i, :, k])

    def test_no_iteration_axes(self):
        a = _arange(2, 2)
        calls = []
        a.apply_on_slices(lambda s, idx: calls.append((s, idx)))
        self.assertEqual(len(calls), 1)
        self.assertIs(calls[0][0], a)
        self.assertEqual(calls[0][1], ())

    def test_writes_through_permute_view(self):
        base = _arange(4, 5, 3)
        original = base.to_numpy()
        view = base.permute_dims(2, 0, 1)
        out = view.apply_on_slices(lambda s, idx: s.add(100 * idx[0]), 0)
        self.assertIs(out, view)
        np.testing.assert_array_equal(base.to_numpy(), original + 100 * np.arange(3))

    def test_writes_through_mask_view(self):
        base = _arange(4, 5)
        odd = base.mask_with_linear_indices(lambda v, i: i % 2 == 1)
        odd.apply_on_slices(lambda s, idx: s.multiply(-1), 0)
        expected = np.arange(20) * np.where(np.arange(20) % 2 == 1, -1, 1)
        np.testing.assert_array_equal(base.to_numpy().reshape(-1), expected)

    def test_wrong_shape_is_rejected(self):
        a = _arange(4, 5, 3)
        original = a.to_numpy()
        with self.assertRaises(ShapeMismatchError):
            a.apply_on_slices(lambda s, idx: np.zeros((5, 4)), 2)
        np.testing.assert_array_equal(a.to_numpy(), original)

    def test_invalid_iteration_axes(self):
        a = _arange(2, 3)
        with self.assertRaises(ValueError):
            a.apply_on_slices(lambda s, idx: None, 2)
        with self.assertRaises(ValueError):
            a.apply_on_slices(lambda s, idx: None, 0, -2)


class TestMapOnSlices(unittest.TestCase):
    def test_receiver_is_unchanged(self):
        base = _arange(3, 4)
        view = base.slice(":", "1:3")
        mapped = view.map_on_slices(lambda s, idx: s.conj().add(idx[0]), 0)
        self.assertIsInstance(mapped, ComplexFloatNDArray)
        self.assertEqual(mapped.shape, (3, 2))
        np.testing.assert_array_equal(
            mapped.to_numpy(), base.to_numpy()[:, 1:3] + np.arange(3).reshape(3, 1)
        )
        np.testing.assert_array_equal(base.to_numpy(), np.arange(12).reshape(3, 4))


if __name__ == "__main__":
    unittest.main()
