"""
Unit tests for in-memory marshalling.

These tests validate that:
- marshal_out produces a 16-slot dims vector and a column-major payload
- labeled arrays are remapped before marshalling
- marshal_in strips trailing singletons, or applies requested labels
- payload / dims disagreements are rejected
"""

import unittest

import numpy as np

from bartnd import (
    BartDims,
    ComplexFloatNDArray,
    MarshalledArray,
    ShapeMismatchError,
    marshal_in,
    marshal_out,
)


def _arange(*shape: int) -> ComplexFloatNDArray:
    a = ComplexFloatNDArray(*shape)
    a.fill_using_linear_indices(lambda i: i + 0.5j)
    return a


class TestMarshalOut(unittest.TestCase):
    def test_dims_and_payload_layout(self):
        a = _arange(2, 3)
        m = marshal_out(a)
        self.assertIsInstance(m, MarshalledArray)
        self.assertEqual(m.dims, (2, 3) + (1,) * 14)
        self.assertEqual(len(m.payload), 6 * 8)
        floats = np.frombuffer(m.payload, dtype="<f4")
        # first dimension varies fastest: (0,0), (1,0), (0,1), ...
        np.testing.assert_array_equal(floats[0::2], [0, 3, 1, 4, 2, 5])
        np.testing.assert_array_equal(floats[1::2], [0.5] * 6)

    def test_labeled_array_is_remapped(self):
        a = _arange(2, 3)
        a.set_bart_dims(BartDims.COIL, BartDims.READ)
        m = marshal_out(a)
        self.assertEqual(m.dims, (3, 1, 1, 2) + (1,) * 12)
        values = np.frombuffer(m.payload, dtype="<c8")
        np.testing.assert_array_equal(values, a.to_numpy().reshape(-1))

    def test_too_many_dims(self):
        with self.assertRaises(ValueError):
            marshal_out(ComplexFloatNDArray(*([1] * 17)))


class TestMarshalIn(unittest.TestCase):
    def test_round_trip_unlabeled(self):
        a = _arange(2, 3, 4)
        b = marshal_in(marshal_out(a))
        self.assertEqual(b, a)

    def test_strips_trailing_singletons(self):
        payload = np.zeros(4, dtype="<c8").tobytes()
        self.assertEqual(marshal_in((4, 1, 1), payload).shape, (4,))
        self.assertEqual(marshal_in((1, 1), np.zeros(1, dtype="<c8").tobytes()).shape, (1,))
        self.assertEqual(marshal_in((1, 4), payload).shape, (1, 4))

    def test_round_trip_labeled(self):
        labels = (BartDims.TIME, BartDims.READ, BartDims.COIL)
        a = _arange(4, 6, 8)
        a.set_bart_dims(*labels)
        m = marshal_out(a)
        b = marshal_in(m.dims, m.payload, bart_dims=labels)
        self.assertIsInstance(b, ComplexFloatNDArray)
        self.assertEqual(b.bart_dims, labels)
        self.assertEqual(b, a)

    def test_labels_in_other_order(self):
        a = _arange(4, 6)
        a.set_bart_dims(BartDims.COIL, BartDims.READ)
        m = marshal_out(a)
        b = marshal_in(m, bart_dims=(BartDims.READ, BartDims.COIL))
        self.assertEqual(b.shape, (6, 4))
        np.testing.assert_array_equal(b.to_numpy(), a.to_numpy().T)

    def test_rejections(self):
        with self.assertRaises(ShapeMismatchError):
            marshal_in((2, 2), np.zeros(3, dtype="<c8").tobytes())
        with self.assertRaises(ValueError):
            marshal_in((1,) * 17, np.zeros(1, dtype="<c8").tobytes())
        with self.assertRaises(TypeError):
            marshal_in(marshal_out(ComplexFloatNDArray(2)), b"")


if __name__ == "__main__":
    unittest.main()
