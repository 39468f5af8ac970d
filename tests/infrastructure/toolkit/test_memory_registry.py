"""
Unit tests for the in-memory array registry.

These tests validate that:
- buffer names must end with ``.mem``
- inputs are registered marshalled and can be loaded back
- reserved outputs only count as registered once stored
- unregistering removes entries
"""

import unittest

import numpy as np

from bartnd import BartDims, ComplexFloatNDArray, InvalidMemoryNameError, MemoryRegistry


class TestMemoryRegistry(unittest.TestCase):
    def setUp(self):
        self.registry = MemoryRegistry()

    def test_name_validation(self):
        for bad in ("input.ra", "mem", "input.mem.txt", 3):
            with self.subTest(name=bad):
                with self.assertRaises(InvalidMemoryNameError):
                    self.registry.register_input(bad, ComplexFloatNDArray(1))

    def test_register_and_load_input(self):
        a = ComplexFloatNDArray.of([[1, 2], [3j, 4]])
        self.registry.register_input("in.mem", a)
        self.assertTrue(self.registry.is_registered("in.mem"))
        self.assertIn("in.mem", self.registry)
        self.assertEqual(self.registry.load("in.mem"), a)

    def test_load_with_labels(self):
        a = ComplexFloatNDArray(3, 2)
        a.fill_using_linear_indices(lambda i: i)
        a.set_bart_dims(BartDims.COIL, BartDims.READ)
        self.registry.register_input("in.mem", a)
        b = self.registry.load("in.mem", bart_dims=(BartDims.COIL, BartDims.READ))
        self.assertEqual(b, a)

    def test_output_reservation(self):
        self.registry.register_output("out.mem")
        self.assertFalse(self.registry.is_registered("out.mem"))
        self.assertNotIn("out.mem", self.registry)
        with self.assertRaises(KeyError):
            self.registry.load("out.mem")

        payload = np.arange(4, dtype="<c8").tobytes()
        self.registry.store("out.mem", (4,) + (1,) * 15, payload)
        self.assertTrue(self.registry.is_registered("out.mem"))
        np.testing.assert_array_equal(self.registry.load("out.mem").to_numpy(), np.arange(4))

    def test_reserving_does_not_clear_a_stored_entry(self):
        self.registry.register_input("x.mem", ComplexFloatNDArray(2))
        self.registry.register_output("x.mem")
        self.assertTrue(self.registry.is_registered("x.mem"))

    def test_unregister_and_names(self):
        self.registry.register_input("a.mem", ComplexFloatNDArray(1))
        self.registry.register_input("b.mem", ComplexFloatNDArray(1))
        self.registry.register_output("c.mem")
        self.assertEqual(sorted(self.registry.names()), ["a.mem", "b.mem"])
        self.registry.unregister("a.mem")
        self.registry.unregister("missing.mem")
        self.assertEqual(self.registry.names(), ["b.mem"])


if __name__ == "__main__":
    unittest.main()
