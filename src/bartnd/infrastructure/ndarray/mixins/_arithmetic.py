"""
Elementwise arithmetic mixin.

This module declares `NDArrayArithmeticMixin`, implementing addition,
subtraction, multiplication and division of complex arrays. No broadcasting
is performed: operands are scalars, engine arrays of identical shape, or
NumPy arrays of identical shape.
"""

from __future__ import annotations

from typing import Any, Callable, Union

import numpy as np

from ....domain._errors import ShapeMismatchError
from ....domain._ndarray import Scalar

Operand = Union[Scalar, Any]
"""Scalar, engine array/view, or array-like of matching shape."""

_OPS: dict[str, Callable[[np.ndarray, Any], np.ndarray]] = {
    "add": np.add,
    "subtract": np.subtract,
    "multiply": np.multiply,
    "divide": np.divide,
}


def _is_operand(x: Any) -> bool:
    from .._ndarray_base import NDArrayBase

    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (NDArrayBase, np.ndarray, int, float, complex, np.number))


class NDArrayArithmeticMixin:
    """
    Elementwise arithmetic operations.

    Notes
    -----
    - Variadic forms apply their operands in order:
      ``a.subtract(b, c)`` is ``(a - b) - c``.
    - Every operand is validated before anything is written, so a failing
      in-place operation leaves the receiver untouched.
    - Division by zero produces NaN/inf components without warnings.
    """

    # NumPy defers binary operators to the reflected methods below
    __array_ufunc__ = None

    def _operand_values(self, operand: Operand, op: str) -> Any:
        from .._ndarray_base import NDArrayBase

        if isinstance(operand, NDArrayBase):
            if operand.shape != self.shape:
                raise ShapeMismatchError(self.shape, operand.shape, op)
            return operand._values()
        if np.isscalar(operand):
            if isinstance(operand, (str, bytes, bool, np.bool_)):
                raise TypeError(f"Unsupported operand for {op}: {operand!r}")
            return np.complex64(operand)
        arr = np.asarray(operand, dtype=np.complex64)
        if arr.shape != self.shape:
            raise ShapeMismatchError(self.shape, arr.shape, op)
        return arr.reshape(-1)

    def _combine(self, op: str, operands: tuple[Operand, ...]) -> np.ndarray:
        if len(operands) == 0:
            raise TypeError(f"{op} expects at least one operand")
        resolved = [self._operand_values(o, op) for o in operands]
        out = self._values()
        fn = _OPS[op]
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            for values in resolved:
                out = fn(out, values).astype(np.complex64, copy=False)
        return out

    def _new_from_values(self, values: np.ndarray) -> Any:
        from .._dense import ComplexFloatNDArray

        out = ComplexFloatNDArray(self.shape)
        out._cbuf[...] = values
        return out

    # ----------------------------
    # Out-of-place
    # ----------------------------
    def add(self, *operands: Operand) -> Any:
        """
        Elementwise sum of the receiver and every operand.

        Parameters
        ----------
        *operands : Operand
            Scalars, arrays or views of the receiver's shape, or NumPy arrays
            of the receiver's shape.

        Returns
        -------
        ComplexFloatNDArray
            A new dense array.

        Raises
        ------
        ShapeMismatchError
            If an array operand has a different shape.
        """
        return self._new_from_values(self._combine("add", operands))

    def subtract(self, *operands: Operand) -> Any:
        """Elementwise difference ``self - o1 - o2 - ...`` as a new array."""
        return self._new_from_values(self._combine("subtract", operands))

    def multiply(self, *operands: Operand) -> Any:
        """Elementwise product as a new array."""
        return self._new_from_values(self._combine("multiply", operands))

    def divide(self, *operands: Operand) -> Any:
        """Elementwise quotient ``self / o1 / o2 / ...`` as a new array."""
        return self._new_from_values(self._combine("divide", operands))

    # ----------------------------
    # In-place
    # ----------------------------
    def add_inplace(self, *operands: Operand) -> Any:
        """Add every operand into the receiver and return the receiver."""
        self._write_values(self._combine("add", operands))
        return self

    def subtract_inplace(self, *operands: Operand) -> Any:
        """Subtract every operand from the receiver, in order, and return the receiver."""
        self._write_values(self._combine("subtract", operands))
        return self

    def multiply_inplace(self, *operands: Operand) -> Any:
        """Multiply the receiver by every operand and return the receiver."""
        self._write_values(self._combine("multiply", operands))
        return self

    def divide_inplace(self, *operands: Operand) -> Any:
        """
        Divide the receiver by every operand, in order, and return the receiver.

        Elements divided by zero become NaN; no warning is emitted.

        Raises
        ------
        ShapeMismatchError
            If an array operand differs in shape; nothing is written.
        """
        self._write_values(self._combine("divide", operands))
        return self

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        values = self._operand_values(other, "subtract")
        return self._new_from_values(values - self._values())

    def __mul__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        values = self._operand_values(other, "divide")
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return self._new_from_values(values / self._values())

    def __iadd__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.add_inplace(other)

    def __isub__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.subtract_inplace(other)

    def __imul__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.multiply_inplace(other)

    def __itruediv__(self, other: Operand) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.divide_inplace(other)

    def __neg__(self) -> Any:
        return self._new_from_values(-self._values())

    def __pos__(self) -> Any:
        return self.copy()
