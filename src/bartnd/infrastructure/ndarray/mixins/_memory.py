"""
Copying and NumPy-interop mixin.

Defines `NDArrayMemoryMixin`: materializing any array kind into a new dense
array, bulk copies between arrays, conversion to NumPy, and concatenation.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ....domain._errors import ShapeMismatchError


class NDArrayMemoryMixin:
    """
    Copy and conversion operations.
    """

    def copy(self) -> Any:
        """
        Return a new dense array holding a copy of the values.

        Labels visible on the receiver are carried onto the copy.

        Returns
        -------
        ComplexFloatNDArray
        """
        from .._dense import ComplexFloatNDArray

        out = ComplexFloatNDArray(self.shape)
        out._cbuf[...] = self._values()
        labels = self._bart_dims_or_none()
        if labels is not None:
            out.set_bart_dims(*labels)
        return out

    def similar(self) -> Any:
        """Return a zero-filled dense array of the receiver's shape."""
        from .._dense import ComplexFloatNDArray

        return ComplexFloatNDArray(self.shape)

    def copy_from(self, source: Any) -> Any:
        """
        Overwrite every element with the corresponding element of `source`.

        Parameters
        ----------
        source : Any
            An array, a view, or a NumPy array of the receiver's shape.

        Returns
        -------
        Self
            The receiver.

        Raises
        ------
        ShapeMismatchError
            If `source` has a different shape.
        """
        from .._ndarray_base import NDArrayBase

        if isinstance(source, NDArrayBase):
            if source.shape != self.shape:
                raise ShapeMismatchError(self.shape, source.shape, "copy_from")
            self._write_values(source._values())
            return self
        arr = np.asarray(source, dtype=np.complex64)
        if arr.shape != self.shape:
            raise ShapeMismatchError(self.shape, arr.shape, "copy_from")
        self._write_values(arr)
        return self

    def to_numpy(self) -> np.ndarray:
        """
        Return a complex64 NumPy copy of the values, shaped like the receiver.
        """
        return self._values().reshape(self.shape)

    def __array__(self, dtype: Optional[Any] = None, copy: Optional[bool] = None) -> np.ndarray:
        arr = self.to_numpy()
        if dtype is not None:
            arr = arr.astype(dtype)
        return arr

    def concatenate(self, axis: int, *arrays: Any) -> Any:
        """
        Concatenate the receiver with `arrays` along `axis`.

        Parameters
        ----------
        axis : int
            Axis along which to join; every other extent must match.
        *arrays : Any
            Arrays or views with the receiver's number of dimensions.

        Returns
        -------
        ComplexFloatNDArray
            A new dense array, carrying the receiver's labels if it has any.

        Raises
        ------
        ShapeMismatchError
            If an array's extents differ from the receiver's off `axis`.
        ValueError
            If `axis` is out of range.
        """
        from .._dense import ComplexFloatNDArray

        k = axis + self.ndim if axis < 0 else axis
        if k < 0 or k >= self.ndim:
            raise ValueError(f"axis {axis} is out of range for {self.ndim} dimensions")
        parts = [self.to_numpy()]
        for other in arrays:
            other_shape = tuple(np.shape(other))
            expected = self.shape[:k] + other_shape[k : k + 1] + self.shape[k + 1 :]
            if len(other_shape) != self.ndim or other_shape != expected:
                raise ShapeMismatchError(
                    self.shape[:k] + (-1,) + self.shape[k + 1 :], other_shape, "concatenate"
                )
            parts.append(np.asarray(other, dtype=np.complex64))
        out = ComplexFloatNDArray.from_numpy(np.concatenate(parts, axis=k))
        labels = self._bart_dims_or_none()
        if labels is not None:
            out.set_bart_dims(*labels)
        return out
