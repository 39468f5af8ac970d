"""
Shared base class of the dense array and every view kind.

`NDArrayBase` assembles the behaviour mixins (element access, arithmetic,
reductions, view production, dimension labels, copying) into one canonical
implementation. The mixins are written against a small set of capabilities
that each concrete kind implements exactly once:

- `shape`                : the logical shape,
- `_root`                : the dense array that owns the storage,
- `_resolve_linear(i)`   : storage element index of normalized linear index i,
- `_resolve_cartesian(c)`: storage element index of normalized Cartesian c,
- `_index_map()`         : storage element index of every element, in
                           row-major order (vectorised resolution),
- `_bart_dims_or_none()` : dimension labels visible through this kind.

Design notes
------------
- The dense array is the single owner of the buffer (the arena). Views only
  hold a handle to it (`_root`) plus immutable transform metadata; bulk reads
  and writes go through `_values()` / `_write_values(...)`, which index the
  owner's buffer with the view's index map.
- `is_contiguous` is the explicit fast-path capability: it is True when the
  elements, in linear order, are exactly the owner's buffer in storage order.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._bart_dims import BartDims
from ...domain._ndarray import INDArray
from ._indexing import shape_length
from .mixins import (
    NDArrayAccessMixin,
    NDArrayArithmeticMixin,
    NDArrayBartDimsMixin,
    NDArrayMemoryMixin,
    NDArrayReductionMixin,
    NDArrayViewsMixin,
)


class NDArrayBase(
    NDArrayAccessMixin,
    NDArrayArithmeticMixin,
    NDArrayReductionMixin,
    NDArrayViewsMixin,
    NDArrayBartDimsMixin,
    NDArrayMemoryMixin,
    INDArray,
):
    """
    Abstract complex-float multi-dimensional array.

    Concrete subclasses are `ComplexFloatNDArray` (owning) and the view kinds
    in `bartnd.infrastructure.ndarray.views`. Subclasses must set `_shape` and
    `_root` and implement the resolve capabilities listed in the module
    docstring.

    Notes
    -----
    Equality is deep value equality that also requires identical shapes and
    identical dimension labels (or both unlabeled). Arrays are mutable, so
    hashing is not supported.
    """

    _shape: tuple[int, ...]
    _root: Any

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the array.

        Returns
        -------
        tuple[int, ...]
            One extent per dimension.
        """
        return self._shape

    @property
    def ndim(self) -> int:
        """Return the number of dimensions."""
        return len(self._shape)

    @property
    def length(self) -> int:
        """Return the total number of elements."""
        return shape_length(self._shape)

    @property
    def dtype(self) -> np.dtype:
        """Element dtype as seen by NumPy (always complex64)."""
        return np.dtype(np.complex64)

    # ------------------------------------------------------------------
    # Capabilities implemented by each concrete kind
    # ------------------------------------------------------------------
    @property
    def is_contiguous(self) -> bool:
        """
        Return True if the elements, in linear order, are exactly the owner's
        buffer in storage order.
        """
        return False

    def _resolve_linear(self, index: int) -> int:
        raise NotImplementedError

    def _resolve_cartesian(self, indices: tuple[int, ...]) -> int:
        raise NotImplementedError

    def _index_map(self) -> np.ndarray:
        raise NotImplementedError

    def _bart_dims_or_none(self) -> Optional[tuple[BartDims, ...]]:
        return None

    # ------------------------------------------------------------------
    # Bulk storage access
    # ------------------------------------------------------------------
    def _values(self) -> np.ndarray:
        """
        Return a flat complex64 copy of the elements in linear order.
        """
        buf = self._root._cbuf
        if self.is_contiguous:
            return buf.copy()
        return buf[self._index_map()]

    def _write_values(self, values: Any) -> None:
        """
        Write a flat sequence (or a scalar broadcast) into the elements, in
        linear order, through to the owner's buffer.
        """
        buf = self._root._cbuf
        vals = np.asarray(values, dtype=np.complex64)
        if vals.ndim > 0:
            vals = vals.reshape(-1)
        if self.is_contiguous:
            buf[...] = vals
        else:
            buf[self._index_map()] = vals

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        """
        Deep equality: same shape, same labels (or none on both sides) and
        equal values. NaN elements compare equal to NaN elements.
        """
        if not isinstance(other, NDArrayBase):
            return False
        if self.shape != other.shape:
            return False
        if self._bart_dims_or_none() != other._bart_dims_or_none():
            return False
        return bool(np.array_equal(self._values(), other._values(), equal_nan=True))

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        labels = self._bart_dims_or_none()
        extra = "" if labels is None else f", bart_dims={[d.name for d in labels]}"
        return f"{type(self).__name__}(shape={self.shape}{extra})"

    def __str__(self) -> str:
        return f"{self!r}\n{self.to_numpy()}"
