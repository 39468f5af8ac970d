"""
Dense, owning complex-float array.

`ComplexFloatNDArray` owns a single contiguous float32 buffer of
``2 * length`` values holding interleaved (real, imaginary) pairs in
row-major order. A complex64 reinterpretation of the same memory is used for
element access. Every view built on top of a dense array resolves its
indices down to this buffer.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._bart_dims import BartDims
from ...domain._errors import ShapeMismatchError
from ._indexing import cartesian_to_linear, normalize_shape, shape_length
from ._ndarray_base import NDArrayBase
from .mixins import normalize_bart_dims


class ComplexFloatNDArray(NDArrayBase):
    """
    Owning multi-dimensional array of complex64 values.

    Parameters
    ----------
    *args : Any
        Either the extents of the new zero-filled array (``(3, 4)`` or
        ``3, 4``), or a single array/view to copy (values and labels).

    Raises
    ------
    TypeError
        If an extent is not an integer.
    ValueError
        If the shape is empty or an extent is negative.

    Examples
    --------
    >>> a = ComplexFloatNDArray(4, 5, 3)
    >>> a.set(1 + 2j, 0, 1, 2)
    >>> a.get(0, 1, 2)
    (1+2j)
    """

    def __init__(self, *args: Any) -> None:
        source: Optional[NDArrayBase] = None
        if len(args) == 1 and isinstance(args[0], NDArrayBase):
            source = args[0]
            shape = source.shape
        else:
            shape = normalize_shape(args, allow_zero=True)

        self._shape = shape
        self._data = np.zeros(2 * shape_length(shape), dtype=np.float32)
        self._cbuf = self._data.view(np.complex64)
        self._root = self
        self._bart_dims: Optional[tuple[BartDims, ...]] = None

        if source is not None:
            self._cbuf[...] = source._values()
            self._bart_dims = source._bart_dims_or_none()

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def from_numpy(cls, arr: Any) -> "ComplexFloatNDArray":
        """
        Create a dense array from a NumPy array (or anything NumPy accepts).

        A 0-d input becomes a 1-element, 1-D array.
        """
        arr = np.asarray(arr)
        if arr.ndim == 0:
            arr = arr.reshape(1)
        out = cls(arr.shape)
        out._cbuf[...] = arr.astype(np.complex64).reshape(-1)
        return out

    @classmethod
    def of(cls, values: Any) -> "ComplexFloatNDArray":
        """
        Create a dense array from nested sequences of numbers.

        Examples
        --------
        >>> ComplexFloatNDArray.of([[1, 2j], [3, 4]]).shape
        (2, 2)
        """
        if isinstance(values, NDArrayBase):
            return cls(values)
        return cls.from_numpy(np.asarray(values, dtype=np.complex64))

    @classmethod
    def from_real_imag(cls, real: Any, imag: Any) -> "ComplexFloatNDArray":
        """
        Create a dense array from separate real and imaginary parts.

        Raises
        ------
        ShapeMismatchError
            If the two parts differ in shape.
        """
        re = np.asarray(real, dtype=np.float32)
        im = np.asarray(imag, dtype=np.float32)
        if re.shape != im.shape:
            raise ShapeMismatchError(re.shape, im.shape, "from_real_imag")
        return cls.from_numpy(re + 1j * im)

    # ------------------------------------------------------------------
    # Resolve capabilities
    # ------------------------------------------------------------------
    @property
    def is_contiguous(self) -> bool:
        return True

    def _resolve_linear(self, index: int) -> int:
        return index

    def _resolve_cartesian(self, indices: tuple[int, ...]) -> int:
        return cartesian_to_linear(indices, self._shape)

    def _index_map(self) -> np.ndarray:
        return np.arange(self.length, dtype=np.intp)

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------
    def _bart_dims_or_none(self) -> Optional[tuple[BartDims, ...]]:
        return self._bart_dims

    def set_bart_dims(self, *bart_dims: Any) -> None:
        """
        Assign one `BartDims` label per axis.

        Parameters
        ----------
        *bart_dims : BartDims
            Labels in axis order (members or their integer slot values). A
            single sequence argument is also accepted.

        Raises
        ------
        BartDimsCountMismatchError
            If the number of labels differs from `ndim`.
        DuplicateBartDimsError
            If a label is repeated.
        """
        if len(bart_dims) == 1 and not isinstance(bart_dims[0], (BartDims, int)):
            bart_dims = tuple(bart_dims[0])
        self._bart_dims = normalize_bart_dims(bart_dims, self.ndim)

    # ------------------------------------------------------------------
    # Raw storage
    # ------------------------------------------------------------------
    @property
    def buffer(self) -> np.ndarray:
        """
        The interleaved float32 storage (live, row-major). Writing into it
        writes into the array.
        """
        return self._data
