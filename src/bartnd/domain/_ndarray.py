"""
Array interface definitions.

This module defines the domain-level interface of the complex-valued
multi-dimensional arrays handled by bartnd, using structural typing. Both
the dense array and every view kind satisfy `INDArray`, so domain and
boundary code can type against it without importing the concrete classes.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Protocol, Sequence, Union, runtime_checkable

from typing_extensions import TypeAlias

from ._bart_dims import BartDims

Scalar: TypeAlias = Union[int, float, complex]
"""Scalar operand types accepted by element setters and arithmetic."""

Index: TypeAlias = Sequence[int]
"""A Cartesian index: one integer per dimension."""


@runtime_checkable
class INDArray(Protocol):
    """
    Complex-float multi-dimensional array interface.

    An `INDArray` is either an owning dense array or a view that aliases the
    storage of a parent array. All element access goes through index
    translation down to the single owning buffer.

    Notes
    -----
    - Linear indices follow row-major order: the last dimension varies
      fastest.
    - Negative indices count from the end of their axis.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the array."""
        ...

    @property
    def ndim(self) -> int:
        """Return the number of dimensions."""
        ...

    @property
    def length(self) -> int:
        """Return the total number of elements."""
        ...

    def get(self, *indices: int) -> complex:
        """
        Read one element by linear index or by one index per dimension.

        Raises
        ------
        NDArrayIndexError
            If an index is out of range.
        DimensionMismatchError
            If the number of indices is neither 1 nor `ndim`.
        """
        ...

    def set(self, value: Scalar, *indices: int) -> None:
        """Write one element by linear index or by one index per dimension."""
        ...

    def to_numpy(self) -> Any:
        """Return a complex64 `np.ndarray` copy of the array values."""
        ...

    def copy(self) -> "INDArray":
        """Return a new dense array holding a copy of the values."""
        ...

    def slice(self, *expressions: Any) -> "INDArray":
        """Return a slice view (or the receiver for an identity slice)."""
        ...

    def permute_dims(self, *permutation: int) -> "INDArray":
        """Return a permute view (or the receiver for the identity)."""
        ...

    def reshape(self, *shape: int) -> "INDArray":
        """Return a reshape view (or the receiver for the same shape)."""
        ...

    def mask(self, selector: Union["INDArray", Any, Callable[[complex], bool]]) -> "INDArray":
        """Return a 1-D mask view of the selected elements."""
        ...

    def are_bart_dims_specified(self) -> bool:
        """Return whether dimension labels are available on this array."""
        ...

    @property
    def bart_dims(self) -> tuple[BartDims, ...]:
        """Return the dimension labels (raises if none are assigned)."""
        ...

    def set_bart_dims(self, *bart_dims: BartDims) -> None:
        """Assign dimension labels (dense arrays only)."""
        ...

    def __iter__(self) -> Iterator[complex]: ...
