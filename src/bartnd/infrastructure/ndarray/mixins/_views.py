"""
View-production mixin.

Defines `NDArrayViewsMixin`, the entry points that build slice, permute,
reshape and mask views over any array kind. Every view aliases the storage
of the dense array at the root of the chain.

Identity constructions collapse to an existing object:

- a slice selecting every axis in full returns the receiver,
- an identity permutation returns the receiver, and a permutation of a
  permute view whose composition is the identity returns the grandparent,
- reshaping to the receiver's shape returns the receiver, and reshaping a
  reshape view back to its parent's shape returns the parent,
- an all-selecting mask returns ``reshape(length)`` of the receiver.
"""

from __future__ import annotations

from typing import Any, Callable, Union

import numpy as np

from ....domain._errors import (
    DimensionMismatchError,
    InvalidPermutatorError,
    ShapeMismatchError,
)
from ....domain._ndarray import Index
from .._indexing import is_integer, parse_slice_expression, shape_length

Selector = Union[Any, Callable[[complex], bool]]
"""A predicate on element values, or a same-shaped boolean/engine array."""


def _is_identity(permutation: tuple[int, ...]) -> bool:
    return all(i == p for i, p in enumerate(permutation))


class NDArrayViewsMixin:
    """
    Construction of aliasing views.

    Notes
    -----
    View constructors validate eagerly: invalid slicing expressions,
    permutations and shapes raise at construction time, not at first access.
    """

    # ----------------------------
    # Slice
    # ----------------------------
    def slice(self, *expressions: Any) -> Any:
        """
        Return a slice view.

        Parameters
        ----------
        *expressions : Any
            One expression per dimension: an integer (selects one position and
            drops the axis), a `slice`, a `range`, or a string such as
            ``":"``, ``"2:5"`` or ``"::-1"``.

        Returns
        -------
        INDArray
            A `SliceView`, or the receiver if every expression selects its
            whole axis.

        Raises
        ------
        DimensionMismatchError
            If the number of expressions differs from `ndim`.
        NDArrayIndexError
            If a bound lies outside its axis.
        ValueError
            If a step is zero or an expression is malformed.
        """
        from ..views import SliceView

        if len(expressions) != self.ndim:
            raise DimensionMismatchError(self.ndim, len(expressions))
        ranges = [parse_slice_expression(e, k, self.shape) for k, e in enumerate(expressions)]
        if all(r.is_full(n) for r, n in zip(ranges, self.shape)):
            return self
        if all(r.scalar for r in ranges):
            last = ranges[-1]
            ranges[-1] = type(last)(start=last.start, step=1, extent=1)
        return SliceView(self, tuple(ranges))

    def _normalize_dims(self, dims: tuple[Any, ...]) -> list[int]:
        if len(dims) == 1 and not is_integer(dims[0]):
            dims = tuple(dims[0])
        out: list[int] = []
        for d in dims:
            if not is_integer(d):
                raise TypeError(f"dimension indices must be integers, got {d!r}")
            k = int(d) + self.ndim if int(d) < 0 else int(d)
            if k < 0 or k >= self.ndim:
                raise ValueError(f"dimension {d} is out of range for {self.ndim} dimensions")
            if k in out:
                raise ValueError(f"dimension {d} is listed more than once")
            out.append(k)
        return out

    def select_dims(self, *dims: int) -> Any:
        """
        Keep the listed axes and drop every other axis.

        The dropped axes must be singletons. Surviving axes keep their
        relative order.

        Raises
        ------
        ValueError
            If no axis is selected, an index is invalid, or a dropped axis
            is not a singleton.
        """
        kept = set(self._normalize_dims(dims))
        if len(kept) == 0:
            raise ValueError("at least one dimension must be selected")
        if len(kept) == self.ndim:
            return self
        for k, n in enumerate(self.shape):
            if k not in kept and n != 1:
                raise ValueError(
                    f"cannot drop dimension {k} of extent {n}: only singleton "
                    f"dimensions can be dropped"
                )
        return self.slice(*(":" if k in kept else 0 for k in range(self.ndim)))

    def drop_dims(self, *dims: int) -> Any:
        """
        Drop the listed singleton axes.

        Raises
        ------
        ValueError
            If every axis would be dropped or a listed axis is not a
            singleton.
        """
        dropped = set(self._normalize_dims(dims))
        if len(dropped) == self.ndim:
            raise ValueError("cannot drop all dimensions")
        return self.select_dims(*(k for k in range(self.ndim) if k not in dropped))

    def squeeze(self) -> Any:
        """
        Drop every singleton axis.

        If all axes are singletons, the first one is kept.
        """
        kept = [k for k, n in enumerate(self.shape) if n != 1]
        if not kept:
            kept = [0]
        return self.select_dims(*kept)

    # ----------------------------
    # Permute
    # ----------------------------
    def permute_dims(self, *permutation: int) -> Any:
        """
        Return a permute view.

        Parameters
        ----------
        *permutation : int
            ``permutation[i]`` is the receiver axis that becomes axis ``i``.

        Returns
        -------
        INDArray
            A `PermuteView`, the receiver (identity permutation), or the
            grandparent when permuting a permute view back to its parent's
            axis order.

        Raises
        ------
        InvalidPermutatorError
            If `permutation` is not a permutation of ``0..ndim-1``.
        """
        from ..views import PermuteView

        if len(permutation) == 1 and not is_integer(permutation[0]):
            permutation = tuple(permutation[0])
        if (
            len(permutation) != self.ndim
            or not all(is_integer(p) for p in permutation)
            or sorted(int(p) for p in permutation) != list(range(self.ndim))
        ):
            raise InvalidPermutatorError(permutation, self.ndim)
        perm = tuple(int(p) for p in permutation)
        if _is_identity(perm):
            return self
        if isinstance(self, PermuteView):
            composed = tuple(self.permutation[p] for p in perm)
            if _is_identity(composed):
                return self.parent
            return PermuteView(self.parent, composed)
        return PermuteView(self, perm)

    # ----------------------------
    # Reshape
    # ----------------------------
    def reshape(self, *shape: int) -> Any:
        """
        Return a reshape view.

        Parameters
        ----------
        *shape : int
            New shape; at most one extent may be ``-1`` and is inferred.

        Returns
        -------
        INDArray
            A `ReshapeView`, the receiver (same shape), or the parent of a
            reshape view when reshaping back to the parent's shape.

        Raises
        ------
        ShapeMismatchError
            If the new shape does not hold exactly `length` elements.
        """
        from ..views import ReshapeView

        new_shape = self._infer_shape(shape)
        if new_shape == self.shape:
            return self
        if isinstance(self, ReshapeView):
            if new_shape == self.parent.shape:
                return self.parent
            return ReshapeView(self.parent, new_shape)
        return ReshapeView(self, new_shape)

    def _infer_shape(self, shape: tuple[Any, ...]) -> tuple[int, ...]:
        if len(shape) == 1 and not is_integer(shape[0]):
            shape = tuple(shape[0])
        if len(shape) == 0:
            raise ValueError("shape must have at least one dimension")
        dims = []
        for d in shape:
            if not is_integer(d):
                raise TypeError(f"shape entries must be integers, got {d!r}")
            dims.append(int(d))
        if dims.count(-1) > 1:
            raise ValueError("only one dimension can be inferred")
        if any(d < -1 or (d == 0 and self.length != 0) for d in dims):
            raise ShapeMismatchError(self.shape, dims, "reshape")
        if -1 in dims:
            known = shape_length([d for d in dims if d != -1])
            if known == 0 or self.length % known != 0:
                raise ShapeMismatchError(self.shape, dims, "reshape")
            dims[dims.index(-1)] = self.length // known
        if shape_length(dims) != self.length:
            raise ShapeMismatchError(self.shape, dims, "reshape")
        return tuple(dims)

    # ----------------------------
    # Mask
    # ----------------------------
    def _selection(self, selector: Selector, op: str) -> np.ndarray:
        from .._ndarray_base import NDArrayBase

        if isinstance(selector, NDArrayBase):
            if selector.shape != self.shape:
                raise ShapeMismatchError(self.shape, selector.shape, op)
            return selector._values() != 0
        if callable(selector):
            return np.fromiter(
                (bool(selector(complex(v))) for v in self._values()),
                dtype=bool,
                count=self.length,
            )
        arr = np.asarray(selector)
        if arr.shape != self.shape:
            raise ShapeMismatchError(self.shape, arr.shape, op)
        return (arr != 0).reshape(-1)

    def _mask_from_flags(self, flags: np.ndarray) -> Any:
        from ..views import MaskView

        if flags.size and bool(flags.all()):
            return self.reshape(self.length)
        selected = np.flatnonzero(flags)
        if isinstance(self, MaskView):
            return MaskView(self.parent, self.linear_indices[selected])
        return MaskView(self, selected)

    def mask(self, selector: Selector) -> Any:
        """
        Return a 1-D mask view of the selected elements.

        Parameters
        ----------
        selector : Selector
            Either a predicate ``f(value) -> bool`` or an array of the
            receiver's shape (boolean, NumPy or engine array; non-zero
            entries are selected).

        Returns
        -------
        INDArray
            A `MaskView` with the selected elements in ascending linear
            order, or ``reshape(length)`` if every element is selected.

        Raises
        ------
        ShapeMismatchError
            If a mask array has a different shape.
        """
        return self._mask_from_flags(self._selection(selector, "mask"))

    def mask_with_linear_indices(self, func: Callable[[complex, int], bool]) -> Any:
        """Mask with a predicate ``f(value, linear_index) -> bool``."""
        flags = np.fromiter(
            (bool(func(complex(v), i)) for i, v in enumerate(self._values())),
            dtype=bool,
            count=self.length,
        )
        return self._mask_from_flags(flags)

    def mask_with_cartesian_indices(self, func: Callable[[complex, Index], bool]) -> Any:
        """Mask with a predicate ``f(value, cartesian_index) -> bool``."""
        flags = np.fromiter(
            (
                bool(func(complex(v), idx))
                for idx, v in zip(self.iter_cartesian_indices(), self._values())
            ),
            dtype=bool,
            count=self.length,
        )
        return self._mask_from_flags(flags)

    def inverse_mask(self, selector: Selector) -> Any:
        """Return a mask view of the elements that `selector` does not select."""
        return self._mask_from_flags(~self._selection(selector, "inverse_mask"))
