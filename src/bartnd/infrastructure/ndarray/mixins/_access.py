"""
Element access, iteration and functional-update mixin.

This module defines `NDArrayAccessMixin`, which implements reading and writing
single elements (by linear or Cartesian index), Python indexing sugar,
iteration, and the fill/apply/map family of elementwise updates.

Every method is written against the resolve capabilities of `NDArrayBase`, so
the same code serves the dense array and every view kind. Writes made through
a view land in the owner's buffer and are visible through every other alias.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable, Iterator

import numpy as np

from ....domain._errors import DimensionMismatchError
from ....domain._ndarray import Index, Scalar
from .._indexing import check_index_types, is_integer, wrap_cartesian, wrap_linear


class NDArrayAccessMixin:
    """
    Element access and elementwise update operations.

    Notes
    -----
    - A single index is a linear index (row-major, last dimension fastest);
      otherwise exactly one index per dimension is required.
    - Negative indices count from the end of their axis (or of the whole
      array, for linear indices).
    - `apply*` and `fill*` mutate the receiver and return it; `map*` return
      a modified copy.
    - `apply_on_slices` / `map_on_slices` run a function over the slices
      spanned by the axes that are not iterated over.
    """

    # ----------------------------
    # Single elements
    # ----------------------------
    def _locate(self, indices: tuple[Any, ...]) -> int:
        if len(indices) == 0:
            raise DimensionMismatchError(self.ndim, 0)
        check_index_types(indices)
        if len(indices) == 1:
            return self._resolve_linear(wrap_linear(indices[0], self.shape))
        return self._resolve_cartesian(wrap_cartesian(indices, self.shape))

    def get(self, *indices: int) -> complex:
        """
        Read one element.

        Parameters
        ----------
        *indices : int
            Either a single linear index or one index per dimension.

        Returns
        -------
        complex
            The element value.

        Raises
        ------
        NDArrayIndexError
            If an index is out of range (after negative normalization).
        DimensionMismatchError
            If the number of indices is neither 1 nor `ndim`.
        """
        return complex(self._root._cbuf[self._locate(indices)])

    def set(self, value: Scalar, *indices: int) -> None:
        """
        Write one element.

        Parameters
        ----------
        value : Scalar
            Value to store (cast to complex64).
        *indices : int
            Either a single linear index or one index per dimension.
        """
        k = self._locate(indices)
        self._root._cbuf[k] = np.complex64(value)

    def get_real(self, *indices: int) -> float:
        """Read the real part of one element."""
        return float(self._root._data[2 * self._locate(indices)])

    def get_imag(self, *indices: int) -> float:
        """Read the imaginary part of one element."""
        return float(self._root._data[2 * self._locate(indices) + 1])

    def set_real(self, value: float, *indices: int) -> None:
        """Write the real part of one element, keeping the imaginary part."""
        self._root._data[2 * self._locate(indices)] = np.float32(value)

    def set_imag(self, value: float, *indices: int) -> None:
        """Write the imaginary part of one element, keeping the real part."""
        self._root._data[2 * self._locate(indices) + 1] = np.float32(value)

    # ----------------------------
    # Python indexing sugar
    # ----------------------------
    def _expand_key(self, key: Any) -> tuple[Any, ...]:
        if not isinstance(key, tuple):
            key = (key,)
        if any(k is Ellipsis for k in key):
            pos = next(i for i, k in enumerate(key) if k is Ellipsis)
            fill = (slice(None),) * (self.ndim - len(key) + 1)
            key = key[:pos] + fill + key[pos + 1 :]
        return key

    def __getitem__(self, key: Any) -> Any:
        """
        ``a[i]`` / ``a[i, j, k]`` read elements; keys containing a slice, a
        slicing string or ``...`` produce a slice view.
        """
        key = self._expand_key(key)
        if all(is_integer(k) for k in key):
            return self.get(*key)
        if len(key) < self.ndim:
            key = key + (slice(None),) * (self.ndim - len(key))
        return self.slice(*key)

    def __setitem__(self, key: Any, value: Any) -> None:
        key = self._expand_key(key)
        if all(is_integer(k) for k in key):
            self.set(value, *key)
            return
        target = self[key]
        if np.isscalar(value):
            target.fill(value)
        else:
            target.copy_from(value)

    # ----------------------------
    # Iteration
    # ----------------------------
    def __iter__(self) -> Iterator[complex]:
        for v in self._values():
            yield complex(v)

    def __len__(self) -> int:
        return self.length

    def iter_linear_indices(self) -> Iterator[int]:
        """Iterate over linear indices ``0 .. length-1``."""
        return iter(range(self.length))

    def iter_cartesian_indices(self) -> Iterator[tuple[int, ...]]:
        """Iterate over Cartesian indices in linear (row-major) order."""
        return itertools.product(*(range(d) for d in self.shape))

    def enumerate_cartesian(self) -> Iterator[tuple[tuple[int, ...], complex]]:
        """Iterate over ``(cartesian_index, value)`` pairs in linear order."""
        return zip(self.iter_cartesian_indices(), iter(self))

    # ----------------------------
    # Fill
    # ----------------------------
    def fill(self, value: Scalar) -> Any:
        """
        Set every element to `value`.

        Returns
        -------
        Self
            The receiver, to allow chaining.
        """
        self._write_values(np.complex64(value))
        return self

    def fill_using_linear_indices(self, func: Callable[[int], Scalar]) -> Any:
        """Set element ``i`` to ``func(i)`` for every linear index."""
        self._write_values([func(i) for i in range(self.length)])
        return self

    def fill_using_cartesian_indices(self, func: Callable[[Index], Scalar]) -> Any:
        """Set each element to ``func(cartesian_index)``."""
        self._write_values([func(idx) for idx in self.iter_cartesian_indices()])
        return self

    # ----------------------------
    # Apply (in place) / map (copy)
    # ----------------------------
    def apply(self, func: Callable[[complex], Scalar]) -> Any:
        """Replace each element ``v`` by ``func(v)``."""
        self._write_values([func(complex(v)) for v in self._values()])
        return self

    def apply_with_linear_indices(self, func: Callable[[complex, int], Scalar]) -> Any:
        """Replace each element ``v`` at linear index ``i`` by ``func(v, i)``."""
        self._write_values([func(complex(v), i) for i, v in enumerate(self._values())])
        return self

    def apply_with_cartesian_indices(
        self, func: Callable[[complex, Index], Scalar]
    ) -> Any:
        """Replace each element ``v`` at Cartesian index ``c`` by ``func(v, c)``."""
        self._write_values(
            [
                func(complex(v), idx)
                for idx, v in zip(self.iter_cartesian_indices(), self._values())
            ]
        )
        return self

    def map(self, func: Callable[[complex], Scalar]) -> Any:
        """Return a copy with ``func`` applied to every element."""
        return self.copy().apply(func)

    def map_with_linear_indices(self, func: Callable[[complex, int], Scalar]) -> Any:
        """
        Return a copy where the element ``v`` at linear index ``i`` is
        replaced by ``func(v, i)``.

        Returns
        -------
        ComplexFloatNDArray
            A new dense array; the receiver is unchanged.
        """
        return self.copy().apply_with_linear_indices(func)

    def map_with_cartesian_indices(
        self, func: Callable[[complex, Index], Scalar]
    ) -> Any:
        """
        Return a copy where the element ``v`` at Cartesian index ``c`` is
        replaced by ``func(v, c)``.

        The copy is a dense row-major array of the receiver's shape, so
        ``c`` addresses the same element in the receiver and in the copy.
        """
        return self.copy().apply_with_cartesian_indices(func)

    # ----------------------------
    # Per-slice updates
    # ----------------------------
    def apply_on_slices(
        self, func: Callable[[Any, tuple[int, ...]], Any], *iteration_dims: int
    ) -> Any:
        """
        Call `func` on every slice spanned by the axes not listed in
        `iteration_dims`.

        For each Cartesian index ``idx`` over the iteration axes (row-major,
        in the listed order), the slice view with ``idx`` fixed on those axes
        and full ranges elsewhere is passed as ``func(slice_view, idx)``.

        Parameters
        ----------
        func : Callable[[INDArray, tuple[int, ...]], Any]
            Either mutates the slice view and returns None, or returns an
            array (engine array, view or NumPy array) of the slice's shape,
            or a scalar, which is written into the slice.
        *iteration_dims : int
            Axes to iterate over (negative values count from the end). With
            no axes, `func` is called once on the receiver with ``idx = ()``.

        Returns
        -------
        Self
            The receiver. For views, every write lands in the parent.

        Raises
        ------
        ValueError
            If an axis is out of range or listed twice.
        ShapeMismatchError
            If `func` returns an array whose shape differs from the slice.

        Examples
        --------
        >>> a = ComplexFloatNDArray(4, 5, 3)
        >>> a.apply_on_slices(lambda s, idx: s.fill(idx[0]), 2)  # doctest: +SKIP
        """
        dims = self._normalize_dims(iteration_dims)
        for idx in itertools.product(*(range(self.shape[k]) for k in dims)):
            expressions: list[Any] = [":"] * self.ndim
            for k, i in zip(dims, idx):
                expressions[k] = i
            view = self.slice(*expressions)
            result = func(view, idx)
            if result is None or result is view:
                continue
            if np.isscalar(result):
                view.fill(result)
            else:
                view.copy_from(result)
        return self

    def map_on_slices(
        self, func: Callable[[Any, tuple[int, ...]], Any], *iteration_dims: int
    ) -> Any:
        """Like `apply_on_slices`, applied to a copy of the receiver."""
        return self.copy().apply_on_slices(func, *iteration_dims)
