"""
Index arithmetic shared by every array kind.

This module groups the pure helper functions used to validate shapes,
normalize negative indices, convert between linear and Cartesian indices
(row-major, last dimension fastest) and parse slicing expressions.

None of these helpers touch storage; they are safe to call from any number
of readers at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from ...domain._errors import DimensionMismatchError, NDArrayIndexError


def is_integer(x: Any) -> bool:
    """Return True for Python/NumPy integers (booleans excluded)."""
    return isinstance(x, (int, np.integer)) and not isinstance(x, (bool, np.bool_))


def shape_length(shape: Sequence[int]) -> int:
    """Return the number of elements described by `shape`."""
    n = 1
    for d in shape:
        n *= int(d)
    return n


def normalize_shape(dims: Sequence[Any], *, allow_zero: bool = False) -> tuple[int, ...]:
    """
    Normalize a shape given either as ``(d0, d1, ...)`` or as a single
    sequence argument ``((d0, d1, ...),)``.

    Parameters
    ----------
    dims : Sequence[Any]
        Raw shape arguments as received by a variadic method.
    allow_zero : bool, optional
        Whether zero-extent dimensions are accepted. Defaults to False.

    Returns
    -------
    tuple[int, ...]
        The validated shape.

    Raises
    ------
    TypeError
        If an extent is not an integer.
    ValueError
        If the shape is empty or has a non-positive extent.
    """
    if len(dims) == 1 and not is_integer(dims[0]):
        dims = tuple(dims[0])
    if len(dims) == 0:
        raise ValueError("shape must have at least one dimension")
    out = []
    for d in dims:
        if not is_integer(d):
            raise TypeError(f"shape entries must be integers, got {d!r}")
        d = int(d)
        if d < 0 or (d == 0 and not allow_zero):
            raise ValueError(f"invalid extent {d} in shape {tuple(dims)}")
        out.append(d)
    return tuple(out)


def c_strides(shape: Sequence[int]) -> tuple[int, ...]:
    """Return element strides of a row-major layout of `shape`."""
    strides = [1] * len(shape)
    for k in range(len(shape) - 2, -1, -1):
        strides[k] = strides[k + 1] * int(shape[k + 1])
    return tuple(strides)


def wrap_linear(index: int, shape: Sequence[int]) -> int:
    """
    Normalize a (possibly negative) linear index and check its range.

    Raises
    ------
    NDArrayIndexError
        If the index lies outside ``[-length, length - 1]``.
    """
    length = shape_length(shape)
    i = int(index)
    if i < 0:
        i += length
    if i < 0 or i >= length:
        raise NDArrayIndexError(int(index), length, shape)
    return i


def wrap_cartesian(indices: Sequence[int], shape: Sequence[int]) -> tuple[int, ...]:
    """
    Normalize a Cartesian index, axis by axis.

    Raises
    ------
    DimensionMismatchError
        If the index count differs from ``len(shape)``.
    NDArrayIndexError
        If any per-axis index is out of range.
    """
    if len(indices) != len(shape):
        raise DimensionMismatchError(len(shape), len(indices))
    out = []
    for axis, (raw, extent) in enumerate(zip(indices, shape)):
        i = int(raw)
        if i < 0:
            i += extent
        if i < 0 or i >= extent:
            raise NDArrayIndexError(int(raw), int(extent), shape, axis=axis)
        out.append(i)
    return tuple(out)


def linear_to_cartesian(index: int, shape: Sequence[int]) -> tuple[int, ...]:
    """Convert a normalized linear index to a Cartesian index."""
    out = [0] * len(shape)
    rem = index
    for k in range(len(shape) - 1, -1, -1):
        rem, out[k] = divmod(rem, int(shape[k]))
    return tuple(out)


def cartesian_to_linear(indices: Sequence[int], shape: Sequence[int]) -> int:
    """Convert a normalized Cartesian index to a linear index."""
    i = 0
    for idx, extent in zip(indices, shape):
        i = i * int(extent) + int(idx)
    return i


def check_index_types(indices: Sequence[Any]) -> None:
    for i in indices:
        if not is_integer(i):
            raise TypeError(f"indices must be integers, got {i!r}")


@dataclass(frozen=True)
class SliceRange:
    """
    Normalized slicing expression for one parent axis.

    Attributes
    ----------
    start : int
        First parent index selected on this axis.
    step : int
        Distance between consecutive selected parent indices (non-zero).
    extent : int
        Number of selected positions; 1 for scalar expressions.
    scalar : bool
        True if the expression was a single integer; such axes are dropped
        from the view's shape.
    """

    start: int
    step: int
    extent: int
    scalar: bool = False

    def is_full(self, axis_extent: int) -> bool:
        """Return True if this range selects the whole axis in order."""
        return (
            not self.scalar
            and self.start == 0
            and self.step == 1
            and self.extent == axis_extent
        )

    def as_slice(self) -> Any:
        """Return the equivalent NumPy index entry."""
        if self.scalar:
            return self.start
        if self.extent == 0:
            return slice(0, 0, 1)
        stop = self.start + self.step * self.extent
        return slice(self.start, stop if stop >= 0 else None, self.step)


def _parse_bound(token: str, expression: str) -> Optional[int]:
    token = token.strip()
    if token == "":
        return None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Invalid slicing expression {expression!r}") from None


def _expression_to_slice(expression: Any) -> Any:
    """Convert the accepted expression forms to an int or a `slice`."""
    if is_integer(expression):
        return int(expression)
    if isinstance(expression, slice):
        return expression
    if isinstance(expression, range):
        return slice(expression.start, expression.stop, expression.step)
    if isinstance(expression, str):
        parts = expression.split(":")
        if len(parts) == 1:
            bound = _parse_bound(parts[0], expression)
            if bound is None:
                raise ValueError(f"Invalid slicing expression {expression!r}")
            return bound
        if len(parts) > 3:
            raise ValueError(f"Invalid slicing expression {expression!r}")
        return slice(*(_parse_bound(p, expression) for p in parts))
    raise TypeError(
        f"Slicing expressions must be int, slice, range or str, got {expression!r}"
    )


def parse_slice_expression(
    expression: Any, axis: int, shape: Sequence[int]
) -> SliceRange:
    """
    Parse and validate a slicing expression against one axis.

    Accepted forms are an integer (scalar index), a `slice`, a `range`, or a
    string such as ``":"``, ``"1:4"`` or ``"::2"``. Bounds follow Python's
    stop-exclusive convention and negative bounds count from the end, but
    unlike Python slicing, explicit bounds outside the axis are rejected
    instead of clipped.

    Parameters
    ----------
    expression : Any
        Expression to parse.
    axis : int
        Axis the expression applies to.
    shape : Sequence[int]
        Shape of the sliced array (used for extents and error reporting).

    Returns
    -------
    SliceRange
        The normalized range.

    Raises
    ------
    NDArrayIndexError
        If a bound lies outside the axis.
    ValueError
        If the step is zero or the expression is malformed.
    """
    n = int(shape[axis])
    expr = _expression_to_slice(expression)

    if isinstance(expr, int):
        i = expr + n if expr < 0 else expr
        if i < 0 or i >= n:
            raise NDArrayIndexError(expr, n, shape, axis=axis)
        return SliceRange(start=i, step=1, extent=1, scalar=True)

    step = 1 if expr.step is None else int(expr.step)
    if step == 0:
        raise ValueError("slice step cannot be zero")

    def norm(bound: int, lo: int, hi: int) -> int:
        b = bound + n if bound < 0 else bound
        if b < lo or b > hi:
            raise NDArrayIndexError(bound, n, shape, axis=axis)
        return b

    if step > 0:
        start = 0 if expr.start is None else norm(int(expr.start), 0, n)
        stop = n if expr.stop is None else norm(int(expr.stop), 0, n)
        extent = max(0, (stop - start + step - 1) // step)
    else:
        start = n - 1 if expr.start is None else norm(int(expr.start), 0, n - 1)
        stop = -1 if expr.stop is None else norm(int(expr.stop), 0, n - 1)
        extent = max(0, (start - stop - step - 1) // -step)
    return SliceRange(start=start, step=step, extent=extent)
