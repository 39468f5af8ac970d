"""
Array-engine and toolkit-boundary exceptions for bartnd.

This module defines the custom errors raised by the array engine and by the
BART boundary layer. Every error is raised synchronously at the point where
the violated precondition is detected:

- indexing errors (`NDArrayIndexError`, `DimensionMismatchError`) when an
  element is read or written,
- structural errors (`ShapeMismatchError`, `InvalidPermutatorError`) when a
  view is constructed or an elementwise operation validates its operands,
- label errors (`BartDimsCountMismatchError`, `DuplicateBartDimsError`,
  `UnsupportedOperationError`) when dimension semantics are assigned or read,
- boundary errors (`UnsupportedFormatError`, `InvalidMemoryNameError`,
  `BartError`) at the container-file / memory-name / process boundary.

The errors derive from the closest builtin exception type so that callers
that only care about the broad category (e.g. ``except IndexError``) keep
working.
"""

from __future__ import annotations

from typing import Optional, Sequence


class NDArrayIndexError(IndexError):
    """
    Raised when an index lies outside the valid range of an axis (or of the
    whole array, for linear indices).

    Attributes
    ----------
    index : int
        The offending index, as supplied by the caller.
    extent : int
        The extent of the indexed axis (or the array length for linear
        indexing).
    shape : tuple[int, ...]
        Shape of the indexed array.
    axis : Optional[int]
        The offending axis, or None for linear indexing.
    """

    def __init__(
        self,
        index: int,
        extent: int,
        shape: Sequence[int],
        axis: Optional[int] = None,
    ) -> None:
        """
        Initialize the NDArrayIndexError.

        Parameters
        ----------
        index : int
            The offending index value.
        extent : int
            Number of valid positions on the indexed axis (or array length).
        shape : Sequence[int]
            Shape of the indexed array.
        axis : Optional[int], optional
            Axis being indexed; None for linear indexing.
        """
        where = "linear index" if axis is None else f"index on axis {axis}"
        super().__init__(
            f"{where.capitalize()} {index} is out of bounds for array of shape "
            f"{tuple(shape)} (length={extent}, valid range: [{-extent}, {extent - 1}])."
        )
        self.index = index
        self.extent = extent
        self.shape = tuple(shape)
        self.axis = axis

    @property
    def length(self) -> int:
        """Alias of `extent` used by linear-index callers."""
        return self.extent


class DimensionMismatchError(ValueError):
    """
    Raised when the number of supplied indices (or slicing expressions)
    does not match the dimensionality of the array.
    """

    def __init__(self, expected: int, actual: int) -> None:
        """
        Initialize the DimensionMismatchError.

        Parameters
        ----------
        expected : int
            Number of dimensions of the array.
        actual : int
            Number of indices supplied by the caller.
        """
        super().__init__(
            f"Dimension mismatch: expected {expected} indices, got {actual}."
        )
        self.expected = expected
        self.actual = actual


class ShapeMismatchError(ValueError):
    """
    Raised when a shape is incompatible with the operation: a reshape whose
    element count differs from the source, an elementwise operand with a
    different shape, or a mask whose shape differs from the masked array.
    """

    def __init__(self, expected: Sequence[int], actual: Sequence[int], op: str) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        expected : Sequence[int]
            Shape required by the operation.
        actual : Sequence[int]
            Shape that was supplied.
        op : str
            Name of the operation that failed (e.g. "reshape", "add").
        """
        super().__init__(
            f"Shape mismatch in {op}: expected {tuple(expected)}, got {tuple(actual)}."
        )
        self.expected = tuple(expected)
        self.actual = tuple(actual)
        self.op = op


class InvalidPermutatorError(ValueError):
    """
    Raised when a permutation vector is not a bijection over
    ``0..ndim-1``.
    """

    def __init__(self, permutation: Sequence[int], ndim: int) -> None:
        """
        Initialize the InvalidPermutatorError.

        Parameters
        ----------
        permutation : Sequence[int]
            The rejected permutation vector.
        ndim : int
            Number of dimensions of the array being permuted.
        """
        super().__init__(
            f"Invalid permutator {tuple(permutation)} for an array with {ndim} "
            f"dimensions: expected a permutation of 0..{ndim - 1}."
        )
        self.permutation = tuple(permutation)
        self.ndim = ndim


class BartDimsCountMismatchError(ValueError):
    """
    Raised when the number of assigned dimension labels differs from the
    number of dimensions of the array.
    """

    def __init__(self, ndim: int, actual: int) -> None:
        """
        Initialize the BartDimsCountMismatchError.

        Parameters
        ----------
        ndim : int
            Number of dimensions of the labeled array.
        actual : int
            Number of labels that were supplied.
        """
        super().__init__(
            f"The length of the list of BART dimensions ({actual}) doesn't match "
            f"the number of dimensions ({ndim})!"
        )
        self.ndim = ndim
        self.actual = actual


class DuplicateBartDimsError(ValueError):
    """Raised when an assigned list of dimension labels contains duplicates."""

    def __init__(self, bart_dims: Sequence[object]) -> None:
        """
        Initialize the DuplicateBartDimsError.

        Parameters
        ----------
        bart_dims : Sequence[object]
            The label list that contains a repeated entry.
        """
        super().__init__("The list of BART dimensions contains duplicates!")
        self.bart_dims = tuple(bart_dims)


class UnsupportedOperationError(RuntimeError):
    """
    Raised when an operation is not supported by the receiving array kind,
    e.g. assigning dimension labels on a view, or reading labels that were
    never assigned.
    """


class UnsupportedFormatError(ValueError):
    """
    Raised when a container file deviates from the fixed ``rawarray``
    layout (identifier, flags, element type/size tags, payload size).
    """

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Unsupported file format in {name!r}: {reason}.")
        self.name = name
        self.reason = reason


class InvalidMemoryNameError(ValueError):
    """Raised when an in-memory buffer name does not end with ``.mem``."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Name of array must end with '.mem'! Got {name!r}.")
        self.name = name


class BartError(RuntimeError):
    """
    Raised when running the BART toolkit fails for any reason.

    The diagnostic text produced by the toolkit is attached unmodified; the
    array engine does not interpret it.

    Attributes
    ----------
    diagnostics : str
        Text emitted by the toolkit (typically its standard error stream).
    returncode : Optional[int]
        Exit status of the toolkit process, if one was started.
    """

    def __init__(
        self, message: str, diagnostics: str = "", returncode: Optional[int] = None
    ) -> None:
        text = message if not diagnostics else f"{message}\n{diagnostics.rstrip()}"
        super().__init__(text)
        self.diagnostics = diagnostics
        self.returncode = returncode
