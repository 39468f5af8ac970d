"""
Dimension-label mixin.

Defines `NDArrayBartDimsMixin`: querying and assigning the `BartDims` label
of every axis, plus label-driven view helpers. Labels live on dense arrays;
permute and slice views derive theirs from the parent, reshape and mask
views carry none.
"""

from __future__ import annotations

from typing import Any, Iterable

from ....domain._bart_dims import BartDims
from ....domain._errors import (
    BartDimsCountMismatchError,
    DuplicateBartDimsError,
    UnsupportedOperationError,
)


def normalize_bart_dims(bart_dims: Iterable[Any], ndim: int) -> tuple[BartDims, ...]:
    """
    Validate a label assignment for an array with `ndim` axes.

    Parameters
    ----------
    bart_dims : Iterable[Any]
        `BartDims` members or their integer slot values.
    ndim : int
        Number of axes of the labeled array.

    Returns
    -------
    tuple[BartDims, ...]

    Raises
    ------
    BartDimsCountMismatchError
        If the number of labels differs from `ndim`.
    DuplicateBartDimsError
        If a label occurs more than once.
    """
    dims = tuple(d if isinstance(d, BartDims) else BartDims(int(d)) for d in bart_dims)
    if len(dims) != ndim:
        raise BartDimsCountMismatchError(ndim, len(dims))
    if len(set(dims)) != len(dims):
        raise DuplicateBartDimsError(dims)
    return dims


class NDArrayBartDimsMixin:
    """
    Dimension semantics of the axes.
    """

    def are_bart_dims_specified(self) -> bool:
        """Return True if every axis carries a `BartDims` label."""
        return self._bart_dims_or_none() is not None

    @property
    def bart_dims(self) -> tuple[BartDims, ...]:
        """
        Labels of the axes, in axis order.

        Raises
        ------
        UnsupportedOperationError
            If no labels are available on this array.
        """
        dims = self._bart_dims_or_none()
        if dims is None:
            raise UnsupportedOperationError("BART dimensions are not specified!")
        return dims

    def set_bart_dims(self, *bart_dims: BartDims) -> None:
        """
        Assign labels. Only dense arrays hold labels; views derive theirs.

        Raises
        ------
        UnsupportedOperationError
            Always, for views.
        """
        raise UnsupportedOperationError(
            f"Cannot set BART dimensions on a {type(self).__name__}; "
            f"set them on the dense array instead."
        )

    def select_and_reorder_bart_dims(self, *bart_dims: BartDims) -> Any:
        """
        Select the labeled axes listed in `bart_dims`, in that order.

        Axes whose label is not listed must be singletons and are dropped;
        the remaining axes are permuted into the requested order.

        Raises
        ------
        UnsupportedOperationError
            If the array carries no labels.
        ValueError
            If a requested label is not present, a label is requested twice,
            or an unlisted axis is not a singleton.
        """
        if len(bart_dims) == 1 and not isinstance(bart_dims[0], (BartDims, int)):
            bart_dims = tuple(bart_dims[0])
        labels = self.bart_dims
        wanted = tuple(d if isinstance(d, BartDims) else BartDims(int(d)) for d in bart_dims)
        if len(set(wanted)) != len(wanted):
            raise DuplicateBartDimsError(wanted)
        missing = [d.name for d in wanted if d not in labels]
        if missing:
            raise ValueError(f"BART dimensions {missing} are not present in {labels}")
        selected = self.select_dims(*(labels.index(d) for d in wanted))
        order = selected.bart_dims
        return selected.permute_dims(*(order.index(d) for d in wanted))

    def to_bart_layout(self) -> Any:
        """Shortcut for `bartnd.infrastructure.dims.to_bart_layout(self)`."""
        from ...dims import to_bart_layout

        return to_bart_layout(self)
