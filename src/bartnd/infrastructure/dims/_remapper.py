"""
Dimension-semantics remapping between labeled arrays and BART's layout.

BART addresses data through `BART_DIMS` positional slots. An application
array whose axes carry `BartDims` labels is moved into that layout by a
permutation (axes sorted by slot) followed by a reshape that inserts
singleton extents for every unlabeled slot. Both steps produce views, so no
data is copied, and the mapping is bijective on element order.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from ...domain._bart_dims import BART_DIMS, BartDims
from ...domain._errors import ShapeMismatchError
from ...domain._ndarray import INDArray
from ..ndarray.mixins import normalize_bart_dims


def _sorted_axes(labels: Sequence[BartDims]) -> list[int]:
    return sorted(range(len(labels)), key=lambda k: labels[k].value)


def _pad(shape: Sequence[int]) -> tuple[int, ...]:
    if len(shape) > BART_DIMS:
        raise ValueError(
            f"BART supports at most {BART_DIMS} dimensions, got {len(shape)}"
        )
    return tuple(shape) + (1,) * (BART_DIMS - len(shape))


def to_bart_layout(array: INDArray) -> INDArray:
    """
    Reorder and reshape a labeled array into BART's positional layout.

    Parameters
    ----------
    array : INDArray
        Array or view, labeled or not.

    Returns
    -------
    INDArray
        For labeled arrays, a view with ``max_slot + 1`` axes whose axis
        ``d.value`` holds the axis labeled ``d`` (1 elsewhere). Unlabeled
        arrays are returned unchanged.

    Examples
    --------
    >>> a = ComplexFloatNDArray(4, 6, 8)
    >>> a.set_bart_dims(BartDims.TIME, BartDims.READ, BartDims.COIL)
    >>> to_bart_layout(a).shape
    (6, 1, 1, 8, 1, 1, 1, 1, 1, 1, 4)
    """
    if not array.are_bart_dims_specified():
        return array
    labels = array.bart_dims
    permuted = array.permute_dims(*_sorted_axes(labels))
    target = [1] * (max(d.value for d in labels) + 1)
    for extent, d in zip(array.shape, labels):
        target[d.value] = extent
    return permuted.reshape(*target)


def bart_layout_dims(array: INDArray) -> tuple[int, ...]:
    """
    Return the `BART_DIMS`-slot dims vector of `array` in BART's layout.

    Unused trailing slots are 1.

    Raises
    ------
    ValueError
        If an unlabeled array has more than `BART_DIMS` axes.
    """
    return _pad(to_bart_layout(array).shape)


def from_bart_layout(array: INDArray, bart_dims: Iterable[Any]) -> INDArray:
    """
    Inverse of `to_bart_layout`.

    Parameters
    ----------
    array : INDArray
        Array in BART's positional layout (trailing slots may be omitted).
    bart_dims : Iterable[BartDims]
        Requested axis labels, in the desired axis order.

    Returns
    -------
    INDArray
        A view with one axis per requested label. The view carries no labels;
        callers that need them copy it and assign `bart_dims`.

    Raises
    ------
    ShapeMismatchError
        If a slot that is not requested has an extent other than 1.
    DuplicateBartDimsError
        If a label is requested twice.
    """
    requested = tuple(bart_dims)
    labels = normalize_bart_dims(requested, len(requested))
    padded = _pad(array.shape)
    wanted = {d.value for d in labels}
    for slot, extent in enumerate(padded):
        if slot not in wanted and extent != 1:
            expected = tuple(
                e if s in wanted else 1 for s, e in enumerate(padded)
            )
            raise ShapeMismatchError(expected, padded, "from_bart_layout")
    in_order = sorted(labels)
    reshaped = array.reshape(*(padded[d.value] for d in in_order))
    return reshaped.permute_dims(*(in_order.index(d) for d in labels))
