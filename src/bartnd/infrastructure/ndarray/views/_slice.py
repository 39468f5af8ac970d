"""
Slice view: a rectangular, possibly strided or reversed, region of a parent.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ....domain._bart_dims import BartDims
from .._indexing import SliceRange, linear_to_cartesian
from .._ndarray_base import NDArrayBase
from ._view_base import NDArrayView


class SliceView(NDArrayView):
    """
    View selecting, per parent axis, either one position (the axis is
    dropped) or an arithmetic progression of positions.

    Parameters
    ----------
    parent : NDArrayBase
        Sliced array.
    ranges : tuple[SliceRange, ...]
        One normalized range per parent axis.

    Notes
    -----
    Parent coordinate of surviving axis ``k`` is ``start + i * step``; dropped
    axes use their fixed ``start``. Labels of surviving axes are inherited
    from the parent in order.
    """

    def __init__(self, parent: NDArrayBase, ranges: tuple[SliceRange, ...]) -> None:
        super().__init__(parent, tuple(r.extent for r in ranges if not r.scalar))
        self._ranges = ranges

    @property
    def ranges(self) -> tuple[SliceRange, ...]:
        """
        One `SliceRange` per parent axis (scalar ranges mark dropped axes).
        """
        return self._ranges

    def _to_parent(self, indices: tuple[int, ...]) -> tuple[int, ...]:
        it = iter(indices)
        return tuple(
            r.start if r.scalar else r.start + next(it) * r.step for r in self._ranges
        )

    def _resolve_cartesian(self, indices: tuple[int, ...]) -> int:
        return self._parent._resolve_cartesian(self._to_parent(indices))

    def _resolve_linear(self, index: int) -> int:
        return self._resolve_cartesian(linear_to_cartesian(index, self._shape))

    def _compute_index_map(self) -> np.ndarray:
        key = tuple(r.as_slice() for r in self._ranges)
        return self._parent_map()[key].reshape(-1)

    def _bart_dims_or_none(self) -> Optional[tuple[BartDims, ...]]:
        labels = self._parent._bart_dims_or_none()
        if labels is None:
            return None
        return tuple(d for d, r in zip(labels, self._ranges) if not r.scalar)
