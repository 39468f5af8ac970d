"""
Mask view: a 1-D selection of the parent's elements.
"""

from __future__ import annotations

import numpy as np

from .._ndarray_base import NDArrayBase
from ._view_base import NDArrayView


class MaskView(NDArrayView):
    """
    One-dimensional view of the parent elements at `linear_indices`.

    Parameters
    ----------
    parent : NDArrayBase
        Masked array.
    linear_indices : np.ndarray
        Selected parent linear indices, ascending. Stored read-only.

    Notes
    -----
    The selected index set is fixed at construction; writes through the view
    reach the parent. Mask views carry no labels.
    """

    def __init__(self, parent: NDArrayBase, linear_indices: np.ndarray) -> None:
        indices = np.array(linear_indices, dtype=np.intp)
        indices.setflags(write=False)
        super().__init__(parent, (int(indices.size),))
        self._linear_indices = indices

    @property
    def linear_indices(self) -> np.ndarray:
        """Parent linear index of every element (read-only)."""
        return self._linear_indices

    def _resolve_linear(self, index: int) -> int:
        return self._parent._resolve_linear(int(self._linear_indices[index]))

    def _resolve_cartesian(self, indices: tuple[int, ...]) -> int:
        return self._resolve_linear(indices[0])

    def _compute_index_map(self) -> np.ndarray:
        return self._parent._index_map()[self._linear_indices]
