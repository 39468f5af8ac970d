"""
Reshape view: the parent's elements, in linear order, under another shape.
"""

from __future__ import annotations

import numpy as np

from .._indexing import cartesian_to_linear
from ._view_base import NDArrayView


class ReshapeView(NDArrayView):
    """
    View sharing the parent's linear order under a different shape.

    Reshape views carry no labels. A reshape chain over a dense array stays
    contiguous, so bulk operations on it read the owner's buffer directly.
    """

    @property
    def is_contiguous(self) -> bool:
        return self._parent.is_contiguous

    def _resolve_linear(self, index: int) -> int:
        return self._parent._resolve_linear(index)

    def _resolve_cartesian(self, indices: tuple[int, ...]) -> int:
        return self._parent._resolve_linear(cartesian_to_linear(indices, self._shape))

    def _compute_index_map(self) -> np.ndarray:
        return self._parent._index_map()
