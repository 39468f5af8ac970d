"""
Permute view: the parent's axes in a different order.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ....domain._bart_dims import BartDims
from .._indexing import linear_to_cartesian
from .._ndarray_base import NDArrayBase
from ._view_base import NDArrayView


class PermuteView(NDArrayView):
    """
    View whose axis ``i`` is the parent's axis ``permutation[i]``.

    Labels are the parent's labels permuted the same way.
    """

    def __init__(self, parent: NDArrayBase, permutation: tuple[int, ...]) -> None:
        super().__init__(parent, tuple(parent.shape[p] for p in permutation))
        self._permutation = tuple(permutation)

    @property
    def permutation(self) -> tuple[int, ...]:
        """
        Parent axis shown at each position of this view: axis ``k`` of the
        view is axis ``permutation[k]`` of the parent.
        """
        return self._permutation

    def _resolve_cartesian(self, indices: tuple[int, ...]) -> int:
        parent_indices = [0] * len(indices)
        for i, p in enumerate(self._permutation):
            parent_indices[p] = indices[i]
        return self._parent._resolve_cartesian(tuple(parent_indices))

    def _resolve_linear(self, index: int) -> int:
        return self._resolve_cartesian(linear_to_cartesian(index, self._shape))

    def _compute_index_map(self) -> np.ndarray:
        return self._parent_map().transpose(self._permutation).reshape(-1)

    def _bart_dims_or_none(self) -> Optional[tuple[BartDims, ...]]:
        labels = self._parent._bart_dims_or_none()
        if labels is None:
            return None
        return tuple(labels[p] for p in self._permutation)
