"""
Common base of every view kind.

A view owns no storage. It keeps a reference to its immediate parent (an
array or another view), a handle to the dense array at the root of the
chain (the storage owner), and immutable transform metadata. Scalar index
resolution walks the parent chain; bulk access uses an index map that is
computed once per view and cached.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any

import numpy as np

from .._ndarray_base import NDArrayBase


class NDArrayView(NDArrayBase):
    """
    Abstract view over a parent array.

    Subclasses implement `_compute_index_map`, `_resolve_linear` and
    `_resolve_cartesian` relative to their parent.
    """

    def __init__(self, parent: NDArrayBase, shape: tuple[int, ...]) -> None:
        self._parent = parent
        self._root = parent._root
        self._shape = tuple(shape)

    @property
    def parent(self) -> Any:
        """The array or view this view was created from."""
        return self._parent

    def _compute_index_map(self) -> np.ndarray:
        raise NotImplementedError

    @cached_property
    def _storage_map(self) -> np.ndarray:
        index_map = np.ascontiguousarray(self._compute_index_map(), dtype=np.intp)
        index_map.setflags(write=False)
        return index_map

    def _index_map(self) -> np.ndarray:
        return self._storage_map

    def _parent_map(self) -> np.ndarray:
        """Parent's index map, laid out in the parent's shape."""
        return self._parent._index_map().reshape(self._parent.shape)
