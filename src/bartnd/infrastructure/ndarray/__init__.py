"""
Complex-float multi-dimensional array engine.

Exports the dense array, the view kinds and the shared base class.
"""

from ._ndarray_base import NDArrayBase
from ._dense import ComplexFloatNDArray
from .views import MaskView, NDArrayView, PermuteView, ReshapeView, SliceView

__all__ = [
    NDArrayBase.__name__,
    ComplexFloatNDArray.__name__,
    NDArrayView.__name__,
    SliceView.__name__,
    PermuteView.__name__,
    ReshapeView.__name__,
    MaskView.__name__,
]
