"""
View kinds aliasing the storage of a dense array.
"""

from ._view_base import NDArrayView
from ._slice import SliceView
from ._permute import PermuteView
from ._reshape import ReshapeView
from ._mask import MaskView

__all__ = [
    NDArrayView.__name__,
    SliceView.__name__,
    PermuteView.__name__,
    ReshapeView.__name__,
    MaskView.__name__,
]
