"""
Domain layer of bartnd: the array interface, dimension semantics and the
error types shared by the engine and the toolkit boundary.
"""

from ._bart_dims import BART_DIMS, BartDims
from ._ndarray import INDArray, Index, Scalar
from ._errors import (
    BartDimsCountMismatchError,
    BartError,
    DimensionMismatchError,
    DuplicateBartDimsError,
    InvalidMemoryNameError,
    InvalidPermutatorError,
    NDArrayIndexError,
    ShapeMismatchError,
    UnsupportedFormatError,
    UnsupportedOperationError,
)

__all__ = [
    "BART_DIMS",
    "BartDims",
    "INDArray",
    "Index",
    "Scalar",
    BartDimsCountMismatchError.__name__,
    BartError.__name__,
    DimensionMismatchError.__name__,
    DuplicateBartDimsError.__name__,
    InvalidMemoryNameError.__name__,
    InvalidPermutatorError.__name__,
    NDArrayIndexError.__name__,
    ShapeMismatchError.__name__,
    UnsupportedFormatError.__name__,
    UnsupportedOperationError.__name__,
]
