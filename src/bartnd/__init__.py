"""
bartnd: complex-valued multi-dimensional arrays for the BART toolkit.

A dense complex64 array type with aliasing views (slice, permute, reshape,
mask), per-axis BART dimension labels, remapping into BART's positional
layout, and the I/O needed to hand arrays to and from the ``bart``
executable.
"""

from .domain import (
    BART_DIMS,
    BartDims,
    BartDimsCountMismatchError,
    BartError,
    DimensionMismatchError,
    DuplicateBartDimsError,
    INDArray,
    InvalidMemoryNameError,
    InvalidPermutatorError,
    NDArrayIndexError,
    ShapeMismatchError,
    UnsupportedFormatError,
    UnsupportedOperationError,
)
from .infrastructure.ndarray import (
    ComplexFloatNDArray,
    MaskView,
    NDArrayBase,
    NDArrayView,
    PermuteView,
    ReshapeView,
    SliceView,
)
from .infrastructure.dims import bart_layout_dims, from_bart_layout, to_bart_layout
from .infrastructure.io import (
    MarshalledArray,
    load,
    marshal_in,
    marshal_out,
    save,
    save_to_temp,
)
from .infrastructure.toolkit import (
    MemoryRegistry,
    execute,
    find_bart_executable,
    read,
    run,
)

__version__ = "0.1.0"

__all__ = [
    "BART_DIMS",
    BartDims.__name__,
    INDArray.__name__,
    ComplexFloatNDArray.__name__,
    NDArrayBase.__name__,
    NDArrayView.__name__,
    SliceView.__name__,
    PermuteView.__name__,
    ReshapeView.__name__,
    MaskView.__name__,
    to_bart_layout.__name__,
    bart_layout_dims.__name__,
    from_bart_layout.__name__,
    MarshalledArray.__name__,
    marshal_out.__name__,
    marshal_in.__name__,
    load.__name__,
    save.__name__,
    save_to_temp.__name__,
    MemoryRegistry.__name__,
    execute.__name__,
    read.__name__,
    run.__name__,
    find_bart_executable.__name__,
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
