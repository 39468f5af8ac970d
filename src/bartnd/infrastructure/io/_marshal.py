"""
Marshalling between engine arrays and BART's in-memory representation.

BART exchanges arrays as a `BART_DIMS`-slot dims vector plus a flat payload
of little-endian interleaved float32 (real, imaginary) pairs. BART is
column-major: the payload lists elements with the first dimension varying
fastest. The engine is row-major, so the payload is written and read in
Fortran order, which keeps axis ``k`` of an engine array as BART dim ``k``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

import numpy as np

from ...domain._bart_dims import BART_DIMS
from ...domain._errors import ShapeMismatchError
from ...domain._ndarray import INDArray
from ..dims import bart_layout_dims, from_bart_layout, to_bart_layout
from ..ndarray import ComplexFloatNDArray
from ..ndarray._indexing import shape_length

logger = logging.getLogger(__name__)

PAYLOAD_DTYPE = np.dtype("<c8")
"""Little-endian complex64: two little-endian float32 per element."""


@dataclass(frozen=True)
class MarshalledArray:
    """
    An array in BART's exchange representation.

    Attributes
    ----------
    dims : tuple[int, ...]
        `BART_DIMS` extents; unused trailing slots are 1.
    payload : bytes
        Interleaved little-endian float32 pairs, first dimension fastest.
    """

    dims: tuple[int, ...]
    payload: bytes

    @property
    def length(self) -> int:
        """Number of complex elements described by `dims`."""
        return shape_length(self.dims)


def encode_payload(array: INDArray) -> bytes:
    """Serialize the elements of `array` in column-major order."""
    return np.asarray(array.to_numpy(), dtype=PAYLOAD_DTYPE).tobytes(order="F")


def decode_payload(dims: Sequence[int], payload: Union[bytes, bytearray, memoryview]) -> np.ndarray:
    """
    Deserialize a column-major payload into a complex64 array of shape `dims`.

    Raises
    ------
    ShapeMismatchError
        If the payload does not hold exactly ``prod(dims)`` elements.
    """
    expected = shape_length(dims)
    if len(payload) != expected * PAYLOAD_DTYPE.itemsize:
        actual = len(payload) / PAYLOAD_DTYPE.itemsize
        raise ShapeMismatchError((expected,), (actual,), "marshal_in")
    values = np.frombuffer(payload, dtype=PAYLOAD_DTYPE, count=expected)
    return values.reshape(tuple(dims), order="F").astype(np.complex64)


def marshal_out(array: INDArray) -> MarshalledArray:
    """
    Convert an array into BART's exchange representation.

    Labeled arrays are first moved into BART's positional layout.

    Raises
    ------
    ValueError
        If the array has more than `BART_DIMS` axes.
    """
    dims = bart_layout_dims(array)
    payload = encode_payload(to_bart_layout(array))
    logger.debug("marshalled array of shape %s as dims %s", array.shape, dims)
    return MarshalledArray(dims=dims, payload=payload)


def _strip_trailing_singletons(dims: Sequence[int]) -> tuple[int, ...]:
    out = list(dims)
    while len(out) > 1 and out[-1] == 1:
        out.pop()
    return tuple(out)


def marshal_in(
    dims: Union[Sequence[int], MarshalledArray],
    payload: Optional[bytes] = None,
    bart_dims: Optional[Sequence[Any]] = None,
) -> ComplexFloatNDArray:
    """
    Build a dense array from BART's exchange representation.

    Parameters
    ----------
    dims : Sequence[int] or MarshalledArray
        At most `BART_DIMS` extents, or a marshalled array (then `payload`
        must be omitted).
    payload : bytes, optional
        Interleaved float32 pairs matching `dims`.
    bart_dims : Sequence[BartDims], optional
        Labels of the result. When given, the data is taken out of BART's
        positional layout into these axes, in this order.

    Returns
    -------
    ComplexFloatNDArray
        A new array. Without `bart_dims`, trailing singleton dims are
        stripped (at least one axis is kept).

    Raises
    ------
    ValueError
        If more than `BART_DIMS` dims are given.
    ShapeMismatchError
        If the payload size disagrees with `dims`, or a slot that is not
        requested in `bart_dims` is not a singleton.
    """
    if isinstance(dims, MarshalledArray):
        if payload is not None:
            raise TypeError("payload must be omitted when passing a MarshalledArray")
        dims, payload = dims.dims, dims.payload
    if payload is None:
        raise TypeError("marshal_in() missing the payload")
    dims = tuple(int(d) for d in dims)
    if len(dims) == 0 or len(dims) > BART_DIMS:
        raise ValueError(f"expected 1 to {BART_DIMS} dims, got {len(dims)}")
    values = decode_payload(dims, payload)
    array = ComplexFloatNDArray.from_numpy(values.reshape(_strip_trailing_singletons(dims)))
    if bart_dims is None:
        return array
    labels = tuple(bart_dims)
    result = from_bart_layout(array, labels).copy()
    result.set_bart_dims(*labels)
    return result
