"""
Reading and writing BART's ``.ra`` container files.

Layout (all integers little-endian int64)::

    b"rawarray" | flags (0) | type (4: complex) | elbyte (8) | size in bytes
    | ndims | dims[0] .. dims[ndims-1] | payload

The payload is the column-major interleaved float32 representation shared
with in-memory marshalling.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import numpy as np

from ...domain._errors import UnsupportedFormatError
from ...domain._ndarray import INDArray
from ..dims import to_bart_layout
from ..ndarray import ComplexFloatNDArray
from ..ndarray._indexing import shape_length
from ._marshal import PAYLOAD_DTYPE, decode_payload, encode_payload

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

RA_MAGIC = b"rawarray"
RA_FLAGS = 0
RA_TYPE_COMPLEX = 4
RA_EXTENSION = ".ra"

_HEADER_DTYPE = np.dtype("<i8")
_FIXED_FIELDS = 5


def _check_extension(path: Path) -> None:
    if path.suffix != RA_EXTENSION:
        raise UnsupportedFormatError(
            path.name, f"the extension of the file must be {RA_EXTENSION!r}"
        )


def encode_header(shape: tuple[int, ...]) -> bytes:
    """Return the ``.ra`` header for a complex array of `shape`."""
    fields = [
        RA_FLAGS,
        RA_TYPE_COMPLEX,
        PAYLOAD_DTYPE.itemsize,
        shape_length(shape) * PAYLOAD_DTYPE.itemsize,
        len(shape),
        *shape,
    ]
    return RA_MAGIC + np.asarray(fields, dtype=_HEADER_DTYPE).tobytes()


def load(path: PathLike) -> ComplexFloatNDArray:
    """
    Read a ``.ra`` file.

    Parameters
    ----------
    path : PathLike
        File to read; must end in ``.ra``.

    Returns
    -------
    ComplexFloatNDArray
        The stored array, with the file's dims as its shape.

    Raises
    ------
    UnsupportedFormatError
        If the extension, identifier, flags, element type or size tags are
        wrong, the dims disagree with the payload size, or the file is
        truncated.
    FileNotFoundError
        If the file does not exist.
    """
    path = Path(path)
    _check_extension(path)
    raw = path.read_bytes()
    name = path.name

    if raw[: len(RA_MAGIC)] != RA_MAGIC:
        raise UnsupportedFormatError(name, "wrong file identifier")
    offset = len(RA_MAGIC)
    fixed_end = offset + _FIXED_FIELDS * _HEADER_DTYPE.itemsize
    if len(raw) < fixed_end:
        raise UnsupportedFormatError(name, "truncated header")
    flags, eltype, elbyte, size, ndims = (
        int(v) for v in np.frombuffer(raw, dtype=_HEADER_DTYPE, count=_FIXED_FIELDS, offset=offset)
    )
    if flags != RA_FLAGS:
        raise UnsupportedFormatError(name, f"unsupported flags {flags}")
    if eltype != RA_TYPE_COMPLEX:
        raise UnsupportedFormatError(name, f"unsupported element type {eltype}")
    if elbyte != PAYLOAD_DTYPE.itemsize:
        raise UnsupportedFormatError(name, f"unsupported element size {elbyte}")
    if ndims < 1:
        raise UnsupportedFormatError(name, f"invalid number of dimensions {ndims}")

    dims_end = fixed_end + ndims * _HEADER_DTYPE.itemsize
    if len(raw) < dims_end:
        raise UnsupportedFormatError(name, "truncated header")
    dims = tuple(
        int(d) for d in np.frombuffer(raw, dtype=_HEADER_DTYPE, count=ndims, offset=fixed_end)
    )
    if any(d < 0 for d in dims) or shape_length(dims) * elbyte != size:
        raise UnsupportedFormatError(name, f"dims {dims} disagree with payload size {size}")

    payload = raw[dims_end : dims_end + size]
    if len(payload) != size:
        raise UnsupportedFormatError(name, "truncated payload")
    logger.debug("loaded %s with dims %s", path, dims)
    return ComplexFloatNDArray.from_numpy(decode_payload(dims, payload))


def save(path: PathLike, array: INDArray) -> Path:
    """
    Write `array` to a ``.ra`` file.

    Labeled arrays are first moved into BART's positional layout.

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    UnsupportedFormatError
        If `path` does not end in ``.ra``.
    """
    path = Path(path)
    _check_extension(path)
    remapped = to_bart_layout(array)
    with open(path, "wb") as f:
        f.write(encode_header(remapped.shape))
        f.write(encode_payload(remapped))
    logger.debug("saved array of shape %s to %s", remapped.shape, path)
    return path


def save_to_temp(array: INDArray, directory: Optional[PathLike] = None) -> Path:
    """
    Write `array` to a new temporary ``.ra`` file and return its path.

    The caller owns the file and is responsible for removing it.
    """
    fd, name = tempfile.mkstemp(prefix="bart_", suffix=RA_EXTENSION, dir=directory)
    os.close(fd)
    try:
        return save(name, array)
    except BaseException:
        os.unlink(name)
        raise
