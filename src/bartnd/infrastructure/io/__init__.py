"""
Boundary I/O: BART's in-memory exchange format and ``.ra`` container files.
"""

from ._marshal import (
    MarshalledArray,
    decode_payload,
    encode_payload,
    marshal_in,
    marshal_out,
)
from ._rawarray import RA_EXTENSION, load, save, save_to_temp

__all__ = [
    MarshalledArray.__name__,
    decode_payload.__name__,
    encode_payload.__name__,
    marshal_in.__name__,
    marshal_out.__name__,
    load.__name__,
    save.__name__,
    save_to_temp.__name__,
    "RA_EXTENSION",
]
